# campus_route/app/build.py
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from campus_route.app.hooks import NoopHooks
from campus_route.app.planner import RoutePlanner
from campus_route.app.protocols import SnapshotProvider
from campus_route.config.models import PlannerModel
from campus_route.domain.entities.route import Objective
from campus_route.io.planner_logging import PlannerLogging
from campus_route.io.recorder import Recorder, Sink
from campus_route.runtime.registries import get_cost_fn, make_metrics, make_provider, make_search


@dataclass
class PlannerApp:
    config: PlannerModel
    provider: SnapshotProvider
    planner: RoutePlanner
    recorder: Recorder | None


def load_config(path: str | Path) -> PlannerModel:
    with open(path, encoding="utf-8") as f:
        return PlannerModel.model_validate(json.load(f))


def build(
    cfg: PlannerModel | Mapping | None = None,
    *,
    provider: SnapshotProvider | None = None,
    use_logging: bool = True,
    logger: logging.Logger | None = None,
    sinks: tuple[Sink, ...] = (),
) -> PlannerApp:
    # 0) Validate config
    if cfg is None:
        model = PlannerModel()
    elif isinstance(cfg, PlannerModel):
        model = cfg
    else:
        model = PlannerModel.model_validate(cfg)

    # 1) Graph source (an injected provider wins over the configured one)
    deps = {"provider": provider} if provider is not None else {}
    provider = make_provider(model.provider, deps=deps)

    # 2) Hooks; analytics records only go out when sinks are given
    if sinks and not use_logging:
        raise ValueError("recorder sinks are fed by the logging hooks; pass use_logging=True")
    recorder = Recorder(*sinks) if sinks else None
    hooks = (
        PlannerLogging(
            run_id=model.name,
            level=model.log.level,
            debug=model.log.debug,
            logger=logger,
            recorder=recorder,
        )
        if use_logging
        else NoopHooks()
    )

    # 3) Mechanics
    planner = RoutePlanner(
        provider,
        search=make_search(model.limits),
        metrics=make_metrics(model.metrics),
        costs={obj: get_cost_fn(obj, model.costs) for obj in Objective},
        hooks=hooks,
        parallel=model.parallel_searches,
        strict_no_path=model.strict_no_path,
    )

    return PlannerApp(config=model, provider=provider, planner=planner, recorder=recorder)
