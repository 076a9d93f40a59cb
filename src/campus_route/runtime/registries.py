# runtime/registries.py
from collections.abc import Callable
from typing import Any

from campus_route.app.protocols import EdgeCostFn, SnapshotProvider
from campus_route.config.models import (
    CostModelModel,
    MetricsModel,
    ProviderJsonFileModel,
    ProviderMemoryModel,
    ProviderUnion,
    SearchLimitsModel,
)
from campus_route.domain.entities.route import Objective
from campus_route.domain.mechanics.mechanics_costs import EcoCost, SafetyCost
from campus_route.domain.mechanics.mechanics_metrics import RouteMetricsCalculator
from campus_route.domain.mechanics.mechanics_search import BestFirstSearch, SearchLimits
from campus_route.io.snapshot_providers import InMemoryProvider, JsonFileProvider

CostFactory = Callable[[CostModelModel], EdgeCostFn]
ProviderFactory = Callable[[ProviderUnion, dict], SnapshotProvider]

_cost_registry: dict[Objective, CostFactory] = {}
_provider_registry: dict[str, ProviderFactory] = {}


# ------------------- Cost models ---------------------------


def register_cost(objective: Objective):
    def deco(fn: CostFactory):
        _cost_registry[objective] = fn
        return fn

    return deco


def get_cost_fn(objective: Objective | str, cfg: CostModelModel | None = None) -> EdgeCostFn:
    try:
        factory = _cost_registry[Objective(objective)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown objective {objective!r}")
    return factory(cfg or CostModelModel())


@register_cost(Objective.ECO)
def _make_eco(cfg: CostModelModel):
    return EcoCost(baseline_ppm=cfg.carbon_baseline_ppm, carbon_weight=cfg.carbon_weight)


@register_cost(Objective.SAFE)
def _make_safe(cfg: CostModelModel):
    return SafetyCost(
        lighting_weight=cfg.lighting_weight,
        no_cctv_penalty=cfg.no_cctv_penalty,
        crowd_weight=cfg.crowd_weight,
    )


# ------------------- Snapshot providers ---------------------------


def register_provider(kind: str):
    def deco(fn: ProviderFactory):
        _provider_registry[kind] = fn
        return fn

    return deco


def make_provider(cfg: ProviderUnion, *, deps: dict[str, Any] | None = None) -> SnapshotProvider:
    """
    deps can include:
      - 'provider': SnapshotProvider  # injected collaborator, wins over cfg
    """
    deps = deps or {}
    if "provider" in deps:
        return deps["provider"]
    try:
        factory = _provider_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown provider kind {cfg.kind!r}")
    return factory(cfg, deps)


@register_provider("memory")
def _make_memory(cfg: ProviderMemoryModel, deps):
    return InMemoryProvider.from_rows(cfg.nodes, cfg.edges)


@register_provider("json_file")
def _make_json_file(cfg: ProviderJsonFileModel, deps):
    return JsonFileProvider(cfg.file)


# ------------------- Search & metrics ---------------------------


def make_search(cfg: SearchLimitsModel) -> BestFirstSearch:
    return BestFirstSearch(
        SearchLimits(
            max_frontier=cfg.max_frontier,
            max_expansions=cfg.max_expansions,
            deadline_s=cfg.deadline_s,
        )
    )


def make_metrics(cfg: MetricsModel) -> RouteMetricsCalculator:
    return RouteMetricsCalculator(
        walk_kmh=cfg.walk_kmh,
        cycle_kmh=cfg.cycle_kmh,
        other_kmh=cfg.other_kmh,
        car_g_per_km=cfg.car_g_per_km,
        other_mode_credit=cfg.other_mode_credit,
    )
