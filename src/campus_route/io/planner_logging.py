# io/planner_logging.py
import itertools
import json
import logging
import sys

from campus_route.app.hooks import NoopHooks
from campus_route.io.business_events import RoutePlanned
from campus_route.io.recorder import Recorder


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def default_json_logger(name="campus_route", level="INFO", stream=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class PlannerLogging(NoopHooks):
    """
    Structured logs for the planner lifecycle, plus one RoutePlanned record
    per finished plan when a recorder is attached.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.recorder = run_id, debug, recorder
        self.log = logger or default_json_logger(level=level)
        self._seq = itertools.count(1)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    # --------------------------------------------------------

    def plan_start(self, *, origin, destination, mode):
        self._emit(
            "INFO",
            "plan_start",
            origin=(origin.lat, origin.lng),
            destination=(destination.lat, destination.lng),
            mode=str(getattr(mode, "value", mode)),
        )

    def search_end(self, *, objective, start, end, found, expanded, cost, ms):
        level = "DEBUG" if found else "WARNING"
        if found and not self.debug:
            return
        self._emit(
            level,
            "search_end" if found else "no_path_found",
            objective=str(getattr(objective, "value", objective)),
            start=start,
            end=end,
            expanded=expanded,
            cost=cost,
            ms=round(ms, 3),
        )

    def plan_end(
        self, *, origin, destination, routes, snapshot_nodes, snapshot_edges, wall_ms
    ):
        eco, safe = routes.eco, routes.safe
        self._emit(
            "INFO",
            "plan_end",
            nodes=snapshot_nodes,
            edges=snapshot_edges,
            eco_distance_m=eco.metrics.distance_meters,
            safe_distance_m=safe.metrics.distance_meters,
            safe_safety_score=safe.metrics.safety_score,
            wall_ms=round(wall_ms, 3),
        )
        if self.recorder:
            self.recorder.emit(
                RoutePlanned(
                    run_id=self.run_id,
                    seq=next(self._seq),
                    name="RoutePlanned",
                    mode=routes.mode.value,
                    origin=(origin.lat, origin.lng),
                    destination=(destination.lat, destination.lng),
                    eco_distance_m=eco.metrics.distance_meters,
                    eco_co2_saved_kg=eco.metrics.co2_saved_kg,
                    eco_fallback=eco.is_fallback,
                    safe_distance_m=safe.metrics.distance_meters,
                    safe_safety_score=safe.metrics.safety_score,
                    safe_fallback=safe.is_fallback,
                )
            )

    def error(self, *, reason: str, exc: BaseException, **extra):
        self._emit("ERROR", "planner_error", reason=reason, error=str(exc), **extra)
