# app/hooks.py
from typing import Protocol


class PlannerHooks(Protocol):
    def plan_start(self, *, origin, destination, mode): ...
    def search_end(self, *, objective, start, end, found, expanded, cost, ms): ...
    def plan_end(
        self, *, origin, destination, routes, snapshot_nodes, snapshot_edges, wall_ms
    ): ...
    def error(self, *, reason: str, exc: BaseException, **kw): ...


class NoopHooks:
    def plan_start(self, **_):
        pass

    def search_end(self, **_):
        pass

    def plan_end(self, **_):
        pass

    def error(self, *_, **__):
        pass
