# campus_route/app/planner.py
import time
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor

from campus_route.app.hooks import NoopHooks, PlannerHooks
from campus_route.app.protocols import (
    EdgeCostFn,
    MetricsCalculator,
    NodeLocator,
    PathSearch,
    SnapshotProvider,
)
from campus_route.domain.entities.geography import Coordinate, GraphSnapshot
from campus_route.domain.entities.route import Objective, PlannedRoutes, Route, TransportMode
from campus_route.domain.mechanics.mechanics_costs import eco_cost, safety_cost
from campus_route.domain.mechanics.mechanics_locators import EuclidLocator
from campus_route.domain.mechanics.mechanics_metrics import RouteMetricsCalculator
from campus_route.domain.mechanics.mechanics_search import BestFirstSearch, SearchResult
from campus_route.errors import NoPathFound, PlannerError
from campus_route.io.snapshot_providers import fetch_snapshot

DEFAULT_COSTS: Mapping[Objective, EdgeCostFn] = {
    Objective.ECO: eco_cost,
    Objective.SAFE: safety_cost,
}


class RoutePlanner:
    """
    locate -> search (once per objective) -> metrics -> two routes.

    Holds no graph state: every plan_routes call fetches its own snapshot from
    the provider and drops it on return. Either both routes come back or the
    call raises.
    """

    def __init__(
        self,
        provider: SnapshotProvider | None = None,
        *,
        locator: NodeLocator | None = None,
        search: PathSearch | None = None,
        metrics: MetricsCalculator | None = None,
        costs: Mapping[Objective, EdgeCostFn] | None = None,
        hooks: PlannerHooks | None = None,
        parallel: bool = False,
        strict_no_path: bool = False,
    ):
        self.provider = provider
        self.locator = locator or EuclidLocator()
        self.search = search or BestFirstSearch()
        self.metrics = metrics or RouteMetricsCalculator()
        self.costs = dict(costs or DEFAULT_COSTS)
        self.hooks = hooks or NoopHooks()
        self.parallel = parallel
        self.strict_no_path = strict_no_path

    def plan_routes(
        self,
        origin: Coordinate,
        destination: Coordinate,
        mode: TransportMode | str = TransportMode.WALK,
    ) -> PlannedRoutes:
        if self.provider is None:
            raise ValueError("no snapshot provider configured; use plan_on_snapshot")
        try:
            snapshot = fetch_snapshot(self.provider)
        except PlannerError as e:
            self.hooks.error(reason=type(e).__name__, exc=e)
            raise
        return self.plan_on_snapshot(snapshot, origin, destination, mode)

    def plan_on_snapshot(
        self,
        snapshot: GraphSnapshot,
        origin: Coordinate,
        destination: Coordinate,
        mode: TransportMode | str = TransportMode.WALK,
    ) -> PlannedRoutes:
        t0 = time.perf_counter()
        mode = TransportMode.parse(mode)
        self.hooks.plan_start(origin=origin, destination=destination, mode=mode)
        try:
            start = self.locator.nearest(snapshot, origin)
            end = self.locator.nearest(snapshot, destination)
            found = self._search_all(snapshot, start, end)
            routes = PlannedRoutes(
                eco=self._route(Objective.ECO, found[Objective.ECO], snapshot, mode),
                safe=self._route(Objective.SAFE, found[Objective.SAFE], snapshot, mode),
                mode=mode,
            )
        except PlannerError as e:
            self.hooks.error(reason=type(e).__name__, exc=e)
            raise
        self.hooks.plan_end(
            origin=origin,
            destination=destination,
            routes=routes,
            snapshot_nodes=len(snapshot.nodes),
            snapshot_edges=len(snapshot.edges),
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return routes

    # --------------- Helpers -----------------------------

    def _search_all(
        self, snapshot: GraphSnapshot, start: str, end: str
    ) -> dict[Objective, SearchResult]:
        objectives = (Objective.ECO, Objective.SAFE)
        if not self.parallel:
            return {obj: self._search_one(obj, snapshot, start, end) for obj in objectives}
        # both searches only read the snapshot
        with ThreadPoolExecutor(max_workers=len(objectives)) as pool:
            futures = {
                obj: pool.submit(self._search_one, obj, snapshot, start, end)
                for obj in objectives
            }
            return {obj: f.result() for obj, f in futures.items()}

    def _search_one(
        self, objective: Objective, snapshot: GraphSnapshot, start: str, end: str
    ) -> SearchResult:
        t1 = time.perf_counter()
        res = self.search.find(snapshot, start, end, self.costs[objective])
        self.hooks.search_end(
            objective=objective,
            start=start,
            end=end,
            found=res.found,
            expanded=res.expanded,
            cost=res.cost,
            ms=(time.perf_counter() - t1) * 1000,
        )
        if not res.found and self.strict_no_path:
            raise NoPathFound(start, end)
        return res

    def _route(
        self,
        objective: Objective,
        res: SearchResult,
        snapshot: GraphSnapshot,
        mode: TransportMode,
    ) -> Route:
        return Route(
            objective=objective,
            path=res.path,
            points=tuple(snapshot.node(n).coord for n in res.path),
            metrics=self.metrics.compute(res.path, snapshot, mode),
        )


def plan_routes(
    snapshot: GraphSnapshot,
    origin: Coordinate,
    destination: Coordinate,
    mode: TransportMode | str = TransportMode.WALK,
) -> PlannedRoutes:
    """Plan both routes on a ready snapshot with default costs and metrics."""
    return RoutePlanner().plan_on_snapshot(snapshot, origin, destination, mode)
