from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

from campus_route.domain.entities.geography import Coordinate, Edge, GraphSnapshot, Node, Path
from campus_route.domain.entities.route import RouteMetrics, TransportMode


# ------------- External collaborators --------------------
@runtime_checkable
class SnapshotProvider(Protocol):
    """
    Responsibilities:
    • Hand out the full node and edge sets of one campus graph.
    • Keep the pair consistent at fetch time; the planner does not reconcile.
    Failures surface as SnapshotFetchFailure and are never retried by the planner.
    """

    def list_nodes(self) -> Sequence[Node]: ...
    def list_edges(self) -> Sequence[Edge]: ...


# ------------- Mechanics --------------------

EdgeCostFn = Callable[[Edge], float]


@runtime_checkable
class NodeLocator(Protocol):
    def nearest(self, snapshot: GraphSnapshot, at: Coordinate) -> str: ...


@runtime_checkable
class PathSearch(Protocol):
    """
    Responsibilities:
      • Find the cheapest node sequence between two snapshot nodes under a cost fn.
      • Report whether the destination was actually reached.
    """

    def find(self, snapshot: GraphSnapshot, start: str, end: str, cost_fn: EdgeCostFn): ...


@runtime_checkable
class MetricsCalculator(Protocol):
    def compute(
        self, path: Path, snapshot: GraphSnapshot, mode: TransportMode
    ) -> RouteMetrics: ...
