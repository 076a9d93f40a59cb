# campus_route/domain/mechanics/mechanics_search.py

import heapq
import math
import time
from dataclasses import dataclass

from campus_route.app.protocols import EdgeCostFn, PathSearch
from campus_route.domain.entities.geography import GraphSnapshot, Path
from campus_route.errors import SearchAborted


@dataclass(frozen=True)
class SearchLimits:
    """Caller-imposed bounds. None disables a bound."""

    max_frontier: int | None = None
    max_expansions: int | None = None
    deadline_s: float | None = None


@dataclass(frozen=True)
class SearchResult:
    path: Path
    found: bool
    cost: float
    expanded: int


class BestFirstSearch(PathSearch):
    """
    Lowest-cost-first expansion over a snapshot (Dijkstra with lazy deletion).

    Frontier entries are (cost, seq, node, path); seq is a monotonically
    increasing insertion counter so equal costs pop in FIFO order and repeated
    runs on the same snapshot give identical paths.

    When the frontier runs dry the result is the bare (start, end) pair with
    found=False. Callers detect it through the zero matched edges it produces.
    """

    def __init__(self, limits: SearchLimits | None = None):
        self.limits = limits or SearchLimits()

    def find(
        self, snapshot: GraphSnapshot, start: str, end: str, cost_fn: EdgeCostFn
    ) -> SearchResult:
        lim = self.limits
        t0 = time.perf_counter()
        seq = 0
        q: list[tuple[float, int, str, Path]] = [(0.0, seq, start, (start,))]
        finalized: set[str] = set()
        expanded = 0

        while q:
            cost, _, node, path = heapq.heappop(q)
            if node == end:
                return SearchResult(path=path, found=True, cost=cost, expanded=expanded)
            if node in finalized:
                continue
            finalized.add(node)
            expanded += 1

            if lim.max_expansions is not None and expanded > lim.max_expansions:
                raise SearchAborted("max_expansions", limit=lim.max_expansions)
            if lim.deadline_s is not None and time.perf_counter() - t0 > lim.deadline_s:
                raise SearchAborted("deadline", limit_s=lim.deadline_s, expanded=expanded)

            for e in snapshot.edges_from(node):
                if e.target in finalized:
                    continue
                seq += 1
                heapq.heappush(q, (cost + cost_fn(e), seq, e.target, path + (e.target,)))

            if lim.max_frontier is not None and len(q) > lim.max_frontier:
                raise SearchAborted("max_frontier", limit=lim.max_frontier, size=len(q))

        return SearchResult(path=(start, end), found=False, cost=math.inf, expanded=expanded)


def search(
    snapshot: GraphSnapshot,
    start: str,
    end: str,
    cost_fn: EdgeCostFn,
    limits: SearchLimits | None = None,
) -> SearchResult:
    return BestFirstSearch(limits).find(snapshot, start, end, cost_fn)
