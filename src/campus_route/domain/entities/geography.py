import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType

import numpy as np

from campus_route.errors import InvalidSnapshot


# Core graph types consumed by mechanics
@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float


@dataclass(frozen=True)
class Node:
    id: str
    lat: float
    lng: float
    ndvi: float = 0.0  # display only, never priced

    @property
    def coord(self) -> Coordinate:
        return Coordinate(self.lat, self.lng)


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    distance_m: float
    avg_carbon_ppm: float
    lighting_level: float  # 0..10
    cctv_coverage: bool
    crowd_density: float  # 0..10


@dataclass(frozen=True)
class GraphSnapshot:
    """
    Immutable point-in-time copy of the campus graph for one planning call.
    Node order is the provider's order and drives every tie-break downstream.
    Edges are directed; nothing is symmetrized.
    """

    nodes: Mapping[str, Node] = field(default_factory=dict)
    edges: tuple[Edge, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "nodes", MappingProxyType(dict(self.nodes)))
        object.__setattr__(self, "edges", tuple(self.edges))
        for e in self.edges:
            if e.source not in self.nodes or e.target not in self.nodes:
                raise InvalidSnapshot(
                    f"edge {e.source!r}->{e.target!r} references a node outside the snapshot"
                )
            if not e.distance_m > 0:
                raise InvalidSnapshot(
                    f"edge {e.source!r}->{e.target!r} has non-positive distance {e.distance_m}"
                )
            measures = (e.distance_m, e.avg_carbon_ppm, e.lighting_level, e.crowd_density)
            if not all(math.isfinite(x) for x in measures):
                raise InvalidSnapshot(
                    f"edge {e.source!r}->{e.target!r} has a non-finite attribute {measures}"
                )

    @classmethod
    def from_parts(cls, nodes: Iterable[Node], edges: Iterable[Edge]) -> "GraphSnapshot":
        by_id: dict[str, Node] = {}
        for n in nodes:
            if n.id in by_id:
                raise InvalidSnapshot(f"duplicate node id {n.id!r}")
            by_id[n.id] = n
        return cls(nodes=by_id, edges=tuple(edges))

    def __len__(self) -> int:
        return len(self.nodes)

    def node(self, node_id: str) -> Node:
        return self.nodes[node_id]

    # ---- derived read-only indexes (built lazily, once per snapshot)

    @cached_property
    def node_ids(self) -> tuple[str, ...]:
        return tuple(self.nodes)

    @cached_property
    def coords(self) -> np.ndarray:
        """(n, 2) array of (lat, lng) in node order."""
        if not self.nodes:
            return np.empty((0, 2), dtype=float)
        return np.array([(n.lat, n.lng) for n in self.nodes.values()], dtype=float)

    @cached_property
    def outgoing(self) -> Mapping[str, tuple[Edge, ...]]:
        out: dict[str, list[Edge]] = {}
        for e in self.edges:
            out.setdefault(e.source, []).append(e)
        return MappingProxyType({k: tuple(v) for k, v in out.items()})

    @cached_property
    def edge_index(self) -> Mapping[tuple[str, str], Edge]:
        # first edge wins for parallel edges
        idx: dict[tuple[str, str], Edge] = {}
        for e in self.edges:
            idx.setdefault((e.source, e.target), e)
        return MappingProxyType(idx)

    def edges_from(self, node_id: str) -> tuple[Edge, ...]:
        return self.outgoing.get(node_id, ())

    def edge_between(self, source: str, target: str) -> Edge | None:
        return self.edge_index.get((source, target))


Path = tuple[str, ...]
