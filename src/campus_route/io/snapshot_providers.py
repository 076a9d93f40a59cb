# campus_route/io/snapshot_providers.py
import json
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from campus_route.app.protocols import SnapshotProvider
from campus_route.domain.entities.geography import Edge, GraphSnapshot, Node
from campus_route.errors import SnapshotFetchFailure

NODES_TABLE = "campus_nodes"
EDGES_TABLE = "campus_edges"


# Row shapes as the graph store hands them out (extra columns ignored)
class NodeRow(BaseModel):
    model_config = ConfigDict(extra="ignore")
    id: str
    lat: float
    lng: float
    ndvi_value: float | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _str_id(cls, v):
        return str(v) if isinstance(v, int) else v

    def to_node(self) -> Node:
        return Node(id=self.id, lat=self.lat, lng=self.lng, ndvi=self.ndvi_value or 0.0)


class EdgeRow(BaseModel):
    model_config = ConfigDict(extra="ignore")
    from_node_id: str
    to_node_id: str
    distance_meters: float
    avg_carbon_ppm: float
    lighting_level: float
    cctv_coverage: bool
    crowd_density: float

    @field_validator("from_node_id", "to_node_id", mode="before")
    @classmethod
    def _str_id(cls, v):
        return str(v) if isinstance(v, int) else v

    def to_edge(self) -> Edge:
        return Edge(
            source=self.from_node_id,
            target=self.to_node_id,
            distance_m=self.distance_meters,
            avg_carbon_ppm=self.avg_carbon_ppm,
            lighting_level=self.lighting_level,
            cctv_coverage=self.cctv_coverage,
            crowd_density=self.crowd_density,
        )


def parse_rows(
    node_rows: Iterable[Mapping], edge_rows: Iterable[Mapping]
) -> tuple[list[Node], list[Edge]]:
    nodes = [NodeRow.model_validate(r).to_node() for r in node_rows]
    edges = [EdgeRow.model_validate(r).to_edge() for r in edge_rows]
    return nodes, edges


class InMemoryProvider(SnapshotProvider):
    def __init__(self, nodes: Iterable[Node] = (), edges: Iterable[Edge] = ()):
        self._nodes, self._edges = tuple(nodes), tuple(edges)

    @classmethod
    def from_rows(cls, node_rows: Iterable[Mapping], edge_rows: Iterable[Mapping]):
        return cls(*parse_rows(node_rows, edge_rows))

    def list_nodes(self) -> Sequence[Node]:
        return self._nodes

    def list_edges(self) -> Sequence[Edge]:
        return self._edges


class JsonFileProvider(SnapshotProvider):
    """
    Reads an export of the graph store:
        {"campus_nodes": [...rows], "campus_edges": [...rows]}
    The file is re-read on every call; nothing is cached between plans.
    """

    def __init__(self, file: str | Path):
        self.file = Path(file)

    def _table(self, name: str) -> list[dict]:
        try:
            with open(self.file, encoding="utf-8") as f:
                doc = json.load(f)
        except (OSError, ValueError) as e:  # ValueError covers bad JSON and bad UTF-8
            raise SnapshotFetchFailure(f"cannot read graph export {self.file}: {e}") from e
        rows = doc.get(name) if isinstance(doc, dict) else None
        if not isinstance(rows, list):
            raise SnapshotFetchFailure(f"{self.file}: missing table {name!r}")
        return rows

    def list_nodes(self) -> Sequence[Node]:
        try:
            return [NodeRow.model_validate(r).to_node() for r in self._table(NODES_TABLE)]
        except ValidationError as e:
            raise SnapshotFetchFailure(f"{self.file}: bad {NODES_TABLE} row: {e}") from e

    def list_edges(self) -> Sequence[Edge]:
        try:
            return [EdgeRow.model_validate(r).to_edge() for r in self._table(EDGES_TABLE)]
        except ValidationError as e:
            raise SnapshotFetchFailure(f"{self.file}: bad {EDGES_TABLE} row: {e}") from e


def fetch_snapshot(provider: SnapshotProvider) -> GraphSnapshot:
    """One nodes fetch plus one edges fetch, frozen into a snapshot."""
    return GraphSnapshot.from_parts(provider.list_nodes(), provider.list_edges())
