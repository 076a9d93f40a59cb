# tests/conftest.py
import pytest

from campus_route.domain.entities.geography import Edge, GraphSnapshot, Node


def edge(
    source,
    target,
    distance=100.0,
    carbon=350.0,
    lighting=10.0,
    cctv=True,
    crowd=0.0,
) -> Edge:
    return Edge(
        source=source,
        target=target,
        distance_m=distance,
        avg_carbon_ppm=carbon,
        lighting_level=lighting,
        cctv_coverage=cctv,
        crowd_density=crowd,
    )


@pytest.fixture
def make_edge():
    return edge


@pytest.fixture
def abc_snapshot() -> GraphSnapshot:
    """A -> B clean and bright, B -> C dirty, dark, uncovered and crowded."""
    nodes = [
        Node("A", 0.0, 0.0, ndvi=0.4),
        Node("B", 0.0, 0.001, ndvi=0.2),
        Node("C", 0.0, 0.002, ndvi=-0.1),
    ]
    edges = [
        edge("A", "B", 100, carbon=300, lighting=10, cctv=True, crowd=0),
        edge("B", "C", 100, carbon=600, lighting=0, cctv=False, crowd=10),
    ]
    return GraphSnapshot.from_parts(nodes, edges)


@pytest.fixture
def diamond_snapshot() -> GraphSnapshot:
    """
    S -> X -> T: short, polluted first leg, bright and covered.
    S -> Y -> T: longer, clean air, dark and uncovered.
    Eco prefers Y, safe prefers X.
    """
    nodes = [
        Node("S", 0.0, 0.0),
        Node("X", 0.001, 0.001),
        Node("Y", -0.001, 0.001),
        Node("T", 0.0, 0.002),
    ]
    edges = [
        edge("S", "X", 100, carbon=800),
        edge("X", "T", 100, carbon=350),
        edge("S", "Y", 120, carbon=350, lighting=0, cctv=False, crowd=5),
        edge("Y", "T", 120, carbon=350, lighting=0, cctv=False, crowd=5),
    ]
    return GraphSnapshot.from_parts(nodes, edges)
