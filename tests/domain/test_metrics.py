# tests/domain/test_metrics.py
import pytest

from campus_route.domain.entities.geography import GraphSnapshot, Node
from campus_route.domain.entities.route import TransportMode
from campus_route.domain.mechanics.mechanics_metrics import (
    RouteMetricsCalculator,
    edge_safety,
    round_half_up,
)


@pytest.fixture
def calc() -> RouteMetricsCalculator:
    return RouteMetricsCalculator()


def test_weakest_link_safety_and_totals(calc, abc_snapshot):
    m = calc.compute(("A", "B", "C"), abc_snapshot, TransportMode.WALK)
    assert m.distance_meters == 200
    assert m.duration_seconds == 144
    assert m.co2_saved_kg == 0.024
    assert m.safety_score == 0
    assert m.carbon_exposure_ppm_km == 90.0
    assert m.matched_edges == 2


def test_edge_safety_ratings(make_edge):
    assert edge_safety(make_edge("A", "B", lighting=10, cctv=True, crowd=0)) == 100
    assert edge_safety(make_edge("B", "C", lighting=0, cctv=False, crowd=10)) == 0
    assert edge_safety(make_edge("A", "B", lighting=4, cctv=True, crowd=6)) == 55


@pytest.mark.parametrize(
    "mode, duration, co2",
    [
        (TransportMode.WALK, 144, 0.024),
        (TransportMode.CYCLE, 48, 0.024),
        (TransportMode.OTHER, 144, 0.017),
        ("bus", 144, 0.017),
    ],
)
def test_mode_speed_and_credit(calc, abc_snapshot, mode, duration, co2):
    m = calc.compute(("A", "B", "C"), abc_snapshot, mode)
    assert m.duration_seconds == duration
    assert m.co2_saved_kg == co2


def test_single_node_path(calc, abc_snapshot):
    m = calc.compute(("B",), abc_snapshot, TransportMode.WALK)
    assert (m.distance_meters, m.duration_seconds) == (0, 0)
    assert (m.co2_saved_kg, m.safety_score) == (0.0, 100)
    assert m.matched_edges == 0


def test_unmatched_pairs_contribute_nothing(calc, abc_snapshot):
    m = calc.compute(("A", "C"), abc_snapshot, TransportMode.WALK)
    assert m.distance_meters == 0
    assert m.matched_edges == 0
    assert m.safety_score == 100


@pytest.mark.parametrize(
    "attrs, expected",
    [
        (dict(lighting=30, cctv=True, crowd=-10), 100),
        (dict(lighting=-5, cctv=False, crowd=20), 0),
    ],
)
def test_safety_score_clamped(calc, make_edge, attrs, expected):
    snap = GraphSnapshot.from_parts(
        [Node("A", 0, 0), Node("B", 0, 1)], [make_edge("A", "B", 100, **attrs)]
    )
    assert calc.compute(("A", "B"), snap, TransportMode.WALK).safety_score == expected


def test_fractional_distance_rounding(calc, make_edge):
    snap = GraphSnapshot.from_parts(
        [Node("A", 0, 0), Node("B", 0, 1)], [make_edge("A", "B", 62.5, lighting=9)]
    )
    m = calc.compute(("A", "B"), snap, TransportMode.WALK)
    assert m.distance_meters == 63
    assert m.duration_seconds == 45
    assert m.safety_score == 95


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(0.0625, 3) == 0.063
    assert round_half_up(1.2344, 3) == 1.234
    assert round_half_up(1e300, 3) == 1e300
    assert round_half_up(float("inf")) == float("inf")


def test_configured_speeds_and_baseline(abc_snapshot):
    calc = RouteMetricsCalculator(walk_kmh=10, car_g_per_km=200, other_mode_credit=0.5)
    walk = calc.compute(("A", "B", "C"), abc_snapshot, TransportMode.WALK)
    other = calc.compute(("A", "B", "C"), abc_snapshot, TransportMode.OTHER)
    assert walk.duration_seconds == 72
    assert walk.co2_saved_kg == 0.04
    assert other.co2_saved_kg == 0.02


def test_huge_finite_distances_still_round(calc, make_edge):
    snap = GraphSnapshot.from_parts(
        [Node("A", 0, 0), Node("B", 0, 1)], [make_edge("A", "B", 1e30)]
    )
    m = calc.compute(("A", "B"), snap, TransportMode.WALK)
    assert m.distance_meters == int(1e30)
    assert m.carbon_exposure_ppm_km == pytest.approx(3.5e29)
    assert m.safety_score == 100
