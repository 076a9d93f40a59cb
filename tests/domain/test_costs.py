# tests/domain/test_costs.py
import pytest

from campus_route.domain.mechanics.mechanics_costs import EcoCost, SafetyCost, eco_cost, safety_cost


def test_eco_cost_ignores_carbon_below_baseline(make_edge):
    assert eco_cost(make_edge("A", "B", 100, carbon=300)) == 100
    assert eco_cost(make_edge("A", "B", 100, carbon=350)) == 100


def test_eco_cost_penalizes_excess_carbon(make_edge):
    assert eco_cost(make_edge("B", "C", 100, carbon=600)) == 225


def test_safety_cost_components(make_edge):
    bright = make_edge("A", "B", 100, lighting=10, cctv=True, crowd=0)
    dark = make_edge("B", "C", 100, lighting=0, cctv=False, crowd=10)
    assert safety_cost(bright) == 100
    assert safety_cost(dark) == 100 + 200 + 50 + 100


def test_custom_weights(make_edge):
    e = make_edge("A", "B", 50, carbon=450, lighting=5, cctv=False, crowd=2)
    assert EcoCost(baseline_ppm=400, carbon_weight=1.0)(e) == 100
    assert SafetyCost(lighting_weight=1, no_cctv_penalty=0, crowd_weight=0)(e) == 55


@pytest.mark.parametrize(
    "attrs",
    [
        dict(carbon=0, lighting=10, cctv=True, crowd=0),
        dict(carbon=2000, lighting=0, cctv=False, crowd=10),
        dict(carbon=100, lighting=30, cctv=True, crowd=-5),  # out-of-range synthetic levels
        dict(carbon=351, lighting=9.5, cctv=False, crowd=0.1),
    ],
)
def test_costs_never_below_distance(make_edge, attrs):
    e = make_edge("A", "B", 73.5, **attrs)
    assert eco_cost(e) >= e.distance_m
    assert safety_cost(e) >= e.distance_m
