# campus_route/domain/mechanics/mechanics_costs.py
from dataclasses import dataclass

from campus_route.domain.entities.geography import Edge


@dataclass(frozen=True)
class EcoCost:
    """distance + carbon above the ambient baseline, weighted."""

    baseline_ppm: float = 350.0
    carbon_weight: float = 0.5

    def __call__(self, edge: Edge) -> float:
        excess = max(0.0, edge.avg_carbon_ppm - self.baseline_ppm)
        return edge.distance_m + excess * self.carbon_weight


@dataclass(frozen=True)
class SafetyCost:
    """
    distance + darkness, missing CCTV and crowding penalties.
    Penalties are floored at zero, so lighting above 10 or negative crowding
    earns no discount and orders routes differently from the unclamped formula.
    """

    lighting_weight: float = 20.0
    no_cctv_penalty: float = 50.0
    crowd_weight: float = 10.0

    def __call__(self, edge: Edge) -> float:
        # clamp so out-of-range levels can't discount below raw distance
        darkness = max(0.0, 10.0 - edge.lighting_level) * self.lighting_weight
        cctv = 0.0 if edge.cctv_coverage else self.no_cctv_penalty
        crowd = max(0.0, edge.crowd_density) * self.crowd_weight
        return edge.distance_m + darkness + cctv + crowd


eco_cost = EcoCost()
safety_cost = SafetyCost()
