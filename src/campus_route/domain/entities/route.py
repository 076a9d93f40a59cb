from dataclasses import dataclass
from enum import Enum

from campus_route.domain.entities.geography import Coordinate, Path


class Objective(str, Enum):
    ECO = "eco"
    SAFE = "safe"


class TransportMode(str, Enum):
    WALK = "walk"
    CYCLE = "cycle"
    OTHER = "other"

    @classmethod
    def parse(cls, value: "str | TransportMode") -> "TransportMode":
        # anything that is not walking or cycling is treated as partially motorized
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class RouteMetrics:
    distance_meters: int
    duration_seconds: int
    co2_saved_kg: float
    safety_score: int
    carbon_exposure_ppm_km: float = 0.0
    matched_edges: int = 0


@dataclass(frozen=True)
class Route:
    objective: Objective
    path: Path
    points: tuple[Coordinate, ...]
    metrics: RouteMetrics

    @property
    def is_fallback(self) -> bool:
        """True when the search gave up and returned the bare endpoint pair."""
        return len(self.path) > 1 and self.metrics.matched_edges == 0


@dataclass(frozen=True)
class PlannedRoutes:
    eco: Route
    safe: Route
    mode: TransportMode

    def __iter__(self):
        yield self.eco
        yield self.safe
