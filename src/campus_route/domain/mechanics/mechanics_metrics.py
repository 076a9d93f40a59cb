import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from campus_route.app.protocols import MetricsCalculator
from campus_route.domain.entities.geography import Edge, GraphSnapshot, Path
from campus_route.domain.entities.route import RouteMetrics, TransportMode


def round_half_up(x: float, ndigits: int = 0) -> float:
    # clients display these verbatim, so no banker's rounding
    if not math.isfinite(x):
        return x
    d = Decimal(x)
    with localcontext() as ctx:
        # room for every integer digit of any float plus the kept decimals
        ctx.prec = max(ctx.prec, d.adjusted() + ndigits + 2)
        return float(d.quantize(Decimal(1).scaleb(-ndigits), rounding=ROUND_HALF_UP))


def edge_safety(edge: Edge) -> float:
    """Per-edge safety rating; 100 = fully lit, covered, empty."""
    return (
        edge.lighting_level * 5
        + (25 if edge.cctv_coverage else 0)
        + (10 - edge.crowd_density) * 2.5
    )


class RouteMetricsCalculator(MetricsCalculator):
    """
    Walks consecutive node pairs of a path and aggregates what the matching
    directed edges report. Pairs with no edge (the fallback path) add nothing.
    Safety is weakest-link: the minimum edge rating, not the mean.
    """

    def __init__(
        self,
        *,
        walk_kmh: float = 5.0,
        cycle_kmh: float = 15.0,
        other_kmh: float = 5.0,
        car_g_per_km: float = 120.0,
        other_mode_credit: float = 0.7,
    ):
        self.speed_kmh = {
            TransportMode.WALK: walk_kmh,
            TransportMode.CYCLE: cycle_kmh,
            TransportMode.OTHER: other_kmh,
        }
        self.car_g_per_km = car_g_per_km
        self.other_mode_credit = other_mode_credit

    def compute(self, path: Path, snapshot: GraphSnapshot, mode: TransportMode) -> RouteMetrics:
        mode = TransportMode.parse(mode)
        distance = 0.0
        carbon = 0.0
        safety = 100.0
        matched = 0

        for u, v in zip(path, path[1:]):
            e = snapshot.edge_between(u, v)
            if e is None:
                continue
            matched += 1
            distance += e.distance_m
            carbon += e.avg_carbon_ppm * e.distance_m / 1000
            safety = min(safety, edge_safety(e))

        return RouteMetrics(
            distance_meters=int(round_half_up(distance)),
            duration_seconds=self.duration_s(distance, mode),
            co2_saved_kg=self.co2_saved_kg(distance, mode),
            safety_score=int(round_half_up(max(0.0, min(100.0, safety)))),
            carbon_exposure_ppm_km=round_half_up(carbon, 3),
            matched_edges=matched,
        )

    def duration_s(self, distance_m: float, mode: TransportMode) -> int:
        speed_m_per_h = self.speed_kmh[mode] * 1000
        return int(round_half_up(distance_m / speed_m_per_h * 3600))

    def co2_saved_kg(self, distance_m: float, mode: TransportMode) -> float:
        car_kg = distance_m * (self.car_g_per_km / 1000) / 1000
        if mode in (TransportMode.WALK, TransportMode.CYCLE):
            saved = car_kg
        else:
            saved = car_kg * self.other_mode_credit
        return round_half_up(saved, 3)
