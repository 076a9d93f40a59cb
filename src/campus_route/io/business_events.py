# campus_route/io/business_events.py

from dataclasses import dataclass


# Analytics records (one per finished plan, never fed back into planning)
@dataclass
class PlanRecord:
    run_id: str
    seq: int  # plan sequence within this process
    name: str  # stable record name


@dataclass
class RoutePlanned(PlanRecord):
    mode: str
    origin: tuple[float, float]
    destination: tuple[float, float]
    eco_distance_m: int
    eco_co2_saved_kg: float
    eco_fallback: bool
    safe_distance_m: int
    safe_safety_score: int
    safe_fallback: bool
