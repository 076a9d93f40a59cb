# campus_route/io/serialize.py
from campus_route.domain.entities.route import PlannedRoutes, Route


def route_to_dict(route: Route) -> dict:
    m = route.metrics
    return {
        "points": [{"lat": p.lat, "lng": p.lng} for p in route.points],
        "distance_meters": m.distance_meters,
        "duration_seconds": m.duration_seconds,
        "co2_saved_kg": m.co2_saved_kg,
        "safety_score": m.safety_score,
    }


def routes_to_dict(routes: PlannedRoutes) -> dict:
    return {
        "eco_route": route_to_dict(routes.eco),
        "safe_route": route_to_dict(routes.safe),
    }
