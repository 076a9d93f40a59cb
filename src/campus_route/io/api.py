# campus_route/io/api.py
import logging
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from campus_route.app.build import PlannerApp
from campus_route.domain.entities.geography import Coordinate
from campus_route.domain.entities.route import TransportMode
from campus_route.errors import PlannerError
from campus_route.io.serialize import routes_to_dict

log = logging.getLogger("campus_route.api")


class RouteRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")
    from_lat: float
    from_lng: float
    to_lat: float
    to_lng: float
    mode: TransportMode = TransportMode.WALK

    @field_validator("mode", mode="before")
    @classmethod
    def _any_mode(cls, v):
        # null, numbers and unknown names all plan as partially motorized
        return TransportMode.parse(v)

    @property
    def origin(self) -> Coordinate:
        return Coordinate(self.from_lat, self.from_lng)

    @property
    def destination(self) -> Coordinate:
        return Coordinate(self.to_lat, self.to_lng)

    @property
    def transport_mode(self) -> TransportMode:
        return self.mode


def _describe(e: ValidationError) -> str:
    return "; ".join(
        ".".join(str(p) for p in err["loc"]) + ": " + err["msg"] for err in e.errors()
    )


def handle_request(payload: Mapping, app: PlannerApp) -> tuple[int, dict]:
    """
    Route-planning request/response cycle: (status, body).
    Bad input -> 400, planner failures -> 500, both as {"error": message}.
    """
    try:
        req = RouteRequest.model_validate(payload)
    except ValidationError as e:
        log.warning("bad route request: %s", e.errors(include_url=False))
        return 400, {"error": "invalid request: " + _describe(e)}

    try:
        routes = app.planner.plan_routes(req.origin, req.destination, req.transport_mode)
    except PlannerError as e:
        log.error("route planning failed: %s", e)
        return 500, {"error": str(e)}
    return 200, routes_to_dict(routes)
