"""Route Schemas — Pydantic models at the HTTP boundary, mapped to core records.

Invariants:
    - No Field constraints on domain-checked values: out-of-range input must reach
      the validator and come back with its RouteErrorCode, not a generic 400
    - camelCase aliases accepted alongside snake_case names

Design Decisions:
    - StrictInt for safety_level: 3.5 or "3" is a type error at the boundary, not a
      silently coerced value
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel

from route_registry.core.route_record import (
    Boundaries, Geolocation, Route, RouteDraft, RouteUpdate,
)


class _Schema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GeolocationSchema(_Schema):
    lat: float
    lon: float


class BoundariesSchema(_Schema):
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float


class RouteCreate(_Schema):
    """Registration payload."""
    hash: str
    description: str
    safety_level: StrictInt
    geolocation: GeolocationSchema
    boundaries: BoundariesSchema
    route_type: str
    distance: float
    elevation: float
    weather_condition: str
    traffic_status: str
    emergency_status: bool = False

    def to_draft(self) -> RouteDraft:
        return RouteDraft(
            hash=self.hash,
            description=self.description,
            safety_level=self.safety_level,
            geolocation=Geolocation(
                lat=self.geolocation.lat, lon=self.geolocation.lon,
            ),
            boundaries=Boundaries(
                min_lat=self.boundaries.min_lat,
                max_lat=self.boundaries.max_lat,
                min_lon=self.boundaries.min_lon,
                max_lon=self.boundaries.max_lon,
            ),
            route_type=self.route_type,
            distance=self.distance,
            elevation=self.elevation,
            weather_condition=self.weather_condition,
            traffic_status=self.traffic_status,
            emergency_status=self.emergency_status,
        )


class RouteUpdateRequest(_Schema):
    update_hash: str
    description: str
    safety_level: StrictInt


class RouteCreated(BaseModel):
    id: int


class RouteUpdated(BaseModel):
    updated: bool = True


class RouteResponse(_Schema):
    id: int
    hash: str
    description: str
    safety_level: int
    geolocation: GeolocationSchema
    boundaries: BoundariesSchema
    route_type: str
    distance: float
    elevation: float
    weather_condition: str
    traffic_status: str
    emergency_status: bool
    timestamp: int
    creator: str

    @classmethod
    def from_route(cls, route: Route) -> "RouteResponse":
        return cls.model_validate(route.to_dict())


class RouteUpdateResponse(_Schema):
    update_hash: str
    update_description: str
    update_safety_level: int
    update_timestamp: int
    updater: str

    @classmethod
    def from_update(cls, update: RouteUpdate) -> "RouteUpdateResponse":
        return cls.model_validate(update.to_dict())


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    routes: int = Field(ge=0)
