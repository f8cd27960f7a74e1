"""Route Records — immutable value objects for routes and their latest update.

Invariants:
    - Route and RouteUpdate are frozen: mutation happens by replacement only
    - Route.creator never changes after creation (with_update preserves it)
    - RouteUpdate is a single overwrite slot per route id, not a history log

Design Decisions:
    - Frozen dataclasses over ORM models: the core stays free of persistence concerns;
      the SQL store maps rows to these records at the boundary
"""

from dataclasses import dataclass, asdict, replace


@dataclass(frozen=True)
class Geolocation:
    lat: float
    lon: float


@dataclass(frozen=True)
class Boundaries:
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float


@dataclass(frozen=True)
class Route:
    """A registered path record with safety and environmental metadata."""
    id: int
    hash: str
    description: str
    safety_level: int
    geolocation: Geolocation
    boundaries: Boundaries
    route_type: str
    distance: float
    elevation: float
    weather_condition: str
    traffic_status: str
    emergency_status: bool
    timestamp: int
    creator: str

    def with_update(
        self, update_hash: str, description: str, safety_level: int, timestamp: int,
    ) -> "Route":
        """Replace the mutable fields, retaining everything else."""
        return replace(
            self,
            hash=update_hash,
            description=description,
            safety_level=safety_level,
            timestamp=timestamp,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class RouteUpdate:
    """Latest update applied to a route."""
    update_hash: str
    update_description: str
    update_safety_level: int
    update_timestamp: int
    updater: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class RouteDraft:
    """Caller-supplied fields of a registration, before id/timestamp/creator are stamped."""
    hash: str
    description: str
    safety_level: int
    geolocation: Geolocation
    boundaries: Boundaries
    route_type: str
    distance: float
    elevation: float
    weather_condition: str
    traffic_status: str
    emergency_status: bool = False

    def to_route(self, route_id: int, creator: str, timestamp: int) -> Route:
        return Route(
            id=route_id,
            hash=self.hash,
            description=self.description,
            safety_level=self.safety_level,
            geolocation=self.geolocation,
            boundaries=self.boundaries,
            route_type=self.route_type,
            distance=self.distance,
            elevation=self.elevation,
            weather_condition=self.weather_condition,
            traffic_status=self.traffic_status,
            emergency_status=self.emergency_status,
            timestamp=timestamp,
            creator=creator,
        )
