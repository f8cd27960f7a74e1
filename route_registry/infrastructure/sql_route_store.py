"""SQL Route Store — RouteStore backed by SQLAlchemy, same observable behavior as in-memory.

Invariants:
    - next_id() == number of stored rows (ids are dense from 0, no deletes exist)
    - insert/replace/record_update each commit exactly one transaction
    - replace() never writes id or creator columns
    - Rows are converted to frozen core records before leaving this module
    - Ids outside the signed 64-bit column range are never stored, so lookups return None

Design Decisions:
    - hash_exists() as an indexed EXISTS query: replaces the linear scan without
      changing the contract
    - session.merge for record_update: single-row upsert keyed by route_id
"""

from sqlalchemy import exists, func, select

from route_registry.core.domain_types import DEFAULT_MAX_ROUTES
from route_registry.core.route_record import (
    Boundaries, Geolocation, Route, RouteUpdate,
)
from route_registry.infrastructure.database import DatabaseSessionManager
from route_registry.models.route import RouteRow, RouteUpdateRow

# SQL INTEGER is a signed 64-bit column
_MAX_SQL_ID = 2**63


def _row_to_route(row: RouteRow) -> Route:
    return Route(
        id=row.id,
        hash=row.hash,
        description=row.description,
        safety_level=row.safety_level,
        geolocation=Geolocation(lat=row.lat, lon=row.lon),
        boundaries=Boundaries(
            min_lat=row.min_lat, max_lat=row.max_lat,
            min_lon=row.min_lon, max_lon=row.max_lon,
        ),
        route_type=row.route_type,
        distance=row.distance,
        elevation=row.elevation,
        weather_condition=row.weather_condition,
        traffic_status=row.traffic_status,
        emergency_status=row.emergency_status,
        timestamp=row.timestamp,
        creator=row.creator,
    )


def _row_to_update(row: RouteUpdateRow) -> RouteUpdate:
    return RouteUpdate(
        update_hash=row.update_hash,
        update_description=row.update_description,
        update_safety_level=row.update_safety_level,
        update_timestamp=row.update_timestamp,
        updater=row.updater,
    )


class SqlRouteStore:
    """SQLAlchemy-backed RouteStore."""

    def __init__(
        self, db: DatabaseSessionManager, max_routes: int = DEFAULT_MAX_ROUTES,
    ):
        self._db = db
        self.max_routes = max_routes

    def next_id(self) -> int:
        return self.count()

    def insert(self, route_id: int, route: Route) -> None:
        expected = self.next_id()
        if route_id != expected:
            raise ValueError(
                f"Route id {route_id} is not the next assignable id ({expected})",
            )
        with self._db.session() as session:
            session.add(RouteRow(
                id=route_id,
                hash=route.hash,
                description=route.description,
                safety_level=route.safety_level,
                lat=route.geolocation.lat,
                lon=route.geolocation.lon,
                min_lat=route.boundaries.min_lat,
                max_lat=route.boundaries.max_lat,
                min_lon=route.boundaries.min_lon,
                max_lon=route.boundaries.max_lon,
                route_type=route.route_type,
                distance=route.distance,
                elevation=route.elevation,
                weather_condition=route.weather_condition,
                traffic_status=route.traffic_status,
                emergency_status=route.emergency_status,
                timestamp=route.timestamp,
                creator=route.creator,
            ))
            session.commit()

    def get(self, route_id: int) -> Route | None:
        if not 0 <= route_id < _MAX_SQL_ID:
            return None
        with self._db.session() as session:
            row = session.get(RouteRow, route_id)
            return _row_to_route(row) if row is not None else None

    def replace(self, route_id: int, route: Route) -> None:
        with self._db.session() as session:
            row = session.get(RouteRow, route_id)
            if row is None:
                raise KeyError(route_id)
            row.hash = route.hash
            row.description = route.description
            row.safety_level = route.safety_level
            row.lat = route.geolocation.lat
            row.lon = route.geolocation.lon
            row.min_lat = route.boundaries.min_lat
            row.max_lat = route.boundaries.max_lat
            row.min_lon = route.boundaries.min_lon
            row.max_lon = route.boundaries.max_lon
            row.route_type = route.route_type
            row.distance = route.distance
            row.elevation = route.elevation
            row.weather_condition = route.weather_condition
            row.traffic_status = route.traffic_status
            row.emergency_status = route.emergency_status
            row.timestamp = route.timestamp
            session.commit()

    def record_update(self, route_id: int, update: RouteUpdate) -> None:
        with self._db.session() as session:
            session.merge(RouteUpdateRow(
                route_id=route_id,
                update_hash=update.update_hash,
                update_description=update.update_description,
                update_safety_level=update.update_safety_level,
                update_timestamp=update.update_timestamp,
                updater=update.updater,
            ))
            session.commit()

    def get_update(self, route_id: int) -> RouteUpdate | None:
        if not 0 <= route_id < _MAX_SQL_ID:
            return None
        with self._db.session() as session:
            row = session.get(RouteUpdateRow, route_id)
            return _row_to_update(row) if row is not None else None

    def hash_exists(self, route_hash: str) -> bool:
        with self._db.session() as session:
            return bool(session.scalar(
                select(exists().where(RouteRow.hash == route_hash)),
            ))

    def count(self) -> int:
        with self._db.session() as session:
            return session.scalar(select(func.count()).select_from(RouteRow)) or 0
