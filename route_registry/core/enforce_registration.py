"""Registration Enforcement — ordered checks run before a route is admitted.

Invariants:
    - Checks run in a fixed order and the first violation wins:
      capacity, hash, description, safety level, geolocation, boundaries, route type,
      distance, elevation, weather, traffic, authority, hash uniqueness
    - The authority oracle is consulted only after every field rule passes
    - Nothing here mutates the store

Design Decisions:
    - `or`-chaining over a list of rules: short-circuit keeps the oracle and the
      uniqueness lookup from running on malformed input
    - Return codes (not exceptions): the service turns them into Result values,
      keeping error path identical to success path (ADR: uniform result shape)
"""

from route_registry.core.errors import RouteErrorCode
from route_registry.core.enforce_fields import (
    check_hash,
    check_description,
    check_safety_level,
    check_geolocation,
    check_boundaries,
    check_route_type,
    check_distance,
    check_elevation,
    check_weather_condition,
    check_traffic_status,
)
from route_registry.core.repository_protocols import AuthorityRegistry, RouteStore
from route_registry.core.route_record import RouteDraft


def check_capacity(assigned: int, max_routes: int) -> RouteErrorCode | None:
    """Rule 1: no id may be assigned at or beyond max_routes."""
    if assigned >= max_routes:
        return RouteErrorCode.MAX_ROUTES_EXCEEDED
    return None


def validate_route_fields(draft: RouteDraft) -> RouteErrorCode | None:
    """Rules 2-11: field shape and domain checks. Pure."""
    return (
        check_hash(draft.hash)
        or check_description(draft.description)
        or check_safety_level(draft.safety_level)
        or check_geolocation(draft.geolocation)
        or check_boundaries(draft.boundaries)
        or check_route_type(draft.route_type)
        or check_distance(draft.distance)
        or check_elevation(draft.elevation)
        or check_weather_condition(draft.weather_condition)
        or check_traffic_status(draft.traffic_status)
    )


def check_authority(authorities: AuthorityRegistry, caller: str) -> RouteErrorCode | None:
    """Rule 12: only verified authorities may register."""
    if not authorities.is_verified_authority(caller):
        return RouteErrorCode.NOT_AUTHORIZED
    return None


def check_hash_unique(store: RouteStore, route_hash: str) -> RouteErrorCode | None:
    """Rule 13: hash must not belong to any stored route."""
    if store.hash_exists(route_hash):
        return RouteErrorCode.ROUTE_ALREADY_EXISTS
    return None


def validate_registration(
    store: RouteStore,
    authorities: AuthorityRegistry,
    draft: RouteDraft,
    caller: str,
) -> RouteErrorCode | None:
    """Chain all registration checks. Returns first error or None."""
    return (
        check_capacity(store.next_id(), store.max_routes)
        or validate_route_fields(draft)
        or check_authority(authorities, caller)
        or check_hash_unique(store, draft.hash)
    )
