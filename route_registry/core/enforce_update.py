"""Update Enforcement — ordered checks run before a stored route is mutated.

Invariants:
    - Order: existence, creator match, hash shape, description, safety level
    - Only the route's creator may update it; the authority oracle is not consulted
    - The new hash is checked for shape only, never for uniqueness across routes

Design Decisions:
    - Separate from enforce_registration: different lifecycle: registration gates
      admission, update gates ownership (ADR: responsibility separation)
    - Hash-shape failure reports INVALID_UPDATE_HASH, not INVALID_HASH, so callers
      can tell which operation rejected the value
"""

from route_registry.core.errors import RouteErrorCode
from route_registry.core.enforce_fields import (
    check_hash,
    check_description,
    check_safety_level,
)
from route_registry.core.route_record import Route


def check_route_exists(route: Route | None) -> RouteErrorCode | None:
    return RouteErrorCode.ROUTE_NOT_FOUND if route is None else None


def check_creator(route: Route, caller: str) -> RouteErrorCode | None:
    return RouteErrorCode.NOT_AUTHORIZED if route.creator != caller else None


def validate_update(
    route: Route | None,
    caller: str,
    update_hash: str,
    description: str,
    safety_level: int,
) -> RouteErrorCode | None:
    """Chain all update checks against the currently stored route. Pure."""
    return (
        check_route_exists(route)
        or check_creator(route, caller)
        or check_hash(update_hash, RouteErrorCode.INVALID_UPDATE_HASH)
        or check_description(description)
        or check_safety_level(safety_level)
    )
