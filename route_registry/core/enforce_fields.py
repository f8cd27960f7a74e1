"""Field Rules — pure per-field checks shared by registration and update.

Invariants:
    - All functions are PURE: no IO, no store access, no side effects
    - Return the violated RouteErrorCode, or None on success
    - Range checks are written as `not (lo <= x <= hi)` so NaN is rejected

Design Decisions:
    - bool is rejected wherever a number is expected: True/False are ints in Python,
      but a flag passed as a safety level or distance is a caller bug
"""

import string
from enum import Enum
from numbers import Real

from route_registry.core.domain_types import (
    HASH_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MIN_SAFETY_LEVEL,
    MAX_SAFETY_LEVEL,
    MAX_DISTANCE,
    MAX_ELEVATION,
    RouteType,
    WeatherCondition,
    TrafficStatus,
)
from route_registry.core.errors import RouteErrorCode
from route_registry.core.route_record import Geolocation, Boundaries

_HEX_DIGITS = frozenset(string.hexdigits)

ROUTE_TYPES = frozenset(t.value for t in RouteType)
WEATHER_CONDITIONS = frozenset(w.value for w in WeatherCondition)
TRAFFIC_STATUSES = frozenset(t.value for t in TrafficStatus)


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_member(value: object, allowed: frozenset[str]) -> bool:
    if isinstance(value, Enum):
        value = value.value
    return isinstance(value, str) and value in allowed


def is_valid_hash(value: object) -> bool:
    """Exactly 64 hexadecimal characters, either case."""
    return (
        isinstance(value, str)
        and len(value) == HASH_LENGTH
        and all(ch in _HEX_DIGITS for ch in value)
    )


def check_hash(value: object, error: RouteErrorCode = RouteErrorCode.INVALID_HASH) -> RouteErrorCode | None:
    return None if is_valid_hash(value) else error


def check_description(value: object) -> RouteErrorCode | None:
    if not isinstance(value, str) or not value or len(value) > MAX_DESCRIPTION_LENGTH:
        return RouteErrorCode.INVALID_DESCRIPTION
    return None


def check_safety_level(value: object) -> RouteErrorCode | None:
    if (
        not _is_number(value)
        or not (MIN_SAFETY_LEVEL <= value <= MAX_SAFETY_LEVEL)
        or value != int(value)
    ):
        return RouteErrorCode.INVALID_SAFETY_LEVEL
    return None


def check_geolocation(geo: Geolocation) -> RouteErrorCode | None:
    if (
        not _is_number(geo.lat)
        or not _is_number(geo.lon)
        or not (-90 <= geo.lat <= 90)
        or not (-180 <= geo.lon <= 180)
    ):
        return RouteErrorCode.INVALID_GEOLOCATION
    return None


def check_boundaries(bounds: Boundaries) -> RouteErrorCode | None:
    """min <= max on both axes. Absolute ranges are not checked."""
    values = (bounds.min_lat, bounds.max_lat, bounds.min_lon, bounds.max_lon)
    if (
        not all(_is_number(v) for v in values)
        or not (bounds.min_lat <= bounds.max_lat)
        or not (bounds.min_lon <= bounds.max_lon)
    ):
        return RouteErrorCode.INVALID_BOUNDARIES
    return None


def check_route_type(value: object) -> RouteErrorCode | None:
    return None if _is_member(value, ROUTE_TYPES) else RouteErrorCode.INVALID_ROUTE_TYPE


def check_distance(value: object) -> RouteErrorCode | None:
    """Ceiling only: negative distances pass."""
    if not _is_number(value) or not (value <= MAX_DISTANCE):
        return RouteErrorCode.INVALID_DISTANCE
    return None


def check_elevation(value: object) -> RouteErrorCode | None:
    """Ceiling only: below-sea-level elevations pass."""
    if not _is_number(value) or not (value <= MAX_ELEVATION):
        return RouteErrorCode.INVALID_ELEVATION
    return None


def check_weather_condition(value: object) -> RouteErrorCode | None:
    return None if _is_member(value, WEATHER_CONDITIONS) else RouteErrorCode.INVALID_WEATHER_CONDITION


def check_traffic_status(value: object) -> RouteErrorCode | None:
    return None if _is_member(value, TRAFFIC_STATUSES) else RouteErrorCode.INVALID_TRAFFIC_STATUS
