"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RouteId is a dense, non-negative int assigned by the store, never by callers
    - Principal is an opaque caller identity supplied by the host
    - All enumerated field values encoded as str Enums: no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders, compare equal to raw strings
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RouteId = NewType("RouteId", int)
Principal = NewType("Principal", str)
Height = NewType("Height", int)           # logical clock value


# ─── Field Limits ────────────────────────────────────────────────

HASH_LENGTH: int = 64
MAX_DESCRIPTION_LENGTH: int = 500
MIN_SAFETY_LEVEL: int = 1
MAX_SAFETY_LEVEL: int = 5
MAX_DISTANCE: int = 1_000_000
MAX_ELEVATION: int = 10_000
DEFAULT_MAX_ROUTES: int = 1000


# ─── Enums ───────────────────────────────────────────────────────

class RouteType(str, Enum):
    """Kind of physical path a route follows."""
    ROAD = "road"
    PATH = "path"
    WATER = "water"


class WeatherCondition(str, Enum):
    CLEAR = "clear"
    RAINY = "rainy"
    STORMY = "stormy"


class TrafficStatus(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
