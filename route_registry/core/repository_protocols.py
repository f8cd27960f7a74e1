"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - The authority oracle and route storage are accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass plain stubs (ADR: no inheritance hierarchy)
    - Synchronous methods: every register/update is one atomic unit; the oracle is assumed
      side-effect free and answers within the call
"""

from typing import Protocol

from route_registry.core.route_record import Route, RouteUpdate


class AuthorityRegistry(Protocol):
    """Answers whether a principal may register new routes."""
    def is_verified_authority(self, principal: str) -> bool: ...


class RouteStore(Protocol):
    """Contract for route persistence: owns id assignment and capacity."""
    max_routes: int

    def next_id(self) -> int: ...
    def insert(self, route_id: int, route: Route) -> None: ...
    def get(self, route_id: int) -> Route | None: ...
    def replace(self, route_id: int, route: Route) -> None: ...
    def record_update(self, route_id: int, update: RouteUpdate) -> None: ...
    def get_update(self, route_id: int) -> RouteUpdate | None: ...
    def hash_exists(self, route_hash: str) -> bool: ...
    def count(self) -> int: ...
