"""In-Memory Route Store — id assignment, capacity, and the latest-update slot per route.

Invariants:
    - Ids are dense: insert() accepts only next_id(), then advances the counter
    - replace() keeps the stored id and creator regardless of the record passed in
    - At most one RouteUpdate per id; record_update() overwrites
    - _hash_counts mirrors the hashes of all stored routes (count > 0 means present)

Design Decisions:
    - Hash index as a counter, not a set: update may give two routes the same hash,
      and replacing one of them must not hide the other from hash_exists()
    - Not thread-safe on its own: RegistrationService serializes mutating calls
"""

from collections import Counter
from dataclasses import replace

from route_registry.core.domain_types import DEFAULT_MAX_ROUTES
from route_registry.core.route_record import Route, RouteUpdate


class InMemoryRouteStore:
    """Dict-backed RouteStore."""

    def __init__(self, max_routes: int = DEFAULT_MAX_ROUTES):
        self.max_routes = max_routes
        self._next_id = 0
        self._routes: dict[int, Route] = {}
        self._updates: dict[int, RouteUpdate] = {}
        self._hash_counts: Counter[str] = Counter()

    def next_id(self) -> int:
        return self._next_id

    def insert(self, route_id: int, route: Route) -> None:
        if route_id != self._next_id:
            raise ValueError(
                f"Route id {route_id} is not the next assignable id ({self._next_id})",
            )
        self._routes[route_id] = replace(route, id=route_id)
        self._hash_counts[route.hash] += 1
        self._next_id += 1

    def get(self, route_id: int) -> Route | None:
        return self._routes.get(route_id)

    def replace(self, route_id: int, route: Route) -> None:
        current = self._routes.get(route_id)
        if current is None:
            raise KeyError(route_id)
        self._hash_counts[current.hash] -= 1
        if self._hash_counts[current.hash] <= 0:
            del self._hash_counts[current.hash]
        self._routes[route_id] = replace(route, id=route_id, creator=current.creator)
        self._hash_counts[route.hash] += 1

    def record_update(self, route_id: int, update: RouteUpdate) -> None:
        self._updates[route_id] = update

    def get_update(self, route_id: int) -> RouteUpdate | None:
        return self._updates.get(route_id)

    def hash_exists(self, route_hash: str) -> bool:
        return self._hash_counts.get(route_hash, 0) > 0

    def count(self) -> int:
        return len(self._routes)
