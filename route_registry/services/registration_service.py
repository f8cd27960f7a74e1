"""Registration Service — orchestrates validator, authority oracle, and store per call.

Invariants:
    - Every public method returns a Result; domain failures never raise
    - Validation completes before any store mutation: a failed call changes nothing
    - next_id+insert and get+replace+record_update run under one lock (atomic per call)
    - creator=caller and timestamp=current_time are stamped here, never by the caller's payload

Design Decisions:
    - Caller identity and logical clock are explicit parameters, not ambient state:
      the service is deterministic given (store, oracle, arguments)
    - threading.Lock over per-route locks: one writer at a time keeps id assignment dense
      and is cheap at registry scale (ADR: simplicity over throughput)
"""

import logging
import threading

from route_registry.core.domain_types import Height, Principal, RouteId
from route_registry.core.enforce_registration import validate_registration
from route_registry.core.enforce_update import validate_update
from route_registry.core.errors import RouteErrorCode
from route_registry.core.repository_protocols import AuthorityRegistry, RouteStore
from route_registry.core.result import Result
from route_registry.core.route_record import Route, RouteDraft, RouteUpdate

logger = logging.getLogger(__name__)


class RegistrationService:
    """Register, update, and read routes."""

    def __init__(self, store: RouteStore, authorities: AuthorityRegistry):
        self._store = store
        self._authorities = authorities
        self._lock = threading.Lock()

    def register(
        self, draft: RouteDraft, caller: Principal, current_time: Height,
    ) -> Result[RouteId]:
        """Admit a new route. Returns its id on success."""
        with self._lock:
            error = validate_registration(
                self._store, self._authorities, draft, caller,
            )
            if error is not None:
                logger.info(
                    f"Route registration rejected: {error.kind}",
                    extra={"caller": caller, "error_code": int(error)},
                )
                return Result.failure(error)

            route_id = self._store.next_id()
            self._store.insert(
                route_id, draft.to_route(route_id, caller, current_time),
            )

        logger.info(
            "Route registered",
            extra={
                "route_id": route_id, "caller": caller,
                "timestamp_height": current_time,
            },
        )
        return Result.success(route_id)

    def update(
        self,
        route_id: RouteId,
        update_hash: str,
        description: str,
        safety_level: int,
        caller: Principal,
        current_time: Height,
    ) -> Result[bool]:
        """Replace hash/description/safety level of a route owned by caller."""
        with self._lock:
            current = self._store.get(route_id)
            error = validate_update(
                current, caller, update_hash, description, safety_level,
            )
            if error is not None:
                logger.info(
                    f"Route update rejected: {error.kind}",
                    extra={
                        "route_id": route_id, "caller": caller,
                        "error_code": int(error),
                    },
                )
                return Result.failure(error)

            self._store.replace(
                route_id,
                current.with_update(
                    update_hash, description, safety_level, current_time,
                ),
            )
            self._store.record_update(
                route_id,
                RouteUpdate(
                    update_hash=update_hash,
                    update_description=description,
                    update_safety_level=safety_level,
                    update_timestamp=current_time,
                    updater=caller,
                ),
            )

        logger.info(
            "Route updated",
            extra={
                "route_id": route_id, "caller": caller,
                "timestamp_height": current_time,
            },
        )
        return Result.success(True)

    def get_route(self, route_id: RouteId) -> Result[Route]:
        route = self._store.get(route_id)
        if route is None:
            return Result.failure(RouteErrorCode.ROUTE_NOT_FOUND)
        return Result.success(route)

    def get_route_update(self, route_id: RouteId) -> Result[RouteUpdate]:
        """Latest update entry. RouteNotFound if the route was never updated."""
        update = self._store.get_update(route_id)
        if update is None:
            return Result.failure(RouteErrorCode.ROUTE_NOT_FOUND)
        return Result.success(update)

    @property
    def route_count(self) -> int:
        return self._store.count()
