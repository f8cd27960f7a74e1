"""Route Endpoints — register, update, and read route records.

Invariants:
    - Each mutating request ticks the logical clock exactly once, before the service call
    - A failed Result becomes RouteRejectedError; the global handler shapes the response
    - Caller identity comes only from the X-Caller-Id header, never from the body

Design Decisions:
    - Sync handlers: the service is synchronous and lock-guarded; FastAPI runs these
      in its threadpool
"""

from fastapi import APIRouter, status

from route_registry.api.dependencies import CallerDep, ClockDep, ServiceDep
from route_registry.core.errors import ErrorContext, RouteRejectedError
from route_registry.core.result import Result
from route_registry.schemas.route import (
    RouteCreate,
    RouteCreated,
    RouteResponse,
    RouteUpdateRequest,
    RouteUpdated,
    RouteUpdateResponse,
)

router = APIRouter(prefix="/api/v1/routes", tags=["routes"])


def _unwrap(result: Result, route_id: int | None = None, caller: str | None = None):
    if not result.ok:
        raise RouteRejectedError(
            result.error, ErrorContext(route_id=route_id, caller=caller),
        )
    return result.value


@router.post(
    "", response_model=RouteCreated, status_code=status.HTTP_201_CREATED,
)
def register_route(
    body: RouteCreate, service: ServiceDep, clock: ClockDep, caller: CallerDep,
) -> RouteCreated:
    result = service.register(body.to_draft(), caller, clock.tick())
    return RouteCreated(id=_unwrap(result, caller=caller))


@router.get("/{route_id}", response_model=RouteResponse)
def get_route(route_id: int, service: ServiceDep) -> RouteResponse:
    route = _unwrap(service.get_route(route_id), route_id=route_id)
    return RouteResponse.from_route(route)


@router.put("/{route_id}", response_model=RouteUpdated)
def update_route(
    route_id: int,
    body: RouteUpdateRequest,
    service: ServiceDep,
    clock: ClockDep,
    caller: CallerDep,
) -> RouteUpdated:
    result = service.update(
        route_id, body.update_hash, body.description, body.safety_level,
        caller, clock.tick(),
    )
    return RouteUpdated(updated=_unwrap(result, route_id=route_id, caller=caller))


@router.get("/{route_id}/update", response_model=RouteUpdateResponse)
def get_route_update(route_id: int, service: ServiceDep) -> RouteUpdateResponse:
    update = _unwrap(service.get_route_update(route_id), route_id=route_id)
    return RouteUpdateResponse.from_update(update)
