"""API Dependencies — per-request access to the service, clock, and caller identity.

Invariants:
    - Service and clock live on app.state, built once in the lifespan
    - A missing or blank caller header resolves to "" (never an authority, never a creator)

Design Decisions:
    - app.state over module globals: tests build a fresh app per fixture
"""

from typing import Annotated

from fastapi import Depends, Header, Request

from route_registry.infrastructure.logical_clock import LogicalClock
from route_registry.services.registration_service import RegistrationService

CALLER_HEADER = "X-Caller-Id"


def get_service(request: Request) -> RegistrationService:
    return request.app.state.registration_service


def get_clock(request: Request) -> LogicalClock:
    return request.app.state.clock


def get_caller(
    caller: Annotated[str | None, Header(alias=CALLER_HEADER)] = None,
) -> str:
    return (caller or "").strip()


ServiceDep = Annotated[RegistrationService, Depends(get_service)]
ClockDep = Annotated[LogicalClock, Depends(get_clock)]
CallerDep = Annotated[str, Depends(get_caller)]
