"""Result — explicit success/failure value returned by every public operation.

Invariants:
    - ok=True carries the operation value; ok=False carries a RouteErrorCode
    - Results are immutable; a failed Result implies no state was mutated

Design Decisions:
    - Result values over exceptions in the core: the error path has the same shape
      as the success path, so callers branch on .ok instead of try/except
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from route_registry.core.errors import RouteErrorCode

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    ok: bool
    value: T | None = None
    error: RouteErrorCode | None = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: RouteErrorCode) -> "Result[T]":
        return cls(ok=False, error=error)

    def unwrap(self) -> T:
        """Return the value or raise ValueError for a failed result."""
        if not self.ok:
            raise ValueError(f"unwrap() on failed result: {self.error!r}")
        return self.value
