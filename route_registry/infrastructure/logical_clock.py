"""Logical Clock — host-side monotonic height stamped onto mutating calls.

Invariants:
    - tick() returns strictly increasing values, starting at start + 1
    - current() never decreases

Design Decisions:
    - Owned by the HTTP shell, not the core: the service receives the height as a parameter
"""

import threading


class LogicalClock:
    def __init__(self, start: int = 0):
        self._height = start
        self._lock = threading.Lock()

    def tick(self) -> int:
        with self._lock:
            self._height += 1
            return self._height

    def current(self) -> int:
        return self._height
