"""Static Authority Registry — settings-driven AuthorityRegistry implementation.

Invariants:
    - Answer for a principal is stable for the duration of a call (set lookup, no IO)
    - Empty or whitespace principals are never authorities

Design Decisions:
    - grant/revoke kept on the shell object, not the Protocol: the core only asks
"""

import logging
import threading
from collections.abc import Iterable

logger = logging.getLogger(__name__)


class StaticAuthorityRegistry:
    """In-process set of verified authorities."""

    def __init__(self, principals: Iterable[str] = ()):
        self._principals = {p.strip() for p in principals if p and p.strip()}
        self._lock = threading.Lock()

    def is_verified_authority(self, principal: str) -> bool:
        return principal in self._principals

    def grant(self, principal: str) -> None:
        with self._lock:
            self._principals.add(principal)
        logger.info("Authority granted", extra={"caller": principal})

    def revoke(self, principal: str) -> None:
        with self._lock:
            self._principals.discard(principal)
        logger.info("Authority revoked", extra={"caller": principal})
