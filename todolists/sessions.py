"""In-process registry of session-scoped todo state."""

from __future__ import annotations

import logging
import secrets
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from .repositories.session_repository import SessionState

logger = logging.getLogger(__name__)


@dataclass
class _SessionEntry:
    state: SessionState
    last_seen: float


class SessionRegistry:
    """Map session ids carried in a cookie to their in-memory state.

    Sessions idle for longer than the ttl passed to :meth:`get_or_create`
    are dropped before the lookup.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._sessions: Dict[str, _SessionEntry] = {}
        self._clock = clock

    def get_or_create(
        self, session_id: Optional[str], *, ttl_seconds: Optional[float] = None
    ) -> Tuple[str, SessionState]:
        """Return the state for ``session_id``, starting a new session if unknown."""
        now = self._clock()
        if ttl_seconds is not None and ttl_seconds > 0:
            self.evict_idle(ttl_seconds, now=now)
        entry = self._sessions.get(session_id) if session_id else None
        if entry is not None:
            entry.last_seen = now
            return session_id, entry.state
        new_id = secrets.token_urlsafe(32)
        state = SessionState()
        self._sessions[new_id] = _SessionEntry(state=state, last_seen=now)
        logger.info("Started new todo session (active=%d)", len(self._sessions))
        return new_id, state

    def evict_idle(self, ttl_seconds: float, *, now: Optional[float] = None) -> int:
        """Drop sessions not seen within ``ttl_seconds``; return how many went."""
        cutoff = (self._clock() if now is None else now) - ttl_seconds
        expired = [key for key, entry in self._sessions.items() if entry.last_seen < cutoff]
        for key in expired:
            del self._sessions[key]
        if expired:
            logger.info("Evicted %d idle todo sessions (active=%d)", len(expired), len(self._sessions))
        return len(expired)

    def get(self, session_id: str) -> Optional[SessionState]:
        entry = self._sessions.get(session_id)
        return entry.state if entry else None

    def __len__(self) -> int:
        return len(self._sessions)

    def clear(self) -> None:
        """Drop every session (testing helper)."""
        self._sessions.clear()


registry = SessionRegistry()
