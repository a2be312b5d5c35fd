"""In-memory registry of studio sessions keyed by browser cookie."""

import logging
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import uuid4

from product_studio.services.studio import StudioSession

logger = logging.getLogger(__name__)


@dataclass
class _SessionEntry:
    session: StudioSession
    expires_at: datetime


@dataclass
class StudioSessionStore:
    """Keeps one state machine per browser.

    Idle sessions are dropped after a TTL, and once ``max_sessions`` are held
    the least recently used one is evicted to make room for a new one.
    """

    factory: Callable[[], StudioSession]
    ttl_seconds: int
    max_sessions: int
    _entries: OrderedDict[str, _SessionEntry]

    def __init__(
        self,
        factory: Callable[[], StudioSession],
        ttl_seconds: int,
        max_sessions: int,
    ) -> None:
        self.factory = factory
        self.ttl_seconds = ttl_seconds
        self.max_sessions = max(1, max_sessions)
        self._entries = OrderedDict()

    def get(self, session_id: str | None) -> StudioSession | None:
        """Return the live session for an id without creating one."""
        if not session_id:
            return None
        now = datetime.now(tz=UTC)
        self._purge_expired(now)
        entry = self._entries.get(session_id)
        if entry is None:
            return None
        self._touch(session_id, entry, now)
        return entry.session

    def get_or_create(self, session_id: str | None) -> tuple[str, StudioSession]:
        """Return the live session for an id, creating a fresh one if needed."""
        session = self.get(session_id)
        if session is not None and session_id is not None:
            return session_id, session

        while len(self._entries) >= self.max_sessions:
            evicted_id, _ = self._entries.popitem(last=False)
            logger.info("Evicted least recently used session %s", evicted_id)
        now = datetime.now(tz=UTC)
        new_id = uuid4().hex
        entry = _SessionEntry(session=self.factory(), expires_at=now)
        self._entries[new_id] = entry
        self._touch(new_id, entry, now)
        return new_id, entry.session

    def __len__(self) -> int:
        return len(self._entries)

    def _touch(self, session_id: str, entry: _SessionEntry, now: datetime) -> None:
        entry.expires_at = now + timedelta(seconds=self.ttl_seconds)
        self._entries.move_to_end(session_id)

    def _purge_expired(self, now: datetime) -> None:
        expired = [
            key for key, entry in self._entries.items() if now >= entry.expires_at
        ]
        for key in expired:
            del self._entries[key]
