from __future__ import annotations

import threading
import time
from collections import OrderedDict
from contextlib import contextmanager
from typing import Callable, Iterator

from hotelbot.application.ports.session_store import SessionStorePort
from hotelbot.domain.entities.session import Session


class _IdentityLock:
    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0  # threads holding or waiting on the lock


class MemorySessionStore(SessionStorePort):
    """Process-wide sessions keyed by conversation identity, lost on restart."""

    def __init__(
        self,
        ttl_seconds: float = 1800,
        processed_limit: int = 10_000,
        sweep_interval_seconds: float = 60,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._sessions: dict[str, Session] = {}
        self._processed: OrderedDict[str, None] = OrderedDict()
        self._locks: dict[str, _IdentityLock] = {}
        self._lock_lock = threading.Lock()  # guards the dicts above
        self._ttl_seconds = ttl_seconds
        self._processed_limit = processed_limit
        self._sweep_interval_seconds = sweep_interval_seconds
        self._clock = clock
        self._last_sweep_at = clock()

    def get(self, identity: str) -> Session | None:
        with self._lock_lock:
            session = self._sessions.get(identity)
            if session is None:
                return None
            if self._is_expired(session, self._clock()):
                del self._sessions[identity]
                return None
            return session

    def put(self, identity: str, session: Session) -> None:
        now = self._clock()
        with self._lock_lock:
            self._sessions[identity] = session
            # Abandoned sessions of guests who never write again go here.
            if now - self._last_sweep_at >= self._sweep_interval_seconds:
                self._evict_expired_locked(now)

    def delete(self, identity: str) -> None:
        with self._lock_lock:
            self._sessions.pop(identity, None)

    @contextmanager
    def lock(self, identity: str) -> Iterator[None]:
        with self._lock_lock:
            entry = self._locks.get(identity)
            if entry is None:
                entry = self._locks[identity] = _IdentityLock()
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._lock_lock:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[identity]

    def claim(self, message_id: str) -> bool:
        with self._lock_lock:
            if message_id in self._processed:
                return False
            self._processed[message_id] = None
            while len(self._processed) > self._processed_limit:
                self._processed.popitem(last=False)
            return True

    def evict_expired(self, now_ts: float | None = None) -> int:
        """Drop abandoned sessions. Returns how many were removed."""
        now = self._clock() if now_ts is None else now_ts
        with self._lock_lock:
            return self._evict_expired_locked(now)

    def session_count(self) -> int:
        with self._lock_lock:
            return len(self._sessions)

    def lock_count(self) -> int:
        with self._lock_lock:
            return len(self._locks)

    def _evict_expired_locked(self, now: float) -> int:
        expired = [k for k, s in self._sessions.items() if self._is_expired(s, now)]
        for identity in expired:
            del self._sessions[identity]
        self._last_sweep_at = now
        return len(expired)

    def _is_expired(self, session: Session, now: float) -> bool:
        if session.updated_at is None or self._ttl_seconds <= 0:
            return False
        return now - session.updated_at > self._ttl_seconds
