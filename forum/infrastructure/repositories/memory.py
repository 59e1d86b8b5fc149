# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Process-local session storage.

Used when ``SESSION_BACKEND=memory``. Sessions do not survive a restart and
are not shared between worker processes.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime

from forum.domain.sessions import Session, SessionRepository


class InMemorySessionRepository(SessionRepository):
    def __init__(self) -> None:
        self._rows: dict[str, Session] = {}
        self._lock = threading.Lock()

    def add(self, session: Session) -> None:
        with self._lock:
            self._rows[session.id] = session

    def get(self, session_id: str) -> Session | None:
        with self._lock:
            return self._rows.get(session_id)

    def touch(self, session_id: str, now: datetime) -> bool:
        with self._lock:
            current = self._rows.get(session_id)
            if current is None or current.expires_at <= now:
                return False
            self._rows[session_id] = replace(current, last_active=now)
            return True

    def delete(self, session_id: str) -> None:
        with self._lock:
            self._rows.pop(session_id, None)

    def delete_expired(self, now: datetime) -> int:
        with self._lock:
            dead = [sid for sid, s in self._rows.items() if s.expires_at <= now]
            for sid in dead:
                del self._rows[sid]
            return len(dead)

    def list_active_since(self, cutoff: datetime, now: datetime) -> Sequence[Session]:
        with self._lock:
            rows = [
                s for s in self._rows.values()
                if s.last_active > cutoff and s.expires_at > now
            ]
        return sorted(rows, key=lambda s: s.last_active, reverse=True)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)
