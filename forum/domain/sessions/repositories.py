# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from .entities import Session


class SessionRepository(Protocol):
    """Point operations on the sessions table, each one atomic."""

    def add(self, session: Session) -> None: ...

    def get(self, session_id: str) -> Session | None: ...

    def touch(self, session_id: str, now: datetime) -> bool:
        """Set ``last_active`` to ``now`` only if the row exists and ``expires_at > now``."""
        ...

    def delete(self, session_id: str) -> None: ...

    def delete_expired(self, now: datetime) -> int: ...

    def list_active_since(self, cutoff: datetime, now: datetime) -> Sequence[Session]:
        """Unexpired sessions with ``last_active > cutoff``."""
        ...
