# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class SessionState(Enum):
    """Session lifecycle states.

    ``REVOKED`` is never stored: a revoked session is a deleted row. No state
    transitions back to ``ACTIVE``.
    """

    ACTIVE = "active"
    EXPIRED = "expired"
    REVOKED = "revoked"


@dataclass(slots=True, frozen=True)
class Session:
    """One login instance.

    ``expires_at`` is fixed at issue time and never extended. ``nickname`` is
    the user's nickname as it was when the session was issued.
    """

    id: str
    user_id: str
    nickname: str
    expires_at: datetime
    last_active: datetime

    def state_at(self, now: datetime) -> SessionState:
        # valid on [issued, expires)
        if now >= self.expires_at:
            return SessionState.EXPIRED
        return SessionState.ACTIVE

    def is_active(self, now: datetime) -> bool:
        return self.state_at(now) is SessionState.ACTIVE
