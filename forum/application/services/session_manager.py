# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from datetime import timedelta

from forum.domain.sessions.entities import Session
from forum.domain.sessions.repositories import SessionRepository
from forum.shared.logging import logger
from forum.shared.utils.clock import Clock, utc_now

DEFAULT_SESSION_TTL = timedelta(hours=24)


def _hint(session_id: str) -> str:
    return f"{session_id[:6]}…"


class SessionManager:
    """Issues, validates, touches and revokes login sessions.

    This is the only writer of session rows. Expiry is lazy: ``validate``
    treats a row with ``expires_at <= now`` as absent but leaves it in place;
    ``sweep_expired`` removes such rows in bulk.
    """

    def __init__(
        self,
        *,
        sessions: SessionRepository,
        ttl: timedelta = DEFAULT_SESSION_TTL,
        clock: Clock = utc_now,
    ) -> None:
        self._sessions = sessions
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, user_id: str, nickname: str) -> str:
        now = self._clock()
        session = Session(
            id=secrets.token_urlsafe(32),
            user_id=user_id,
            nickname=nickname,
            expires_at=now + self._ttl,
            last_active=now,
        )
        self._sessions.add(session)
        logger.info(
            f"sessions.issue: user_id={user_id} exp={session.expires_at.isoformat()} "
            f"sid={_hint(session.id)}"
        )
        return session.id

    def validate(self, session_id: str | None) -> Session | None:
        if not session_id:
            return None
        session = self._sessions.get(session_id)
        if session is None:
            return None
        if not session.is_active(self._clock()):
            logger.debug(f"sessions.validate: expired sid={_hint(session_id)}")
            return None
        return session

    def touch(self, session_id: str | None) -> None:
        if not session_id:
            return
        if not self._sessions.touch(session_id, self._clock()):
            logger.debug(f"sessions.touch: ignored dead session sid={_hint(session_id)}")

    def revoke(self, session_id: str | None) -> None:
        if not session_id:
            return
        self._sessions.delete(session_id)
        logger.info(f"sessions.revoke: sid={_hint(session_id)}")

    def sweep_expired(self) -> int:
        removed = self._sessions.delete_expired(self._clock())
        if removed:
            logger.info(f"sessions.sweep: removed {removed} expired sessions")
        return removed


__all__ = ["DEFAULT_SESSION_TTL", "SessionManager"]
