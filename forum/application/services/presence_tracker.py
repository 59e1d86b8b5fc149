# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta

from forum.domain.sessions.repositories import SessionRepository
from forum.shared.utils.clock import Clock, utc_now

DEFAULT_PRESENCE_WINDOW = timedelta(minutes=5)


class PresenceTracker:
    """Who is online, derived from session activity.

    Read-only. A user counts as online while one of their unexpired sessions
    has ``last_active`` inside the window, so the result is only as fresh as
    the ``SessionManager.touch`` calls made by the request pipeline.
    """

    def __init__(
        self,
        *,
        sessions: SessionRepository,
        window: timedelta = DEFAULT_PRESENCE_WINDOW,
        clock: Clock = utc_now,
    ) -> None:
        self._sessions = sessions
        self._window = window
        self._clock = clock

    def online_users(self, window: timedelta | None = None) -> list[str]:
        now = self._clock()
        cutoff = now - (window if window is not None else self._window)
        recent = sorted(
            self._sessions.list_active_since(cutoff, now),
            key=lambda s: s.last_active,
            reverse=True,
        )

        seen: set[str] = set()
        nicknames: list[str] = []
        for session in recent:
            if session.nickname in seen:
                continue
            seen.add(session.nickname)
            nicknames.append(session.nickname)
        return nicknames


__all__ = ["DEFAULT_PRESENCE_WINDOW", "PresenceTracker"]
