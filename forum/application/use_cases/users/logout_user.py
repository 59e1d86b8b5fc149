"""Use-case for revoking login sessions."""

from __future__ import annotations

from forum.application.services.session_manager import SessionManager


class LogoutUserUseCase:
    def __init__(self, *, sessions: SessionManager) -> None:
        self._sessions = sessions

    def execute(self, session_id: str | None) -> None:
        if session_id:
            self._sessions.revoke(session_id)
