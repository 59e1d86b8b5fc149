# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from forum.application.services.credential_store import CredentialStore
from forum.application.services.session_manager import SessionManager
from forum.domain.users.entities import IdentifierKind, User


@dataclass(slots=True, frozen=True)
class LoginResult:
    user: User
    session_id: str


class LoginUserUseCase:
    def __init__(
        self,
        *,
        credentials: CredentialStore,
        sessions: SessionManager,
    ) -> None:
        self._credentials = credentials
        self._sessions = sessions

    def execute(self, kind: IdentifierKind, identifier: str, password: str) -> LoginResult:
        user = self._credentials.verify_credentials(kind, identifier, password)
        session_id = self._sessions.issue(user.id, user.nickname)
        return LoginResult(user=user, session_id=session_id)
