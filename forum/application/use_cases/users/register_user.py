# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from forum.application.services.credential_store import CredentialStore
from forum.domain.users.entities import User


class RegisterUserUseCase:
    """Signup. Does not log the new user in."""

    def __init__(self, *, credentials: CredentialStore) -> None:
        self._credentials = credentials

    def execute(self, fields: Mapping[str, Any]) -> User:
        return self._credentials.create_user(fields)
