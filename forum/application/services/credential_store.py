# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
import uuid
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from forum.domain.users.entities import IdentifierKind, User
from forum.domain.users.exceptions import (
    DuplicateEmailError,
    DuplicateNicknameError,
    InvalidCredentialsError,
)
from forum.domain.users.registration import UserRegistration
from forum.domain.users.repositories import PasswordHasher, UserRepository
from forum.shared.errors.validation import raise_validation_error
from forum.shared.logging import logger


class CredentialStore:
    """Owns user records and password checks.

    ``verify_credentials`` raises the same ``InvalidCredentialsError`` for an
    unknown identifier and for a wrong password, and runs a full hash
    comparison in both cases so response time does not reveal which one
    happened.
    """

    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._dummy_hash = password_hasher.hash(secrets.token_urlsafe(24))

    def create_user(self, fields: Mapping[str, Any]) -> User:
        try:
            registration = UserRegistration.model_validate(dict(fields))
        except PydanticValidationError as exc:
            raise_validation_error(exc)

        if self._users.find_by_email(registration.email):
            logger.info(f"credentials.create_user: email taken nickname={registration.nickname}")
            raise DuplicateEmailError()
        if self._users.find_by_nickname(registration.nickname):
            logger.info(f"credentials.create_user: nickname taken nickname={registration.nickname}")
            raise DuplicateNicknameError()

        user = User(
            id=str(uuid.uuid4()),
            first_name=registration.first_name,
            last_name=registration.last_name,
            nickname=registration.nickname,
            age=registration.age,
            gender=registration.gender,
            email=registration.email,
            password_hash=self._password_hasher.hash(registration.password),
        )
        persisted = self._users.add(user)
        logger.info(f"credentials.create_user: ok user_id={persisted.id} nickname={persisted.nickname}")
        return persisted

    def verify_credentials(self, kind: IdentifierKind, identifier: str, password: str) -> User:
        if kind is IdentifierKind.EMAIL:
            user = self._users.find_by_email(identifier)
        else:
            user = self._users.find_by_nickname(identifier)

        hashed = user.password_hash if user else self._dummy_hash
        password_valid = self._password_hasher.verify(password, hashed)

        if user is None or not password_valid:
            logger.info(f"credentials.verify: rejected kind={kind.value}")
            raise InvalidCredentialsError()

        return user


__all__ = ["CredentialStore"]
