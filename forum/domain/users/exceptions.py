# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from forum.shared.errors.base import DomainError


class DuplicateUserError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT


class DuplicateNicknameError(DuplicateUserError):
    code = "nickname_taken"


class DuplicateEmailError(DuplicateUserError):
    code = "email_taken"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
