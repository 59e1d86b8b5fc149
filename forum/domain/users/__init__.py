# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import IdentifierKind, User
from .exceptions import (
    DuplicateEmailError,
    DuplicateNicknameError,
    DuplicateUserError,
    InvalidCredentialsError,
)
from .repositories import PasswordHasher, UserRepository

__all__ = [
    "DuplicateEmailError",
    "DuplicateNicknameError",
    "DuplicateUserError",
    "IdentifierKind",
    "InvalidCredentialsError",
    "PasswordHasher",
    "User",
    "UserRepository",
]
