# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .memory import InMemorySessionRepository
from .sqlalchemy import SqlAlchemyCommentRepository, SqlAlchemyPostRepository
from .users.sqlalchemy_user_repository import (
    SqlAlchemySessionRepository,
    SqlAlchemyUserRepository,
)

__all__ = [
    "InMemorySessionRepository",
    "SqlAlchemyCommentRepository",
    "SqlAlchemyPostRepository",
    "SqlAlchemySessionRepository",
    "SqlAlchemyUserRepository",
]
