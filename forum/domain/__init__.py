# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .posts import Comment, CommentRepository, Post, PostRepository
from .sessions import Session, SessionRepository, SessionState
from .users import IdentifierKind, PasswordHasher, User, UserRepository

__all__ = [
    "Comment",
    "CommentRepository",
    "IdentifierKind",
    "PasswordHasher",
    "Post",
    "PostRepository",
    "Session",
    "SessionRepository",
    "SessionState",
    "User",
    "UserRepository",
]
