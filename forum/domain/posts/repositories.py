# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Comment, Post


class PostRepository(Protocol):
    def add(self, post: Post) -> Post: ...
    def get(self, post_id: str) -> Post | None: ...
    def list_recent(self, limit: int) -> Sequence[Post]: ...


class CommentRepository(Protocol):
    def add(self, comment: Comment) -> Comment: ...
    def list_for_post(self, post_id: str) -> Sequence[Comment]:
        """Comments on ``post_id``, oldest first."""
        ...
