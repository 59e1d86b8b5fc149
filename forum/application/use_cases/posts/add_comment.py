# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid

from forum.domain.posts.entities import Comment
from forum.domain.posts.repositories import CommentRepository, PostRepository
from forum.shared.errors.base import PostNotFoundError
from forum.shared.logging import logger
from forum.shared.utils.clock import Clock, utc_now


class AddCommentUseCase:
    def __init__(
        self,
        *,
        posts: PostRepository,
        comments: CommentRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._posts = posts
        self._comments = comments
        self._clock = clock

    def execute(self, post_id: str, user_id: str, body: str) -> Comment:
        if self._posts.get(post_id) is None:
            raise PostNotFoundError(post_id)

        comment = Comment(
            id=str(uuid.uuid4()),
            post_id=post_id,
            user_id=user_id,
            body=body,
            created_at=self._clock(),
        )
        persisted = self._comments.add(comment)
        logger.info(f"comments.add: ok comment_id={persisted.id} post_id={post_id} user_id={user_id}")
        return persisted
