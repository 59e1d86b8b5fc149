# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid

from forum.domain.posts.entities import Post
from forum.domain.posts.repositories import PostRepository
from forum.shared.logging import logger
from forum.shared.utils.clock import Clock, utc_now


class CreatePostUseCase:
    def __init__(self, *, posts: PostRepository, clock: Clock = utc_now) -> None:
        self._posts = posts
        self._clock = clock

    def execute(self, user_id: str, title: str, content: str) -> Post:
        post = Post(
            id=str(uuid.uuid4()),
            user_id=user_id,
            title=title,
            content=content,
            created_at=self._clock(),
        )
        persisted = self._posts.add(post)
        logger.info(f"posts.create: ok post_id={persisted.id} user_id={user_id}")
        return persisted
