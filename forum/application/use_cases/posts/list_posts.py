# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from forum.domain.posts.entities import Comment, Post
from forum.domain.posts.repositories import CommentRepository, PostRepository
from forum.shared.errors.base import PostNotFoundError


class ListPostsUseCase:
    def __init__(
        self,
        *,
        posts: PostRepository,
        comments: CommentRepository,
        page_size: int = 100,
    ) -> None:
        self._posts = posts
        self._comments = comments
        self._page_size = page_size

    def execute(self) -> Sequence[Post]:
        return self._posts.list_recent(self._page_size)

    def get(self, post_id: str) -> Post:
        post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    def get_with_comments(self, post_id: str) -> tuple[Post, Sequence[Comment]]:
        post = self.get(post_id)
        return post, self._comments.list_for_post(post.id)
