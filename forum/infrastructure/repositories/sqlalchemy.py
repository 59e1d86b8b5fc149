# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from forum.domain.posts import Comment, CommentRepository, Post, PostRepository
from forum.infrastructure.db.models import CommentRow, PostRow
from forum.infrastructure.unit_of_work import unit_of_work_scope
from forum.shared.utils.clock import ensure_utc


def _to_domain(row: PostRow) -> Post:
    return Post(
        id=row.id,
        user_id=row.user_id,
        title=row.title,
        content=row.content,
        created_at=ensure_utc(row.created_at),
    )


def _to_domain_comment(row: CommentRow) -> Comment:
    return Comment(
        id=row.id,
        post_id=row.post_id,
        user_id=row.user_id,
        body=row.body,
        created_at=ensure_utc(row.created_at),
    )


class SqlAlchemyPostRepository(PostRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(self, post: Post) -> Post:
        with unit_of_work_scope(self._session_factory) as session:
            row = PostRow(
                id=post.id,
                user_id=post.user_id,
                title=post.title,
                content=post.content,
                created_at=post.created_at,
            )
            session.add(row)
            session.flush()
            return _to_domain(row)

    def get(self, post_id: str) -> Post | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(PostRow, post_id)
            return _to_domain(row) if row else None

    def list_recent(self, limit: int) -> Sequence[Post]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(
                select(PostRow).order_by(PostRow.created_at.desc()).limit(limit)
            ).all()
            return [_to_domain(row) for row in rows]


class SqlAlchemyCommentRepository(CommentRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(self, comment: Comment) -> Comment:
        with unit_of_work_scope(self._session_factory) as session:
            row = CommentRow(
                id=comment.id,
                post_id=comment.post_id,
                user_id=comment.user_id,
                body=comment.body,
                created_at=comment.created_at,
            )
            session.add(row)
            session.flush()
            return _to_domain_comment(row)

    def list_for_post(self, post_id: str) -> Sequence[Comment]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(
                select(CommentRow)
                .where(CommentRow.post_id == post_id)
                .order_by(CommentRow.created_at.asc())
            ).all()
            return [_to_domain_comment(row) for row in rows]
