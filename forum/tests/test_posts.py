from __future__ import annotations

import pytest

from forum.application.use_cases.posts.add_comment import AddCommentUseCase
from forum.application.use_cases.posts.create_post import CreatePostUseCase
from forum.application.use_cases.posts.list_posts import ListPostsUseCase
from forum.domain.posts.entities import Comment, Post
from forum.domain.posts.repositories import CommentRepository, PostRepository
from forum.shared.errors.base import PostNotFoundError
from forum.tests.helpers import FakeClock


class InMemoryPostRepository(PostRepository):
    def __init__(self) -> None:
        self._posts: dict[str, Post] = {}

    def add(self, post: Post) -> Post:
        self._posts[post.id] = post
        return post

    def get(self, post_id: str) -> Post | None:
        return self._posts.get(post_id)

    def list_recent(self, limit: int) -> list[Post]:
        ordered = sorted(self._posts.values(), key=lambda p: p.created_at, reverse=True)
        return ordered[:limit]


class InMemoryCommentRepository(CommentRepository):
    def __init__(self) -> None:
        self._comments: list[Comment] = []

    def add(self, comment: Comment) -> Comment:
        self._comments.append(comment)
        return comment

    def list_for_post(self, post_id: str) -> list[Comment]:
        matching = [c for c in self._comments if c.post_id == post_id]
        return sorted(matching, key=lambda c: c.created_at)


@pytest.fixture()
def posts() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture()
def comments() -> InMemoryCommentRepository:
    return InMemoryCommentRepository()


def test_create_post_stamps_author_and_time(posts: InMemoryPostRepository, clock: FakeClock) -> None:
    post = CreatePostUseCase(posts=posts, clock=clock).execute("u1", "Hello", "World")

    assert post.user_id == "u1"
    assert post.created_at == clock.now
    assert posts.get(post.id) == post
    assert post.to_dict()["created_at"] == clock.now.isoformat()


def test_list_posts_newest_first_with_page_size(
    posts: InMemoryPostRepository, comments: InMemoryCommentRepository, clock: FakeClock
) -> None:
    create = CreatePostUseCase(posts=posts, clock=clock)
    first = create.execute("u1", "one", "1")
    clock.advance(minutes=1)
    second = create.execute("u1", "two", "2")
    clock.advance(minutes=1)
    third = create.execute("u2", "three", "3")

    listing = ListPostsUseCase(posts=posts, comments=comments, page_size=2)

    assert [p.id for p in listing.execute()] == [third.id, second.id]
    assert listing.get(first.id) == first


def test_get_missing_post(posts: InMemoryPostRepository, comments: InMemoryCommentRepository) -> None:
    with pytest.raises(PostNotFoundError) as excinfo:
        ListPostsUseCase(posts=posts, comments=comments).get("nope")

    assert excinfo.value.status == 404


def test_comments_come_back_oldest_first(
    posts: InMemoryPostRepository, comments: InMemoryCommentRepository, clock: FakeClock
) -> None:
    post = CreatePostUseCase(posts=posts, clock=clock).execute("u1", "Hello", "World")
    other = CreatePostUseCase(posts=posts, clock=clock).execute("u1", "Other", "Post")
    add = AddCommentUseCase(posts=posts, comments=comments, clock=clock)

    clock.advance(minutes=1)
    first = add.execute(post.id, "u2", "first!")
    clock.advance(minutes=1)
    second = add.execute(post.id, "u1", "thanks")
    add.execute(other.id, "u2", "elsewhere")

    found, thread = ListPostsUseCase(posts=posts, comments=comments).get_with_comments(post.id)

    assert found == post
    assert [c.id for c in thread] == [first.id, second.id]
    assert first.to_dict()["post_id"] == post.id


def test_comment_on_missing_post(
    posts: InMemoryPostRepository, comments: InMemoryCommentRepository, clock: FakeClock
) -> None:
    with pytest.raises(PostNotFoundError):
        AddCommentUseCase(posts=posts, comments=comments, clock=clock).execute("nope", "u1", "hi")

    assert comments.list_for_post("nope") == []
