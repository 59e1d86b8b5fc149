from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from forum.app import create_app
from forum.container import container
from forum.domain.sessions.entities import Session
from forum.infrastructure.db import ENGINE, Base, SessionLocal
from forum.domain.users.registration import PASSWORD_MAX_LENGTH
from forum.infrastructure.db.models import CommentRow, SessionRow, User
from forum.interfaces.http.cookies import SESSION_COOKIE_NAME
from forum.tests.helpers import signup_payload


@pytest.fixture(autouse=True)
def reset_database() -> None:
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    SessionLocal.remove()
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture()
def client():
    app = create_app()
    with app.test_client() as test_client:
        yield test_client


def _count(model) -> int:
    session = SessionLocal()
    try:
        return session.query(model).count()
    finally:
        session.close()


def _login(client, **fields):
    payload = {"loginType": "nickname", "nickname": "alice", "password": "wonderland"}
    payload.update(fields)
    return client.post("/login", data=payload)


def test_signup_login_check_logout_flow(client) -> None:
    signup = client.post("/signup", data=signup_payload())
    assert signup.status_code == 201
    assert client.get_cookie(SESSION_COOKIE_NAME) is None

    login = _login(client)
    assert login.status_code == 200
    cookie = client.get_cookie(SESSION_COOKIE_NAME)
    assert cookie is not None and cookie.value

    check = client.get("/api/check-auth")
    assert check.status_code == 200
    body = check.get_json()
    assert body["authenticated"] is True
    assert body["nickname"] == "alice"

    logout = client.post("/api/logout")
    assert logout.status_code == 200
    assert client.get_cookie(SESSION_COOKIE_NAME) is None

    client.set_cookie(SESSION_COOKIE_NAME, cookie.value)
    after = client.get("/api/check-auth")
    assert after.status_code == 401
    assert after.get_json() == {"authenticated": False}

    assert _count(User) == 1
    assert _count(SessionRow) == 0


def test_login_by_email(client) -> None:
    client.post("/signup", json=signup_payload())

    response = client.post(
        "/login",
        json={"loginType": "email", "email": "alice@example.com", "password": "wonderland"},
    )

    assert response.status_code == 200
    assert _count(SessionRow) == 1


def test_wrong_password_creates_no_session(client) -> None:
    client.post("/signup", data=signup_payload())

    response = _login(client, password="looking-glass")

    assert response.status_code == 401
    assert response.get_json() == {"error": "invalid_credentials"}
    assert "Set-Cookie" not in response.headers
    assert _count(SessionRow) == 0


def test_unknown_user_matches_wrong_password(client) -> None:
    client.post("/signup", data=signup_payload())

    unknown = _login(client, nickname="mallory")
    wrong = _login(client, password="looking-glass")

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.get_json() == wrong.get_json()


def test_duplicate_signup_returns_409(client) -> None:
    assert client.post("/signup", data=signup_payload()).status_code == 201

    same_email = client.post("/signup", data=signup_payload(nickname="alice2"))
    same_nick = client.post("/signup", data=signup_payload(email="other@example.com"))

    assert same_email.status_code == 409
    assert same_email.get_json() == {"error": "email_taken"}
    assert same_nick.status_code == 409
    assert same_nick.get_json() == {"error": "nickname_taken"}
    assert _count(User) == 1


def test_signup_validation_returns_400(client) -> None:
    response = client.post("/signup", data=signup_payload(age="7"))

    assert response.status_code == 400
    body = response.get_json()
    assert body["error"] == "validation_error"
    assert "age" in body["context"]["fields"]
    assert _count(User) == 0


def test_longest_allowed_password_can_sign_up_and_log_in(client) -> None:
    password = "x" * PASSWORD_MAX_LENGTH

    assert client.post("/signup", data=signup_payload(password=password)).status_code == 201

    login = _login(client, password=password)

    assert login.status_code == 200
    assert client.get_cookie(SESSION_COOKIE_NAME) is not None


def test_password_over_the_limit_is_rejected_at_signup(client) -> None:
    response = client.post("/signup", data=signup_payload(password="x" * (PASSWORD_MAX_LENGTH + 1)))

    assert response.status_code == 400
    assert "password" in response.get_json()["context"]["fields"]
    assert _count(User) == 0


def test_online_users_lists_logged_in_nicknames(client) -> None:
    client.post("/signup", data=signup_payload())
    client.post("/signup", data=signup_payload(nickname="bob", email="bob@example.com"))

    assert client.get("/api/online-users").get_json() == []

    _login(client)
    _login(client, nickname="bob")

    online = client.get("/api/online-users")
    assert online.status_code == 200
    assert sorted(online.get_json()) == ["alice", "bob"]


def test_expired_session_is_rejected_but_kept_until_swept(client) -> None:
    client.post("/signup", data=signup_payload())
    user_id = client.post(
        "/login", data={"loginType": "nickname", "nickname": "alice", "password": "wonderland"}
    ).get_json()["user_id"]

    past = datetime.now(UTC) - timedelta(hours=1)
    container.session_repository.add(
        Session(
            id="expired-sid",
            user_id=user_id,
            nickname="alice",
            expires_at=past,
            last_active=past - timedelta(minutes=1),
        )
    )
    client.set_cookie(SESSION_COOKIE_NAME, "expired-sid")

    response = client.get("/api/check-auth")

    assert response.status_code == 401
    assert container.session_repository.get("expired-sid") is not None

    assert container.session_manager.sweep_expired() == 1
    assert container.session_repository.get("expired-sid") is None
    assert _count(SessionRow) == 1


def test_posts_require_session_and_count_as_activity(client) -> None:
    assert client.get("/api/posts").status_code == 401
    assert client.post("/api/posts", json={"title": "t", "content": "c"}).status_code == 401

    client.post("/signup", data=signup_payload())
    _login(client)

    created = client.post("/api/posts", json={"title": " Hello ", "content": "First post"})
    assert created.status_code == 201
    post = created.get_json()
    assert post["title"] == "Hello"

    invalid = client.post("/api/posts", data={"title": "", "content": "x"})
    assert invalid.status_code == 400

    listing = client.get("/api/posts")
    assert listing.status_code == 200
    assert [p["id"] for p in listing.get_json()] == [post["id"]]

    single = client.get(f"/api/posts/{post['id']}")
    assert single.get_json()["content"] == "First post"
    assert client.get("/api/posts/missing").status_code == 404


def test_comments_on_a_post(client) -> None:
    assert client.post("/api/posts/any/comments", json={"body": "hi"}).status_code == 401

    client.post("/signup", data=signup_payload())
    _login(client)
    post = client.post("/api/posts", json={"title": "Hello", "content": "First post"}).get_json()

    first = client.post(f"/api/posts/{post['id']}/comments", json={"body": " first! "})
    assert first.status_code == 201
    assert first.get_json()["body"] == "first!"
    assert first.get_json()["post_id"] == post["id"]
    second = client.post(f"/api/posts/{post['id']}/comments", data={"body": "second"})
    assert second.status_code == 201

    empty = client.post(f"/api/posts/{post['id']}/comments", json={"body": "   "})
    assert empty.status_code == 400
    assert empty.get_json()["error"] == "validation_error"

    missing = client.post("/api/posts/missing/comments", json={"body": "hi"})
    assert missing.status_code == 404
    assert missing.get_json()["error"] == "post_not_found"

    single = client.get(f"/api/posts/{post['id']}").get_json()
    assert [c["body"] for c in single["comments"]] == ["first!", "second"]
    assert single["comments"][0]["user_id"] == post["user_id"]
    assert _count(CommentRow) == 2


def test_health(client) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}


def test_security_headers(client) -> None:
    response = client.get("/api/online-users")

    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_metrics_count_logins(client) -> None:
    client.post("/signup", data=signup_payload())
    _login(client)
    _login(client, password="looking-glass")

    response = client.get("/api/metrics")

    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert 'forum_logins_total{outcome="success"}' in body
    assert 'forum_logins_total{outcome="invalid_credentials"}' in body
    assert "forum_requests_total" in body
