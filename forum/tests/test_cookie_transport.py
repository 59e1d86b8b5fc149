from __future__ import annotations

from datetime import timedelta

import pytest
from flask import Flask, Response, request

from forum.interfaces.http.cookies import SESSION_COOKIE_NAME, CookieTransport


@pytest.fixture()
def flask_app() -> Flask:
    return Flask(__name__)


def test_attach_sets_http_only_cookie() -> None:
    transport = CookieTransport()
    response = Response()

    transport.attach(response, "abc123")

    header = response.headers["Set-Cookie"]
    assert header.startswith(f"{SESSION_COOKIE_NAME}=abc123")
    assert "HttpOnly" in header
    assert "Path=/" in header
    assert "Max-Age=86400" in header
    assert "SameSite=Lax" in header
    assert "Secure" not in header


def test_attach_honours_security_settings() -> None:
    transport = CookieTransport(max_age=timedelta(hours=1), secure=True, samesite="Strict")
    response = Response()

    transport.attach(response, "abc123")

    header = response.headers["Set-Cookie"]
    assert "Max-Age=3600" in header
    assert "Secure" in header
    assert "SameSite=Strict" in header


def test_clear_expires_cookie_immediately() -> None:
    transport = CookieTransport()
    response = Response()

    transport.clear(response)

    header = response.headers["Set-Cookie"]
    assert header.startswith(f"{SESSION_COOKIE_NAME}=;")
    assert "Max-Age=0" in header
    assert "Path=/" in header


def test_extract_reads_same_cookie_name(flask_app: Flask) -> None:
    transport = CookieTransport()

    with flask_app.test_request_context(headers={"Cookie": f"{SESSION_COOKIE_NAME}=xyz"}):
        assert transport.extract(request) == "xyz"

    with flask_app.test_request_context(headers={"Cookie": "auth_token=xyz"}):
        assert transport.extract(request) is None

    with flask_app.test_request_context():
        assert transport.extract(request) is None
