# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session id <-> cookie binding.

Every path that issues, reads or clears the session cookie goes through
:class:`CookieTransport`, so the cookie name lives in exactly one place.
"""

from __future__ import annotations

from datetime import timedelta

from flask import Request, Response

from forum.shared.config import AppConfig

SESSION_COOKIE_NAME = "session_id"
SESSION_COOKIE_PATH = "/"


class CookieTransport:
    def __init__(
        self,
        *,
        max_age: timedelta = timedelta(hours=24),
        secure: bool = False,
        samesite: str | None = "Lax",
    ) -> None:
        self._max_age = int(max_age.total_seconds())
        self._secure = secure
        self._samesite = samesite

    @classmethod
    def from_config(cls, config: AppConfig) -> CookieTransport:
        return cls(
            max_age=timedelta(hours=config.sessions.ttl_hours),
            secure=config.security.cookie_secure,
            samesite=config.security.cookie_samesite,
        )

    def attach(self, response: Response, session_id: str) -> Response:
        response.set_cookie(
            SESSION_COOKIE_NAME,
            session_id,
            max_age=self._max_age,
            path=SESSION_COOKIE_PATH,
            httponly=True,
            secure=self._secure,
            samesite=self._samesite,
        )
        return response

    def extract(self, request: Request) -> str | None:
        return request.cookies.get(SESSION_COOKIE_NAME) or None

    def clear(self, response: Response) -> Response:
        response.delete_cookie(
            SESSION_COOKIE_NAME,
            path=SESSION_COOKIE_PATH,
            httponly=True,
            secure=self._secure,
            samesite=self._samesite,
        )
        return response


__all__ = ["SESSION_COOKIE_NAME", "CookieTransport"]
