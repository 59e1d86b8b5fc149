# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Request-side session enforcement.

Online presence is derived from ``sessions.last_active``, and nothing but
this guard refreshes it during normal browsing. Any endpoint that should keep
its caller listed as online must be wrapped with ``require(touch=True)``;
endpoints wrapped with ``touch=False`` authenticate without counting as
activity.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import g, request

from forum.application.services.session_manager import SessionManager
from forum.domain.sessions.entities import Session
from forum.shared.errors.base import UnauthorizedError
from forum.shared.logging import logger

from .cookies import CookieTransport

F = TypeVar("F", bound=Callable[..., Any])


class SessionGuard:
    def __init__(self, *, sessions: SessionManager, cookies: CookieTransport) -> None:
        self._sessions = sessions
        self._cookies = cookies

    def current(self, *, touch: bool = False) -> Session | None:
        """Resolve the request's session, or ``None`` if it has no live one."""
        session = self._sessions.validate(self._cookies.extract(request))
        if session is None:
            return None
        if touch:
            self._sessions.touch(session.id)
        g.session = session
        g.user_id = session.user_id
        return session

    def require(self, *, touch: bool = True) -> Callable[[F], F]:
        def decorator(view: F) -> F:
            @wraps(view)
            def inner(*args: Any, **kwargs: Any) -> Any:
                if self.current(touch=touch) is None:
                    logger.info(
                        f"auth: no live session on {request.method} {request.path}"
                    )
                    raise UnauthorizedError()
                return view(*args, **kwargs)

            return cast(F, inner)

        return decorator


__all__ = ["SessionGuard"]
