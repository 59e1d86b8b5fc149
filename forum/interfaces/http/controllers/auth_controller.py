# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from forum.application.use_cases.users.login_user import LoginUserUseCase
from forum.application.use_cases.users.logout_user import LogoutUserUseCase
from forum.application.use_cases.users.register_user import RegisterUserUseCase
from forum.domain.users.exceptions import InvalidCredentialsError
from forum.infrastructure.observability import record_login
from forum.interfaces.http.cookies import CookieTransport
from forum.interfaces.http.dto.auth import AuthStatusDTO, AuthSuccessDTO, LoginRequestDTO
from forum.interfaces.http.payload import request_payload
from forum.interfaces.http.session_guard import SessionGuard
from forum.shared.errors.validation import raise_validation_error
from forum.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        guard: SessionGuard,
        cookies: CookieTransport,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._guard = guard
        self._cookies = cookies

    def signup(self) -> tuple[Response, int]:
        user = self._register_use_case.execute(request_payload())
        logger.info(f"auth.signup: ok user_id={user.id} nickname={user.nickname}")
        return jsonify(AuthSuccessDTO.from_user(user).model_dump()), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request_payload())
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            result = self._login_use_case.execute(dto.login_type, dto.identifier or "", dto.password)
        except InvalidCredentialsError:
            record_login("invalid_credentials")
            raise
        record_login("success")

        response = jsonify(AuthSuccessDTO.from_user(result.user).model_dump())
        self._cookies.attach(response, result.session_id)
        logger.info(f"auth.login: ok user_id={result.user.id} via={dto.login_type.value}")
        return response, 200

    def logout(self) -> tuple[Response, int]:
        self._logout_use_case.execute(self._cookies.extract(request))
        response = jsonify({"ok": True})
        self._cookies.clear(response)
        logger.info("auth.logout: ok")
        return response, 200

    def check_auth(self) -> tuple[Response, int]:
        session = self._guard.current(touch=True)
        if session is None:
            response = jsonify(AuthStatusDTO(authenticated=False).model_dump(exclude_none=True))
            if self._cookies.extract(request):
                self._cookies.clear(response)
            return response, 401

        payload = AuthStatusDTO(
            authenticated=True, user_id=session.user_id, nickname=session.nickname
        )
        return jsonify(payload.model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/api/logout", view_func=self.logout, methods=["POST"])
        bp.add_url_rule("/api/check-auth", view_func=self.check_auth, methods=["GET"])
        return bp
