# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify
from pydantic import ValidationError

from forum.application.use_cases.posts.add_comment import AddCommentUseCase
from forum.application.use_cases.posts.create_post import CreatePostUseCase
from forum.application.use_cases.posts.list_posts import ListPostsUseCase
from forum.interfaces.http.dto.posts import CreateCommentRequestDTO, CreatePostRequestDTO
from forum.interfaces.http.payload import request_payload
from forum.interfaces.http.session_guard import SessionGuard
from forum.shared.errors.validation import raise_validation_error


class PostsController:
    def __init__(
        self,
        *,
        create_use_case: CreatePostUseCase,
        list_use_case: ListPostsUseCase,
        comment_use_case: AddCommentUseCase,
        guard: SessionGuard,
    ) -> None:
        self._create_use_case = create_use_case
        self._list_use_case = list_use_case
        self._comment_use_case = comment_use_case
        self._guard = guard

    def list_posts(self) -> Response:
        return jsonify([post.to_dict() for post in self._list_use_case.execute()])

    def get_post(self, post_id: str) -> Response:
        post, comments = self._list_use_case.get_with_comments(post_id)
        payload = post.to_dict()
        payload["comments"] = [comment.to_dict() for comment in comments]
        return jsonify(payload)

    def create_post(self) -> tuple[Response, int]:
        try:
            dto = CreatePostRequestDTO.model_validate(request_payload())
        except ValidationError as exc:
            raise_validation_error(exc)

        post = self._create_use_case.execute(g.user_id, dto.title, dto.content)
        return jsonify(post.to_dict()), 201

    def create_comment(self, post_id: str) -> tuple[Response, int]:
        try:
            dto = CreateCommentRequestDTO.model_validate(request_payload())
        except ValidationError as exc:
            raise_validation_error(exc)

        comment = self._comment_use_case.execute(post_id, g.user_id, dto.body)
        return jsonify(comment.to_dict()), 201

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("posts", __name__, url_prefix="/api/posts")
        require = self._guard.require(touch=True)
        bp.add_url_rule("", view_func=require(self.list_posts), methods=["GET"])
        bp.add_url_rule("", view_func=require(self.create_post), methods=["POST"])
        bp.add_url_rule("/<post_id>", view_func=require(self.get_post), methods=["GET"])
        bp.add_url_rule(
            "/<post_id>/comments", view_func=require(self.create_comment), methods=["POST"]
        )
        return bp
