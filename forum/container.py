"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from forum.application.services.credential_store import CredentialStore
from forum.application.services.password_hashing import WerkzeugPasswordHasher
from forum.application.services.presence_tracker import PresenceTracker
from forum.application.services.session_manager import SessionManager
from forum.application.use_cases.posts.add_comment import AddCommentUseCase
from forum.application.use_cases.posts.create_post import CreatePostUseCase
from forum.application.use_cases.posts.list_posts import ListPostsUseCase
from forum.application.use_cases.users.login_user import LoginUserUseCase
from forum.application.use_cases.users.logout_user import LogoutUserUseCase
from forum.application.use_cases.users.register_user import RegisterUserUseCase
from forum.domain.sessions.repositories import SessionRepository
from forum.infrastructure.db import ENGINE, SessionLocal
from forum.infrastructure.maintenance import SessionSweeper
from forum.infrastructure.repositories import (
    InMemorySessionRepository,
    SqlAlchemyCommentRepository,
    SqlAlchemyPostRepository,
    SqlAlchemySessionRepository,
    SqlAlchemyUserRepository,
)
from forum.interfaces.http.controllers.auth_controller import AuthController
from forum.interfaces.http.controllers.misc_controller import MiscController
from forum.interfaces.http.controllers.posts_controller import PostsController
from forum.interfaces.http.controllers.presence_controller import PresenceController
from forum.interfaces.http.cookies import CookieTransport
from forum.interfaces.http.session_guard import SessionGuard
from forum.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self._config.security.password_hash_method)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(SessionLocal)

    @cached_property
    def session_repository(self) -> SessionRepository:
        if self._config.sessions.backend == "memory":
            return InMemorySessionRepository()
        return SqlAlchemySessionRepository(SessionLocal)

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository(SessionLocal)

    @cached_property
    def comment_repository(self) -> SqlAlchemyCommentRepository:
        return SqlAlchemyCommentRepository(SessionLocal)

    @cached_property
    def credential_store(self) -> CredentialStore:
        return CredentialStore(users=self.user_repository, password_hasher=self.password_hasher)

    @cached_property
    def session_manager(self) -> SessionManager:
        return SessionManager(
            sessions=self.session_repository,
            ttl=timedelta(hours=self._config.sessions.ttl_hours),
        )

    @cached_property
    def presence_tracker(self) -> PresenceTracker:
        return PresenceTracker(
            sessions=self.session_repository,
            window=timedelta(minutes=self._config.sessions.presence_window_minutes),
        )

    @cached_property
    def session_sweeper(self) -> SessionSweeper:
        return SessionSweeper(self.session_manager, interval=self._config.sessions.sweep_interval)

    @cached_property
    def cookie_transport(self) -> CookieTransport:
        return CookieTransport.from_config(self._config)

    @cached_property
    def session_guard(self) -> SessionGuard:
        return SessionGuard(sessions=self.session_manager, cookies=self.cookie_transport)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(credentials=self.credential_store)

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(credentials=self.credential_store, sessions=self.session_manager)

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(sessions=self.session_manager)

    @cached_property
    def create_post_use_case(self) -> CreatePostUseCase:
        return CreatePostUseCase(posts=self.post_repository)

    @cached_property
    def list_posts_use_case(self) -> ListPostsUseCase:
        return ListPostsUseCase(posts=self.post_repository, comments=self.comment_repository)

    @cached_property
    def add_comment_use_case(self) -> AddCommentUseCase:
        return AddCommentUseCase(posts=self.post_repository, comments=self.comment_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            guard=self.session_guard,
            cookies=self.cookie_transport,
        )

    @cached_property
    def presence_controller(self) -> PresenceController:
        return PresenceController(presence=self.presence_tracker)

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            create_use_case=self.create_post_use_case,
            list_use_case=self.list_posts_use_case,
            comment_use_case=self.add_comment_use_case,
            guard=self.session_guard,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=ENGINE)


container = Container()
