# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session as DbSession

from forum.domain.sessions.entities import Session as DomainSession
from forum.domain.sessions.repositories import SessionRepository
from forum.domain.users.entities import User as DomainUser
from forum.domain.users.exceptions import DuplicateEmailError, DuplicateNicknameError
from forum.domain.users.repositories import UserRepository
from forum.infrastructure.db.models import SessionRow, User
from forum.infrastructure.unit_of_work import unit_of_work_scope
from forum.shared.logging import logger
from forum.shared.utils.clock import ensure_utc


def _to_domain_user(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        nickname=row.nickname,
        age=row.age,
        gender=row.gender,
        email=row.email,
        password_hash=row.password_hash,
    )


def _to_domain_session(row: SessionRow) -> DomainSession:
    return DomainSession(
        id=row.id,
        user_id=row.user_id,
        nickname=row.nickname,
        expires_at=ensure_utc(row.expires_at),
        last_active=ensure_utc(row.last_active),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], DbSession]):
        self._session_factory = session_factory

    def find_by_id(self, user_id: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return _to_domain_user(row) if row else None

    def find_by_email(self, email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(User).where(User.email == email)).first()
            return _to_domain_user(row) if row else None

    def find_by_nickname(self, nickname: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(User).where(User.nickname == nickname)).first()
            return _to_domain_user(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        with unit_of_work_scope(self._session_factory) as session:
            row = User(
                id=user.id,
                first_name=user.first_name,
                last_name=user.last_name,
                nickname=user.nickname,
                age=user.age,
                gender=user.gender,
                email=user.email,
                password_hash=user.password_hash,
            )
            session.add(row)
            try:
                session.flush()
            except IntegrityError:
                # lost a race against a concurrent signup
                session.rollback()
                email_taken = session.scalars(
                    select(User.id).where(User.email == user.email)
                ).first()
                logger.info(f"users.add: unique violation nickname={user.nickname}")
                if email_taken:
                    raise DuplicateEmailError() from None
                raise DuplicateNicknameError() from None
            return _to_domain_user(row)


class SqlAlchemySessionRepository(SessionRepository):
    """Every method is a single statement against the ``sessions`` primary key
    (or a single bulk statement), committed in its own unit of work."""

    def __init__(self, session_factory: Callable[[], DbSession]):
        self._session_factory = session_factory

    def add(self, session: DomainSession) -> None:
        with unit_of_work_scope(self._session_factory) as db:
            db.add(
                SessionRow(
                    id=session.id,
                    user_id=session.user_id,
                    nickname=session.nickname,
                    expires_at=session.expires_at,
                    last_active=session.last_active,
                )
            )

    def get(self, session_id: str) -> DomainSession | None:
        with unit_of_work_scope(self._session_factory) as db:
            row = db.get(SessionRow, session_id)
            return _to_domain_session(row) if row else None

    def touch(self, session_id: str, now: datetime) -> bool:
        with unit_of_work_scope(self._session_factory) as db:
            result = db.execute(
                update(SessionRow)
                .where(SessionRow.id == session_id, SessionRow.expires_at > now)
                .values(last_active=now)
                .execution_options(synchronize_session=False)
            )
            return bool(result.rowcount)

    def delete(self, session_id: str) -> None:
        with unit_of_work_scope(self._session_factory) as db:
            db.execute(
                delete(SessionRow)
                .where(SessionRow.id == session_id)
                .execution_options(synchronize_session=False)
            )

    def delete_expired(self, now: datetime) -> int:
        with unit_of_work_scope(self._session_factory) as db:
            result = db.execute(
                delete(SessionRow)
                .where(SessionRow.expires_at <= now)
                .execution_options(synchronize_session=False)
            )
            return int(result.rowcount or 0)

    def list_active_since(self, cutoff: datetime, now: datetime) -> Sequence[DomainSession]:
        with unit_of_work_scope(self._session_factory) as db:
            rows = db.scalars(
                select(SessionRow)
                .where(SessionRow.last_active > cutoff, SessionRow.expires_at > now)
                .order_by(SessionRow.last_active.desc())
            ).all()
            return [_to_domain_session(row) for row in rows]
