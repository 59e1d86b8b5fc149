from __future__ import annotations

from datetime import UTC, datetime, timedelta

from forum.domain.users.entities import User
from forum.domain.users.repositories import PasswordHasher, UserRepository


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


class DeterministicHasher(PasswordHasher):
    def __init__(self) -> None:
        self.verify_calls: list[tuple[str, str]] = []

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        self.verify_calls.append((password, hashed))
        return hashed == f"hashed:{password}"


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def find_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def find_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def find_by_nickname(self, nickname: str) -> User | None:
        return next((u for u in self._users.values() if u.nickname == nickname), None)

    def add(self, user: User) -> User:
        self._users[user.id] = user
        return user

    def __len__(self) -> int:
        return len(self._users)


def signup_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "firstName": "Alice",
        "lastName": "Liddell",
        "nickname": "alice",
        "age": 30,
        "gender": "female",
        "email": "alice@example.com",
        "password": "wonderland",
    }
    payload.update(overrides)
    return payload
