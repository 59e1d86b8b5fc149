from __future__ import annotations

import os
import tempfile

import pytest

_TMP = tempfile.mkdtemp(prefix="forum-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_TMP, 'forum.db')}")
os.environ.setdefault("LOG_FILE", os.path.join(_TMP, "forum.log"))
os.environ.setdefault("PASSWORD_HASH_METHOD", "pbkdf2:sha256:1000")
os.environ.setdefault("SESSION_BACKEND", "database")
os.environ.pop("FORUM_BOOT_WORKERS", None)

from forum.tests.helpers import DeterministicHasher, FakeClock, InMemoryUserRepository  # noqa: E402


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()
