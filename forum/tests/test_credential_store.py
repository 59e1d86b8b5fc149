from __future__ import annotations

import pytest

from forum.application.services.credential_store import CredentialStore
from forum.domain.users.entities import IdentifierKind
from forum.domain.users.exceptions import (
    DuplicateEmailError,
    DuplicateNicknameError,
    DuplicateUserError,
    InvalidCredentialsError,
)
from forum.shared.errors.base import ValidationError
from forum.tests.helpers import DeterministicHasher, InMemoryUserRepository, signup_payload


@pytest.fixture()
def store(users: InMemoryUserRepository, hasher: DeterministicHasher) -> CredentialStore:
    return CredentialStore(users=users, password_hasher=hasher)


def _error_types(exc: ValidationError) -> set[str]:
    assert exc.context is not None
    return {entry["type"] for entry in exc.context["errors"]}


def test_create_user_persists_hashed_password(store: CredentialStore, users: InMemoryUserRepository) -> None:
    user = store.create_user(signup_payload())

    assert user.nickname == "alice"
    assert user.first_name == "Alice"
    assert user.password_hash == "hashed:wonderland"
    assert users.find_by_id(user.id) == user


def test_create_user_trims_text_fields(store: CredentialStore) -> None:
    user = store.create_user(signup_payload(nickname="  alice ", email=" alice@example.com "))

    assert user.nickname == "alice"
    assert user.email == "alice@example.com"


def test_create_user_accepts_form_spelling(store: CredentialStore) -> None:
    fields = signup_payload(age="42", confirmPassword="wonderland")
    fields["firstname"] = fields.pop("firstName")

    user = store.create_user(fields)

    assert user.age == 42
    assert user.first_name == "Alice"


def test_duplicate_email_is_reported_before_nickname(store: CredentialStore) -> None:
    store.create_user(signup_payload())

    with pytest.raises(DuplicateEmailError):
        store.create_user(signup_payload())


def test_duplicate_nickname(store: CredentialStore, users: InMemoryUserRepository) -> None:
    store.create_user(signup_payload())

    with pytest.raises(DuplicateNicknameError) as excinfo:
        store.create_user(signup_payload(email="other@example.com"))

    assert isinstance(excinfo.value, DuplicateUserError)
    assert excinfo.value.status == 409
    assert len(users) == 1


@pytest.mark.parametrize(
    ("overrides", "expected"),
    [
        ({"nickname": "ab"}, "nickname_length"),
        ({"nickname": "a" * 17}, "nickname_length"),
        ({"nickname": "bad nick"}, "nickname_invalid_chars"),
        ({"age": 12}, "age_out_of_range"),
        ({"age": 101}, "age_out_of_range"),
        ({"email": "not-an-email"}, "email_invalid"),
        ({"password": "short"}, "password_too_short"),
        ({"password": "PassWord"}, "password_weak"),
        ({"confirm_password": "different"}, "password_mismatch"),
        ({"lastName": "   "}, "missing"),
    ],
)
def test_create_user_rejects_invalid_fields(
    store: CredentialStore,
    users: InMemoryUserRepository,
    overrides: dict[str, object],
    expected: str,
) -> None:
    with pytest.raises(ValidationError) as excinfo:
        store.create_user(signup_payload(**overrides))

    assert excinfo.value.status == 400
    assert expected in _error_types(excinfo.value)
    assert len(users) == 0


def test_nickname_boundaries_are_inclusive(store: CredentialStore) -> None:
    store.create_user(signup_payload(nickname="abc", email="a@example.com"))
    store.create_user(signup_payload(nickname="a" * 16, email="b@example.com", age=13))
    store.create_user(signup_payload(nickname="x_y-z", email="c@example.com", age=100))


def test_verify_credentials_by_email_and_nickname(store: CredentialStore) -> None:
    created = store.create_user(signup_payload())

    assert store.verify_credentials(IdentifierKind.EMAIL, "alice@example.com", "wonderland") == created
    assert store.verify_credentials(IdentifierKind.NICKNAME, "alice", "wonderland") == created


def test_verify_credentials_wrong_password(store: CredentialStore) -> None:
    store.create_user(signup_payload())

    with pytest.raises(InvalidCredentialsError) as excinfo:
        store.verify_credentials(IdentifierKind.NICKNAME, "alice", "looking-glass")

    assert excinfo.value.status == 401


def test_unknown_identifier_looks_like_wrong_password(
    store: CredentialStore, hasher: DeterministicHasher
) -> None:
    store.create_user(signup_payload())

    with pytest.raises(InvalidCredentialsError) as unknown:
        store.verify_credentials(IdentifierKind.EMAIL, "nobody@example.com", "wonderland")
    with pytest.raises(InvalidCredentialsError) as wrong:
        store.verify_credentials(IdentifierKind.EMAIL, "alice@example.com", "nope-nope")

    assert unknown.value.to_dict() == wrong.value.to_dict()
    # the hash comparison still ran for the missing user
    assert len(hasher.verify_calls) == 2
    assert hasher.verify_calls[0][0] == "wonderland"


def test_identifier_kind_selects_lookup_column(store: CredentialStore) -> None:
    store.create_user(signup_payload())

    with pytest.raises(InvalidCredentialsError):
        store.verify_credentials(IdentifierKind.NICKNAME, "alice@example.com", "wonderland")
