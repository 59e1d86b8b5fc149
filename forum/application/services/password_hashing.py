"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from forum.domain.users.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted hashes via werkzeug.

    ``method`` carries the cost factor, e.g. ``"scrypt:32768:8:1"`` or
    ``"pbkdf2:sha256:600000"``. Verification compares digests with
    ``hmac.compare_digest``.
    """

    def __init__(self, method: str = "scrypt", salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return str(
            generate_password_hash(password, method=self._method, salt_length=self._salt_length)
        )

    def verify(self, password: str, hashed: str) -> bool:
        return bool(check_password_hash(hashed, password))
