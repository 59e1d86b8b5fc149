# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signup field rules.

Accepts the field spellings the browser clients send (``firstname``,
``firstName``, ``first_name`` ...). Text fields are trimmed, passwords are
taken verbatim.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from forum.shared.errors.validation_types import ValidationErrorType

NICKNAME_MIN_LENGTH = 3
NICKNAME_MAX_LENGTH = 16
MIN_AGE = 13
MAX_AGE = 100
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128

_NICKNAME_RE = re.compile(r"^[A-Za-z0-9_\-]+$")
_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class UserRegistration(BaseModel):
    first_name: str = Field(validation_alias=AliasChoices("first_name", "firstname", "firstName", "FirstName"))
    last_name: str = Field(validation_alias=AliasChoices("last_name", "lastname", "lastName", "LastName"))
    nickname: str = Field(validation_alias=AliasChoices("nickname", "nickName", "nick_name", "NickName"))
    age: int = Field(validation_alias=AliasChoices("age", "Age"))
    gender: str = Field(validation_alias=AliasChoices("gender", "Gender"))
    email: str = Field(validation_alias=AliasChoices("email", "Email"))
    password: str = Field(validation_alias=AliasChoices("password", "Password", "passwd"))
    confirm_password: str | None = Field(
        None, validation_alias=AliasChoices("confirm_password", "confirmPassword", "ConfirmPassword")
    )

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("first_name", "last_name", "nickname", "gender", "email", mode="before")
    @classmethod
    def _strip_required(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
        if value is None or value == "":
            raise PydanticCustomError(
                ValidationErrorType.MISSING,
                "This field is required",
                {},
            )
        return value

    @field_validator("age", mode="before")
    @classmethod
    def _strip_age(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
        if value is None or value == "":
            raise PydanticCustomError(ValidationErrorType.MISSING, "This field is required", {})
        return value

    @field_validator("nickname")
    @classmethod
    def validate_nickname(cls, value: str) -> str:
        if not NICKNAME_MIN_LENGTH <= len(value) <= NICKNAME_MAX_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.NICKNAME_LENGTH,
                "Nickname must be between {min_length}-{max_length} characters",
                {"min_length": NICKNAME_MIN_LENGTH, "max_length": NICKNAME_MAX_LENGTH},
            )

        if not _NICKNAME_RE.match(value):
            raise PydanticCustomError(
                ValidationErrorType.NICKNAME_INVALID_CHARS,
                "Nickname may only contain letters, digits, '_' and '-'",
                {"pattern": _NICKNAME_RE.pattern},
            )

        return value

    @field_validator("age")
    @classmethod
    def validate_age(cls, value: int) -> int:
        if not MIN_AGE <= value <= MAX_AGE:
            raise PydanticCustomError(
                ValidationErrorType.AGE_OUT_OF_RANGE,
                "Age must be between {min_age}-{max_age}",
                {"min_age": MIN_AGE, "max_age": MAX_AGE},
            )
        return value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if not _EMAIL_RE.match(value):
            raise PydanticCustomError(
                ValidationErrorType.EMAIL_INVALID,
                "Invalid email format",
                {},
            )
        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if len(value) < PASSWORD_MIN_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_SHORT,
                "Password must be at least {min_length} characters",
                {"min_length": PASSWORD_MIN_LENGTH},
            )

        if len(value) > PASSWORD_MAX_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_LONG,
                "Password must be at most {max_length} characters",
                {"max_length": PASSWORD_MAX_LENGTH},
            )

        if value.lower() == "password":
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_WEAK,
                "Password cannot be 'password'",
                {},
            )

        return value

    @model_validator(mode="after")
    def _passwords_match(self) -> "UserRegistration":
        if self.confirm_password is not None and self.confirm_password != self.password:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_MISMATCH,
                "Passwords do not match",
                {},
            )
        return self


__all__ = ["PASSWORD_MAX_LENGTH", "PASSWORD_MIN_LENGTH", "UserRegistration"]
