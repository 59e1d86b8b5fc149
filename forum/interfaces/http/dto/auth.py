from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from forum.domain.users.entities import IdentifierKind, User
from forum.domain.users.registration import PASSWORD_MAX_LENGTH
from forum.shared.errors.validation_types import ValidationErrorType


class LoginRequestDTO(BaseModel):
    login_type: IdentifierKind = Field(
        validation_alias=AliasChoices("loginType", "login_type", "LoginType")
    )
    email: str | None = Field(None, validation_alias=AliasChoices("email", "Email"))
    nickname: str | None = Field(
        None, validation_alias=AliasChoices("nickname", "nickName", "NickName")
    )
    password: str = Field(
        min_length=1,
        max_length=PASSWORD_MAX_LENGTH,
        validation_alias=AliasChoices("password", "Password"),
    )

    @field_validator("login_type", mode="before")
    @classmethod
    def validate_login_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().lower()
        if value not in (IdentifierKind.EMAIL.value, IdentifierKind.NICKNAME.value):
            raise PydanticCustomError(
                ValidationErrorType.LOGIN_TYPE_INVALID,
                "loginType must be 'email' or 'nickname'",
                {},
            )
        return value

    @field_validator("email", "nickname", mode="before")
    @classmethod
    def strip_identifier(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @model_validator(mode="after")
    def require_identifier(self) -> "LoginRequestDTO":
        if not self.identifier:
            raise PydanticCustomError(
                ValidationErrorType.MISSING,
                "The {field} field is required for this login type",
                {"field": self.login_type.value},
            )
        return self

    @property
    def identifier(self) -> str | None:
        if self.login_type is IdentifierKind.EMAIL:
            return self.email
        return self.nickname


class AuthSuccessDTO(BaseModel):
    ok: bool = True
    user_id: str
    nickname: str

    @classmethod
    def from_user(cls, user: User) -> "AuthSuccessDTO":
        return cls(user_id=user.id, nickname=user.nickname)


class AuthStatusDTO(BaseModel):
    authenticated: bool
    user_id: str | None = None
    nickname: str | None = None
