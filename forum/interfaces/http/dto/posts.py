from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator
from pydantic_core import PydanticCustomError

from forum.shared.errors.validation_types import ValidationErrorType

TITLE_MAX_LENGTH = 200


class CreatePostRequestDTO(BaseModel):
    title: str
    content: str

    @field_validator("title", "content", mode="before")
    @classmethod
    def require_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
        if not value:
            raise PydanticCustomError(
                ValidationErrorType.MISSING,
                "This field is required",
                {},
            )
        return value

    @field_validator("title")
    @classmethod
    def limit_title(cls, value: str) -> str:
        if len(value) > TITLE_MAX_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.TITLE_TOO_LONG,
                "Title must be at most {max_length} characters",
                {"max_length": TITLE_MAX_LENGTH},
            )
        return value


class CreateCommentRequestDTO(BaseModel):
    body: str

    @field_validator("body", mode="before")
    @classmethod
    def require_body(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
        if not value:
            raise PydanticCustomError(ValidationErrorType.MISSING, "This field is required", {})
        return value
