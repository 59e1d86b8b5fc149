# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations


class ValidationErrorType:
    MISSING = "missing"
    NICKNAME_LENGTH = "nickname_length"
    NICKNAME_INVALID_CHARS = "nickname_invalid_chars"
    AGE_OUT_OF_RANGE = "age_out_of_range"
    EMAIL_INVALID = "email_invalid"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_TOO_LONG = "password_too_long"
    PASSWORD_WEAK = "password_weak"
    PASSWORD_MISMATCH = "password_mismatch"
    LOGIN_TYPE_INVALID = "login_type_invalid"
    TITLE_TOO_LONG = "title_too_long"


__all__ = ["ValidationErrorType"]
