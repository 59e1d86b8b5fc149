# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IdentifierKind(str, Enum):
    EMAIL = "email"
    NICKNAME = "nickname"


@dataclass(slots=True, frozen=True)
class User:

    id: str
    first_name: str
    last_name: str
    nickname: str
    age: int
    gender: str
    email: str
    password_hash: str
