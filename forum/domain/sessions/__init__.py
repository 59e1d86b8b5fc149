# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Session, SessionState
from .repositories import SessionRepository

__all__ = ["Session", "SessionRepository", "SessionState"]
