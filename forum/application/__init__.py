# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.credential_store import CredentialStore
from .services.presence_tracker import PresenceTracker
from .services.session_manager import SessionManager

__all__ = [
    "CredentialStore",
    "PresenceTracker",
    "SessionManager",
]
