# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Background housekeeping for the session store."""

from __future__ import annotations

import threading

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from forum.application.services.session_manager import SessionManager
from forum.infrastructure.observability import record_sweep
from forum.shared.errors.base import AppError
from forum.shared.logging import logger


class SessionSweeper:
    """Daemon thread that calls ``SessionManager.sweep_expired`` periodically.

    Expiry is enforced on every read, so a stopped or slow sweeper only lets
    dead rows pile up; it never keeps a session alive.
    """

    def __init__(self, sessions: SessionManager, *, interval: float) -> None:
        self._sessions = sessions
        self._interval = max(float(interval), 1.0)
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._loop, name="session-sweeper", daemon=True
        )
        self._thread.start()
        logger.info(f"sweeper: started interval={self._interval:.0f}s")

    def stop(self, timeout: float = 5.0) -> None:
        self._stop.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
            logger.info("sweeper: stopped")

    def run_once(self) -> int:
        try:
            removed = self._sessions.sweep_expired()
        except AppError as exc:
            logger.warning(f"sweeper: sweep failed code={exc.code}")
            return 0
        record_sweep(removed)
        return removed

    def _loop(self) -> None:
        while not self._stop.wait(self._interval):
            self.run_once()


def check_database(engine: Engine) -> bool:
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning(f"health: database unavailable: {type(exc).__name__}")
        return False
    return True


__all__ = ["SessionSweeper", "check_database"]
