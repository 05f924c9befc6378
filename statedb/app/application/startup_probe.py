"""
One-shot database connectivity check run after the application reports ready.
Accepts the ConnectionSource abstraction and a loguru logger; never raises into the caller.
"""
from __future__ import annotations

import asyncio
from contextlib import closing
from typing import TYPE_CHECKING

from loguru import logger as default_logger

from statedb.app.core import SERVICE_NAME
from statedb.app.domain.connection_check import ConnectionCheckResult
from statedb.app.ports.connection_source import ConnectionSource

if TYPE_CHECKING:
    from loguru import Logger

SUCCESS_MESSAGE = "Database connection, from datasource, successfully established!"
FAILURE_MESSAGE = "Failed to establish database connection from datasource."


class StartupConnectivityProbe:
    """
    Borrows one connection from the source, checks it is open, and logs the outcome.

    The connection is closed (returned to its pool) exactly once on every path.
    A connection that is acquired but reports itself closed produces no log record.
    """

    def __init__(self, connection_source: ConnectionSource, *, logger: Logger = default_logger) -> None:
        self._connection_source = connection_source
        self._logger = logger

    def check(self) -> ConnectionCheckResult | None:
        """Return the check outcome, or None when the acquired connection was already closed."""
        try:
            with closing(self._connection_source.acquire()) as connection:
                if connection.closed:
                    return None
                return ConnectionCheckResult.ok()
        except Exception as exc:
            return ConnectionCheckResult.failed(exc)

    def verify_database_connection(self) -> None:
        result = self.check()
        if result is None:
            return
        if result.succeeded:
            self._logger.bind(service_name=SERVICE_NAME, event="db_connection_established").info(SUCCESS_MESSAGE)
            return
        self._logger.bind(
            service_name=SERVICE_NAME,
            event="db_connection_failed",
            error=result.error_detail,
        ).opt(exception=result.error).error(FAILURE_MESSAGE)

    async def run(self) -> None:
        # acquire() blocks on pool/network I/O
        await asyncio.to_thread(self.verify_database_connection)
