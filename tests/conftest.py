from __future__ import annotations

from typing import Any

import pytest
from loguru import logger

from statedb.app.config.settings import Settings


class FakeConnection:
    """Implements PooledConnection for tests; records every close() call."""

    def __init__(self, *, closed: bool = False, raise_on_closed: Exception | None = None) -> None:
        self._closed = closed
        self._raise_on_closed = raise_on_closed
        self.close_calls = 0

    @property
    def closed(self) -> bool:
        if self._raise_on_closed is not None:
            raise self._raise_on_closed
        return self._closed

    def close(self) -> None:
        self.close_calls += 1
        self._closed = True


class FakeConnectionSource:
    """Implements ConnectionSource for tests; hands out one connection or raises."""

    def __init__(
        self,
        connection: FakeConnection | None = None,
        *,
        raise_on_acquire: Exception | None = None,
    ) -> None:
        self.connection = connection or FakeConnection()
        self._raise_on_acquire = raise_on_acquire
        self.acquire_calls = 0
        self.disposed = False

    def acquire(self) -> FakeConnection:
        self.acquire_calls += 1
        if self._raise_on_acquire is not None:
            raise self._raise_on_acquire
        return self.connection

    def dispose(self) -> None:
        self.disposed = True


@pytest.fixture()
def log_records() -> Any:
    """Capture loguru records emitted during the test."""
    records: list[dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


def records_for(records: list[dict[str, Any]], event: str) -> list[dict[str, Any]]:
    return [r for r in records if r["extra"].get("event") == event]


@pytest.fixture()
def sqlite_settings() -> Settings:
    return Settings(DATABASE_URL="sqlite://", DATABASE_BACKEND="sqlalchemy")
