from typing import Any

from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError

from statedb.app.config.settings import Settings
from statedb.app.core import SERVICE_NAME
from statedb.app.domain.connection_check import ConnectionAcquisitionError


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class SqlAlchemyConnectionSource:
    """ConnectionSource implementation backed by an SQLAlchemy engine and its pool."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._engine: Engine | None = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = create_engine(self._settings.database_url, **self._engine_options())
            _log("db_engine_created", backend=self._engine.dialect.name)
        return self._engine

    def _engine_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {"pool_pre_ping": self._settings.database_pool_pre_ping}
        # SQLite pools reject the sizing arguments
        if make_url(self._settings.database_url).get_backend_name() != "sqlite":
            options.update(
                pool_size=self._settings.database_pool_size,
                max_overflow=self._settings.database_max_overflow,
                pool_timeout=self._settings.database_pool_timeout_seconds,
            )
        return options

    def acquire(self) -> Connection:
        try:
            return self.engine.connect()
        except SQLAlchemyError as e:
            raise ConnectionAcquisitionError(f"Failed to acquire connection: {e}") from e

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            _log("db_engine_disposed")
