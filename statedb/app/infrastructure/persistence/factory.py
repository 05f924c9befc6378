"""Connection source factory: selects implementation from config. Only place that imports concrete sources."""
from __future__ import annotations

from statedb.app.config.settings import Settings
from statedb.app.infrastructure.persistence.sql.sqlalchemy_connection_source import SqlAlchemyConnectionSource
from statedb.app.ports.connection_source import ConnectionSource


def create_connection_source(settings: Settings) -> ConnectionSource:
    backend = settings.database_backend.strip().lower()

    if backend in ("sqlalchemy",):
        return SqlAlchemyConnectionSource(settings)

    raise ValueError(f"Unsupported database backend: {backend}")
