"""Port: pooled database connections borrowed at startup. Implementations live in infrastructure."""
from __future__ import annotations

from typing import Protocol


class PooledConnection(Protocol):
    """A connection handle checked out from a pool; close() returns it."""

    @property
    def closed(self) -> bool: ...

    def close(self) -> None: ...


class ConnectionSource(Protocol):
    """Interface for a pool or factory that yields connection handles on demand."""

    def acquire(self) -> PooledConnection: ...

    def dispose(self) -> None: ...
