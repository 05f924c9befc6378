from __future__ import annotations

from dataclasses import dataclass


class ConnectionAcquisitionError(Exception):
    """Any failure to obtain or validate a connection (network, pool exhaustion, auth, timeout)."""


@dataclass(frozen=True)
class ConnectionCheckResult:
    """Outcome of one startup connectivity check.
    succeeded=True => error is None.
    succeeded=False => error holds the failure that was caught.
    """
    succeeded: bool
    error: BaseException | None = None

    def __post_init__(self) -> None:
        if self.succeeded == (self.error is not None):
            raise ValueError("error must be set if and only if the check failed")

    @classmethod
    def ok(cls) -> ConnectionCheckResult:
        return cls(succeeded=True)

    @classmethod
    def failed(cls, error: BaseException) -> ConnectionCheckResult:
        return cls(succeeded=False, error=error)

    @property
    def error_detail(self) -> str | None:
        if self.error is None:
            return None
        return str(self.error) or type(self.error).__name__
