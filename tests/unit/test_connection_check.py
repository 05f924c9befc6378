import pytest

from statedb.app.domain.connection_check import ConnectionAcquisitionError, ConnectionCheckResult


def test_ok_has_no_error():
    result = ConnectionCheckResult.ok()
    assert result.succeeded is True
    assert result.error is None
    assert result.error_detail is None


def test_failed_keeps_error_detail():
    exc = ConnectionAcquisitionError("pool exhausted")
    result = ConnectionCheckResult.failed(exc)
    assert result.succeeded is False
    assert result.error is exc
    assert result.error_detail == "pool exhausted"


def test_failed_with_empty_message_falls_back_to_type_name():
    assert ConnectionCheckResult.failed(TimeoutError()).error_detail == "TimeoutError"


@pytest.mark.parametrize(
    "succeeded, error",
    [(True, RuntimeError("x")), (False, None)],
)
def test_error_set_iff_failed(succeeded, error):
    with pytest.raises(ValueError):
        ConnectionCheckResult(succeeded=succeeded, error=error)
