from __future__ import annotations

import pytest

from routeresult.result import Err, Ok, attempt, attempt_async

pytestmark = pytest.mark.unit


def _divide(a: int, b: int) -> float:
    return a / b


def test_attempt_wraps_return_value_in_ok() -> None:
    assert attempt(_divide, 6, b=3) == Ok(2.0)


def test_attempt_captures_exception_in_err() -> None:
    result = attempt(_divide, 1, 0)

    assert isinstance(result, Err)
    assert isinstance(result.error, ZeroDivisionError)


def test_attempt_does_not_capture_base_exceptions() -> None:
    def _exit() -> None:
        raise SystemExit(1)

    with pytest.raises(SystemExit):
        attempt(_exit)


@pytest.mark.asyncio
async def test_attempt_async_awaits_and_captures() -> None:
    async def _fetch(ok: bool) -> str:
        if not ok:
            raise ConnectionError("connection refused")
        return "row"

    assert await attempt_async(_fetch, True) == Ok("row")
    failed = await attempt_async(_fetch, ok=False)
    assert isinstance(failed, Err)
    assert str(failed.error) == "connection refused"
