"""Tests for the retry loop."""

from __future__ import annotations

import httpx
import pytest

from core.domain.errors import HttpStatusError, RequestAborted, ValidationError
from core.services.retry import RetryPolicy, run_with_retries


class FakeSleep:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


def _failing(exc: BaseException, *, succeed_on: int | None = None):
    attempts: list[int] = []

    async def send(number: int) -> str:
        attempts.append(number)
        if succeed_on is not None and number == succeed_on:
            return "ok"
        raise exc

    return send, attempts


async def test_retries_then_raises_last_error() -> None:
    sleep = FakeSleep()
    send, attempts = _failing(httpx.ConnectError("boom"))

    with pytest.raises(httpx.ConnectError):
        await run_with_retries(send, RetryPolicy(retries=2, retry_delay_seconds=0.5), sleep=sleep)

    assert attempts == [0, 1, 2]
    assert sleep.delays == [0.5, 0.5]


async def test_success_after_failures_returns_value() -> None:
    sleep = FakeSleep()
    send, attempts = _failing(RequestAborted("timeout"), succeed_on=1)

    result = await run_with_retries(send, RetryPolicy(retries=3, retry_delay_seconds=1), sleep=sleep)

    assert result == "ok"
    assert attempts == [0, 1]
    assert sleep.delays == [1]


async def test_zero_delay_disables_retries() -> None:
    sleep = FakeSleep()
    response = httpx.Response(503)
    send, attempts = _failing(HttpStatusError(503, response))

    with pytest.raises(HttpStatusError):
        await run_with_retries(send, RetryPolicy(retries=3, retry_delay_seconds=0), sleep=sleep)

    assert attempts == [0]
    assert sleep.delays == []


async def test_non_retryable_error_propagates_at_once() -> None:
    sleep = FakeSleep()
    send, attempts = _failing(ValidationError([], {}))

    with pytest.raises(ValidationError):
        await run_with_retries(send, RetryPolicy(retries=3, retry_delay_seconds=1), sleep=sleep)

    assert attempts == [0]


async def test_give_up_stops_without_sleeping() -> None:
    sleep = FakeSleep()
    send, attempts = _failing(RequestAborted("aborted"))

    with pytest.raises(RequestAborted):
        await run_with_retries(
            send,
            RetryPolicy(retries=3, retry_delay_seconds=1),
            give_up=lambda exc: isinstance(exc, RequestAborted) and exc.reason == "aborted",
            sleep=sleep,
        )

    assert attempts == [0]
    assert sleep.delays == []
