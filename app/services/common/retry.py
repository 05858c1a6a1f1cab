"""Retry policy for fallible async operations."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from loguru import logger
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    stop_after_attempt,
    wait_exponential,
)

from settings import RETRY_ATTEMPTS, RETRY_FACTOR, RETRY_MAX_DELAY, RETRY_MIN_DELAY

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Exponential backoff policy shared by cache and store calls.

    `retries` counts attempts after the first failure. The n-th wait is
    `min_delay * factor ** (n - 1)` seconds, capped at `max_delay`.
    """

    retries: int = RETRY_ATTEMPTS
    min_delay: float = RETRY_MIN_DELAY
    factor: float = RETRY_FACTOR
    max_delay: float = RETRY_MAX_DELAY
    sleep: Callable[[float], Awaitable[Any]] | None = None

    @property
    def attempts(self) -> int:
        return self.retries + 1

    def retrying(self, operation: str) -> AsyncRetrying:
        """Build the attempt loop for one operation."""

        def log_retry(state: RetryCallState) -> None:
            logger.debug(
                "{} failed (attempt {}/{}): {}",
                operation,
                state.attempt_number,
                self.attempts,
                state.outcome.exception(),
            )

        kwargs = {}
        if self.sleep is not None:
            kwargs["sleep"] = self.sleep

        return AsyncRetrying(
            stop=stop_after_attempt(self.attempts),
            wait=wait_exponential(multiplier=self.min_delay, exp_base=self.factor, max=self.max_delay),
            before_sleep=log_retry,
            reraise=True,
            **kwargs,
        )

    async def call(self, operation: str, fn: Callable[[], Awaitable[T]]) -> T:
        """Await fn() until it succeeds or attempts run out, then re-raise the last error."""
        async for attempt in self.retrying(operation):
            with attempt:
                result = await fn()
        return result
