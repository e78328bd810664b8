"""Retry helpers for flaky async operations.

Playwright already retries assertions and auto-waits on actions. These
helpers cover the cases it does not, such as polling an API until a record
appears.
"""

import asyncio
import logging
import time
from functools import wraps
from typing import Awaitable, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def retry(
    func: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    delay_ms: int = 1000,
    on_retry: Optional[Callable[[int, Exception], None]] = None,
    retry_on: tuple = (Exception,),
) -> T:
    """Call ``func`` until it succeeds, waiting a fixed delay between attempts.

    Args:
        func: Async callable with no arguments
        max_attempts: Total number of attempts
        delay_ms: Delay between attempts in milliseconds
        on_retry: Called with (attempt, error) instead of logging a warning
        retry_on: Exception types that trigger a retry

    Returns:
        Result of the first successful call

    Raises:
        Exception: The last error once all attempts fail
    """
    last_error: Optional[Exception] = None

    for attempt in range(1, max_attempts + 1):
        try:
            return await func()
        except retry_on as e:
            last_error = e

            if attempt < max_attempts:
                if on_retry:
                    on_retry(attempt, e)
                else:
                    logger.warning(
                        f"Attempt {attempt} failed, retrying in {delay_ms}ms...: {e}"
                    )
                await asyncio.sleep(delay_ms / 1000)

    if last_error:
        logger.error(f"All {max_attempts} attempts failed: {last_error}")
        raise last_error

    raise RuntimeError("Retry failed")


async def retry_with_backoff(
    func: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    initial_delay_ms: int = 1000,
    max_delay_ms: int = 10000,
    multiplier: float = 2.0,
    retry_on: tuple = (Exception,),
) -> T:
    """Call ``func`` until it succeeds, growing the delay after each failure.

    GOTCHA: Delay is capped at max_delay_ms

    Raises:
        Exception: The last error once all attempts fail
    """
    delay_ms = initial_delay_ms
    last_error: Optional[Exception] = None

    for attempt in range(1, max_attempts + 1):
        try:
            return await func()
        except retry_on as e:
            last_error = e

            if attempt < max_attempts:
                logger.warning(
                    f"Attempt {attempt} failed, retrying in {delay_ms}ms "
                    f"(exponential backoff)...: {e}"
                )
                await asyncio.sleep(delay_ms / 1000)
                delay_ms = min(delay_ms * multiplier, max_delay_ms)

    if last_error:
        logger.error(f"All {max_attempts} attempts failed: {last_error}")
        raise last_error

    raise RuntimeError("Retry with backoff failed")


async def retry_until(
    func: Callable[[], Awaitable[T]],
    condition: Callable[[T], bool],
    timeout_ms: int = 10000,
    interval_ms: int = 500,
) -> T:
    """Poll ``func`` until ``condition`` accepts its result.

    Errors raised by ``func`` are not retried.

    Raises:
        TimeoutError: If the condition is not met within timeout_ms
    """
    deadline = time.monotonic() + timeout_ms / 1000

    while time.monotonic() < deadline:
        result = await func()
        if condition(result):
            return result
        await asyncio.sleep(interval_ms / 1000)

    raise TimeoutError(f"Condition not met within {timeout_ms}ms")


def with_retry(
    max_attempts: int = 3,
    backoff_factor: float = 2.0,
    retry_on: tuple = (Exception,),
    max_delay: float = 30.0,
):
    """
    Decorator for automatic retry with exponential backoff.

    PATTERN: Decorator pattern for retry logic
    GOTCHA: Backoff delay is capped at max_delay (seconds)

    Args:
        max_attempts: Total number of attempts
        backoff_factor: Exponential backoff multiplier
        retry_on: Tuple of exception types to retry on
        max_delay: Maximum delay between retries (seconds)

    Returns:
        Decorated async function with retry logic
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            last_error: Optional[Exception] = None

            for attempt in range(max_attempts):
                try:
                    return await func(*args, **kwargs)

                except retry_on as e:
                    last_error = e

                    if attempt < max_attempts - 1:
                        delay = min(backoff_factor**attempt, max_delay)

                        logger.warning(
                            f"Attempt {attempt + 1}/{max_attempts} failed for "
                            f"{func.__name__}: {e}. Retrying in {delay:.2f}s..."
                        )

                        await asyncio.sleep(delay)
                    else:
                        logger.error(
                            f"All {max_attempts} attempts failed for {func.__name__}: {e}"
                        )

            if last_error:
                raise last_error

            raise RuntimeError(f"Unexpected error in retry logic for {func.__name__}")

        return wrapper

    return decorator
