"""Async retry decorator with exponential backoff for transient errors.

Only transient errors are retried. Provider errors flagged
``retryable=False`` (malformed responses, unknown ids) fail immediately.
"""

import asyncio
import functools
import logging
import random
from typing import Any, Awaitable, Callable, Optional, Tuple, Type, TypeVar

from mushaf.exceptions import MushafError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TRANSIENT_EXCEPTIONS: Tuple[Type[Exception], ...] = (
    TimeoutError,
    ConnectionError,
)


def is_transient(exc: Exception, exceptions: Tuple[Type[Exception], ...]) -> bool:
    """Check if an exception should be retried."""
    if isinstance(exc, MushafError):
        return exc.retryable
    return isinstance(exc, exceptions)


def async_retry(
    max_retries: int = 3,
    min_backoff: float = 1.0,
    max_backoff: float = 10.0,
    exceptions: Optional[Tuple[Type[Exception], ...]] = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorator that retries a coroutine function on transient failures.

    Args:
        max_retries: Maximum number of retry attempts (default: 3).
        min_backoff: Minimum backoff time in seconds (default: 1.0).
        max_backoff: Maximum backoff time in seconds (default: 10.0).
        exceptions: Tuple of exception types to retry on. If None, uses
            DEFAULT_TRANSIENT_EXCEPTIONS. MushafError subclasses are retried
            according to their ``retryable`` flag.

    Example:
        @async_retry(max_retries=2, min_backoff=0.5)
        async def fetch_index(client):
            response = await client.get("https://api.alquran.cloud/v1/surah")
            response.raise_for_status()
            return response.json()
    """
    transient = exceptions if exceptions is not None else DEFAULT_TRANSIENT_EXCEPTIONS

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            attempt = 0
            while True:
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    if not is_transient(e, transient):
                        raise
                    attempt += 1
                    if attempt > max_retries:
                        logger.warning(
                            "Max retries (%d) exceeded for %s: %s",
                            max_retries,
                            func.__name__,
                            e,
                        )
                        raise

                    backoff = min(min_backoff * (2 ** (attempt - 1)), max_backoff)
                    # Jitter to prevent thundering herd
                    sleep_time = backoff + random.uniform(0, backoff * 0.1)

                    logger.debug(
                        "Retry %d/%d for %s after %.2fs: %s",
                        attempt,
                        max_retries,
                        func.__name__,
                        sleep_time,
                        e,
                    )
                    await asyncio.sleep(sleep_time)

        return wrapper

    return decorator
