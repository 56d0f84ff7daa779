"""
Bounded exponential-backoff retry for flaky remote calls.

Only the openFDA drug search goes through this; every other client calls its
source once and degrades to an empty result on failure.
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from medical_sources.constants import DEFAULT_BASE_DELAY, DEFAULT_MAX_RETRIES

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_retryable(error: BaseException) -> bool:
    """Return False for client errors (4xx other than 429), True otherwise.

    Errors without a status code (connection resets, timeouts) count as
    transient.
    """
    status = getattr(error, "status_code", None)
    if status is None:
        return True
    return not (400 <= status < 500 and status != 429)


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = DEFAULT_MAX_RETRIES,
    base_delay: float = DEFAULT_BASE_DELAY,
    *,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """
    Run `operation` up to `max_retries` times.

    Parameters
    ----------
    operation : callable
        Zero-argument coroutine function performing the remote call.
    max_retries : int
        Total number of attempts, not additional ones.
    base_delay : float
        Seconds to wait after the first failure; doubles after each
        subsequent failure (base_delay * 2 ** (attempt - 1)).
    sleep : callable
        Awaitable used for the pause between attempts.

    Raises
    ------
    Exception
        The first non-retryable error, or the last error once all
        attempts are used up.
    """
    attempts = max(1, max_retries)
    for attempt in range(1, attempts + 1):
        try:
            return await operation()
        except Exception as e:
            if not is_retryable(e):
                raise
            if attempt == attempts:
                logger.error("All %d attempts failed: %s", attempts, e)
                raise
            delay = base_delay * 2 ** (attempt - 1)
            logger.warning(
                "Attempt %d/%d failed (%s), retrying in %.2fs",
                attempt,
                attempts,
                e,
                delay,
            )
            await sleep(delay)

    raise RuntimeError("unreachable")  # pragma: no cover
