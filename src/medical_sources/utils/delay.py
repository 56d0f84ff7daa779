"""Randomised pauses used to pace requests to sources without an API."""

import asyncio
import random


async def random_delay(min_seconds: float, max_seconds: float) -> float:
    """Sleep for a uniform random duration in [min_seconds, max_seconds].

    Returns the number of seconds slept.
    """
    delay = random.uniform(min_seconds, max_seconds)
    await asyncio.sleep(delay)
    return delay
