"""
Random sources for generating synthetic personal identity numbers.

Durations count backwards from now: ``random_past_timestamp(years(100),
years(18))`` is the birth time of someone between 18 and 100 years old.
"""

import logging
import random
import threading
from datetime import datetime, timedelta
from typing import Optional

from ssnkit.config import settings

logger = logging.getLogger(__name__)

_MICROSECOND = timedelta(microseconds=1)

_rng: Optional[random.Random] = None
_rng_lock = threading.Lock()


def default_rng() -> random.Random:
    """Process-wide random source, seeded from the OS unless configured."""
    global _rng
    if _rng is None:
        with _rng_lock:
            if _rng is None:
                if settings.random_seed is not None:
                    logger.debug(
                        f"Seeding shared random source with {settings.random_seed}"
                    )
                _rng = random.Random(settings.random_seed)
    return _rng


def years(n: float) -> timedelta:
    """A duration of ``n`` 365-day years."""
    return timedelta(days=365 * n)


def random_past_timestamp(
    from_: timedelta,
    to: timedelta,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> datetime:
    """
    Random time in ``[now - from_, now - to)``, uniformly distributed.

    Args:
        from_: Distance back from now of the earliest possible result
        to: Distance back from now of the (exclusive) latest result
        rng: Random source (default: the shared one)
        now: Reference time (default: datetime.now())

    Returns:
        Exactly ``now - from_`` when the window is empty.
    """
    if now is None:
        now = datetime.now()
    steps = (from_ - to) // _MICROSECOND
    if steps <= 0:
        return now - from_
    rng = rng or default_rng()
    return now - from_ + rng.randrange(steps) * _MICROSECOND
