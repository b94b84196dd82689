"""
Generation of synthetic personal identity numbers for testing purposes.

A birth date is drawn uniformly from an age window, then the last four
digits are filled in from a pattern (see ssnkit.pattern).
"""

import logging
import random
from datetime import datetime, timedelta
from typing import Optional

from ssnkit.config import settings
from ssnkit.digits import SSN, encode_date
from ssnkit.pattern import apply_pattern
from ssnkit.random_time import default_rng, random_past_timestamp, years

logger = logging.getLogger(__name__)

RANDOM_PATTERN = "???c"
SAFE_PATTERN = "ss?c"


def generate_ssn(
    pattern: Optional[str] = None,
    from_: Optional[timedelta] = None,
    to: Optional[timedelta] = None,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> SSN:
    """
    Generate a personal identity number for someone in an age window.

    Args:
        pattern: Pattern for positions 8-11 (default: settings.default_pattern)
        from_: Oldest age (default: settings.max_age_years)
        to: Youngest age (default: settings.min_age_years)
        rng: Random source (default: the shared one)
        now: Reference time for the age window

    Returns:
        A new SSN; it only satisfies the checksum if the pattern ends in 'c'
    """
    if pattern is None:
        pattern = settings.default_pattern
    if from_ is None:
        from_ = years(settings.max_age_years)
    if to is None:
        to = years(settings.min_age_years)
    rng = rng or default_rng()

    born = random_past_timestamp(from_, to, rng=rng, now=now)
    ssn = encode_date(SSN(), born)
    apply_pattern(ssn, pattern, rng=rng)
    logger.debug(f"Generated {ssn} with pattern {pattern!r}")
    return ssn


def new_random_ssn(rng: Optional[random.Random] = None) -> SSN:
    """Valid random personal identity number of a 0-100 year old."""
    return generate_ssn(RANDOM_PATTERN, years(100), timedelta(0), rng=rng)


def new_safe_random_ssn(rng: Optional[random.Random] = None) -> SSN:
    """Valid random number of a 0-100 year old with a 980-999 serial."""
    return generate_ssn(SAFE_PATTERN, years(100), timedelta(0), rng=rng)
