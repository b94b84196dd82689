"""
Pattern language for the last four digits of a personal identity number.

One character per position (8, 9, 10, 11):
- '*': keep the current digit
- '?': random digit 0-9
- '0'-'9': that digit
- 's' (position 8 or 9): safe serial, 98 or 99 in positions 8-9
- 'f' (position 10): random even digit (female)
- 'm' (position 10): random odd digit (male)
- 'c' (position 11): computed checksum

Missing characters default to '*'. Characters that mean nothing at their
position are treated as '*'.
"""

import logging
import random
from enum import Enum
from typing import Optional

from ssnkit.checksum import get_checksum
from ssnkit.digits import CHECKSUM, GENDER, SERIAL_HIGH, SERIAL_LOW, SSN
from ssnkit.random_time import default_rng

logger = logging.getLogger(__name__)

PATTERN_LENGTH = 4
FIRST_POSITION = SERIAL_HIGH


class Directive(str, Enum):
    """What to do with one of the trailing digits."""

    KEEP = "*"
    RANDOM = "?"
    LITERAL = "digit"
    SAFE = "s"
    FEMALE = "f"
    MALE = "m"
    CHECKSUM = "c"


# Directives allowed beyond KEEP/RANDOM/LITERAL, per position
POSITION_DIRECTIVES = {
    SERIAL_HIGH: {Directive.SAFE},
    SERIAL_LOW: {Directive.SAFE},
    GENDER: {Directive.FEMALE, Directive.MALE},
    CHECKSUM: {Directive.CHECKSUM},
}

Step = tuple[Directive, Optional[int]]


def _parse_char(char: str, position: int) -> Step:
    if char == Directive.RANDOM.value:
        return Directive.RANDOM, None
    if char in "0123456789":
        return Directive.LITERAL, int(char)
    for directive in POSITION_DIRECTIVES[position]:
        if char == directive.value:
            return directive, None
    return Directive.KEEP, None


def parse_pattern(pattern: str) -> list[Step]:
    """
    Turn a pattern string into one (directive, literal) step per position.

    The literal is only set for Directive.LITERAL.
    """
    chars = pattern[:PATTERN_LENGTH].ljust(PATTERN_LENGTH, Directive.KEEP.value)
    return [
        _parse_char(char, FIRST_POSITION + i) for i, char in enumerate(chars)
    ]


def _apply_step(ssn: SSN, position: int, step: Step, rng: random.Random) -> None:
    directive, literal = step
    if directive is Directive.RANDOM:
        ssn[position] = rng.randrange(10)
    elif directive is Directive.LITERAL:
        ssn[position] = literal
    elif directive is Directive.FEMALE:
        ssn[position] = rng.randrange(5) * 2
    elif directive is Directive.MALE:
        ssn[position] = rng.randrange(5) * 2 + 1
    elif directive is Directive.CHECKSUM:
        ssn[position] = get_checksum(ssn)


def apply_pattern(
    ssn: SSN, pattern: str, rng: Optional[random.Random] = None
) -> SSN:
    """
    Rewrite positions 8-11 of ``ssn`` in place according to ``pattern``.

    A safe directive in either serial position sets both of them. The
    checksum position is handled last so it sees the final positions 8-10.

    Returns:
        The same SSN, for chaining
    """
    rng = rng or default_rng()
    high, low, gender, check = parse_pattern(pattern)

    if Directive.SAFE in (high[0], low[0]):
        ssn[SERIAL_HIGH] = 9
        ssn[SERIAL_LOW] = rng.randrange(2) + 8
    else:
        _apply_step(ssn, SERIAL_HIGH, high, rng)
        _apply_step(ssn, SERIAL_LOW, low, rng)

    _apply_step(ssn, GENDER, gender, rng)
    _apply_step(ssn, CHECKSUM, check, rng)

    logger.debug(f"Applied pattern {pattern!r}: {ssn}")
    return ssn
