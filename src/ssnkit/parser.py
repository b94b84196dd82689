"""
Parsing and validation of Swedish personal identity numbers.

Accepted formats:
- YYYYMMDD-XXXX
- YYYYMMDDXXXX

Checks run in order: format, then date, then checksum. A checksum failure
still yields the decoded number (see ChecksumError.ssn).
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from ssnkit.checksum import get_checksum
from ssnkit.digits import SSN, decode_date, encode_date
from ssnkit.errors import ChecksumError, DateError, FormatError, SSNError

logger = logging.getLogger(__name__)

SSN_PATTERN = re.compile(r"(?P<date>[0-9]{8})-?(?P<tail>[0-9]{4})")


@dataclass
class ValidationResult:
    """Outcome of validating a personal identity number."""

    ssn: Optional[SSN]  # Populated on success and on checksum failure
    error: Optional[SSNError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


def parse(text: str) -> SSN:
    """
    Parse and validate a personal identity number.

    Raises:
        FormatError: Not 8 digits, optional '-', 4 digits
        DateError: The first 8 digits are not a real calendar date
        ChecksumError: Wrong check digit; the decoded number is on ``.ssn``
    """
    if not isinstance(text, str):
        raise FormatError(text)

    match = SSN_PATTERN.fullmatch(text)
    if not match:
        logger.debug(f"Rejected {text!r}: bad format")
        raise FormatError(text)

    date_digits = [int(c) for c in match.group("date")]
    try:
        birth_date = decode_date(date_digits)
    except DateError as e:
        logger.debug(f"Rejected {text!r}: bad date")
        raise DateError(text, str(e)) from e

    ssn = SSN()
    encode_date(ssn, birth_date)
    ssn[8:12] = [int(c) for c in match.group("tail")]

    expected = get_checksum(ssn)
    if expected != ssn.checksum_digit:
        logger.debug(f"Rejected {text!r}: checksum should be {expected}")
        raise ChecksumError(text, ssn, expected)

    return ssn


def validate(text: str) -> ValidationResult:
    """Validate without raising; see parse() for the checks performed."""
    try:
        return ValidationResult(ssn=parse(text))
    except ChecksumError as e:
        return ValidationResult(ssn=e.ssn, error=e)
    except SSNError as e:
        return ValidationResult(ssn=None, error=e)


def is_valid(text: str) -> bool:
    return validate(text).is_valid
