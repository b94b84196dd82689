"""
Errors reported while parsing personal identity numbers.

All three kinds are recoverable by the caller. A checksum failure still
carries the decoded number, since every other field was read successfully.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ssnkit.digits import SSN


class SSNError(Exception):
    """Base exception for personal identity number errors."""

    message = "Invalid personal identity number"

    def __init__(self, text: Optional[str] = None, message: Optional[str] = None):
        self.text = text
        super().__init__(message or self.message)


class FormatError(SSNError):
    """Input does not match YYYYMMDD-XXXX or YYYYMMDDXXXX."""

    message = "Input does not match YYYYMMDD-XXXX or YYYYMMDDXXXX"


class DateError(SSNError):
    """The date digits do not form a real calendar date."""

    message = "Could not parse date"


class ChecksumError(SSNError):
    """The check digit disagrees with the computed Luhn checksum."""

    message = "Checksum is incorrect"

    def __init__(self, text: Optional[str], ssn: "SSN", expected: int):
        self.ssn = ssn
        self.expected = expected
        self.actual = ssn.checksum_digit
        super().__init__(
            text, f"{self.message}: expected {expected}, got {self.actual}"
        )
