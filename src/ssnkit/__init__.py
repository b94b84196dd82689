"""
ssnkit - Swedish personal identity numbers

Parses, validates, formats and generates 12-digit personnummer:
- YYYYMMDD birth date
- three digit birth number, the last of which is odd for men, even for women
- Luhn check digit
"""

__version__ = "0.1.0"

from ssnkit.checksum import get_checksum, luhn_checksum, sum_digits
from ssnkit.digits import SSN, decode_date, digits_to_int, encode_date
from ssnkit.errors import ChecksumError, DateError, FormatError, SSNError
from ssnkit.formatting import format_ssn
from ssnkit.generator import generate_ssn, new_random_ssn, new_safe_random_ssn
from ssnkit.parser import ValidationResult, is_valid, parse, validate
from ssnkit.pattern import Directive, apply_pattern, parse_pattern
from ssnkit.random_time import default_rng, random_past_timestamp, years

__all__ = [
    # Data model
    "SSN",
    "encode_date",
    "decode_date",
    "digits_to_int",
    # Checksum
    "luhn_checksum",
    "get_checksum",
    "sum_digits",
    # Parsing
    "parse",
    "validate",
    "is_valid",
    "ValidationResult",
    "SSNError",
    "FormatError",
    "DateError",
    "ChecksumError",
    # Formatting
    "format_ssn",
    # Generation
    "Directive",
    "parse_pattern",
    "apply_pattern",
    "random_past_timestamp",
    "default_rng",
    "years",
    "generate_ssn",
    "new_random_ssn",
    "new_safe_random_ssn",
]
