"""
Luhn checksum for personal identity numbers.

The check digit covers the ten-digit form without the century, i.e.
positions 2-10 of the twelve-digit number.
"""

from typing import TYPE_CHECKING, Iterable, Union

if TYPE_CHECKING:
    from ssnkit.digits import SSN


def sum_digits(n: int) -> int:
    """Repeatedly add the decimal digits of ``n`` until one digit remains."""
    while n > 9:
        n, d = divmod(n, 10)
        n += d
    return n


def luhn_checksum(digits: Iterable[Union[int, str]]) -> int:
    """
    Calculate Luhn checksum digit.

    The Luhn algorithm:
    1. Weight the digits 2, 1, 2, 1, ... from the left
    2. If weighting results in > 9, sum the digits of the product
    3. Sum all products
    4. Checksum is (10 - (sum % 10)) % 10
    """
    total = 0
    for i, digit in enumerate(digits):
        weight = 2 if i % 2 == 0 else 1
        total += sum_digits(int(digit) * weight)
    return (10 - (total % 10)) % 10


def get_checksum(ssn: "SSN") -> int:
    """Checksum over positions 2-10 of ``ssn``."""
    return luhn_checksum(ssn[2:11])
