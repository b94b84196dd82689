"""
The 12-digit personal identity number and date/digit conversion.

Layout (index: meaning):
- 0-3: year, most significant digit first
- 4-5: month
- 6-7: day of month
- 8-9: serial (birth order); 98 and 99 are the reserved "safe" range
- 10: gender digit (even for female, odd for male)
- 11: Luhn check digit over positions 2-10
"""

from datetime import date, datetime, time, timedelta
from typing import Iterable, Iterator, Optional, Union

from ssnkit.errors import DateError

LENGTH = 12

YEAR = slice(0, 4)
MONTH = slice(4, 6)
DAY = slice(6, 8)
DATE = slice(0, 8)
SERIAL = slice(8, 11)

SERIAL_HIGH = 8
SERIAL_LOW = 9
GENDER = 10
CHECKSUM = 11


def digits_to_int(digits: Iterable[int]) -> int:
    """Read a digit slice as a base-10 integer, most significant digit first."""
    value = 0
    for d in digits:
        value = value * 10 + d
    return value


def _int_to_digits(value: int, width: int) -> list[int]:
    digits = []
    for _ in range(width):
        value, d = divmod(value, 10)
        digits.append(d)
    return digits[::-1]


def encode_date(ssn: "SSN", d: Union[date, datetime]) -> "SSN":
    """Write the calendar part of ``d`` into positions 0-7 of ``ssn``."""
    ssn[YEAR] = _int_to_digits(d.year, 4)
    ssn[MONTH] = _int_to_digits(d.month, 2)
    ssn[DAY] = _int_to_digits(d.day, 2)
    return ssn


def decode_date(digits: Iterable[int]) -> date:
    """
    Build a calendar date from the first eight digits.

    Raises:
        DateError: If year, month and day do not form a real date
            (month 15, February 30, a day of 00, ...).
    """
    digits = list(digits)[:8]
    year = digits_to_int(digits[YEAR])
    month = digits_to_int(digits[MONTH])
    day = digits_to_int(digits[DAY])
    try:
        return date(year, month, day)
    except ValueError as e:
        raise DateError(message=f"Could not parse date: {e}") from e


class SSN:
    """A Swedish personal identity number as twelve single digits."""

    __slots__ = ("_digits",)

    def __init__(self, digits: Optional[Iterable[int]] = None):
        values = [0] * LENGTH if digits is None else [int(d) for d in digits]
        if len(values) != LENGTH:
            raise ValueError(f"SSN needs {LENGTH} digits, got {len(values)}")
        for d in values:
            if not 0 <= d <= 9:
                raise ValueError(f"Not a single digit: {d}")
        self._digits = values

    @classmethod
    def from_date(cls, d: Union[date, datetime]) -> "SSN":
        """Create a number for birth date ``d`` with zeroed trailing digits."""
        return encode_date(cls(), d)

    def __getitem__(self, index):
        return self._digits[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            values = [int(v) for v in value]
            if len(values) != len(range(*index.indices(LENGTH))):
                raise ValueError("Slice assignment must not change the length")
            for v in values:
                if not 0 <= v <= 9:
                    raise ValueError(f"Not a single digit: {v}")
            self._digits[index] = values
            return
        value = int(value)
        if not 0 <= value <= 9:
            raise ValueError(f"Not a single digit: {value}")
        self._digits[index] = value

    def __iter__(self) -> Iterator[int]:
        return iter(self._digits)

    def __len__(self) -> int:
        return LENGTH

    def __eq__(self, other) -> bool:
        if not isinstance(other, SSN):
            return NotImplemented
        return self._digits == other._digits

    __hash__ = None

    def __repr__(self) -> str:
        return f"SSN({self._digits!r})"

    def __str__(self) -> str:
        from ssnkit.formatting import format_ssn

        return format_ssn(self)

    def copy(self) -> "SSN":
        return SSN(self._digits)

    def set_date(self, d: Union[date, datetime]) -> None:
        """Set the date part (positions 0-7)."""
        encode_date(self, d)

    def set_last_digits(self, pattern: str, rng=None) -> None:
        """Rewrite positions 8-11 from a pattern such as ``"???c"``."""
        from ssnkit.pattern import apply_pattern

        apply_pattern(self, pattern, rng=rng)

    # Zone accessors

    @property
    def year(self) -> int:
        return digits_to_int(self._digits[YEAR])

    @property
    def month(self) -> int:
        return digits_to_int(self._digits[MONTH])

    @property
    def day(self) -> int:
        return digits_to_int(self._digits[DAY])

    @property
    def serial(self) -> int:
        """Birth number: positions 8-10 as a three digit integer."""
        return digits_to_int(self._digits[SERIAL])

    @property
    def gender_digit(self) -> int:
        return self._digits[GENDER]

    @property
    def checksum_digit(self) -> int:
        return self._digits[CHECKSUM]

    @property
    def is_female(self) -> bool:
        return self._digits[GENDER] % 2 == 0

    @property
    def gender(self) -> str:
        """'F' for female, 'M' for male."""
        return "F" if self.is_female else "M"

    @property
    def is_safe(self) -> bool:
        """True if the serial lies in the reserved 980-999 range."""
        return self._digits[SERIAL_HIGH] == 9 and self._digits[SERIAL_LOW] >= 8

    def date_parts(self) -> tuple[int, int, int]:
        """Year, month and day as read from the digits, without validation."""
        return self.year, self.month, self.day

    def birth_date(self) -> date:
        """
        The birth date encoded in positions 0-7.

        Only numbers built from a real date reach this; anything else is a
        programming error and raises RuntimeError.
        """
        try:
            return decode_date(self._digits)
        except DateError as e:
            raise RuntimeError(
                f"SSN date digits cannot be read as a date: {self!r}"
            ) from e

    def age(self, now: Union[date, datetime]) -> timedelta:
        """Time elapsed between midnight of the birth date and ``now``."""
        if not isinstance(now, datetime):
            now = datetime.combine(now, time())
        born = datetime.combine(self.birth_date(), time(), tzinfo=now.tzinfo)
        return now - born
