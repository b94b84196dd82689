"""Rendering of personal identity numbers as text."""

from ssnkit.digits import SSN

DEFAULT_SEPARATOR = "-"


def format_ssn(
    ssn: SSN,
    include_century: bool = True,
    include_separator: bool = True,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """
    Format a personal identity number.

    Args:
        ssn: The number to render (not validated)
        include_century: Emit all twelve digits instead of the ten digit form
        include_separator: Put ``separator`` between date and trailing digits
        separator: The separator to use (default: '-')

    Returns:
        e.g. '19750930-1938', '197509301938', '750930-1938' or '7509301938'
    """
    start = 0 if include_century else 2
    date_part = "".join(str(d) for d in ssn[start:8])
    tail = "".join(str(d) for d in ssn[8:])
    if include_separator:
        return f"{date_part}{separator}{tail}"
    return f"{date_part}{tail}"
