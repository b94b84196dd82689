"""
Unit tests for personal identity number formatting.
"""

import pytest

from ssnkit.digits import SSN
from ssnkit.formatting import format_ssn
from ssnkit.parser import parse


class TestFormatSSN:
    """Tests for format_ssn()."""

    @pytest.mark.parametrize(
        "century,separator,expected",
        [
            (False, False, "7509301938"),
            (True, False, "197509301938"),
            (False, True, "750930-1938"),
            (True, True, "19750930-1938"),
        ],
    )
    def test_variants(self, reference_ssn, century, separator, expected):
        assert format_ssn(reference_ssn, century, separator) == expected

    def test_str_is_full_form(self, reference_ssn):
        assert str(reference_ssn) == "19750930-1938"

    def test_custom_separator(self, reference_ssn):
        assert format_ssn(reference_ssn, separator=" ") == "19750930 1938"

    def test_no_validation(self):
        """Test that an impossible number still formats."""
        ssn = SSN([2, 0, 1, 0, 1, 5, 1, 0, 1, 2, 3, 4])
        assert format_ssn(ssn) == "20101510-1234"

    def test_parse_round_trip(self, reference_ssn):
        assert parse(format_ssn(reference_ssn, True, True)) == reference_ssn
        assert parse(format_ssn(reference_ssn, True, False)) == reference_ssn
