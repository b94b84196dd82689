"""
Pytest configuration and shared fixtures for ssnkit tests.
"""

import random
from datetime import datetime

import pytest

from ssnkit.digits import SSN


@pytest.fixture
def rng() -> random.Random:
    """A seeded random source so generated values are reproducible."""
    return random.Random(20240521)


@pytest.fixture
def reference_ssn() -> SSN:
    """19750930-1938, a number with a correct checksum."""
    return SSN([1, 9, 7, 5, 0, 9, 3, 0, 1, 9, 3, 8])


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed reference time for random timestamps."""
    return datetime(2024, 5, 21, 12, 0, 0)
