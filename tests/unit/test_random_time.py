"""
Unit tests for random birth times.
"""

import random
from datetime import datetime, timedelta

from ssnkit.random_time import default_rng, random_past_timestamp, years


class TestRandomPastTimestamp:
    """Tests for random_past_timestamp()."""

    def test_within_window(self, rng, fixed_now):
        from_, to = years(100), years(20)
        for _ in range(200):
            ts = random_past_timestamp(from_, to, rng=rng, now=fixed_now)
            assert fixed_now - from_ <= ts < fixed_now - to

    def test_not_constant(self, rng, fixed_now):
        values = {
            random_past_timestamp(years(100), years(20), rng=rng, now=fixed_now)
            for _ in range(20)
        }
        assert len(values) > 1

    def test_empty_window(self, rng, fixed_now):
        """Test that from == to returns exactly now - from."""
        ts = random_past_timestamp(years(5), years(5), rng=rng, now=fixed_now)
        assert ts == fixed_now - years(5)

    def test_inverted_window(self, rng, fixed_now):
        ts = random_past_timestamp(years(1), years(5), rng=rng, now=fixed_now)
        assert ts == fixed_now - years(1)

    def test_sub_microsecond_window(self, rng, fixed_now):
        ts = random_past_timestamp(
            timedelta(days=1), timedelta(days=1), rng=rng, now=fixed_now
        )
        assert ts == fixed_now - timedelta(days=1)

    def test_reproducible_with_seed(self, fixed_now):
        a = random_past_timestamp(years(50), years(0), rng=random.Random(7), now=fixed_now)
        b = random_past_timestamp(years(50), years(0), rng=random.Random(7), now=fixed_now)
        assert a == b

    def test_defaults_to_now(self):
        before = datetime.now()
        ts = random_past_timestamp(timedelta(hours=1), timedelta(0))
        assert before - timedelta(hours=1) <= ts <= datetime.now()


class TestDefaultRng:
    """Tests for the shared random source."""

    def test_shared_instance(self):
        assert default_rng() is default_rng()

    def test_years(self):
        assert years(1) == timedelta(days=365)
