"""
Unit tests for ssnkit settings.
"""

import pytest
from pydantic import ValidationError

from ssnkit.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "MIN_AGE_YEARS", "MAX_AGE_YEARS", "DEFAULT_PATTERN", "RANDOM_SEED"):
            monkeypatch.delenv(f"SSNKIT_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.min_age_years == 0
        assert settings.max_age_years == 100
        assert settings.default_pattern == "???c"
        assert settings.random_seed is None

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("SSNKIT_MAX_AGE_YEARS", "80")
        monkeypatch.setenv("SSNKIT_RANDOM_SEED", "42")
        settings = Settings(_env_file=None)
        assert settings.max_age_years == 80
        assert settings.random_seed == 42

    def test_log_level_normalised(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_inverted_age_window(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, min_age_years=50, max_age_years=10)

    def test_negative_age(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, min_age_years=-1)
