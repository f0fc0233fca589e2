"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from pacecalc.config import Settings
from pacecalc.models import PaceUnit


def test_default_settings():
    """Test defaults keep the original calculator behavior."""
    settings = Settings(_env_file=None)

    assert settings.log_level == "WARNING"
    assert settings.default_unit == PaceUnit.KMH
    assert settings.normalize_seconds is False
    assert settings.strict_seconds is False


def test_settings_from_environment(monkeypatch):
    """Test PACE_ prefixed environment variables override defaults."""
    monkeypatch.setenv("PACE_DEFAULT_UNIT", "min-mile")
    monkeypatch.setenv("PACE_NORMALIZE_SECONDS", "true")
    monkeypatch.setenv("pace_log_level", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.default_unit == PaceUnit.MIN_PER_MILE
    assert settings.normalize_seconds is True
    assert settings.log_level == "DEBUG"


def test_settings_from_env_file(tmp_path):
    """Test values are read from a .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("PACE_STRICT_SECONDS=1\nUNRELATED=ignored\n")

    settings = Settings(_env_file=env_file)

    assert settings.strict_seconds is True


def test_log_level_case_insensitive():
    """Test level names are accepted in any case."""
    assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"


def test_invalid_log_level_rejected():
    """Test an unknown level name fails at load time."""
    with pytest.raises(ValidationError, match="log_level"):
        Settings(_env_file=None, log_level="verbose")
