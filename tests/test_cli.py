"""Tests for the pace CLI."""

import json

import pytest
from typer.testing import CliRunner

from cli import __version__
from cli.main import app
from pacecalc import config
from pacecalc.config import Settings
from pacecalc.models import PaceUnit

runner = CliRunner()

EXPECTED_AT_12_KMH = {
    "2.4km": "12:00",
    "5km": "25:00",
    "10km": "50:00",
    "half": "1:45:30",
    "full": "3:31:00",
}


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Use default settings regardless of the local environment."""
    settings = Settings(_env_file=None)
    monkeypatch.setattr(config, "_settings", settings)
    return settings


def test_version():
    """Test --version prints the version."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_calc_kmh_json():
    """Test finish times for a km/h pace as JSON."""
    result = runner.invoke(app, ["calc", "12", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output) == EXPECTED_AT_12_KMH


def test_calc_min_per_km_colon_format():
    """Test M:SS input for a duration unit."""
    result = runner.invoke(app, ["calc", "5:00", "--unit", "min-km", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output) == EXPECTED_AT_12_KMH


def test_calc_min_per_km_separate_seconds():
    """Test minutes and seconds given as two arguments."""
    result = runner.invoke(app, ["calc", "5", "0", "-u", "min-km", "-j"])
    assert result.exit_code == 0
    assert json.loads(result.output) == EXPECTED_AT_12_KMH


def test_calc_uses_default_unit(default_settings):
    """Test the configured default unit applies without --unit."""
    default_settings.default_unit = PaceUnit.MIN_PER_KM
    result = runner.invoke(app, ["calc", "5:00", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output) == EXPECTED_AT_12_KMH


def test_calc_table():
    """Test the finish time table output."""
    result = runner.invoke(app, ["calc", "12"])
    assert result.exit_code == 0
    assert "Marathon" in result.output
    assert "3:31:00" in result.output


def test_calc_invalid_input():
    """Test a zero pace exits with an error."""
    result = runner.invoke(app, ["calc", "0"])
    assert result.exit_code == 1
    assert "valid pace" in result.output


def test_calc_unknown_unit():
    """Test units outside the four are rejected."""
    result = runner.invoke(app, ["calc", "12", "--unit", "m/s"])
    assert result.exit_code != 0


def test_convert_json():
    """Test a pace shown in all four units."""
    result = runner.invoke(app, ["convert", "12", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "kmh": "12",
        "mph": "7.46",
        "min-km": "5:00",
        "min-mile": "8:03",
    }


def test_convert_table():
    """Test the conversion table output."""
    result = runner.invoke(app, ["convert", "8:00", "-u", "min-mile"])
    assert result.exit_code == 0
    assert "12.07" in result.output
    assert "min/mile" in result.output


def test_convert_invalid_input():
    """Test 0:00 exits with an error."""
    result = runner.invoke(app, ["convert", "0:00", "-u", "min-km"])
    assert result.exit_code == 1
    assert "valid pace" in result.output


def test_convert_pads_entered_seconds():
    """Test a bare minutes entry is shown as m:ss."""
    result = runner.invoke(app, ["convert", "5", "-u", "min-km", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output)["min-km"] == "5:00"


def test_calc_title_pads_entered_seconds():
    """Test the finish time title shows 5:00 rather than 5:0."""
    result = runner.invoke(app, ["calc", "5", "-u", "min-km"])
    assert result.exit_code == 0
    assert "at 5:00" in result.output


def test_calc_extreme_speed():
    """Test a speed with no finite finish time exits cleanly."""
    result = runner.invoke(app, ["calc", "1e-310"])
    assert result.exit_code == 1
    assert "Invalid pace calculation" in result.output


def test_invalid_log_level_setting(monkeypatch):
    """Test a bad PACE_LOG_LEVEL is reported instead of crashing."""
    monkeypatch.setattr(config, "_settings", None)
    monkeypatch.setenv("PACE_LOG_LEVEL", "verbose")

    result = runner.invoke(app, ["calc", "12"])

    assert result.exit_code == 1
    assert "log_level" in result.output
