"""Tests for Pydantic pace models and enums."""

import pytest
from pydantic import TypeAdapter, ValidationError

from pacecalc.models import DurationPace, PaceUnit, PaceValue, SpeedPace


def test_pace_unit_values():
    """Test the four supported units and their string values."""
    assert [unit.value for unit in PaceUnit] == ["kmh", "mph", "min-km", "min-mile"]
    assert PaceUnit("min-mile") == PaceUnit.MIN_PER_MILE


def test_pace_unit_kinds():
    """Test speed vs duration classification."""
    assert PaceUnit.KMH.is_speed
    assert PaceUnit.MPH.is_speed
    assert PaceUnit.MIN_PER_KM.is_duration
    assert PaceUnit.MIN_PER_MILE.is_duration
    assert not PaceUnit.MIN_PER_KM.is_speed


def test_pace_unit_labels():
    """Test display labels."""
    assert PaceUnit.KMH.label == "km/h"
    assert PaceUnit.MIN_PER_MILE.label == "min/mile"


def test_unknown_unit_rejected():
    """Test units outside the four are not representable."""
    with pytest.raises(ValueError):
        PaceUnit("m/s")


def test_speed_pace():
    """Test creating a speed pace."""
    pace = SpeedPace(value=12.5)
    assert pace.kind == "speed"
    assert pace.value == 12.5
    assert str(pace) == "12.50"


def test_speed_pace_rejects_negative():
    """Test negative speeds fail validation."""
    with pytest.raises(ValidationError):
        SpeedPace(value=-1)


def test_duration_pace():
    """Test creating a duration pace."""
    pace = DurationPace(minutes=4, seconds=30)
    assert pace.kind == "duration"
    assert pace.total_minutes == 4.5
    assert str(pace) == "4:30"


def test_duration_pace_rejects_negative():
    """Test negative minutes or seconds fail validation."""
    with pytest.raises(ValidationError):
        DurationPace(minutes=-1, seconds=0)
    with pytest.raises(ValidationError):
        DurationPace(minutes=5, seconds=-5)


def test_pace_value_discriminator():
    """Test the tagged union picks the model from the kind field."""
    adapter = TypeAdapter(PaceValue)

    speed = adapter.validate_python({"kind": "speed", "value": 10})
    assert isinstance(speed, SpeedPace)

    duration = adapter.validate_python({"kind": "duration", "minutes": 5, "seconds": 0})
    assert isinstance(duration, DurationPace)
    assert duration.model_dump() == {"kind": "duration", "minutes": 5, "seconds": 0}
