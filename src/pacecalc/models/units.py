"""Unit conversion utilities for pace, speed and finish times.

Every pace representation funnels through a canonical speed in kilometers
per hour. All functions here are pure.
"""

import math
from types import MappingProxyType
from typing import assert_never

from .enums import PaceUnit
from .pace import DurationPace, PaceValue, SpeedPace

# Conversion constants
KM_TO_MILES = 0.621371
MILES_TO_KM = 1.60934

# Race distances in kilometers, in display order
DISTANCES = MappingProxyType(
    {
        "2.4km": 2.4,
        "5km": 5,
        "10km": 10,
        "half": 21.1,
        "full": 42.2,
    }
)

DISTANCE_LABELS = MappingProxyType(
    {
        "2.4km": "2.4 km",
        "5km": "5 km",
        "10km": "10 km",
        "half": "Half Marathon",
        "full": "Marathon",
    }
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive input."""
    return math.floor(value + 0.5)


def round_to_precision(num: float, precision: int = 10) -> float:
    """
    Round a number to a fixed count of decimals, hiding floating-point noise.

    Args:
        num: Number to round
        precision: Decimal places to keep

    Returns:
        Rounded number
    """
    factor = 10**precision
    return round_half_up(num * factor) / factor


def km_to_miles(km: float) -> float:
    """
    Convert kilometers to miles.

    Args:
        km: Distance in kilometers

    Returns:
        Distance in miles
    """
    return km / MILES_TO_KM


def miles_to_km(miles: float) -> float:
    """
    Convert miles to kilometers.

    Args:
        miles: Distance in miles

    Returns:
        Distance in kilometers
    """
    return miles * MILES_TO_KM


def _duration_to_speed(value: DurationPace) -> float:
    try:
        total_minutes = value.total_minutes
    except OverflowError:
        # Minutes too large for a float; slower than any usable pace
        return 0.0
    if total_minutes == 0:
        return math.inf
    return 60 / total_minutes


def to_canonical_speed(unit: PaceUnit, value: PaceValue) -> float:
    """
    Convert a pace in any unit to km/h.

    A zero duration (0:00) gives an infinite speed rather than an error;
    callers decide whether that is usable.

    Args:
        unit: Unit the value is expressed in
        value: Speed for the speed units, minutes/seconds for the duration units

    Returns:
        Speed in kilometers per hour

    Raises:
        TypeError: If the value kind does not match the unit
    """
    if unit.is_speed != isinstance(value, SpeedPace):
        raise TypeError(f"{type(value).__name__} is not a valid value for {unit.value}")

    match unit:
        case PaceUnit.KMH:
            return value.value
        case PaceUnit.MPH:
            return value.value * MILES_TO_KM
        case PaceUnit.MIN_PER_KM:
            return _duration_to_speed(value)
        case PaceUnit.MIN_PER_MILE:
            # Per-mile duration read as km/h first, then rebased by the mile factor
            return _duration_to_speed(value) * MILES_TO_KM
        case _:
            assert_never(unit)


def speed_to_mph(kmh: float) -> float:
    """Convert km/h to mph."""
    return kmh * KM_TO_MILES


def _speed_to_duration(speed: float, normalize: bool) -> DurationPace:
    if speed <= 0:
        raise ValueError("Speed must be greater than zero.")

    pace_minutes = 60 / speed
    minutes = math.floor(pace_minutes)
    seconds = round_half_up((pace_minutes % 1) * 60)
    if normalize and seconds == 60:
        minutes += 1
        seconds = 0
    return DurationPace(minutes=minutes, seconds=seconds)


def speed_to_duration_per_km(kmh: float, normalize: bool = False) -> DurationPace:
    """
    Convert km/h to minutes and seconds per kilometer.

    Seconds are rounded, so they can come out as 60 (e.g., "4:60"). With
    ``normalize`` the 60 seconds carry into the minutes instead.

    Args:
        kmh: Speed in kilometers per hour, greater than zero
        normalize: Carry rounded 60 seconds into the minutes

    Returns:
        Pace per kilometer
    """
    return _speed_to_duration(kmh, normalize)


def speed_to_duration_per_mile(kmh: float, normalize: bool = False) -> DurationPace:
    """Convert km/h to minutes and seconds per mile (see speed_to_duration_per_km)."""
    return _speed_to_duration(speed_to_mph(kmh), normalize)


def format_time(total_minutes: float) -> str:
    """
    Format a duration in minutes as a finish time.

    Args:
        total_minutes: Elapsed time in minutes

    Returns:
        "H:MM:SS" when at least an hour, otherwise "M:SS"
    """
    # Two decimals hide floating-point noise (11.999999 -> 12.00)
    rounded = round_half_up(total_minutes * 100) / 100
    hours = math.floor(rounded / 60)
    minutes = math.floor(rounded % 60)
    seconds = round_half_up((rounded % 1) * 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def time_for_distance(speed_kmh: float, distance_km: float) -> str:
    """
    Estimate the finish time for a distance at a constant speed.

    Args:
        speed_kmh: Speed in kilometers per hour, greater than zero
        distance_km: Distance in kilometers

    Returns:
        Formatted finish time (e.g., "25:00" or "3:31:00")

    Raises:
        ValueError: If the speed is zero or negative
    """
    if speed_kmh <= 0:
        raise ValueError("Speed must be greater than zero.")

    hours = distance_km / speed_kmh
    return format_time(hours * 60)
