"""Data models and unit conversions for pacecalc."""

from .enums import PaceUnit
from .pace import DurationPace, PaceValue, SpeedPace
from .units import (
    DISTANCE_LABELS,
    DISTANCES,
    KM_TO_MILES,
    MILES_TO_KM,
    format_time,
    km_to_miles,
    miles_to_km,
    round_half_up,
    round_to_precision,
    speed_to_duration_per_km,
    speed_to_duration_per_mile,
    speed_to_mph,
    time_for_distance,
    to_canonical_speed,
)

__all__ = [
    # Enums
    "PaceUnit",
    # Pace values
    "PaceValue",
    "SpeedPace",
    "DurationPace",
    # Race distances
    "DISTANCES",
    "DISTANCE_LABELS",
    # Units
    "KM_TO_MILES",
    "MILES_TO_KM",
    "km_to_miles",
    "miles_to_km",
    "round_half_up",
    "round_to_precision",
    "to_canonical_speed",
    "speed_to_mph",
    "speed_to_duration_per_km",
    "speed_to_duration_per_mile",
    "format_time",
    "time_for_distance",
]
