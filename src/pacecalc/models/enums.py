"""Enumeration types for pace data models."""

from enum import Enum


class PaceUnit(str, Enum):
    """Unit a runner's pace is expressed in."""

    KMH = "kmh"  # speed, kilometers per hour
    MPH = "mph"  # speed, miles per hour
    MIN_PER_KM = "min-km"  # duration per kilometer
    MIN_PER_MILE = "min-mile"  # duration per mile

    @property
    def is_speed(self) -> bool:
        """True for the rate units (distance per time)."""
        return self in (PaceUnit.KMH, PaceUnit.MPH)

    @property
    def is_duration(self) -> bool:
        """True for the duration units (time per distance)."""
        return not self.is_speed

    @property
    def label(self) -> str:
        """Short display label (e.g., "km/h" or "min/mile")."""
        return _LABELS[self]


_LABELS = {
    PaceUnit.KMH: "km/h",
    PaceUnit.MPH: "mph",
    PaceUnit.MIN_PER_KM: "min/km",
    PaceUnit.MIN_PER_MILE: "min/mile",
}
