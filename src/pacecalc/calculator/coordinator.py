"""Selection coordinator keeping the four pace slots in sync."""

import logging
import math
from typing import assert_never

from pacecalc.config import Settings, get_settings
from pacecalc.models import (
    DISTANCES,
    PaceUnit,
    PaceValue,
    SpeedPace,
    speed_to_duration_per_km,
    speed_to_duration_per_mile,
    speed_to_mph,
    time_for_distance,
    to_canonical_speed,
)

from .slots import DurationSlot, InputSlot, SpeedSlot

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Please enter a valid pace value."
DEGENERATE_SPEED_MESSAGE = "Invalid pace calculation. Please check your inputs."


class SelectionCoordinator:
    """
    Owns the active-unit state and the four input slots.

    The active slot is authoritative: every edit recomputes the other three
    slots from it and never writes back to it. Failures are reported as
    status values (False / None, slot error flags, last_error), never raised.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.active: PaceUnit | None = None
        self.last_error: str | None = None
        self._slots: dict[PaceUnit, InputSlot] = {
            PaceUnit.KMH: SpeedSlot(PaceUnit.KMH, self),
            PaceUnit.MPH: SpeedSlot(PaceUnit.MPH, self),
            PaceUnit.MIN_PER_KM: DurationSlot(PaceUnit.MIN_PER_KM, self),
            PaceUnit.MIN_PER_MILE: DurationSlot(PaceUnit.MIN_PER_MILE, self),
        }

    @property
    def slots(self) -> list[InputSlot]:
        """All slots in display order."""
        return list(self._slots.values())

    def slot(self, unit: PaceUnit) -> InputSlot:
        return self._slots[unit]

    @property
    def active_slot(self) -> InputSlot | None:
        if self.active is None:
            return None
        return self._slots[self.active]

    def set_active(self, unit: PaceUnit) -> None:
        """Make ``unit`` the authoritative slot and reset error markers."""
        if unit != self.active:
            logger.debug(f"Active unit changed to {unit.value}")
        self.active = unit
        self.last_error = None
        for slot in self._slots.values():
            slot.clear_error()
            if slot.unit == unit:
                slot.mark_selected()
            else:
                slot.unmark_selected()

    def canonical_speed(self) -> float | None:
        """
        Speed in km/h derived from the active slot.

        Returns:
            Speed (possibly 0 or infinite), or None when no slot is active or
            its input is unusable
        """
        slot = self.active_slot
        if slot is None:
            return None
        reading = slot.read()
        if reading is None:
            return None
        return to_canonical_speed(slot.unit, reading)

    def on_edit(self) -> None:
        """Push the active slot's pace into the three other slots."""
        if self.active is None:
            return

        speed = self.canonical_speed()
        others = [slot for slot in self._slots.values() if slot.unit != self.active]

        if speed is None or not _is_usable(speed):
            logger.debug(f"Clearing derived slots, unusable speed from {self.active.value}: {speed}")
            for slot in others:
                slot.clear_display()
            return

        for slot in others:
            slot.set_display(self._derived_value(slot.unit, speed))
        logger.debug(f"Synced slots from {self.active.value} at {speed:.4f} km/h")

    def validate_active(self) -> bool:
        """
        Check the active slot's input.

        Marks the active slot as errored on failure; other slots are left
        untouched.

        Returns:
            True if a calculation may proceed
        """
        slot = self.active_slot
        if slot is None:
            self.last_error = INVALID_INPUT_MESSAGE
            logger.warning("Validation requested before any pace unit was selected")
            return False

        if not slot.validate():
            slot.mark_error()
            self.last_error = INVALID_INPUT_MESSAGE
            logger.warning(f"Invalid {slot.unit.value} input: {slot.get_raw()!r}")
            return False

        return True

    def compute_finish_times(self) -> dict[str, str] | None:
        """
        Estimate finish times for every race distance.

        Returns:
            Mapping of race key to formatted time, keyed like DISTANCES, or
            None when the input is invalid or gives an unusable speed
        """
        if not self.validate_active():
            return None

        speed = self.canonical_speed()
        if speed is None or not _is_usable(speed):
            self.last_error = DEGENERATE_SPEED_MESSAGE
            logger.warning(f"Rejected calculation with speed {speed} km/h")
            return None

        results = {key: time_for_distance(speed, distance) for key, distance in DISTANCES.items()}
        logger.info(f"Calculated finish times at {speed:.4f} km/h")
        return results

    def _derived_value(self, unit: PaceUnit, speed: float) -> PaceValue:
        normalize = self.settings.normalize_seconds
        match unit:
            case PaceUnit.KMH:
                return SpeedPace(value=speed)
            case PaceUnit.MPH:
                return SpeedPace(value=speed_to_mph(speed))
            case PaceUnit.MIN_PER_KM:
                return speed_to_duration_per_km(speed, normalize=normalize)
            case PaceUnit.MIN_PER_MILE:
                return speed_to_duration_per_mile(speed, normalize=normalize)
            case _:
                assert_never(unit)


def _is_usable(speed: float) -> bool:
    if not math.isfinite(speed) or speed <= 0:
        return False
    mph = speed_to_mph(speed)
    if mph <= 0:
        return False
    # Derived paces, displayed speeds and the longest finish time must stay finite
    longest = max(DISTANCES.values())
    derived = (60 / speed, 60 / mph, longest / speed * 60 * 100, speed * 100, mph * 100)
    return all(math.isfinite(value) for value in derived)
