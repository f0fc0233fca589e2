"""Input slots for the four pace representations.

A slot is the model behind one input widget: it holds the raw text the user
typed (or the value the coordinator pushed into it), plus the selected and
error flags the view layer styles from.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pydantic import ValidationError

from pacecalc.models import DurationPace, PaceUnit, PaceValue, SpeedPace, round_to_precision

if TYPE_CHECKING:
    from .coordinator import SelectionCoordinator

logger = logging.getLogger(__name__)

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def parse_float(text: str) -> float | None:
    """
    Parse the leading number of a string, ignoring trailing text.

    Args:
        text: Raw input (e.g., "12.5", " 7 mph")

    Returns:
        Parsed number, or None if the text does not start with one
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group(1))


def parse_int(text: str) -> int | None:
    """Parse the leading integer of a string ("4.5" -> 4), or None."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    return int(match.group(1))


def format_speed(value: float) -> str:
    """Format a speed with at most two decimals ("12", "7.46")."""
    return f"{round_to_precision(value, 2):.2f}".rstrip("0").rstrip(".")


class InputSlot(ABC):
    """Common interface of the speed and duration slots."""

    def __init__(self, unit: PaceUnit, coordinator: "SelectionCoordinator") -> None:
        self.unit = unit
        self.coordinator = coordinator
        self.selected = False
        self.error = False

    @abstractmethod
    def get_raw(self) -> str | tuple[str, str]:
        """Raw text currently held by the slot."""

    @abstractmethod
    def read(self) -> PaceValue | None:
        """Parse the raw text; unparseable text counts as 0, negatives as None."""

    @abstractmethod
    def set_display(self, value: PaceValue) -> None:
        """Overwrite the raw text with a derived value."""

    @abstractmethod
    def clear_display(self) -> None:
        """Blank the slot."""

    @abstractmethod
    def validate(self) -> bool:
        """Whether the slot holds a pace a calculation can use."""

    def focus(self) -> None:
        """Make this slot the active one (click or focus in the view)."""
        self.coordinator.set_active(self.unit)

    def _changed(self) -> None:
        if self.coordinator.active != self.unit:
            self.coordinator.set_active(self.unit)
        self.coordinator.on_edit()

    def mark_selected(self) -> None:
        self.selected = True

    def unmark_selected(self) -> None:
        self.selected = False

    def mark_error(self) -> None:
        self.error = True

    def clear_error(self) -> None:
        self.error = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.unit.value}, raw={self.get_raw()!r})"


class SpeedSlot(InputSlot):
    """Slot holding a single speed value (km/h or mph)."""

    def __init__(self, unit: PaceUnit, coordinator: "SelectionCoordinator") -> None:
        if not unit.is_speed:
            raise ValueError(f"{unit.value} is not a speed unit")
        super().__init__(unit, coordinator)
        self.raw = ""

    def edit(self, text: str) -> None:
        """User typed into the slot."""
        self.raw = text
        self._changed()

    def get_raw(self) -> str:
        return self.raw

    def read(self) -> SpeedPace | None:
        value = parse_float(self.raw) or 0.0
        try:
            return SpeedPace(value=value)
        except ValidationError:
            logger.debug(f"Unusable {self.unit.value} input: {self.raw!r}")
            return None

    def set_display(self, value: PaceValue) -> None:
        if not isinstance(value, SpeedPace):
            raise TypeError(f"{self.unit.value} slot cannot display {type(value).__name__}")
        self.raw = format_speed(value.value)

    def clear_display(self) -> None:
        self.raw = ""

    def validate(self) -> bool:
        reading = self.read()
        return reading is not None and reading.value > 0


class DurationSlot(InputSlot):
    """Slot holding a minutes/seconds pair (per km or per mile)."""

    def __init__(self, unit: PaceUnit, coordinator: "SelectionCoordinator") -> None:
        if not unit.is_duration:
            raise ValueError(f"{unit.value} is not a duration unit")
        super().__init__(unit, coordinator)
        self.raw_minutes = ""
        self.raw_seconds = ""

    def edit(self, minutes: str | None = None, seconds: str | None = None) -> None:
        """User typed into the minutes field, the seconds field, or both."""
        if minutes is not None:
            self.raw_minutes = minutes
        if seconds is not None:
            self.raw_seconds = seconds
        self._changed()

    def get_raw(self) -> tuple[str, str]:
        return self.raw_minutes, self.raw_seconds

    def read(self) -> DurationPace | None:
        minutes = parse_int(self.raw_minutes) or 0
        seconds = parse_int(self.raw_seconds) or 0
        try:
            return DurationPace(minutes=minutes, seconds=seconds)
        except ValidationError:
            logger.debug(f"Unusable {self.unit.value} input: {self.get_raw()!r}")
            return None

    def set_display(self, value: PaceValue) -> None:
        if not isinstance(value, DurationPace):
            raise TypeError(f"{self.unit.value} slot cannot display {type(value).__name__}")
        self.raw_minutes = str(value.minutes)
        self.raw_seconds = f"{value.seconds:02d}"

    def clear_display(self) -> None:
        self.raw_minutes = ""
        self.raw_seconds = ""

    def validate(self) -> bool:
        reading = self.read()
        if reading is None:
            return False
        if reading.minutes == 0 and reading.seconds == 0:
            return False
        if self.coordinator.settings.strict_seconds and reading.seconds >= 60:
            return False
        return True
