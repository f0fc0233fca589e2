"""Selection coordinator and input slots."""

from .coordinator import (
    DEGENERATE_SPEED_MESSAGE,
    INVALID_INPUT_MESSAGE,
    SelectionCoordinator,
)
from .slots import DurationSlot, InputSlot, SpeedSlot, format_speed, parse_float, parse_int

__all__ = [
    "SelectionCoordinator",
    "INVALID_INPUT_MESSAGE",
    "DEGENERATE_SPEED_MESSAGE",
    # Slots
    "InputSlot",
    "SpeedSlot",
    "DurationSlot",
    # Parsing
    "parse_float",
    "parse_int",
    "format_speed",
]
