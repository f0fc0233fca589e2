"""Pace commands for the pace CLI."""

import json

import typer

from cli import display
from pacecalc.calculator import DurationSlot, SelectionCoordinator, SpeedSlot
from pacecalc.config import get_settings
from pacecalc.models import PaceUnit


def load_pace(value: str, seconds: str | None, unit: PaceUnit | None) -> SelectionCoordinator:
    """
    Type a pace into the matching slot, as a user would in the calculator.

    Args:
        value: Speed for km/h or mph, minutes (or "M:SS") for the duration units
        seconds: Seconds for the duration units
        unit: Unit of the value; the configured default when None

    Returns:
        Coordinator with the slot active and the other slots synced
    """
    settings = get_settings()
    coordinator = SelectionCoordinator(settings)
    slot = coordinator.slot(unit or settings.default_unit)

    if isinstance(slot, DurationSlot):
        if seconds is None and ":" in value:
            value, seconds = value.split(":", 1)
        slot.edit(minutes=value, seconds=seconds or "0")
    elif isinstance(slot, SpeedSlot):
        if seconds is not None:
            display.display_warning(f"Ignoring seconds for {slot.unit.label}")
        slot.edit(value)

    return coordinator


def calc(
    value: str = typer.Argument(..., help="Speed, minutes, or M:SS"),
    seconds: str | None = typer.Argument(None, help="Seconds (duration units only)"),
    unit: PaceUnit | None = typer.Option(None, "--unit", "-u", help="Pace unit"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Estimate finish times for 2.4 km, 5 km, 10 km, half and full marathon."""
    coordinator = load_pace(value, seconds, unit)
    results = coordinator.compute_finish_times()

    if results is None:
        display.display_error(coordinator.last_error or "Calculation failed")
        raise typer.Exit(1)

    if json_output:
        print(json.dumps(results, indent=2))
    else:
        display.display_finish_times(results, coordinator)


def convert(
    value: str = typer.Argument(..., help="Speed, minutes, or M:SS"),
    seconds: str | None = typer.Argument(None, help="Seconds (duration units only)"),
    unit: PaceUnit | None = typer.Option(None, "--unit", "-u", help="Pace unit"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show a pace in km/h, mph, min/km and min/mile."""
    coordinator = load_pace(value, seconds, unit)

    if not coordinator.validate_active():
        display.display_error(coordinator.last_error or "Invalid pace")
        display.display_info("Units: " + ", ".join(u.value for u in PaceUnit))
        raise typer.Exit(1)

    if json_output:
        data = {slot.unit.value: display.slot_text(slot) for slot in coordinator.slots}
        print(json.dumps(data, indent=2))
    else:
        display.display_conversions(coordinator)
