"""Display utilities for the pace CLI with Rich formatting."""

from rich.console import Console
from rich.table import Table

from pacecalc.calculator import DurationSlot, InputSlot, SelectionCoordinator
from pacecalc.models import DISTANCE_LABELS, DISTANCES

console = Console()


def slot_text(slot: InputSlot) -> str:
    """Render a slot's current contents ("12", "7.46", "5:00")."""
    if isinstance(slot, DurationSlot):
        minutes, seconds = slot.get_raw()
        if not minutes and not seconds:
            return ""
        if seconds.isdigit():
            seconds = seconds.zfill(2)
        return f"{minutes or 0}:{seconds or '00'}"
    return slot.get_raw()


def display_finish_times(results: dict[str, str], coordinator: SelectionCoordinator) -> None:
    """Display estimated finish times for every race distance."""
    active = coordinator.active_slot
    title = "Finish Times"
    if active is not None:
        title = f"Finish Times at {slot_text(active)} {active.unit.label}"

    table = Table(title=title, show_header=True, border_style="cyan")
    table.add_column("Race", style="cyan")
    table.add_column("Distance", justify="right")
    table.add_column("Time", justify="right", style="green")

    for key, distance in DISTANCES.items():
        table.add_row(DISTANCE_LABELS[key], f"{distance:g} km", results[key])

    console.print(table)


def display_conversions(coordinator: SelectionCoordinator) -> None:
    """Display the pace in all four units, highlighting the one entered."""
    table = Table(title="Pace Conversions", show_header=True, border_style="cyan")
    table.add_column("Unit", style="cyan")
    table.add_column("Pace", justify="right", style="green")
    table.add_column("", justify="center")

    for slot in coordinator.slots:
        marker = "[bold yellow]*[/bold yellow]" if slot.selected else ""
        table.add_row(slot.unit.label, slot_text(slot) or "-", marker)

    console.print(table)


def display_error(message: str) -> None:
    """Display error message."""
    console.print(f"[red]✗[/red] {message}")


def display_warning(message: str) -> None:
    """Display warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def display_info(message: str) -> None:
    """Display info message."""
    console.print(f"[dim]ℹ[/dim] {message}")
