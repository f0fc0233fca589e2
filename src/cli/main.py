#!/usr/bin/env python3
"""
pace - running pace calculator

Convert a pace between km/h, mph, min/km and min/mile, and estimate finish
times for common race distances.

Usage:
    pace calc 12                    # Finish times at 12 km/h
    pace calc 5:00 -u min-km        # Finish times at 5:00 /km
    pace calc 8 30 -u min-mile      # Finish times at 8:30 /mile
    pace convert 7.5 -u mph         # Same pace in all four units
"""

import logging

import typer
from pydantic import ValidationError
from rich.console import Console

from cli import __version__, display
from cli.commands import calc
from pacecalc.config import get_settings

# Create the main app
app = typer.Typer(
    name="pace",
    help="Convert running paces and estimate race finish times.",
    no_args_is_help=True,
    add_completion=True,
)

# Console for output
console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"pace version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """
    pace - Convert running paces and estimate race finish times.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            display.display_error(f"Invalid setting {field}: {error['msg']}")
        display.display_info("Check your PACE_* environment variables or .env file")
        raise typer.Exit(1) from None

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# Register commands directly on the app
app.command(name="calc")(calc.calc)
app.command(name="convert")(calc.convert)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
