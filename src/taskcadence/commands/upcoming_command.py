"""Command 'upcoming' of taskcadence - preview the next few occurrences."""

import typer

from taskcadence.utils.pattern_input import load_pattern, parse_date_option
from taskcadence.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .utils import OUTPUT_HELP, PATTERN_HELP, get_recurrence_service, resolve_output

app = typer.Typer()


@app.command("upcoming")
@command_wrapper
def upcoming_command(
    pattern: str = typer.Argument(..., help=PATTERN_HELP),
    count: int | None = typer.Option(
        None, "--count", "-c", min=1, help="Number of occurrences to show"
    ),
    from_date: str | None = typer.Option(
        None, "--from", "-f", help="Preview after this date, defaults to today"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """Preview upcoming occurrence dates."""
    recurrence_pattern = load_pattern(pattern)
    service = get_recurrence_service()

    dates = service.upcoming(recurrence_pattern, count, parse_date_option(from_date))
    format_output([d.isoformat() for d in dates], resolve_output(output))
