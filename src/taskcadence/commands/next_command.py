"""Command 'next' of taskcadence - compute the next occurrence."""

import typer

from taskcadence.utils.pattern_input import load_pattern, parse_date_option
from taskcadence.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .utils import OUTPUT_HELP, PATTERN_HELP, get_recurrence_service, resolve_output

app = typer.Typer()


@app.command("next")
@command_wrapper
def next_command(
    pattern: str = typer.Argument(..., help=PATTERN_HELP),
    from_date: str | None = typer.Option(
        None, "--from", "-f", help="Anchor date (YYYY-MM-DD), defaults to today"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """Show the occurrence that follows the anchor date."""
    recurrence_pattern = load_pattern(pattern)
    anchor = parse_date_option(from_date)
    service = get_recurrence_service()

    next_date = service.next_occurrence(recurrence_pattern, anchor)
    output_format = resolve_output(output)
    if output_format in ("json", "yaml"):
        format_output(
            {"from": anchor.isoformat(), "next": next_date.isoformat()}, output_format
        )
    else:
        format_output(next_date.isoformat(), output_format)
