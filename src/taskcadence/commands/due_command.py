"""Command 'due' of taskcadence - decide whether a new instance should be created."""

import typer

from taskcadence.utils.pattern_input import (
    load_instances,
    load_pattern,
    parse_date_option,
)
from taskcadence.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .utils import OUTPUT_HELP, PATTERN_HELP, get_recurrence_service, resolve_output

app = typer.Typer()


@app.command("due")
@command_wrapper
def due_command(
    pattern: str = typer.Argument(..., help=PATTERN_HELP),
    instances: str | None = typer.Option(
        None,
        "--instances",
        "-i",
        help="Existing instances as a JSON list (inline or file path)",
    ),
    on: str | None = typer.Option(
        None, "--on", help="Date to check (YYYY-MM-DD), defaults to today"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """Check whether a new instance is due for a recurring task."""
    recurrence_pattern = load_pattern(pattern)
    existing = load_instances(instances)
    check_date = parse_date_option(on)
    service = get_recurrence_service()

    due = service.should_generate(existing, recurrence_pattern, check_date)
    output_format = resolve_output(output)
    if output_format in ("json", "yaml"):
        format_output(
            {
                "due": due,
                "check_date": check_date.isoformat(),
                "existing_instances": len(existing),
            },
            output_format,
        )
    else:
        format_output("due" if due else "not due", output_format)
