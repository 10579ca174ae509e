"""Command 'range' of taskcadence - list occurrences inside a window."""

import typer

from taskcadence.utils.pattern_input import load_pattern, parse_date_option
from taskcadence.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .utils import OUTPUT_HELP, PATTERN_HELP, get_recurrence_service, resolve_output

app = typer.Typer()


@app.command("range")
@command_wrapper
def range_command(
    pattern: str = typer.Argument(..., help=PATTERN_HELP),
    start: str = typer.Option(..., "--start", "-s", help="First date of the window"),
    end: str = typer.Option(..., "--end", "-e", help="Last date of the window"),
    max_instances: int | None = typer.Option(
        None, "--max", "-n", min=1, help="Maximum number of occurrences"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """List every occurrence from START through END.

    The first occurrence is the start date itself.
    """
    recurrence_pattern = load_pattern(pattern)
    service = get_recurrence_service()

    instances = service.generate_range(
        recurrence_pattern,
        parse_date_option(start),
        parse_date_option(end),
        max_instances,
    )
    format_output([i.model_dump(mode="json") for i in instances], resolve_output(output))
