"""Command 'describe' of taskcadence"""

import typer

from taskcadence.utils.pattern_input import load_pattern
from taskcadence.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .utils import OUTPUT_HELP, PATTERN_HELP, get_recurrence_service, resolve_output

app = typer.Typer()


@app.command("describe")
@command_wrapper
def describe_command(
    pattern: str = typer.Argument(..., help=PATTERN_HELP),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """Describe a recurrence pattern in plain words."""
    recurrence_pattern = load_pattern(pattern)
    service = get_recurrence_service()

    text = service.describe(recurrence_pattern)
    output_format = resolve_output(output)
    if output_format == "table":
        format_output(text, output_format)
    else:
        format_output(
            {
                "description": text,
                "frequency": recurrence_pattern.frequency,
                "pattern": recurrence_pattern.to_record(),
            },
            output_format,
        )
