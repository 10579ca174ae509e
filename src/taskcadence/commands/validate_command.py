"""Command 'validate' of taskcadence - check a recurrence pattern."""

import typer

from taskcadence.services.validator import parse_pattern
from taskcadence.utils import exit_codes
from taskcadence.utils.pattern_input import load_pattern_record
from taskcadence.utils.ui.console import get_console
from taskcadence.utils.ui.formatters import format_error, format_output, format_success

from .decorators import command_wrapper
from .utils import OUTPUT_HELP, PATTERN_HELP, resolve_output

app = typer.Typer()
console = get_console()


@app.command("validate")
@command_wrapper
def validate_command(
    pattern: str = typer.Argument(..., help=PATTERN_HELP),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """Validate a recurrence pattern and list every problem found.

    Exits with code 2 when the pattern is invalid.
    """
    _, result = parse_pattern(load_pattern_record(pattern))
    output_format = resolve_output(output)

    if output_format in ("json", "yaml"):
        format_output(result.model_dump(), output_format)
    elif result.valid:
        format_success("Pattern is valid")
    else:
        format_error("Pattern is invalid")
        for error in result.errors:
            console.print(f"  • {error}")

    if not result.valid:
        raise typer.Exit(code=exit_codes.ERROR_INVALID_ARGS)
