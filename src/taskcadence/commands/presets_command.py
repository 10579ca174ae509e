"""Command 'presets' of taskcadence - list built-in recurrence presets."""

import typer

from taskcadence.models.presets import PRESET_LABELS, pattern_from_preset
from taskcadence.services.description import describe
from taskcadence.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .utils import OUTPUT_HELP, resolve_output

app = typer.Typer()


@app.command("presets")
@command_wrapper
def presets_command(
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """List the built-in presets that can be used in place of a pattern."""
    rows = []
    for preset, (label, description) in PRESET_LABELS.items():
        pattern = pattern_from_preset(preset)
        rows.append(
            {
                "name": preset.value,
                "label": label,
                "description": description,
                "schedule": describe(pattern),
            }
        )
    format_output(rows, resolve_output(output))
