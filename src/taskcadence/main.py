"""Main entry point for the TaskCadence CLI."""

import typer

from taskcadence.commands import (
    config_command,
    describe_command,
    due_command,
    next_command,
    presets_command,
    range_command,
    upcoming_command,
    validate_command,
    version_command,
)

app = typer.Typer(
    name="cadence",
    help="Compute, preview and validate recurring task schedules",
    no_args_is_help=True,
)

# Top-level commands
app.command("validate")(validate_command.validate_command)
app.command("next")(next_command.next_command)
app.command("range")(range_command.range_command)
app.command("upcoming")(upcoming_command.upcoming_command)
app.command("describe")(describe_command.describe_command)
app.command("due")(due_command.due_command)
app.command("presets")(presets_command.presets_command)
app.command("version")(version_command.version)

# Subcommand groups
app.add_typer(config_command.app, name="config", help="Configuration management")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
