"""Configuration management commands."""

import typer

from taskcadence.services.config_service import get_config_service
from taskcadence.utils import exit_codes
from taskcadence.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")


@app.command("show")
@command_wrapper
def show_config(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """Show the current configuration."""
    format_output(get_config_service().config.model_dump(), output)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., preview_count)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    config_service = get_config_service()

    parsed_value: str | int = value
    if value.isdigit():
        parsed_value = int(value)

    try:
        config_service.set(key, parsed_value)
    except KeyError as e:
        raise AppError(
            f"Unknown configuration key '{key}'", exit_codes.ERROR_INVALID_ARGS
        ) from e
    except ValueError as e:
        raise AppError(str(e), exit_codes.ERROR_INVALID_ARGS) from e

    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Reset configuration to defaults?"):
        raise typer.Exit(0)
    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
