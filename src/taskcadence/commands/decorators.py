"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from taskcadence.exceptions import InvalidPatternError, PatternParseError
from taskcadence.services.config_service import get_config_service
from taskcadence.utils import exit_codes
from taskcadence.utils.logger import get_logger
from taskcadence.utils.ui.formatters import console, format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = exit_codes.ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable):
    """Wrap a command with logging and exit-code mapping."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(get_config_service().config.log_level)
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except InvalidPatternError as e:
            logger.warning("command rejected pattern: %s - %s", cmd, str(e))
            format_error("Invalid recurrence pattern")
            for error in e.errors:
                console.print(f"  • {error}")
            raise typer.Exit(code=exit_codes.ERROR_INVALID_ARGS) from e

        except PatternParseError as e:
            logger.warning("command input error: %s - %s", cmd, str(e))
            format_error(str(e))
            raise typer.Exit(code=exit_codes.ERROR_INVALID_ARGS) from e

        except FileNotFoundError as e:
            logger.warning("command input missing: %s - %s", cmd, str(e))
            format_error(str(e))
            raise typer.Exit(code=exit_codes.ERROR_NOT_FOUND) from e

        except AppError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) [%s] - %s",
                cmd,
                elapsed,
                exit_codes.get_exit_code_name(e.exit_code),
                str(e),
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) [%s] - %s\n%s",
                cmd,
                elapsed,
                exit_codes.get_exit_code_name(exit_codes.ERROR_GENERAL),
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=exit_codes.ERROR_GENERAL) from e

    return wrapper
