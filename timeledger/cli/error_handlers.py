"""Enhanced error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click
from pydantic import ValidationError

from timeledger.cli.utils.formatters import format_error, format_warning
from timeledger.readers.snapshot_reader import SnapshotError
from timeledger.utils.logging_utils import LogContext, generate_correlation_id


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    exit_code = 1
    label = "Error"

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""

    exit_code = 1
    label = "Configuration Error"


class SnapshotLoadError(CLIError):
    """Error related to reading the snapshot file."""

    exit_code = 2
    label = "Snapshot Error"


class DataValidationError(CLIError):
    """Error related to data validation."""

    exit_code = 3
    label = "Data Validation Error"


class ProcessingError(CLIError):
    """Error related to data processing."""

    exit_code = 4
    label = "Processing Error"


def handle_cli_error(error: BaseException, debug: bool = False) -> int:
    """
    Handle CLI errors with user-friendly messages.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code (1-4 for known error types, 130 for cancellation,
        255 otherwise)
    """
    if isinstance(error, CLIError):
        click.echo(format_error(f"{error.label}: {error.message}"))
        if error.recovery_hint:
            click.echo(format_warning(f"Hint: {error.recovery_hint}"))
        return error.exit_code

    if isinstance(error, SnapshotError):
        click.echo(format_error(f"Snapshot Error: {error}"))
        click.echo(
            format_warning("Hint: Check the --snapshot path or SNAPSHOT_FILE setting")
        )
        return SnapshotLoadError.exit_code

    if isinstance(error, ValidationError):
        click.echo(format_error("Configuration Error: invalid settings"))
        click.echo(str(error))
        return ConfigurationError.exit_code

    if isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"))
        return 130

    click.echo(format_error(f"Unexpected Error: {type(error).__name__}"))
    click.echo(str(error))

    if debug:
        click.echo("\nFull stack trace:")
        click.echo(
            "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
        )
    else:
        click.echo(format_warning("\nRun with --debug flag for full stack trace"))

    return 255


def with_error_handling(debug: bool = False):
    """
    Context manager adding standardized error handling to CLI commands.

    Log records written inside the block carry one correlation id per run.

    Args:
        debug: Whether to show full stack traces

    Returns:
        Context manager that reports errors and exits with their code

    Example:
        @click.command()
        @click.option('--debug', is_flag=True)
        def my_command(debug):
            with with_error_handling(debug):
                # Command implementation
                pass
    """

    class ErrorHandler:
        """Context manager for error handling."""

        def __init__(self, show_debug: bool):
            self.show_debug = show_debug
            self.log_context = LogContext(correlation_id=generate_correlation_id())

        def __enter__(self):
            self.log_context.__enter__()
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            self.log_context.__exit__(exc_type, exc_val, exc_tb)
            if isinstance(exc_val, Exception) and not isinstance(
                exc_val, click.exceptions.Exit
            ):
                exit_code = handle_cli_error(exc_val, self.show_debug)
                sys.exit(exit_code)
            return False

    return ErrorHandler(debug)
