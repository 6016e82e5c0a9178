"""
Standardized error handling and exit codes for slugpm CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands. Errors go to stderr
so stdout only ever carries the resulting path or name.
"""

from enum import IntEnum
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from slugpm.core.exceptions import (
    AppendFailedError,
    DirectoryCreateFailedError,
    InvalidInputError,
    MoveFailedError,
    NotFoundError,
    SlugpmError,
)

err_console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for slugpm CLI operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Filesystem operation failed (not found, create/move/append failed)."""

    USER_ERROR = 2
    """Missing or unusable input (actionable by user)."""

    SIGINT = 130
    """Terminated by SIGINT (Ctrl+C) - Unix standard."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "not found: notes.txt",
        ...     solution="ls  # check the path",
        ... )
    """
    err_console.print(f"[red]Error:[/red] {escape(problem)}", soft_wrap=True)

    if reason:
        err_console.print(f"[dim]{escape(reason)}[/dim]", soft_wrap=True)

    if solution:
        err_console.print(f"[cyan]→ Try:[/cyan] {escape(solution)}", soft_wrap=True)


def exit_code_for(error: SlugpmError) -> ExitCode:
    """Map a slugpm exception to its exit code."""
    if isinstance(error, InvalidInputError):
        return ExitCode.USER_ERROR
    return ExitCode.GENERAL_ERROR


def _solution_for(error: SlugpmError) -> str | None:
    if isinstance(error, NotFoundError):
        return "check the path exists (paths are relative to --directory)"
    if isinstance(error, MoveFailedError):
        if isinstance(error.cause, FileExistsError):
            return f"rename or remove the existing {error.dst}"
        return "archive within one filesystem and check permissions"
    if isinstance(error, (DirectoryCreateFailedError, AppendFailedError)):
        return "check permissions on the parent directory"
    return None


def handle_error(error: SlugpmError) -> NoReturn:
    """Print a slugpm exception and exit with its mapped code."""
    print_error(str(error), solution=_solution_for(error))
    raise typer.Exit(int(exit_code_for(error)))
