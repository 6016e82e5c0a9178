"""
slugpm create - Create a project directory from a title.

This is the default command: ``slugpm My Project`` and
``echo "My Project" | slugpm`` both land here.
"""

import sys
from typing import Optional, TextIO

import typer

from slugpm.cli.context import get_config
from slugpm.cli.errors import handle_error
from slugpm.core.exceptions import InvalidInputError, SlugpmError
from slugpm.core.fileops import RealFileOps
from slugpm.core.projects import create_project


def read_title(words: list[str], stdin: TextIO) -> str:
    """
    Get the project title from arguments or piped stdin.

    Args:
        words: Positional arguments, joined with spaces when present
        stdin: Input stream, only read when it is not a terminal

    Returns:
        Title text

    Raises:
        InvalidInputError: If there are no words and stdin is a terminal or empty
    """
    if words:
        return " ".join(words)

    if stdin.isatty():
        raise InvalidInputError("missing <title>: pass it as an argument or pipe it on stdin")

    # Only the first line names the project
    lines = stdin.read().splitlines()
    title = lines[0].strip() if lines else ""
    if not title:
        raise InvalidInputError("stdin is empty")
    return title


def create(
    ctx: typer.Context,
    title: Optional[list[str]] = typer.Argument(
        None,
        help="Project title (read from stdin if not provided)",
        show_default=False,
    ),
) -> None:
    """
    Create project/<slug> from a title and print its path.

    Examples:
        slugpm "My Project"           # → project/my-project
        slugpm create Café Crème      # → project/cafe-creme
        echo "My Project" | slugpm
    """
    config = get_config(ctx)

    try:
        text = read_title(title or [], sys.stdin)
        path = create_project(
            text,
            RealFileOps(),
            base_dir=config.base_dir,
            projects_dir=config.projects_dir,
            max_slug_length=config.max_slug_length,
        )
    except SlugpmError as e:
        handle_error(e)

    typer.echo(str(path))
