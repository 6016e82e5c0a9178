"""slugpm name - Print a project's name without its date prefix."""

import typer

from slugpm.cli.errors import handle_error
from slugpm.core.exceptions import SlugpmError
from slugpm.core.names import project_display_name


def name(
    dirname: str = typer.Argument(
        ...,
        help="Project directory name or path",
        show_default=False,
    ),
) -> None:
    """
    Print the project name excluding a leading YYYY-MM-DD- prefix.

    Examples:
        slugpm name 2025-09-13-my-project        # → my-project
        slugpm name project/2025-09-13-my-project/
    """
    try:
        display = project_display_name(dirname)
    except SlugpmError as e:
        handle_error(e)
    typer.echo(display)
