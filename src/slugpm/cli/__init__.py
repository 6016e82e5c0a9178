"""
slugpm CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from slugpm import __version__
from slugpm.cli import archive, create, name
from slugpm.cli.argv import preprocess_argv
from slugpm.cli.errors import ExitCode, print_error
from slugpm.core.config import SlugpmConfig

# Create the main Typer app
app = typer.Typer(
    name="slugpm",
    help="Project slugs + archiving",
    no_args_is_help=False,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for slugpm commands.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("slugpm").setLevel(level)


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
    directory: Path = typer.Option(
        Path("."),
        "--directory",
        "-C",
        help="Resolve paths and create projects relative to this directory",
    ),
    max_length: Optional[int] = typer.Option(
        None,
        "--max-length",
        help="Maximum project slug length",
    ),
) -> None:
    """
    slugpm - Project slugs + archiving.

    Creates project directories named by slugified titles, archives finished
    files and directories, and prints project names without date prefixes.

    Commands:
        slugpm "My Project"               # create project/my-project
        echo "My Project" | slugpm        # same, title from stdin
        slugpm archive notes.txt          # move to ./archive/notes.txt
        slugpm archive project/foo        # move to ./archive/foo
        echo "log" | slugpm archive x -   # append stdin to ./archive/x
        slugpm name 2025-09-13-foo        # print "foo"
    """
    setup_logging(debug)

    try:
        config = SlugpmConfig(
            base_dir=directory,
            max_slug_length=max_length,
            debug=debug,
        )
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        print_error(f"invalid option {field}: {first['msg']}")
        raise typer.Exit(int(ExitCode.USER_ERROR))

    # Share config with subcommands
    ctx.obj = config


app.command(name="create")(create.create)
app.command(name="archive")(archive.archive)
app.command(name="name")(name.name)


@app.command()
def version() -> None:
    """Show slugpm version and exit."""
    console.print(f"slugpm version {__version__}")


def cli_main() -> None:
    """
    Main CLI entry point.

    The argv preprocessor normalizes common patterns before Typer
    parses them (e.g. ``slugpm --version``, ``slugpm help archive``,
    ``slugpm My Project``).
    """
    sys.argv[1:] = preprocess_argv(sys.argv[1:])
    try:
        app()
    except KeyboardInterrupt:
        raise SystemExit(int(ExitCode.SIGINT))


__all__ = ["app", "cli_main"]
