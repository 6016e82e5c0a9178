"""
slugpm archive - Move a file or directory into its archive folder.

- ``slugpm archive <file>``: moves it to ``<parent>/archive/<filename>``
- ``slugpm archive <dir>``:  moves it to ``<parent>/../archive/<dirname>``
- ``slugpm archive <file> -``: appends stdin to ``<parent>/archive/<filename>``
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from slugpm.cli.context import get_config
from slugpm.cli.errors import handle_error
from slugpm.core.archive import archive as archive_path
from slugpm.core.exceptions import SlugpmError
from slugpm.core.fileops import RealFileOps

logger = logging.getLogger(__name__)


def _parse_dash(value: Optional[str]) -> Optional[str]:
    """Only a literal ``-`` is accepted as the trailing argument."""
    if value is not None and value != "-":
        raise typer.BadParameter(f"expected '-', got {value!r}")
    return value


def archive(
    ctx: typer.Context,
    target: Path = typer.Argument(
        ...,
        help="File or directory to archive",
        show_default=False,
    ),
    dash: Optional[str] = typer.Argument(
        None,
        metavar="[-]",
        help="Pass '-' to append stdin to the archived file instead of moving",
        callback=_parse_dash,
        show_default=False,
    ),
) -> None:
    """
    Archive a file or directory and print where it went.

    Files go to an archive folder beside them; directories go to an archive
    folder beside their parent directory.

    Examples:
        slugpm archive notes.txt                 # → ./archive/notes.txt
        slugpm archive project/my-project        # → ./archive/my-project
        echo "done" | slugpm archive log.txt -   # append to ./archive/log.txt
    """
    config = get_config(ctx)
    append = dash == "-"

    # Relative targets resolve against --directory; symlinks and ``..`` are
    # resolved so the archive lands beside the real location
    path = config.resolve(target).resolve()

    data = b""
    if append:
        # Read everything before touching the filesystem
        data = sys.stdin.buffer.read()
        logger.debug("Read %d bytes from stdin", len(data))

    try:
        result = archive_path(
            path,
            append,
            RealFileOps(),
            data=data,
            archive_name=config.archive_name,
        )
    except SlugpmError as e:
        handle_error(e)

    typer.echo(str(result.destination))
