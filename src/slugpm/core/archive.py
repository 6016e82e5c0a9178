"""
Archive routing and execution.

Decides where a file or directory goes when it is archived, then performs
the single mutation through a FileOps implementation:

- file ``a/b/notes.txt``   -> ``a/b/archive/notes.txt`` (sibling archive folder)
- directory ``a/b/mydir``  -> ``a/archive/mydir`` (archive beside the parent)
- ``notes.txt -``          -> stdin appended to ``a/b/archive/notes.txt``

The directory rule puts the archive one level higher than the file rule.
Project directories live in ``project/``, so an archived project lands in
``archive/`` next to ``project/`` rather than inside it.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath

from slugpm.core.exceptions import (
    AppendFailedError,
    DirectoryCreateFailedError,
    InvalidInputError,
    MoveFailedError,
    NotFoundError,
)
from slugpm.core.fileops import FileOps

logger = logging.getLogger(__name__)

DEFAULT_ARCHIVE_NAME = "archive"


class ArchiveOperation(str, Enum):
    """What archiving does with the source."""

    MOVE = "move"
    APPEND_STDIN = "append_stdin"


@dataclass(frozen=True)
class ArchiveTarget:
    """Resolved archive destination for a source path.

    Attributes:
        source: Path being archived
        archive_dir: Archive folder that must exist before the operation
        destination: Final path inside archive_dir
        operation: Move the source, or append stdin to destination
        is_directory: Whether source is a directory
    """

    source: PurePath
    archive_dir: PurePath
    destination: PurePath
    operation: ArchiveOperation
    is_directory: bool = False


def archive_dir_for_file(parent: PurePath, archive_name: str = DEFAULT_ARCHIVE_NAME) -> PurePath:
    """Archive folder for a file whose directory is parent."""
    return parent / archive_name


def archive_dir_for_dir(parent: PurePath, archive_name: str = DEFAULT_ARCHIVE_NAME) -> PurePath:
    """
    Archive folder for a directory whose parent directory is parent.

    At the filesystem root the parent is its own parent, so ``/x`` archives
    into ``/archive``.
    """
    return parent.parent / archive_name


def resolve_archive_target(
    path: PurePath,
    append: bool,
    ops: FileOps,
    archive_name: str = DEFAULT_ARCHIVE_NAME,
) -> ArchiveTarget:
    """
    Work out where path goes when archived. Performs no mutation.

    Args:
        path: File or directory to archive
        append: True when the caller passed ``-`` (append stdin mode)
        ops: Filesystem used to inspect path
        archive_name: Name of the archive folder

    Returns:
        ArchiveTarget describing the operation

    Raises:
        NotFoundError: If path does not exist
        InvalidInputError: If append mode is requested for a directory
    """
    if not ops.exists(path):
        raise NotFoundError(path)

    is_directory = ops.is_dir(path)

    if append:
        if is_directory:
            raise InvalidInputError(f"append mode requires a file, got directory: {path}")
        archive_dir = archive_dir_for_file(path.parent, archive_name)
        operation = ArchiveOperation.APPEND_STDIN
    elif is_directory:
        archive_dir = archive_dir_for_dir(path.parent, archive_name)
        operation = ArchiveOperation.MOVE
    else:
        archive_dir = archive_dir_for_file(path.parent, archive_name)
        operation = ArchiveOperation.MOVE

    target = ArchiveTarget(
        source=path,
        archive_dir=archive_dir,
        destination=archive_dir / path.name,
        operation=operation,
        is_directory=is_directory,
    )
    logger.debug(
        "Resolved archive target: %s %s -> %s",
        target.operation.value,
        target.source,
        target.destination,
    )
    return target


def archive(
    path: PurePath,
    append: bool,
    ops: FileOps,
    data: bytes = b"",
    archive_name: str = DEFAULT_ARCHIVE_NAME,
) -> ArchiveTarget:
    """
    Archive path: move it into its archive folder, or append data there.

    Args:
        path: File or directory to archive
        append: Append data to the archived copy instead of moving path
        ops: Filesystem to operate on
        data: Bytes to append in append mode (already read from stdin)
        archive_name: Name of the archive folder

    Returns:
        The ArchiveTarget that was carried out

    Raises:
        NotFoundError: If path does not exist
        InvalidInputError: If append mode is requested for a directory
        DirectoryCreateFailedError: If the archive folder can't be created
        MoveFailedError: If the move fails (existing destination, cross-device, ...)
        AppendFailedError: If the archived file can't be opened or written
    """
    target = resolve_archive_target(path, append, ops, archive_name)

    try:
        ops.create_dir_all(target.archive_dir)
    except OSError as e:
        raise DirectoryCreateFailedError(target.archive_dir, e) from e

    if target.operation is ArchiveOperation.APPEND_STDIN:
        try:
            ops.append_bytes(target.destination, data)
        except OSError as e:
            raise AppendFailedError(target.destination, e) from e
        logger.debug("Appended %d bytes to %s", len(data), target.destination)
    else:
        try:
            ops.move(target.source, target.destination)
        except OSError as e:
            raise MoveFailedError(target.source, target.destination, e) from e
        logger.debug("Moved %s -> %s", target.source, target.destination)

    return target
