"""
Typed exceptions for slugpm operations.

Core functions raise these; the CLI maps them to messages and exit codes.
Filesystem failures are chained from the underlying ``OSError``.
"""

from pathlib import PurePath


class SlugpmError(Exception):
    """Base exception for slugpm errors."""


class NotFoundError(SlugpmError):
    """Source path does not exist."""

    def __init__(self, path: PurePath) -> None:
        self.path = path
        super().__init__(f"not found: {path}")


class DirectoryCreateFailedError(SlugpmError):
    """A directory (project or archive) could not be created."""

    def __init__(self, path: PurePath, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"create failed: {path}: {_describe(cause)}")


class MoveFailedError(SlugpmError):
    """Moving a file or directory into the archive failed."""

    def __init__(self, src: PurePath, dst: PurePath, cause: OSError) -> None:
        self.src = src
        self.dst = dst
        self.cause = cause
        super().__init__(f"move failed: {src} -> {dst}: {_describe(cause)}")


class AppendFailedError(SlugpmError):
    """Appending stdin to an archived file failed."""

    def __init__(self, path: PurePath, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"append failed: {path}: {_describe(cause)}")


class InvalidInputError(SlugpmError):
    """The invocation is missing input or the input is unusable."""


def _describe(error: OSError) -> str:
    """Short description of an OSError without the repeated filename."""
    return error.strerror or str(error) or type(error).__name__
