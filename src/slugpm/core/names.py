"""
Project name helpers.

Project directories may carry a ``YYYY-MM-DD-`` prefix; the display name is
the directory name without it.
"""

import re
from pathlib import PurePath

from slugpm.core.exceptions import InvalidInputError

DATE_PREFIX_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}-(.*)$", re.ASCII | re.DOTALL)


def strip_date_prefix(name: str) -> str:
    """
    Remove a leading ``YYYY-MM-DD-`` date prefix from a project name.

    Names without the prefix are returned unchanged. Only the first prefix
    is removed: ``2025-01-01-2025-02-02-x`` becomes ``2025-02-02-x``.

    Example:
        >>> strip_date_prefix("2025-09-13-my-project")
        'my-project'
        >>> strip_date_prefix("my-project")
        'my-project'
    """
    match = DATE_PREFIX_PATTERN.match(name)
    if match is None:
        return name
    return match.group(1)


def project_display_name(path: str) -> str:
    """
    Get the display name for a project directory path.

    Uses the last path component, so ``project/2025-09-13-foo/`` and
    ``2025-09-13-foo`` both give ``foo``.

    Raises:
        InvalidInputError: If the path has no usable basename (``""``, ``.``, ``/``)
    """
    base = PurePath(path).name
    if not base:
        raise InvalidInputError(f"invalid directory name: {path!r}")
    return strip_date_prefix(base)
