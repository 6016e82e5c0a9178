"""
Project directory creation.

A project is a directory named by the slug of its title, under ``project/``.
"""

import logging
from pathlib import PurePath

from slugpm.core.exceptions import DirectoryCreateFailedError, InvalidInputError
from slugpm.core.fileops import FileOps
from slugpm.core.slug import slugify

logger = logging.getLogger(__name__)

DEFAULT_PROJECTS_DIR = "project"


def project_path(
    title: str,
    base_dir: PurePath = PurePath("."),
    projects_dir: str = DEFAULT_PROJECTS_DIR,
    max_slug_length: int | None = None,
) -> PurePath:
    """
    Compute the directory for a project title without creating it.

    Raises:
        InvalidInputError: If the title has no sluggable characters
    """
    slug = slugify(title, max_slug_length)
    if not slug:
        raise InvalidInputError(f"title has no usable characters for a directory name: {title!r}")
    return base_dir / projects_dir / slug


def create_project(
    title: str,
    ops: FileOps,
    base_dir: PurePath = PurePath("."),
    projects_dir: str = DEFAULT_PROJECTS_DIR,
    max_slug_length: int | None = None,
) -> PurePath:
    """
    Create ``<base_dir>/<projects_dir>/<slug>`` with all intermediate directories.

    Creating a project that already exists succeeds and returns the same path.

    Args:
        title: Project title
        ops: Filesystem to create the directory in
        base_dir: Directory the projects folder lives in
        projects_dir: Name of the projects folder
        max_slug_length: Optional cap on the slug length

    Returns:
        Path of the project directory

    Raises:
        InvalidInputError: If the title has no sluggable characters
        DirectoryCreateFailedError: If the directory can't be created
    """
    path = project_path(title, base_dir, projects_dir, max_slug_length)
    try:
        ops.create_dir_all(path)
    except OSError as e:
        raise DirectoryCreateFailedError(path, e) from e
    logger.debug("Created project directory %s for title %r", path, title)
    return path
