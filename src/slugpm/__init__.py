"""
slugpm - Project slugs and archiving.

A CLI tool that creates slug-named project directories and moves finished
work into sibling ``archive`` folders.
"""

__version__ = "0.1.0"

# Re-export core API for convenience
from slugpm.core.archive import ArchiveOperation, ArchiveTarget, archive
from slugpm.core.names import strip_date_prefix
from slugpm.core.projects import create_project
from slugpm.core.slug import slugify

__all__ = [
    "ArchiveOperation",
    "ArchiveTarget",
    "archive",
    "create_project",
    "slugify",
    "strip_date_prefix",
    "__version__",
]
