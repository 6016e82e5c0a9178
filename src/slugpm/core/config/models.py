"""
Runtime configuration model for slugpm.

Settings come only from the command line (global options); there are no
config files or environment variables. Validation via Pydantic.
"""

from pathlib import Path, PurePath
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from slugpm.core.archive import DEFAULT_ARCHIVE_NAME
from slugpm.core.projects import DEFAULT_PROJECTS_DIR


class SlugpmConfig(BaseModel):
    """
    Settings for one slugpm invocation.

    Built by the CLI callback and shared with subcommands via ``ctx.obj``.
    """
    base_dir: Path = Field(
        default=Path("."),
        description="Directory that relative paths and the projects folder are resolved against"
    )
    projects_dir: str = Field(
        default=DEFAULT_PROJECTS_DIR,
        min_length=1,
        description="Folder (relative to base_dir) holding project directories"
    )
    archive_name: str = Field(
        default=DEFAULT_ARCHIVE_NAME,
        min_length=1,
        description="Name of the archive folder"
    )
    max_slug_length: Optional[int] = Field(
        default=None,
        ge=1,
        description="Cap on project slug length (None for unlimited)"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    model_config = ConfigDict(
        validate_assignment=True,  # Validate on field assignment
    )

    @field_validator("projects_dir")
    @classmethod
    def validate_projects_dir(cls, v: str) -> str:
        """Projects folder must stay inside base_dir."""
        path = PurePath(v)
        if path.is_absolute():
            raise ValueError("projects_dir must be a relative path")
        if ".." in path.parts:
            raise ValueError("projects_dir must not contain '..'")
        return v

    @field_validator("archive_name")
    @classmethod
    def validate_archive_name(cls, v: str) -> str:
        """Archive folder name must be a single path component."""
        if v in (".", "..") or "/" in v or "\\" in v:
            raise ValueError("archive_name must be a plain folder name")
        return v

    def resolve(self, path: PurePath) -> Path:
        """Resolve a user-supplied path against base_dir."""
        return self.base_dir / path
