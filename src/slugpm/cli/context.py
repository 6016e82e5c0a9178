"""Access to the per-invocation config stored on the Typer context."""

import typer

from slugpm.core.config import SlugpmConfig


def get_config(ctx: typer.Context) -> SlugpmConfig:
    """Return the config set by the app callback, or defaults when invoked directly."""
    obj = ctx.find_root().obj
    if isinstance(obj, SlugpmConfig):
        return obj
    return SlugpmConfig()
