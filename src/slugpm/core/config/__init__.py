"""
Configuration model.

This module provides the Pydantic model holding slugpm's runtime settings.
"""

from .models import SlugpmConfig

__all__ = [
    "SlugpmConfig",
]
