"""Fatal build failures."""
from __future__ import annotations


class BuildError(RuntimeError):
    """Raised when the build step cannot produce a consistent result."""


class ConfigurationMetadataError(BuildError):
    """Raised when configuration metadata JSON or properties are malformed."""


class LayersIndexError(BuildError):
    """Raised when the layers index cannot be parsed into slice groups."""


__all__ = ["BuildError", "ConfigurationMetadataError", "LayersIndexError"]
