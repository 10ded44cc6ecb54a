"""Spring Boot build-phase decision engine."""
from .build import Build
from .errors import BuildError, ConfigurationMetadataError, LayersIndexError
from .result import BOMEntry, BuildResult, Label, Slice

__all__ = [
    "BOMEntry",
    "Build",
    "BuildError",
    "BuildResult",
    "ConfigurationMetadataError",
    "Label",
    "LayersIndexError",
    "Slice",
]
