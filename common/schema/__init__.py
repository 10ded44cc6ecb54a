"""Validation helpers for build context payloads."""
from .context import (
    BuildContext,
    BuildpackDependency,
    BuildpackInfo,
    ContextValidationError,
    PlanEntry,
    normalize_context,
)

__all__ = [
    "BuildContext",
    "BuildpackDependency",
    "BuildpackInfo",
    "ContextValidationError",
    "PlanEntry",
    "normalize_context",
]
