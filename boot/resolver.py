"""Resolve buildpack-declared dependencies for the active stack."""
from __future__ import annotations

import re
from typing import List, Optional, Tuple

from common.logging import get_logger
from common.schema import BuildContext, BuildpackDependency

LOGGER = get_logger(__name__)


def _version_key(version: str) -> Tuple[Tuple[int, object], ...]:
    # numeric segments compare as integers, so "1.10.0" > "1.9.2"
    parts: List[Tuple[int, object]] = []
    for token in re.split(r"[.\-+_]", version):
        if token.isdigit():
            parts.append((1, int(token)))
        elif token:
            parts.append((0, token.lower()))
    return tuple(parts)


class DependencyResolver:
    """Pick buildpack dependencies by id for the build's stack."""

    def __init__(self, dependencies: Tuple[BuildpackDependency, ...], stack_id: str) -> None:
        self.dependencies = dependencies
        self.stack_id = stack_id

    @classmethod
    def from_context(cls, context: BuildContext) -> "DependencyResolver":
        return cls(context.buildpack.dependencies, context.stack_id)

    def candidates(self, dependency_id: str) -> List[BuildpackDependency]:
        return [
            dependency
            for dependency in self.dependencies
            if dependency.id == dependency_id and dependency.supports_stack(self.stack_id)
        ]

    def resolve(self, dependency_id: str) -> Optional[BuildpackDependency]:
        """Return the newest matching dependency, or ``None``."""

        candidates = self.candidates(dependency_id)
        if not candidates:
            LOGGER.debug("No %s dependency declared for stack %s", dependency_id, self.stack_id)
            return None
        return max(candidates, key=lambda dependency: _version_key(dependency.version))


__all__ = ["DependencyResolver"]
