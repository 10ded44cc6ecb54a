"""Slices from a Spring Boot ``layers.idx`` file.

The index is a YAML sequence of single-key mappings::

    - "dependencies":
      - "BOOT-INF/lib/"
    - "application":
      - "BOOT-INF/classes/"

Each group becomes one slice; group names are only logged.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, List, Tuple

import yaml

from boot.errors import LayersIndexError
from boot.result import Slice
from common.config import BootSettings
from common.logging import get_logger
from common.manifest import Manifest
from common.paths import resolve_in_application

LOGGER = get_logger(__name__)


def _groups(document: Any, path: Path) -> List[Tuple[str, List[str]]]:
    if document is None:
        return []
    if not isinstance(document, list):
        raise LayersIndexError(f"Layers index {path} must be a list of groups")
    groups: List[Tuple[str, List[str]]] = []
    for entry in document:
        if not isinstance(entry, dict):
            raise LayersIndexError(f"Layers index {path} contains a non-mapping entry: {entry!r}")
        for name, paths in entry.items():
            if paths is None:
                paths = []
            if not isinstance(paths, list):
                raise LayersIndexError(f"Layer {name!r} in {path} must list paths")
            invalid = [item for item in paths if not isinstance(item, str)]
            if invalid:
                raise LayersIndexError(f"Layer {name!r} in {path} has non-string paths: {invalid!r}")
            groups.append((str(name), list(paths)))
    return groups


def read_layers_index(path: Path) -> List[Tuple[str, List[str]]]:
    """Return ``(group, paths)`` pairs in file order; empty when absent."""

    if not path.exists():
        LOGGER.debug("Layers index %s not present", path)
        return []
    try:
        document = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise LayersIndexError(f"Unable to parse layers index {path}: {exc}") from exc
    return _groups(document, path)


def plan_slices(application: Path, manifest: Manifest, settings: BootSettings) -> List[Slice]:
    index = manifest.get(settings.layers_index_attribute)
    if not index:
        return []
    groups = read_layers_index(resolve_in_application(application, index))
    if groups:
        LOGGER.info("Creating slices from layers index")
    slices: List[Slice] = []
    for name, paths in groups:
        LOGGER.info("  %s", name)
        slices.append(Slice(paths=paths))
    return slices


__all__ = ["plan_slices", "read_layers_index"]
