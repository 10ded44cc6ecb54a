"""Spring configuration metadata compaction and Data Flow filtering.

``META-INF/spring-configuration-metadata.json`` is re-serialized without
insignificant whitespace so it fits in an image label. When the companion
``dataflow-configuration-metadata.properties`` names the classes Spring
Cloud Data Flow should expose, a second document restricted to those
classes is produced.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import javaproperties

from boot.errors import ConfigurationMetadataError


def compact_json(document: Any) -> str:
    """Serialize ``document`` with no whitespace, keeping key order."""

    return json.dumps(document, separators=(",", ":"), ensure_ascii=False)


def read_configuration_metadata(path: Path) -> Optional[Dict[str, Any]]:
    if not path.exists():
        return None
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationMetadataError(f"Unable to parse {path}: {exc}") from exc
    if not isinstance(document, dict):
        raise ConfigurationMetadataError(f"{path} must contain a JSON object")
    return document


def read_properties(path: Path) -> Optional[Dict[str, str]]:
    """Parse a Java ``.properties`` file into a dict.

    Continuation lines, ``=``/``:``/whitespace separators and backslash
    escapes follow ``java.util.Properties``.
    """

    if not path.exists():
        return None
    try:
        return javaproperties.loads(path.read_text(encoding="utf-8"))
    except javaproperties.InvalidUEscapeError as exc:
        raise ConfigurationMetadataError(f"Unable to parse {path}: {exc}") from exc


def split_classes(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [token.strip() for token in value.split(",") if token.strip()]


def _entries(document: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    value = document.get(key) or []
    if not isinstance(value, list):
        raise ConfigurationMetadataError(f"'{key}' in configuration metadata must be a list")
    return [entry for entry in value if isinstance(entry, dict)]


def filter_for_dataflow(document: Dict[str, Any], classes: List[str]) -> Optional[Dict[str, Any]]:
    """Return the subset of ``document`` owned by ``classes``.

    Groups and properties are kept when their ``sourceType`` is listed;
    hints follow the properties they describe. ``None`` when nothing matches.
    """

    wanted = set(classes)
    groups = [entry for entry in _entries(document, "groups") if entry.get("sourceType") in wanted]
    properties = [entry for entry in _entries(document, "properties") if entry.get("sourceType") in wanted]
    if not groups and not properties:
        return None
    property_names = {entry.get("name") for entry in properties}
    hints = [entry for entry in _entries(document, "hints") if entry.get("name") in property_names]

    filtered: Dict[str, Any] = {}
    if groups:
        filtered["groups"] = groups
    if properties:
        filtered["properties"] = properties
    if hints:
        filtered["hints"] = hints
    return filtered


__all__ = [
    "compact_json",
    "filter_for_dataflow",
    "read_configuration_metadata",
    "read_properties",
    "split_classes",
]
