"""Reader for JAR packaging manifests (``META-INF/MANIFEST.MF``).

The format is ``Key: Value`` per line, with values wrapped onto following
lines that start with a single space. Lines that do not look like an
attribute are ignored: manifests come from upstream packaging tools and a
stray line should not make an otherwise usable application undetectable.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from common.logging import get_logger
from common.paths import get_manifest_path

LOGGER = get_logger(__name__)

_ATTRIBUTE = re.compile(r"^(?P<key>[A-Za-z0-9][A-Za-z0-9_-]*):(?: (?P<value>.*))?$")


@dataclass(frozen=True)
class Manifest:
    """Immutable, ordered view over manifest attributes."""

    attributes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def get(self, key: str) -> Optional[str]:
        return self.attributes.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.attributes

    def __iter__(self) -> Iterator[str]:
        return iter(self.attributes)

    def __len__(self) -> int:
        return len(self.attributes)

    def is_empty(self) -> bool:
        return not self.attributes


def parse_manifest(text: str) -> Manifest:
    attributes: Dict[str, str] = {}
    current: Optional[str] = None
    for raw in text.splitlines():
        if raw.startswith(" "):
            if current is not None:
                attributes[current] += raw[1:]
            continue
        match = _ATTRIBUTE.match(raw)
        if match is None:
            # blank lines end a section; anything else is noise
            current = None
            continue
        current = match.group("key")
        attributes[current] = match.group("value") or ""
    return Manifest(MappingProxyType(attributes))


def read_manifest(application: Path) -> Manifest:
    """Return the application's manifest, or an empty one when absent."""

    path = get_manifest_path(application)
    if not path.exists():
        LOGGER.debug("No manifest at %s", path)
        return Manifest()
    return parse_manifest(path.read_text(encoding="utf-8"))


__all__ = ["Manifest", "parse_manifest", "read_manifest"]
