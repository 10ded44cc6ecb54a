"""Runtime dependency listing for the ``dependencies`` BOM entry."""
from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Optional

from boot.result import BOMEntry
from common.digest import sha256_file
from common.logging import get_logger

LOGGER = get_logger(__name__)

# shortest name, so the version is the longest suffix that starts with a digit
_JAR_PATTERN = re.compile(r"^(?P<name>.+?)-(?P<version>\d[^/]*)\.jar$")


@dataclass(frozen=True)
class MavenJAR:
    name: str
    version: str
    sha256: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def parse_jar_filename(filename: str) -> Optional[tuple[str, str]]:
    match = _JAR_PATTERN.match(filename)
    if match is None:
        return None
    return match.group("name"), match.group("version")


def list_maven_jars(lib_dir: Path) -> List[MavenJAR]:
    """Return one record per ``<name>-<version>.jar`` directly in ``lib_dir``."""

    if not lib_dir.is_dir():
        LOGGER.debug("Dependency directory %s not present", lib_dir)
        return []
    jars: List[MavenJAR] = []
    for path in sorted(lib_dir.iterdir(), key=lambda item: item.name):
        if not path.is_file():
            continue
        parsed = parse_jar_filename(path.name)
        if parsed is None:
            LOGGER.debug("Skipping %s: not a versioned JAR", path.name)
            continue
        name, version = parsed
        jars.append(MavenJAR(name=name, version=version, sha256=sha256_file(path)))
    return jars


def dependencies_bom_entry(lib_dir: Path) -> BOMEntry:
    jars = list_maven_jars(lib_dir)
    LOGGER.info("Found %d dependencies in %s", len(jars), lib_dir)
    return BOMEntry(
        name="dependencies",
        metadata={"layer": "application", "dependencies": [jar.to_dict() for jar in jars]},
        launch=True,
        build=False,
    )


__all__ = ["MavenJAR", "dependencies_bom_entry", "list_maven_jars", "parse_jar_filename"]
