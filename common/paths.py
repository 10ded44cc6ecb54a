"""Path helpers to keep the application layout consistent."""
from __future__ import annotations

from pathlib import Path


META_INF = "META-INF"
MANIFEST_FILENAME = "MANIFEST.MF"


def get_manifest_path(application: Path) -> Path:
    return Path(application) / META_INF / MANIFEST_FILENAME


def get_meta_inf_file(application: Path, name: str) -> Path:
    return Path(application) / META_INF / name


def resolve_in_application(application: Path, relative: str) -> Path:
    """Return ``relative`` anchored at the application root.

    Manifest attributes carry forward-slash paths such as ``BOOT-INF/lib``;
    a leading slash is tolerated and stripped.
    """

    cleaned = (relative or "").strip().lstrip("/")
    return Path(application).joinpath(*[part for part in cleaned.split("/") if part])
