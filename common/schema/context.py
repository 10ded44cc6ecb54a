"""Build context types and normalization of raw context descriptors."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple


def as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes", "on"}
    return bool(value)


class ContextValidationError(ValueError):
    """Raised when the context payload is missing mandatory fields."""


@dataclass(frozen=True)
class BuildpackDependency:
    """Dependency declared in the buildpack metadata."""

    id: str
    version: str
    stacks: Tuple[str, ...] = ()
    name: Optional[str] = None
    uri: Optional[str] = None
    sha256: Optional[str] = None
    licenses: Tuple[Dict[str, Any], ...] = ()

    def supports_stack(self, stack_id: str) -> bool:
        return stack_id in self.stacks or "*" in self.stacks


@dataclass(frozen=True)
class BuildpackInfo:
    id: str = ""
    name: str = ""
    version: str = ""
    dependencies: Tuple[BuildpackDependency, ...] = ()


@dataclass(frozen=True)
class PlanEntry:
    name: str
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class BuildContext:
    """Everything one build invocation reads besides the filesystem."""

    application_path: Path
    buildpack: BuildpackInfo = field(default_factory=BuildpackInfo)
    stack_id: str = ""
    plan: Tuple[PlanEntry, ...] = ()


def _require_str(payload: Dict[str, Any], key: str, where: str) -> str:
    value = payload.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ContextValidationError(f"{where} requires a non-empty '{key}'")
    return str(value).strip()


def _as_list(value: Any, where: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ContextValidationError(f"{where} must be a list")
    return value


def _normalize_dependency(raw: Any) -> BuildpackDependency:
    if not isinstance(raw, dict):
        raise ContextValidationError("buildpack dependency entries must be mappings")
    stacks = tuple(str(stack) for stack in _as_list(raw.get("stacks"), "dependency.stacks"))
    licenses = tuple(
        entry for entry in _as_list(raw.get("licenses"), "dependency.licenses") if isinstance(entry, dict)
    )
    return BuildpackDependency(
        id=_require_str(raw, "id", "buildpack dependency"),
        version=_require_str(raw, "version", "buildpack dependency"),
        stacks=stacks,
        name=raw.get("name") or None,
        uri=raw.get("uri") or None,
        sha256=raw.get("sha256") or None,
        licenses=licenses,
    )


def _normalize_buildpack(raw: Any) -> BuildpackInfo:
    raw = raw or {}
    if not isinstance(raw, dict):
        raise ContextValidationError("'buildpack' must be a mapping")
    info = raw.get("info") or {}
    metadata = raw.get("metadata") or {}
    if not isinstance(info, dict) or not isinstance(metadata, dict):
        raise ContextValidationError("'buildpack.info' and 'buildpack.metadata' must be mappings")
    dependencies = tuple(
        _normalize_dependency(entry) for entry in _as_list(metadata.get("dependencies"), "buildpack.metadata.dependencies")
    )
    return BuildpackInfo(
        id=str(info.get("id", "")),
        name=str(info.get("name", "")),
        version=str(info.get("version", "")),
        dependencies=dependencies,
    )


def _normalize_plan(raw: Any) -> Tuple[PlanEntry, ...]:
    if isinstance(raw, dict):
        raw = raw.get("entries")
    entries: List[PlanEntry] = []
    for entry in _as_list(raw, "plan.entries"):
        if not isinstance(entry, dict):
            raise ContextValidationError("plan entries must be mappings")
        metadata = entry.get("metadata") or {}
        if not isinstance(metadata, dict):
            raise ContextValidationError("plan entry metadata must be a mapping")
        entries.append(PlanEntry(name=_require_str(entry, "name", "plan entry"), metadata=dict(metadata)))
    return tuple(entries)


def normalize_context(payload: Dict[str, Any], *, base_dir: Path | None = None) -> BuildContext:
    """Build a :class:`BuildContext` from a raw descriptor.

    The descriptor mirrors what the lifecycle hands a buildpack::

        application: path/to/app
        stack_id: io.buildpacks.stacks.bionic
        buildpack:
          info: {id: ..., name: ..., version: ...}
          metadata:
            dependencies:
              - {id: spring-cloud-bindings, version: 1.1.0, stacks: [...]}
        plan:
          entries:
            - {name: spring-boot, metadata: {native-image: true}}

    Relative application paths are anchored at ``base_dir`` when given.
    """

    if not isinstance(payload, dict):
        raise ContextValidationError("Context descriptor must be a mapping")
    application = Path(_require_str(payload, "application", "context"))
    if base_dir is not None and not application.is_absolute():
        application = Path(base_dir) / application
    return BuildContext(
        application_path=application,
        buildpack=_normalize_buildpack(payload.get("buildpack")),
        stack_id=str(payload.get("stack_id") or ""),
        plan=_normalize_plan(payload.get("plan")),
    )


__all__ = [
    "BuildContext",
    "BuildpackDependency",
    "BuildpackInfo",
    "ContextValidationError",
    "PlanEntry",
    "as_bool",
    "normalize_context",
]
