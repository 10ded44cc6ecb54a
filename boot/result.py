"""Result types handed back to the lifecycle."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List

if TYPE_CHECKING:
    from boot.layers import Layer


@dataclass(frozen=True)
class Label:
    key: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "value": self.value}


@dataclass
class BOMEntry:
    """Bill-of-materials record; ``launch``/``build`` tag when it applies."""

    name: str
    metadata: Dict[str, Any] = field(default_factory=dict)
    launch: bool = False
    build: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "metadata": self.metadata,
            "launch": self.launch,
            "build": self.build,
        }


@dataclass
class Slice:
    paths: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {"paths": list(self.paths)}


@dataclass
class BuildResult:
    """Ordered build output. An empty result means "not applicable"."""

    labels: List[Label] = field(default_factory=list)
    layers: List["Layer"] = field(default_factory=list)
    bom: List[BOMEntry] = field(default_factory=list)
    slices: List[Slice] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.labels or self.layers or self.bom or self.slices)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "labels": [label.to_dict() for label in self.labels],
            "layers": [layer.to_dict() for layer in self.layers],
            "bom": [entry.to_dict() for entry in self.bom],
            "slices": [item.to_dict() for item in self.slices],
        }


__all__ = ["BOMEntry", "BuildResult", "Label", "Slice"]
