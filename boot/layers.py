"""Layer contributor handles and the planning of which ones to contribute.

Contributors only describe a layer; creating its contents on disk is left
to the lifecycle that consumes the build result.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

from boot.resolver import DependencyResolver
from boot.result import BOMEntry
from common.config import BootSettings
from common.logging import get_logger
from common.manifest import Manifest
from common.paths import resolve_in_application
from common.schema import BuildContext, BuildpackDependency

LOGGER = get_logger(__name__)


@dataclass
class Layer(ABC):
    """Named layer with its lifecycle flags."""

    launch: bool = True
    build: bool = False
    cache: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Layer directory name."""

    def details(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": self.name,
            "launch": self.launch,
            "build": self.build,
            "cache": self.cache,
        }
        payload.update(self.details())
        return payload


@dataclass
class HelperLayer(Layer):
    """Launch-time helper executables enabled by name."""

    names: List[str] = field(default_factory=list)
    buildpack_version: str = ""

    @property
    def name(self) -> str:
        return "helper"

    def details(self) -> Dict[str, Any]:
        return {"names": list(self.names)}

    def bom_entry(self) -> BOMEntry:
        return BOMEntry(
            name="helper",
            metadata={"layer": "helper", "names": list(self.names), "version": self.buildpack_version},
            launch=True,
            build=False,
        )


@dataclass
class WebApplicationTypeLayer(Layer):
    """Classifies the application as reactive, servlet, or none at launch."""

    classes_dir: Path = Path()
    lib_dir: Path = Path()

    @property
    def name(self) -> str:
        return "web-application-type"

    def details(self) -> Dict[str, Any]:
        return {"classes": str(self.classes_dir), "lib": str(self.lib_dir)}


@dataclass
class SpringCloudBindingsLayer(Layer):
    """Contributes the bindings library next to the application's JARs."""

    dependency: BuildpackDependency = field(default_factory=lambda: BuildpackDependency(id="", version=""))
    lib_dir: Path = Path()

    @property
    def name(self) -> str:
        return self.dependency.id

    def details(self) -> Dict[str, Any]:
        return {"version": self.dependency.version, "lib": str(self.lib_dir)}

    def bom_entry(self) -> BOMEntry:
        dependency = self.dependency
        metadata: Dict[str, Any] = {"id": dependency.id}
        if dependency.name:
            metadata["name"] = dependency.name
        metadata["version"] = dependency.version
        if dependency.uri:
            metadata["uri"] = dependency.uri
        if dependency.sha256:
            metadata["sha256"] = dependency.sha256
        metadata["stacks"] = list(dependency.stacks)
        if dependency.licenses:
            metadata["licenses"] = [dict(entry) for entry in dependency.licenses]
        return BOMEntry(name=dependency.id, metadata=metadata, launch=True, build=False)


def plan_layers(
    context: BuildContext,
    manifest: Manifest,
    settings: BootSettings,
    resolver: DependencyResolver | None = None,
) -> Tuple[List[Layer], List[BOMEntry]]:
    """Return the layers to contribute in order: helper, web type, bindings."""

    application = context.application_path
    lib_dir = resolve_in_application(application, manifest.get(settings.lib_attribute) or settings.default_lib)
    classes_dir = resolve_in_application(
        application, manifest.get(settings.classes_attribute) or settings.default_classes
    )
    resolver = resolver or DependencyResolver.from_context(context)
    bindings = resolver.resolve(settings.bindings_dependency_id)
    if bindings is None:
        LOGGER.warning(
            "No %s dependency available for stack %s; skipping helper and bindings layers",
            settings.bindings_dependency_id,
            context.stack_id or "<unset>",
        )

    layers: List[Layer] = []
    entries: List[BOMEntry] = []

    if bindings is not None:
        helper = HelperLayer(names=list(settings.helper_names), buildpack_version=context.buildpack.version)
        layers.append(helper)
        entries.append(helper.bom_entry())

    layers.append(WebApplicationTypeLayer(classes_dir=classes_dir, lib_dir=lib_dir))

    if bindings is not None:
        bindings_layer = SpringCloudBindingsLayer(dependency=bindings, lib_dir=lib_dir)
        layers.append(bindings_layer)
        entries.append(bindings_layer.bom_entry())

    for layer in layers:
        LOGGER.info("Contributing layer %s", layer.name)
    return layers, entries


__all__ = [
    "HelperLayer",
    "Layer",
    "SpringCloudBindingsLayer",
    "WebApplicationTypeLayer",
    "plan_layers",
]
