from __future__ import annotations

from pathlib import Path

import pytest

from boot.layers import HelperLayer, Layer, SpringCloudBindingsLayer, WebApplicationTypeLayer, plan_layers
from boot.resolver import DependencyResolver
from common.config import BootSettings, get_settings
from common.manifest import parse_manifest
from common.schema import BuildContext, BuildpackDependency, BuildpackInfo


def _context(tmp_path: Path, *dependencies: BuildpackDependency, stack_id: str = "test-stack-id") -> BuildContext:
    return BuildContext(
        application_path=tmp_path,
        buildpack=BuildpackInfo(id="test-id", version="1.2.3", dependencies=dependencies),
        stack_id=stack_id,
    )


def test_resolver_filters_by_id_and_stack() -> None:
    resolver = DependencyResolver(
        (
            BuildpackDependency(id="spring-cloud-bindings", version="1.0.0", stacks=("other",)),
            BuildpackDependency(id="spring-cloud-bindings", version="1.1.0", stacks=("test-stack-id",)),
            BuildpackDependency(id="unrelated", version="9.0.0", stacks=("test-stack-id",)),
        ),
        "test-stack-id",
    )
    resolved = resolver.resolve("spring-cloud-bindings")
    assert resolved is not None
    assert resolved.version == "1.1.0"
    assert resolver.resolve("missing") is None


def test_resolver_picks_newest_version_and_honours_wildcard_stack() -> None:
    resolver = DependencyResolver(
        (
            BuildpackDependency(id="spring-cloud-bindings", version="1.9.2", stacks=("*",)),
            BuildpackDependency(id="spring-cloud-bindings", version="1.10.0", stacks=("*",)),
        ),
        "any-stack",
    )
    assert resolver.resolve("spring-cloud-bindings").version == "1.10.0"


def test_plan_layers_order_and_bom(tmp_path: Path) -> None:
    dependency = BuildpackDependency(
        id="spring-cloud-bindings",
        version="1.1.0",
        stacks=("test-stack-id",),
        name="Spring Cloud Bindings",
        uri="https://example.com/spring-cloud-bindings-1.1.0.jar",
        sha256="abc123",
    )
    manifest = parse_manifest("Spring-Boot-Version: 1.1.1\nSpring-Boot-Lib: custom/lib\n")

    layers, entries = plan_layers(_context(tmp_path, dependency), manifest, BootSettings())

    assert [type(layer) for layer in layers] == [HelperLayer, WebApplicationTypeLayer, SpringCloudBindingsLayer]
    assert layers[1].lib_dir == tmp_path / "custom" / "lib"
    assert layers[1].classes_dir == tmp_path / "BOOT-INF" / "classes"
    assert layers[2].lib_dir == tmp_path / "custom" / "lib"

    assert [entry.name for entry in entries] == ["helper", "spring-cloud-bindings"]
    assert entries[0].metadata == {"layer": "helper", "names": ["spring-cloud-bindings"], "version": "1.2.3"}
    assert entries[1].metadata == {
        "id": "spring-cloud-bindings",
        "name": "Spring Cloud Bindings",
        "version": "1.1.0",
        "uri": "https://example.com/spring-cloud-bindings-1.1.0.jar",
        "sha256": "abc123",
        "stacks": ["test-stack-id"],
    }
    assert all(entry.launch and not entry.build for entry in entries)


def test_plan_layers_without_bindings_dependency(tmp_path: Path) -> None:
    manifest = parse_manifest("Spring-Boot-Version: 1.1.1\n")
    layers, entries = plan_layers(_context(tmp_path), manifest, BootSettings())
    assert [layer.name for layer in layers] == ["web-application-type"]
    assert entries == []


def test_layer_to_dict() -> None:
    layer = HelperLayer(names=["spring-cloud-bindings"])
    assert layer.to_dict() == {
        "name": "helper",
        "launch": True,
        "build": False,
        "cache": False,
        "names": ["spring-cloud-bindings"],
    }


def test_settings_env_override_renames_bindings() -> None:
    settings = get_settings({"BP_SPRING_CLOUD_BINDINGS_ID": "custom-bindings"})
    assert settings.bindings_dependency_id == "custom-bindings"
    assert settings.helper_names == ("custom-bindings",)
    assert get_settings({}) == BootSettings()


def test_layer_base_requires_a_name() -> None:
    with pytest.raises(TypeError):
        Layer()  # type: ignore[abstract]
