"""Build settings shared by the label, dependency, and layer planners.

Defaults follow the Spring Boot executable JAR layout; a handful of values
can be overridden through environment variables so the same code can serve
forks of the buildpack that ship the bindings library under another id.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class BootSettings:
    """Simple container for build constants."""

    version_attribute: str = "Spring-Boot-Version"
    lib_attribute: str = "Spring-Boot-Lib"
    classes_attribute: str = "Spring-Boot-Classes"
    layers_index_attribute: str = "Spring-Boot-Layers-Index"
    default_lib: str = "BOOT-INF/lib"
    default_classes: str = "BOOT-INF/classes"
    configuration_metadata_file: str = "spring-configuration-metadata.json"
    dataflow_properties_file: str = "dataflow-configuration-metadata.properties"
    dataflow_classes_property: str = "configuration-properties.classes"
    bindings_dependency_id: str = "spring-cloud-bindings"
    helper_names: Tuple[str, ...] = field(default=("spring-cloud-bindings",))
    native_plan_entry: str = "spring-boot"
    native_image_key: str = "native-image"
    logger_name: str = "boot"
    log_level: Optional[str] = None


_DEFAULTS = BootSettings()


def get_settings(environ: Optional[Mapping[str, str]] = None) -> BootSettings:
    """Return the build settings with environment overrides applied.

    Parameters
    ----------
    environ: Mapping, optional
        Source of overrides. Defaults to ``os.environ``.
        ``BP_SPRING_CLOUD_BINDINGS_ID`` renames both the resolved dependency
        and the helper; ``BOOT_LOG_LEVEL`` sets the build log level.
    """

    env = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}
    bindings = (env.get("BP_SPRING_CLOUD_BINDINGS_ID") or "").strip()
    if bindings:
        overrides.update(bindings_dependency_id=bindings, helper_names=(bindings,))
    level = (env.get("BOOT_LOG_LEVEL") or "").strip()
    if level:
        overrides["log_level"] = level
    if not overrides:
        return _DEFAULTS
    return replace(_DEFAULTS, **overrides)
