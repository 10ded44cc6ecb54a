"""Image labels derived from the manifest and configuration metadata."""
from __future__ import annotations

from pathlib import Path
from typing import List

from boot.config_metadata import (
    compact_json,
    filter_for_dataflow,
    read_configuration_metadata,
    read_properties,
    split_classes,
)
from boot.result import Label
from common.config import BootSettings
from common.logging import get_logger
from common.manifest import Manifest
from common.paths import get_meta_inf_file

LOGGER = get_logger(__name__)

VERSION_LABEL = "org.springframework.boot.version"
CONFIGURATION_METADATA_LABEL = "org.springframework.boot.spring-configuration-metadata.json"
DATAFLOW_METADATA_LABEL = "org.springframework.cloud.dataflow.spring-configuration-metadata.json"
IMAGE_TITLE_LABEL = "org.opencontainers.image.title"
IMAGE_VERSION_LABEL = "org.opencontainers.image.version"


def build_labels(application: Path, manifest: Manifest, settings: BootSettings) -> List[Label]:
    labels: List[Label] = []

    version = manifest.get(settings.version_attribute)
    if version is not None:
        labels.append(Label(VERSION_LABEL, version))

    metadata = read_configuration_metadata(get_meta_inf_file(application, settings.configuration_metadata_file))
    if metadata is not None:
        labels.append(Label(CONFIGURATION_METADATA_LABEL, compact_json(metadata)))

        properties = read_properties(get_meta_inf_file(application, settings.dataflow_properties_file))
        if properties is not None:
            classes = split_classes(properties.get(settings.dataflow_classes_property))
            filtered = filter_for_dataflow(metadata, classes)
            if filtered is not None:
                labels.append(Label(DATAFLOW_METADATA_LABEL, compact_json(filtered)))
            else:
                LOGGER.debug("No configuration metadata matches Data Flow classes %s", classes)

    title = manifest.get("Implementation-Title")
    if title is not None:
        labels.append(Label(IMAGE_TITLE_LABEL, title))

    implementation_version = manifest.get("Implementation-Version")
    if implementation_version is not None:
        labels.append(Label(IMAGE_VERSION_LABEL, implementation_version))

    for label in labels:
        LOGGER.info("Contributing label %s", label.key)
    return labels


__all__ = [
    "CONFIGURATION_METADATA_LABEL",
    "DATAFLOW_METADATA_LABEL",
    "IMAGE_TITLE_LABEL",
    "IMAGE_VERSION_LABEL",
    "VERSION_LABEL",
    "build_labels",
]
