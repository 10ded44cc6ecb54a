"""Build step: turn an unpacked Spring Boot application into build output."""
from __future__ import annotations

from boot.dependencies import dependencies_bom_entry
from boot.labels import build_labels
from boot.layers import plan_layers
from boot.native import is_native_image
from boot.resolver import DependencyResolver
from boot.result import BuildResult
from boot.slices import plan_slices
from common.config import BootSettings, get_settings
from common.logging import configure_logging, get_logger
from common.manifest import read_manifest
from common.paths import resolve_in_application
from common.schema import BuildContext

LOGGER = get_logger(__name__)


class Build:
    """Decide labels, BOM, layers, and slices for one application."""

    def __init__(self, settings: BootSettings | None = None) -> None:
        self.settings = settings or get_settings()
        if self.settings.log_level is not None:
            configure_logging(settings=self.settings)

    def build(self, context: BuildContext) -> BuildResult:
        settings = self.settings
        application = context.application_path
        manifest = read_manifest(application)

        version = manifest.get(settings.version_attribute)
        if version is None:
            LOGGER.debug("%s not found in manifest; nothing to contribute", settings.version_attribute)
            return BuildResult()

        buildpack = context.buildpack
        LOGGER.info("%s %s (Spring Boot %s)", buildpack.name or buildpack.id or "spring-boot", buildpack.version, version)

        result = BuildResult()
        result.labels.extend(build_labels(application, manifest, settings))

        lib_dir = resolve_in_application(application, manifest.get(settings.lib_attribute) or settings.default_lib)
        result.bom.append(dependencies_bom_entry(lib_dir))

        if is_native_image(context.plan, settings):
            LOGGER.info("Native image build; skipping layers and slices")
            return result

        layers, entries = plan_layers(context, manifest, settings, DependencyResolver.from_context(context))
        result.layers.extend(layers)
        result.bom.extend(entries)

        result.slices.extend(plan_slices(application, manifest, settings))
        return result


__all__ = ["Build"]
