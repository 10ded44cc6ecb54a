"""Detect native-image builds from the buildpack plan."""
from __future__ import annotations

from typing import Iterable

from common.config import BootSettings
from common.schema import PlanEntry
from common.schema.context import as_bool


def is_native_image(plan: Iterable[PlanEntry], settings: BootSettings) -> bool:
    for entry in plan:
        if entry.name != settings.native_plan_entry:
            continue
        if as_bool(entry.metadata.get(settings.native_image_key, False)):
            return True
    return False


__all__ = ["is_native_image"]
