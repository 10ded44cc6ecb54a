"""Build logging scoped to the ``boot`` logger tree.

Every module logger hangs under ``BootSettings.logger_name`` so the level
chosen for a build (``BOOT_LOG_LEVEL`` or ``--log-level``) applies to the
whole build without touching the host's root logger level.
"""
from __future__ import annotations

import logging
from typing import Optional

from common.config import BootSettings, get_settings

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_configured = False


def _resolve_level(value: int | str | None) -> int:
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        candidate = logging.getLevelName(value.strip().upper())
        if isinstance(candidate, int):
            return candidate
    return logging.INFO


def _qualify(name: Optional[str], base: str) -> str:
    if not name or name == base or name.startswith(base + "."):
        return name or base
    return f"{base}.{name}"


def configure_logging(level: int | str | None = None, settings: BootSettings | None = None) -> logging.Logger:
    """Set the build logger level; an explicit ``level`` beats ``settings.log_level``."""

    global _configured
    settings = settings or get_settings()
    resolved = _resolve_level(level if level is not None else settings.log_level)
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(format=_FORMAT)
    logger = logging.getLogger(settings.logger_name)
    logger.setLevel(resolved)
    _configured = True
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    settings = get_settings()
    if not _configured:
        configure_logging(settings=settings)
    return logging.getLogger(_qualify(name, settings.logger_name))
