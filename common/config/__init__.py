"""Configuration helpers for build settings and env overrides."""

from .settings import BootSettings, get_settings

__all__ = ["BootSettings", "get_settings"]
