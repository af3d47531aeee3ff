"""Configuration for the compatibility layer."""

from .options import EngineOptions
from .settings import Settings, get_settings, load_paths, reset_load_paths


__all__ = [
    "EngineOptions",
    "Settings",
    "get_settings",
    "load_paths",
    "reset_load_paths",
]
