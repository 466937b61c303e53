"""Configuration schemas and loading."""

from .schemas import GeometrySettings
from .loader import SettingsLoader, get_settings, use_settings

__all__ = [
    "GeometrySettings",
    "SettingsLoader",
    "get_settings",
    "use_settings",
]
