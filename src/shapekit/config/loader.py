"""
YAML settings loader and the active settings used by the geometry types.
"""

import logging
from pathlib import Path
import threading
import yaml

from .schemas import GeometrySettings

logger = logging.getLogger(__name__)

_active_settings = GeometrySettings()
_settings_lock = threading.Lock()


def get_settings() -> GeometrySettings:
    """Return the settings currently in effect."""
    return _active_settings


def use_settings(settings: GeometrySettings) -> GeometrySettings:
    """
    Install `settings` as the active settings.

    Settings are process-wide and read on every Direction construction.
    Install them once at startup, before shapes are built on other threads.
    GeometrySettings is frozen, so the active object itself never changes.

    Returns:
        The previously active settings, so callers can restore them.
    """
    global _active_settings
    with _settings_lock:
        previous = _active_settings
        _active_settings = settings
    logger.debug("Geometry settings changed: %s", settings)
    return previous


class SettingsLoader:
    """Load and validate geometry settings from YAML files."""

    @staticmethod
    def _read(filepath: Path) -> dict:
        if not filepath.exists():
            raise FileNotFoundError(f"Settings file not found: {filepath}")

        with open(filepath, 'r') as f:
            raw_config = yaml.safe_load(f)

        # An empty file means "all defaults"
        return raw_config or {}

    @staticmethod
    def load(filepath: str | Path, activate: bool = False) -> GeometrySettings:
        """
        Load a settings file.

        Args:
            filepath: Path to YAML settings file
            activate: Also install the loaded settings as the active settings

        Returns:
            Validated settings
        """
        filepath = Path(filepath)
        settings = GeometrySettings(**SettingsLoader._read(filepath))
        logger.info("Loaded geometry settings from %s", filepath)

        if activate:
            use_settings(settings)

        return settings

    @staticmethod
    def validate(filepath: str | Path) -> bool:
        """
        Validate settings file without activating it.

        Returns:
            True if valid, raises ValidationError otherwise
        """
        GeometrySettings(**SettingsLoader._read(Path(filepath)))
        return True
