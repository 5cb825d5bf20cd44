"""
Settings management for Raster Toolkit.

Handles persistent storage of user preferences in ~/.raster_toolkit/settings.ini.
"""

from configparser import ConfigParser, NoOptionError, NoSectionError
from pathlib import Path
from typing import Optional, Union

from ..core import InvalidArgumentError
from ..logger import get_logger
from ..oiio.ppm import VARIANTS

_logger = get_logger("settings")

# Per-user location, outside the installed package
DEFAULT_SETTINGS_FILE = Path.home() / ".raster_toolkit" / "settings.ini"


class Settings:
    """Manages application settings via settings.ini."""

    SETTINGS_FILE = DEFAULT_SETTINGS_FILE

    # Section and keys
    SECTION = "preferences"
    KEY_IMPORT_DIR = "last_import_dir"
    KEY_EXPORT_DIR = "last_export_dir"
    KEY_PPM_VARIANT = "ppm_variant"
    KEY_LOG_LEVEL = "log_level"

    DEFAULTS = {
        KEY_IMPORT_DIR: "",
        KEY_EXPORT_DIR: "",
        KEY_PPM_VARIANT: "P3",
        KEY_LOG_LEVEL: "INFO",
    }

    def __init__(self, settings_file: Optional[Union[str, Path]] = None):
        """Initialize settings from file or create defaults."""
        self.settings_file = Path(settings_file) if settings_file else self.SETTINGS_FILE
        self.config = ConfigParser()
        self._load()

    def _load(self) -> None:
        """Load settings from file or create defaults."""
        if self.settings_file.exists():
            self.config.read(self.settings_file)
            _logger.debug("settings loaded: %s", self.settings_file)
        else:
            self.config.add_section(self.SECTION)
            for key, value in self.DEFAULTS.items():
                self.config.set(self.SECTION, key, value)
            self._save()

    def _save(self) -> None:
        """Save settings to file."""
        self.settings_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, "w") as f:
            self.config.write(f)
        _logger.debug("settings saved: %s", self.settings_file)

    def _get(self, key: str) -> str:
        try:
            return self.config.get(self.SECTION, key)
        except (NoSectionError, NoOptionError):
            return self.DEFAULTS[key]

    def _set(self, key: str, value: str) -> None:
        if not self.config.has_section(self.SECTION):
            self.config.add_section(self.SECTION)
        self.config.set(self.SECTION, key, value)
        self._save()

    def get_import_dir(self) -> Optional[str]:
        """Get last import directory."""
        return self._get(self.KEY_IMPORT_DIR) or None

    def set_import_dir(self, path: Union[str, Path]) -> None:
        """Set and save last import directory."""
        self._set(self.KEY_IMPORT_DIR, str(path))

    def get_export_dir(self) -> Optional[str]:
        """Get last export directory."""
        return self._get(self.KEY_EXPORT_DIR) or None

    def set_export_dir(self, path: Union[str, Path]) -> None:
        """Set and save last export directory."""
        self._set(self.KEY_EXPORT_DIR, str(path))

    def get_ppm_variant(self) -> str:
        """Get PPM variant used on export (default: 'P3')."""
        variant = self._get(self.KEY_PPM_VARIANT).strip().upper()
        if variant not in VARIANTS:
            _logger.warning("saved ppm_variant invalid: %s", variant)
            return self.DEFAULTS[self.KEY_PPM_VARIANT]
        return variant

    def set_ppm_variant(self, variant: str) -> None:
        """Set and save PPM variant ('P3' or 'P6')."""
        variant = (variant or "").strip().upper()
        if variant not in VARIANTS:
            raise InvalidArgumentError(f"Unsupported PPM variant: {variant!r}")
        self._set(self.KEY_PPM_VARIANT, variant)

    def get_log_level(self) -> str:
        """Get log level name (default: 'INFO')."""
        return self._get(self.KEY_LOG_LEVEL)

    def set_log_level(self, level: str) -> None:
        """Set and save log level name."""
        self._set(self.KEY_LOG_LEVEL, level.upper())
