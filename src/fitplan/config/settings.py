"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".fitplan"


def default_config_path() -> Path:
    return _default_config_dir() / "config.yaml"


@dataclass
class DefaultsConfig:
    """Default values for wizard inputs and output."""

    activity_level: float = 1.5
    weekly_difference: int = 5
    output_format: str = "table"  # "table" or "json"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    json: bool = False


@dataclass
class Settings:
    """Main application settings."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.fitplan/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        # Parse defaults
        if "defaults" in data:
            def_data = data["defaults"] or {}
            if "activity_level" in def_data:
                settings.defaults.activity_level = float(def_data["activity_level"])
            if "weekly_difference" in def_data:
                settings.defaults.weekly_difference = int(def_data["weekly_difference"])
            if "output_format" in def_data:
                settings.defaults.output_format = def_data["output_format"]

        # Parse logging config
        if "logging" in data:
            log_data = data["logging"] or {}
            if "level" in log_data:
                settings.logging.level = str(log_data["level"]).upper()
            if "json" in log_data:
                settings.logging.json = bool(log_data["json"])

        return settings

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.fitplan/config.yaml
        """
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "defaults": {
                "activity_level": self.defaults.activity_level,
                "weekly_difference": self.defaults.weekly_difference,
                "output_format": self.defaults.output_format,
            },
            "logging": {
                "level": self.logging.level,
                "json": self.logging.json,
            },
        }

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings(config_path: Optional[Path] = None) -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load(config_path)
    return _settings
