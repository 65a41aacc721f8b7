"""Configuration and logging setup."""

from __future__ import annotations

from fitplan.config.log import configure_logging
from fitplan.config.settings import Settings, get_settings, reload_settings

__all__ = ["Settings", "configure_logging", "get_settings", "reload_settings"]
