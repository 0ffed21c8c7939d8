"""Configuration for termarcade."""

from termarcade.config.settings import Settings, DisplaySettings, GameSettings, get_settings

__all__ = ["Settings", "DisplaySettings", "GameSettings", "get_settings"]
