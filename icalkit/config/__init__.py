"""Configuration for icalkit."""

from .settings import ICalKitSettings, find_config_file, get_settings, reset_settings

__all__ = ["ICalKitSettings", "find_config_file", "get_settings", "reset_settings"]
