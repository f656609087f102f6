"""Configuration helpers for the plugin system."""

from .config_loader import StorefrontConfigLoader
from .config_schema import PluginSettings, StorefrontConfig

__all__ = ["StorefrontConfigLoader", "PluginSettings", "StorefrontConfig"]
