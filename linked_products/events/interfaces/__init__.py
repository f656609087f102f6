"""Interfaces for the storefront plugin system."""

from .storefront_plugin import StorefrontPlugin, PluginMetadata
from .storefront_host import HOST_INTERFACE_VERSION, IStorefrontHost

__all__ = ["StorefrontPlugin", "PluginMetadata", "IStorefrontHost", "HOST_INTERFACE_VERSION"]
