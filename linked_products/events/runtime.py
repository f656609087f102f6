"""Runtime helpers to access the storefront singletons."""

from __future__ import annotations

from typing import Optional

from .plugin_manager import PluginManager
from linked_products.storefront.host import StorefrontHost

_storefront_host: Optional[StorefrontHost] = None
_plugin_manager: Optional[PluginManager] = None


def set_storefront_host(host: Optional[StorefrontHost]) -> None:
    global _storefront_host
    _storefront_host = host


def get_storefront_host() -> StorefrontHost:
    if _storefront_host is None:
        raise RuntimeError("StorefrontHost has not been initialised")
    return _storefront_host


def set_plugin_manager(manager: Optional[PluginManager]) -> None:
    global _plugin_manager
    _plugin_manager = manager


def get_plugin_manager() -> PluginManager:
    if _plugin_manager is None:
        raise RuntimeError("PluginManager has not been initialised")
    return _plugin_manager
