"""Plugin lifecycle: discovery, activation on the host, enable/disable."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from types import ModuleType
from typing import Dict, Optional

from linked_products.core.exceptions import ExceptionFactory

from .config import PluginSettings, StorefrontConfig, StorefrontConfigLoader
from .interfaces import IStorefrontHost, StorefrontPlugin
from .plugin_loader import PluginDescriptor, PluginLoader

logger = logging.getLogger(__name__)

PLUGIN_FACTORIES = ("get_plugin", "create_plugin", "plugin_factory")
PLUGIN_CLASSES = ("PLUGIN_CLASS", "Plugin", "PLUGIN")


def instantiate_plugin(module: ModuleType) -> StorefrontPlugin:
    """Build the plugin ``module`` exposes; factory functions win over classes."""

    factory = next(
        (getattr(module, attr) for attr in PLUGIN_FACTORIES if callable(getattr(module, attr, None))),
        None,
    )
    if factory is None:
        candidates = (getattr(module, attr, None) for attr in PLUGIN_CLASSES)
        factory = next(
            (cls for cls in candidates if isinstance(cls, type) and issubclass(cls, StorefrontPlugin)),
            None,
        )
    if factory is None:
        raise ValueError(f"Plugin module '{module.__name__}' exposes no factory or StorefrontPlugin class")

    plugin = factory()
    if not isinstance(plugin, StorefrontPlugin):
        raise TypeError(f"'{module.__name__}' produced {type(plugin).__name__}, not a StorefrontPlugin")
    return plugin


@dataclass(slots=True)
class LoadedPlugin:
    name: str
    module: ModuleType
    instance: StorefrontPlugin
    descriptor: PluginDescriptor
    active: bool = False


class PluginManager:
    """Keep the host's registered plugins in line with the configuration."""

    def __init__(
        self,
        host: IStorefrontHost,
        config_loader: StorefrontConfigLoader,
        plugin_loader: PluginLoader,
    ) -> None:
        self._host = host
        self._config_loader = config_loader
        self._plugin_loader = plugin_loader
        self._lock = threading.RLock()

        self._config: Optional[StorefrontConfig] = None
        self._loaded_plugins: Dict[str, LoadedPlugin] = {}

    def initialise(self) -> StorefrontConfig:
        return self.reload()

    def reload(self) -> StorefrontConfig:
        with self._lock:
            return self._reload_internal()

    def _reload_internal(self) -> StorefrontConfig:
        """Reload without taking the lock; callers must hold it."""
        config = self._config_loader.refresh()
        self._config = config

        self._plugin_loader.set_directories(config.plugin_directories)
        discovered = self._plugin_loader.discover()

        removed = set(self._loaded_plugins) - set(discovered)
        for name in removed:
            self._unload_plugin(name)

        for name, descriptor in discovered.items():
            self._load_or_refresh_plugin(name, descriptor, config)

        return config.model_copy(deep=True)

    def enable_plugin(self, plugin_name: str) -> StorefrontConfig:
        return self._set_enabled(plugin_name, True)

    def disable_plugin(self, plugin_name: str) -> StorefrontConfig:
        return self._set_enabled(plugin_name, False)

    def _set_enabled(self, plugin_name: str, enabled: bool) -> StorefrontConfig:
        with self._lock:
            if plugin_name not in self._loaded_plugins:
                raise ExceptionFactory.plugin_not_found(plugin_name)
            config = self._ensure_config()
            settings = config.plugins.get(plugin_name, PluginSettings())
            settings.enabled = enabled
            config.plugins[plugin_name] = settings
            self._config_loader.save(config)
            return self._reload_internal()

    def get_status(self) -> Dict[str, Dict[str, object]]:
        with self._lock:
            return {
                name: {
                    "enabled": plugin.active,
                    "source": plugin.descriptor.source,
                    "config": self._ensure_config().get_plugin_settings(name),
                    "metadata": plugin.instance.get_metadata(),
                }
                for name, plugin in self._loaded_plugins.items()
            }

    def get_loaded_plugins(self) -> Dict[str, LoadedPlugin]:
        with self._lock:
            return dict(self._loaded_plugins)

    def _load_or_refresh_plugin(
        self,
        name: str,
        descriptor: PluginDescriptor,
        config: StorefrontConfig,
    ) -> None:
        existing = self._loaded_plugins.get(name)
        enabled = config.is_plugin_enabled(name)

        if existing and existing.descriptor == descriptor:
            if existing.active != enabled:
                if enabled:
                    self._activate(existing)
                else:
                    self._deactivate(existing)
            return

        if existing:
            self._unload_plugin(name)

        module = self._plugin_loader.load_module(descriptor)
        loaded = LoadedPlugin(
            name=name,
            module=module,
            instance=instantiate_plugin(module),
            descriptor=descriptor,
        )
        self._loaded_plugins[name] = loaded

        if enabled:
            self._activate(loaded)

    def _activate(self, plugin: LoadedPlugin) -> None:
        plugin.instance.register(self._host)
        plugin.active = True
        plugin.instance.on_load()
        logger.info("Plugin '%s' activated", plugin.name)

    def _deactivate(self, plugin: LoadedPlugin) -> None:
        try:
            plugin.instance.on_unload()
        finally:
            plugin.instance.unregister(self._host)
            plugin.active = False
        logger.info("Plugin '%s' deactivated", plugin.name)

    def _unload_plugin(self, name: str) -> None:
        plugin = self._loaded_plugins.pop(name, None)
        if plugin and plugin.active:
            self._deactivate(plugin)

    def _ensure_config(self) -> StorefrontConfig:
        if not self._config:
            self._config = self._config_loader.load(use_cache=True)
        return self._config
