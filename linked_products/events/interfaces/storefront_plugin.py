"""Interface definition for storefront plugins."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .storefront_host import IStorefrontHost

PluginMetadata = Dict[str, Any]


class StorefrontPlugin(ABC):
    """Interface every plugin must implement."""

    def __init__(self, *, name: Optional[str] = None) -> None:
        self._name = name or self.__class__.__name__

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def register(self, host: "IStorefrontHost") -> None:
        """Attach the plugin's shortcodes, filters and actions to ``host``."""
        raise NotImplementedError

    @abstractmethod
    def unregister(self, host: "IStorefrontHost") -> None:
        """Detach everything :meth:`register` attached."""
        raise NotImplementedError

    def get_metadata(self) -> PluginMetadata:
        return {}

    def on_load(self) -> None:
        return None

    def on_unload(self) -> None:
        return None
