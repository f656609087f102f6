"""Extension points a storefront host offers to plugins.

Plugins depend on this interface only. A host adapter implements every
method; the version string changes whenever a method is added or its
contract changes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Mapping, Optional

from linked_products.events.core.hook import DEFAULT_PRIORITY, HookName
from linked_products.models.product import Product
from linked_products.storefront.context import RenderContext

HOST_INTERFACE_VERSION = "1.0"

# renderer(host, context, **kwargs) writes its markup with context.echo
Renderer = Callable[..., None]


class IStorefrontHost(ABC):
    """Interface implemented by every storefront host adapter."""

    interface_version: str = HOST_INTERFACE_VERSION

    # Shortcodes

    @abstractmethod
    def add_shortcode(self, tag: str, handler: Callable[..., Optional[str]]) -> None:
        pass

    @abstractmethod
    def remove_shortcode(self, tag: str) -> bool:
        pass

    # Filters and actions

    @abstractmethod
    def add_filter(
        self,
        hook: str | HookName,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        name: Optional[str] = None,
    ) -> None:
        pass

    @abstractmethod
    def remove_filter(
        self, hook: str | HookName, callback: Callable[..., Any] | str, priority: int = DEFAULT_PRIORITY
    ) -> bool:
        pass

    @abstractmethod
    def apply_filters(self, hook: str | HookName, value: Any, *args: Any) -> Any:
        pass

    @abstractmethod
    def add_action(
        self,
        hook: str | HookName,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        name: Optional[str] = None,
    ) -> None:
        pass

    @abstractmethod
    def remove_action(
        self, hook: str | HookName, callback: Callable[..., Any] | str, priority: int = DEFAULT_PRIORITY
    ) -> bool:
        pass

    @abstractmethod
    def do_action(self, hook: str | HookName, context: RenderContext, *args: Any) -> None:
        """Run an action, skipping what ``context`` suppressed for this render."""
        pass

    # Translation

    @abstractmethod
    def translate(self, text: str, domain: Optional[str] = None) -> str:
        """Look ``text`` up and pass the result through the ``gettext`` filter."""
        pass

    # Page context

    @abstractmethod
    def is_single_product(self, context: RenderContext) -> bool:
        pass

    @abstractmethod
    def get_current_product(self, context: RenderContext) -> Optional[Product]:
        pass

    # Rendering

    @abstractmethod
    def render_template(self, name: str, data: Optional[Mapping[str, Any]] = None) -> str:
        pass

    @abstractmethod
    def get_renderer(self, name: str) -> Optional[Renderer]:
        pass

    def has_renderer(self, name: str) -> bool:
        return self.get_renderer(name) is not None

    @abstractmethod
    def define_renderer(self, name: str, renderer: Renderer, *, replace: bool = False) -> bool:
        """Install ``renderer`` under ``name``; returns False if one existed and ``replace`` is off."""
        pass

    @abstractmethod
    def undefine_renderer(self, name: str, renderer: Optional[Renderer] = None) -> bool:
        pass

    # Products

    @abstractmethod
    def get_product(self, context: RenderContext, product_id: int) -> Optional[Product]:
        pass

    @abstractmethod
    def is_visible(self, product: Optional[Product]) -> bool:
        pass

    @abstractmethod
    def order_products(self, products: Iterable[Product], orderby: str, order: str) -> List[Product]:
        pass
