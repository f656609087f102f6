"""
Linked Products Shortcode Plugin

Adds the [product_cross_sells] and [product_upsells] shortcodes. When a
shortcode renders a list, the default list below the product summary is
suppressed for that render, and the optional "columns" attribute drives the
list's column count and item widths.
"""
from __future__ import annotations

import functools
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from linked_products.events.core.hook import HookName, ShortcodeTag
from linked_products.events.interfaces import IStorefrontHost, StorefrontPlugin
from linked_products.events.plugins.linked_products_shortcode.columns import (
    DEFAULT_COLUMNS,
    build_column_css,
    parse_columns,
)
from linked_products.events.plugins.linked_products_shortcode.fallback import cross_sell_display
from linked_products.events.plugins.linked_products_shortcode.labels import relabel_strings
from linked_products.storefront.context import RenderContext
from linked_products.storefront.shortcodes import shortcode_atts

logger = logging.getLogger(__name__)

CROSS_SELL_CSS_CLASS = "wc_cross_sell_shortcode"
UPSELL_CSS_CLASS = "wc_upsell_shortcode"

CROSS_SELL_RENDERER = "cross_sell_display"
UPSELL_RENDERER = "upsell_display"

# priority of the default lists on after_single_product_summary
DEFAULT_LIST_PRIORITY = 15

SHORTCODE_DEFAULTS = {"columns": str(DEFAULT_COLUMNS)}


@dataclass(slots=True)
class HostRegistration:
    """Callbacks bound to one host and whether the fallback renderer came from us."""

    render_cross_sells: Callable[..., str]
    render_upsells: Callable[..., str]
    relabel_strings: Callable[[str, str, str], str]
    installed_fallback: bool = False


class LinkedProductsShortcodePlugin(StorefrontPlugin):
    """Coordinates the linked-product shortcodes with the host's default lists.

    One instance may serve several hosts; everything that needs a host is
    bound to it at registration and kept in a per-host record.
    """

    VERSION = "1.0.0"

    _instance: Optional["LinkedProductsShortcodePlugin"] = None

    def __init__(self) -> None:
        super().__init__(name="LinkedProductsShortcodePlugin")
        self._registrations: Dict[IStorefrontHost, HostRegistration] = {}
        self._lock = threading.RLock()

    @classmethod
    def instance(cls) -> "LinkedProductsShortcodePlugin":
        """The one instance used by the application."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def is_registered(self, host: IStorefrontHost) -> bool:
        with self._lock:
            return host in self._registrations

    def register(self, host: IStorefrontHost) -> None:
        with self._lock:
            if host in self._registrations:
                logger.debug("%s already registered with %r", self.name, host)
                return
            registration = HostRegistration(
                render_cross_sells=functools.partial(self.render_cross_sells, host),
                render_upsells=functools.partial(self.render_upsells, host),
                relabel_strings=functools.partial(self.relabel_strings, host),
            )
            self._registrations[host] = registration

        host.add_shortcode(ShortcodeTag.PRODUCT_CROSS_SELLS, registration.render_cross_sells)
        host.add_filter(HookName.CROSS_SELLS_COLUMN_COUNT, self.adjust_cross_sell_columns)
        host.add_action(HookName.FOOTER_SCRIPTS, self.emit_cross_sell_column_css)

        host.add_shortcode(ShortcodeTag.PRODUCT_UPSELLS, registration.render_upsells)
        host.add_filter(HookName.UP_SELLS_COLUMN_COUNT, self.adjust_upsell_columns)
        host.add_action(HookName.FOOTER_SCRIPTS, self.emit_upsell_column_css)

        host.add_filter(HookName.GETTEXT, registration.relabel_strings, name="relabel_strings")

        registration.installed_fallback = host.define_renderer(CROSS_SELL_RENDERER, cross_sell_display)
        logger.info(
            "%s registered (fallback cross-sell renderer %s)",
            self.name,
            "installed" if registration.installed_fallback else "not needed",
        )

    def unregister(self, host: IStorefrontHost) -> None:
        with self._lock:
            registration = self._registrations.pop(host, None)
        if registration is None:
            logger.debug("%s is not registered with %r", self.name, host)
            return

        host.remove_shortcode(ShortcodeTag.PRODUCT_CROSS_SELLS)
        host.remove_filter(HookName.CROSS_SELLS_COLUMN_COUNT, self.adjust_cross_sell_columns)
        host.remove_action(HookName.FOOTER_SCRIPTS, self.emit_cross_sell_column_css)

        host.remove_shortcode(ShortcodeTag.PRODUCT_UPSELLS)
        host.remove_filter(HookName.UP_SELLS_COLUMN_COUNT, self.adjust_upsell_columns)
        host.remove_action(HookName.FOOTER_SCRIPTS, self.emit_upsell_column_css)

        host.remove_filter(HookName.GETTEXT, registration.relabel_strings)

        if registration.installed_fallback:
            host.undefine_renderer(CROSS_SELL_RENDERER, cross_sell_display)
        logger.info("%s unregistered", self.name)

    def get_metadata(self) -> Dict[str, Any]:
        return {
            "version": self.VERSION,
            "category": "catalog",
            "description": "Shortcodes rendering product cross-sells and up-sells in page content",
            "shortcodes": [tag.value for tag in ShortcodeTag],
        }

    # Shortcodes

    def render_cross_sells(
        self,
        host: IStorefrontHost,
        attributes: Optional[Mapping[Any, Any]],
        context: RenderContext,
        content: Optional[str] = None,
    ) -> str:
        """Output the cross-sells of the product page in a shortcode container."""
        if not host.is_single_product(context):
            return ""

        columns = self._resolve_columns(attributes)
        self._remove_default_list(context, CROSS_SELL_RENDERER)
        context.overrides.cross_sell_columns = columns
        return self._render_list(host, context, CROSS_SELL_RENDERER, CROSS_SELL_CSS_CLASS)

    def render_upsells(
        self,
        host: IStorefrontHost,
        attributes: Optional[Mapping[Any, Any]],
        context: RenderContext,
        content: Optional[str] = None,
    ) -> str:
        """Output the up-sells of the product page in a shortcode container."""
        if not host.is_single_product(context):
            return ""

        columns = self._resolve_columns(attributes)
        self._remove_default_list(context, UPSELL_RENDERER)
        context.overrides.upsell_columns = columns
        return self._render_list(host, context, UPSELL_RENDERER, UPSELL_CSS_CLASS)

    # Column filters

    def adjust_cross_sell_columns(self, columns: Any, context: RenderContext) -> Any:
        if context.overrides.cross_sell_columns is None:
            return columns
        return context.overrides.cross_sell_columns

    def adjust_upsell_columns(self, columns: Any, context: RenderContext) -> Any:
        if context.overrides.upsell_columns is None:
            return columns
        return context.overrides.upsell_columns

    # Footer styles

    def emit_cross_sell_column_css(self, context: RenderContext) -> None:
        if context.overrides.cross_sell_columns is None:
            return
        context.echo(build_column_css(CROSS_SELL_CSS_CLASS, context.overrides.cross_sell_columns))

    def emit_upsell_column_css(self, context: RenderContext) -> None:
        if context.overrides.upsell_columns is None:
            return
        context.echo(build_column_css(UPSELL_CSS_CLASS, context.overrides.upsell_columns))

    # Labels

    def relabel_strings(self, host: IStorefrontHost, translated_text: str, text: str, domain: str) -> str:
        return relabel_strings(translated_text, text, domain, translate=host.translate)

    # Helpers

    def _resolve_columns(self, attributes: Optional[Mapping[Any, Any]]) -> int:
        merged = shortcode_atts(SHORTCODE_DEFAULTS, attributes)
        return parse_columns(merged["columns"])

    def _remove_default_list(self, context: RenderContext, renderer_name: str) -> None:
        context.remove_action(HookName.AFTER_SINGLE_PRODUCT_SUMMARY, renderer_name, DEFAULT_LIST_PRIORITY)

    def _render_list(self, host: IStorefrontHost, context: RenderContext, renderer_name: str, css_class: str) -> str:
        renderer = host.get_renderer(renderer_name)
        with context.capture() as output:
            if renderer is not None:
                renderer(host, context)
        return f'<div class="{css_class}">{output.text}</div>'


def get_plugin() -> StorefrontPlugin:
    """Factory function to get plugin instance."""
    return LinkedProductsShortcodePlugin.instance()


PLUGIN_CLASS = LinkedProductsShortcodePlugin
