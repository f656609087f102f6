"""Reference storefront host implementing the plugin extension points."""

from __future__ import annotations

import logging
import random
import threading
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from linked_products.core.settings import StorefrontSettings, get_settings
from linked_products.events.core.hook import DEFAULT_PRIORITY, HookName
from linked_products.events.core.hook_registry import HookRegistry
from linked_products.events.interfaces.storefront_host import IStorefrontHost, Renderer
from linked_products.models.product import Product
from linked_products.storefront.context import RenderContext
from linked_products.storefront.i18n import TranslationCatalog
from linked_products.storefront.products import is_visible, products_array_orderby
from linked_products.storefront.shortcodes import ShortcodeRegistry
from linked_products.storefront.templates import TemplateRenderer

logger = logging.getLogger(__name__)

# position of the linked-product lists below the product summary
LINKED_PRODUCTS_PRIORITY = 15


def upsell_display(
    host: IStorefrontHost,
    context: RenderContext,
    limit: int = -1,
    columns: int = 4,
    orderby: str = "rand",
    order: str = "desc",
) -> None:
    """Output the up-sells of the current product."""

    product = host.get_current_product(context)
    if product is None:
        return

    args = host.apply_filters(
        HookName.UPSELL_DISPLAY_ARGS,
        {"posts_per_page": limit, "orderby": orderby, "order": order, "columns": columns},
    )
    context.set_loop_prop("name", "up-sells")
    context.set_loop_prop(
        "columns",
        host.apply_filters(HookName.UP_SELLS_COLUMN_COUNT, args.get("columns", columns), context),
    )

    orderby = host.apply_filters(HookName.UP_SELLS_ORDERBY, args.get("orderby", orderby))
    order = args.get("order", order)
    limit = host.apply_filters(HookName.UP_SELLS_TOTAL, args.get("posts_per_page", limit))

    upsells = [host.get_product(context, product_id) for product_id in product.get_upsell_ids()]
    upsells = host.order_products([item for item in upsells if host.is_visible(item)], orderby, order)
    if limit > 0:
        upsells = upsells[:limit]

    context.echo(host.render_template("single-product/up-sells.html", {
        "upsells": upsells,
        "posts_per_page": limit,
        "orderby": orderby,
        "columns": context.get_loop_prop("columns"),
    }))


class StorefrontHost(IStorefrontHost):
    """Storefront wiring hooks, shortcodes, templates and products together."""

    def __init__(
        self,
        *,
        settings: Optional[StorefrontSettings] = None,
        hooks: Optional[HookRegistry] = None,
        shortcodes: Optional[ShortcodeRegistry] = None,
        translations: Optional[TranslationCatalog] = None,
        templates: Optional[TemplateRenderer] = None,
        renderers: Optional[Mapping[str, Renderer]] = None,
        rng: Optional[random.Random] = None,
        hide_out_of_stock: bool = False,
    ) -> None:
        self.settings = settings or get_settings()
        self.hooks = hooks or HookRegistry()
        self.shortcodes = shortcodes or ShortcodeRegistry()
        self.translations = translations or TranslationCatalog()
        self.templates = templates or TemplateRenderer(translate=lambda text: self.translate(text))
        self.hide_out_of_stock = hide_out_of_stock

        if rng is None and self.settings.random_seed is not None:
            rng = random.Random(self.settings.random_seed)
        self._rng = rng

        self._renderers_lock = threading.RLock()
        self._renderers: Dict[str, Renderer] = {"upsell_display": upsell_display}
        self._renderers.update(renderers or {})

        self._register_default_actions()

    def _register_default_actions(self) -> None:
        for renderer_name in ("upsell_display", "cross_sell_display"):
            self.add_action(
                HookName.AFTER_SINGLE_PRODUCT_SUMMARY,
                self._renderer_action(renderer_name),
                LINKED_PRODUCTS_PRIORITY,
                name=renderer_name,
            )

    def _renderer_action(self, renderer_name: str) -> Callable[[RenderContext], None]:
        # resolved at call time so a renderer defined later by a plugin is used
        def _action(context: RenderContext) -> None:
            renderer = self.get_renderer(renderer_name)
            if renderer is None:
                logger.debug("No renderer defined for '%s'", renderer_name)
                return
            renderer(self, context)

        _action.__qualname__ = renderer_name
        return _action

    # Shortcodes

    def add_shortcode(self, tag: str, handler: Callable[..., Optional[str]]) -> None:
        self.shortcodes.add(tag, handler, replace=True)

    def remove_shortcode(self, tag: str) -> bool:
        return self.shortcodes.remove(tag)

    def do_shortcode(self, content: str, context: RenderContext) -> str:
        return self.shortcodes.do_shortcode(content, context)

    # Filters and actions

    def add_filter(self, hook, callback, priority: int = DEFAULT_PRIORITY, name: Optional[str] = None) -> None:
        self.hooks.add_filter(hook, callback, priority, name)

    def remove_filter(self, hook, callback, priority: int = DEFAULT_PRIORITY) -> bool:
        return self.hooks.remove_filter(hook, callback, priority)

    def apply_filters(self, hook, value: Any, *args: Any) -> Any:
        return self.hooks.apply_filters(hook, value, *args)

    def add_action(self, hook, callback, priority: int = DEFAULT_PRIORITY, name: Optional[str] = None) -> None:
        self.hooks.add_action(hook, callback, priority, name)

    def remove_action(self, hook, callback, priority: int = DEFAULT_PRIORITY) -> bool:
        return self.hooks.remove_action(hook, callback, priority)

    def do_action(self, hook, context: RenderContext, *args: Any) -> None:
        self.hooks.do_action(hook, context, *args, skip=context.removed_actions(hook))

    # Translation

    def translate(self, text: str, domain: Optional[str] = None) -> str:
        domain = domain or self.settings.text_domain
        translated = self.translations.gettext(text, domain)
        return self.hooks.apply_filters(HookName.GETTEXT, translated, text, domain)

    # Page context

    def is_single_product(self, context: RenderContext) -> bool:
        return bool(context.is_single_product and context.product is not None)

    def get_current_product(self, context: RenderContext) -> Optional[Product]:
        return context.product

    # Rendering

    def render_template(self, name: str, data: Optional[Mapping[str, Any]] = None) -> str:
        return self.templates.render(name, data)

    def get_renderer(self, name: str) -> Optional[Renderer]:
        with self._renderers_lock:
            return self._renderers.get(name)

    def define_renderer(self, name: str, renderer: Renderer, *, replace: bool = False) -> bool:
        with self._renderers_lock:
            if name in self._renderers and not replace:
                return False
            self._renderers[name] = renderer
        logger.debug("Renderer '%s' defined", name)
        return True

    def undefine_renderer(self, name: str, renderer: Optional[Renderer] = None) -> bool:
        with self._renderers_lock:
            current = self._renderers.get(name)
            if current is None or (renderer is not None and current is not renderer):
                return False
            del self._renderers[name]
        logger.debug("Renderer '%s' removed", name)
        return True

    # Products

    def get_product(self, context: RenderContext, product_id: int) -> Optional[Product]:
        if context.repository is None:
            return None
        return context.repository.get_by_id(product_id)

    def is_visible(self, product: Optional[Product]) -> bool:
        return is_visible(product, hide_out_of_stock=self.hide_out_of_stock)

    def order_products(self, products: Iterable[Product], orderby: str, order: str) -> List[Product]:
        return products_array_orderby(products, orderby, order, rng=self._rng)
