"""Single product page lifecycle."""

from __future__ import annotations

import logging

from linked_products.core.exceptions import ExceptionFactory
from linked_products.events.core.hook import HookName
from linked_products.repository.interfaces.product_repository_interface import IProductRepository
from linked_products.storefront.context import RenderContext
from linked_products.storefront.host import StorefrontHost

logger = logging.getLogger(__name__)


class ProductPageRenderer:
    """Render a product page: content shortcodes, summary actions, footer scripts."""

    def __init__(self, host: StorefrontHost) -> None:
        self._host = host

    def render(self, product_id: int, repository: IProductRepository) -> str:
        product = repository.get_by_id(product_id)
        if product is None or product.status != "publish":
            raise ExceptionFactory.product_not_found(product_id)

        context = RenderContext(product=product, is_single_product=True, repository=repository)
        return self.render_context(context)

    def render_context(self, context: RenderContext) -> str:
        host = self._host

        content = host.do_shortcode(context.product.description or "", context)

        host.do_action(HookName.AFTER_SINGLE_PRODUCT_SUMMARY, context)
        after_summary = context.flush()

        host.do_action(HookName.FOOTER_SCRIPTS, context)
        footer = context.flush()

        logger.info("Rendered product page %s", context.product.id_product)
        return host.render_template("single-product.html", {
            "product": context.product,
            "content": content,
            "after_summary": after_summary,
            "footer": footer,
        })
