"""Cross-sell renderer installed when the host does not provide one."""
from __future__ import annotations

from linked_products.events.core.hook import HookName
from linked_products.events.interfaces.storefront_host import IStorefrontHost
from linked_products.storefront.context import RenderContext


def cross_sell_display(
    host: IStorefrontHost,
    context: RenderContext,
    limit: int = 2,
    columns: int = 2,
    orderby: str = "rand",
    order: str = "desc",
) -> None:
    """Output the cross-sells of the current product.

    Args:
        host: storefront the products and templates come from.
        context: render the markup is echoed into.
        limit: maximum number of products, 0 or less for all of them.
        columns: column count before the ``cross_sells_column_count`` filter.
        orderby: ordering key, ``rand`` for random order.
        order: ``asc`` or ``desc``.
    """
    product = host.get_current_product(context)
    if product is None:
        return

    # legacy filter controlling every list argument at once
    args = host.apply_filters(HookName.CROSS_SELL_DISPLAY_ARGS, {
        "posts_per_page": limit,
        "orderby": orderby,
        "columns": columns,
    })
    context.set_loop_prop("name", "cross-sells")
    context.set_loop_prop(
        "columns",
        host.apply_filters(HookName.CROSS_SELLS_COLUMN_COUNT, args.get("columns", columns), context),
    )

    orderby = host.apply_filters(HookName.CROSS_SELLS_ORDERBY, args.get("orderby", orderby))
    limit = host.apply_filters(HookName.CROSS_SELLS_TOTAL, args.get("posts_per_page", limit))

    cross_sells = [host.get_product(context, product_id) for product_id in product.get_cross_sell_ids()]
    cross_sells = host.order_products([item for item in cross_sells if host.is_visible(item)], orderby, order)
    if limit > 0:
        cross_sells = cross_sells[:limit]

    context.echo(host.render_template("cart/cross-sells.html", {
        "cross_sells": cross_sells,
        "posts_per_page": limit,
        "orderby": orderby,
        "columns": context.get_loop_prop("columns"),
    }))
