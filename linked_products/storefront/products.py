"""Product list helpers used by the linked-product renderers."""

from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional

from linked_products.models.product import Product

logger = logging.getLogger(__name__)

HIDDEN_VISIBILITIES = frozenset({"hidden", "search"})

_SORT_KEYS: Dict[str, Callable[[Product], object]] = {
    "title": lambda product: (product.name or "").lower(),
    "id": lambda product: product.id_product or 0,
    "price": lambda product: product.price or 0.0,
    "date": lambda product: product.date_created or datetime.min,
    "modified": lambda product: product.date_modified or datetime.min,
    "menu_order": lambda product: product.menu_order or 0,
}


def is_visible(product: Optional[Product], *, hide_out_of_stock: bool = False) -> bool:
    """True when ``product`` may be listed on the storefront."""

    if product is None:
        return False
    if product.status != "publish":
        return False
    if product.catalog_visibility in HIDDEN_VISIBILITIES:
        return False
    if hide_out_of_stock and product.stock_status == "outofstock":
        return False
    return True


def products_array_orderby(
    products: Iterable[Product],
    orderby: str = "date",
    order: str = "desc",
    rng: Optional[random.Random] = None,
) -> List[Product]:
    """Sort products by one of the supported keys.

    ``rand`` shuffles (``order`` is ignored). Unknown keys keep the input
    order. Ties are broken by product id.
    """

    ordered = list(products)
    orderby = (orderby or "").lower()

    if orderby == "rand":
        (rng or random).shuffle(ordered)
        return ordered

    sort_key = _SORT_KEYS.get(orderby)
    if sort_key is None:
        logger.debug("Unknown product ordering '%s'; keeping original order", orderby)
        return ordered

    descending = (order or "").lower() == "desc"
    ordered.sort(key=lambda product: product.id_product or 0, reverse=descending)
    ordered.sort(key=sort_key, reverse=descending)
    return ordered
