import re

from linked_products.events.core.hook import HookName
from linked_products.events.plugins.linked_products_shortcode.fallback import cross_sell_display
from linked_products.models.product import ProductLink
from linked_products.storefront.context import RenderContext


def listed_names(html):
    return re.findall(r'<h2 class="product-title">([^<]+)</h2>', html)


def add_cross_sells(repository, catalog, *keys):
    owner = catalog["thruster"].id_product
    for key in keys:
        repository.add_link(owner, catalog[key].id_product, ProductLink.CROSS_SELL)


def test_nothing_is_rendered_without_a_product(host):
    context = RenderContext()

    cross_sell_display(host, context)

    assert context.flush() == ""


def test_hidden_and_missing_products_are_skipped(host, product_context, repository, catalog):
    repository.add_link(catalog["thruster"].id_product, 9999, ProductLink.CROSS_SELL)
    add_cross_sells(repository, catalog, "draft")
    host.add_filter(HookName.CROSS_SELLS_TOTAL, lambda total: 0)

    cross_sell_display(host, product_context)

    assert sorted(listed_names(product_context.flush())) == ["Connector Kit", "Tether Cable"]


def test_default_limit_is_two_products(host, product_context, repository, catalog):
    add_cross_sells(repository, catalog, "esc", "propeller")

    cross_sell_display(host, product_context)

    html = product_context.flush()
    assert len(listed_names(html)) == 2
    assert "columns-2" in html
    assert product_context.get_loop_prop("name") == "cross-sells"


def test_filters_control_ordering_and_total(host, product_context, repository, catalog):
    add_cross_sells(repository, catalog, "esc", "propeller")
    host.add_filter(HookName.CROSS_SELLS_ORDERBY, lambda orderby: "title")
    host.add_filter(HookName.CROSS_SELLS_TOTAL, lambda total: -1)

    cross_sell_display(host, product_context)

    assert listed_names(product_context.flush()) == [
        "Tether Cable",
        "Speed Controller",
        "Propeller Set",
        "Connector Kit",
    ]


def test_display_args_feed_the_column_filter(host, product_context):
    seen = []

    def column_count(columns, context):
        seen.append((columns, context))
        return columns

    host.add_filter(HookName.CROSS_SELL_DISPLAY_ARGS, lambda args: {**args, "columns": 5})
    host.add_filter(HookName.CROSS_SELLS_COLUMN_COUNT, column_count)

    cross_sell_display(host, product_context)

    assert seen == [(5, product_context)]
    assert product_context.get_loop_prop("columns") == 5
    assert "columns-5" in product_context.flush()


def test_heading_uses_the_translated_label(host, product_context):
    host.translations.add("storefront", "You may be interested in…", "Potrebbe interessarti")

    cross_sell_display(host, product_context)

    assert "<h2>Potrebbe interessarti</h2>" in product_context.flush()
