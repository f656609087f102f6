import pytest

from linked_products.core.exceptions import NotFoundException
from linked_products.storefront.page import ProductPageRenderer

CROSS_SELL_WRAPPER = '<div class="wc_cross_sell_shortcode">'
UPSELL_WRAPPER = '<div class="wc_upsell_shortcode">'
DEFAULT_CROSS_SELLS = '<div class="cross-sells">'
DEFAULT_UPSELLS = '<section class="up-sells upsells products">'


def test_page_without_shortcodes_shows_default_lists(page_renderer, catalog, repository):
    html = page_renderer.render(catalog["thruster"].id_product, repository)

    assert "<title>Thruster</title>" in html
    assert "<p>Brushless thruster.</p>" in html
    assert html.count(DEFAULT_UPSELLS) == 1
    assert html.count(DEFAULT_CROSS_SELLS) == 1
    assert "<h2>Related Products</h2>" in html
    assert "<h2>You May Also Need</h2>" in html
    assert CROSS_SELL_WRAPPER not in html
    assert "<style>" not in html


def test_cross_sells_shortcode_moves_the_list_into_the_content(page_renderer, catalog, repository):
    html = page_renderer.render(catalog["cross_sell_page"].id_product, repository)

    wrapper = html.index(CROSS_SELL_WRAPPER)
    assert html.count(DEFAULT_CROSS_SELLS) == 1
    assert wrapper < html.index(DEFAULT_CROSS_SELLS)
    assert "columns-4" in html
    assert "[product_cross_sells" not in html

    # up-sells are untouched by the cross-sells shortcode
    assert html.count(DEFAULT_UPSELLS) == 1
    assert UPSELL_WRAPPER not in html

    style = html.index("<style>")
    assert style > wrapper
    assert ".woocommerce .wc_cross_sell_shortcode ul.products li.product" in html
    assert "width: 22.5%;" in html
    assert html.count("<style>") == 1


def test_upsells_shortcode_with_quoted_columns(page_renderer, catalog, repository):
    html = page_renderer.render(catalog["upsell_page"].id_product, repository)

    assert html.count(DEFAULT_UPSELLS) == 1
    assert html.index(UPSELL_WRAPPER) < html.index(DEFAULT_UPSELLS)
    assert html.count(DEFAULT_CROSS_SELLS) == 1
    assert "columns-2" in html
    assert "width: 45%;" in html
    assert "wc_cross_sell_shortcode" not in html


def test_both_shortcodes_with_default_and_invalid_columns(page_renderer, catalog, repository):
    html = page_renderer.render(catalog["both_page"].id_product, repository)

    assert html.count(DEFAULT_UPSELLS) == 1
    assert html.count(DEFAULT_CROSS_SELLS) == 1
    assert html.index(UPSELL_WRAPPER) < html.index(CROSS_SELL_WRAPPER)
    assert html.count("width: 30%;") == 2
    assert html.index(".wc_cross_sell_shortcode") > html.index(CROSS_SELL_WRAPPER)


def test_shortcode_effects_end_with_the_render(page_renderer, catalog, repository):
    page_renderer.render(catalog["cross_sell_page"].id_product, repository)
    html = page_renderer.render(catalog["thruster"].id_product, repository)

    assert "<style>" not in html
    assert html.count(DEFAULT_CROSS_SELLS) == 1
    assert "columns-2" in html


def test_without_the_plugin_shortcodes_stay_literal(host, catalog, repository):
    html = ProductPageRenderer(host).render(catalog["cross_sell_page"].id_product, repository)

    assert "[product_cross_sells columns=4]" in html
    assert DEFAULT_CROSS_SELLS not in html
    assert html.count(DEFAULT_UPSELLS) == 1
    assert "<h2>You may also like…</h2>" in html


@pytest.mark.parametrize("key", ["draft", None])
def test_missing_or_unpublished_products_are_not_found(page_renderer, catalog, repository, key):
    product_id = catalog[key].id_product if key else 9999

    with pytest.raises(NotFoundException) as exc_info:
        page_renderer.render(product_id, repository)

    assert exc_info.value.to_dict()["error_code"] == "PRODUCT_NOT_FOUND"
