import pytest

from linked_products.events.plugins.linked_products_shortcode.columns import (
    DEFAULT_COLUMNS,
    build_column_css,
    column_width,
    format_width,
    parse_columns,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("5", 5),
        (6, 6),
        ("4abc", 4),
        (" 2", 2),
        ("3.7", 3),
        ("+2", 2),
        ("0", DEFAULT_COLUMNS),
        ("-2", DEFAULT_COLUMNS),
        ("abc", DEFAULT_COLUMNS),
        ("", DEFAULT_COLUMNS),
        (None, DEFAULT_COLUMNS),
    ],
)
def test_parse_columns(value, expected):
    assert parse_columns(value) == expected


@pytest.mark.parametrize(
    "columns, expected",
    [
        (1, "90"),
        (3, "30"),
        (4, "22.5"),
        (6, "15"),
        (7, "12.857142857143"),
    ],
)
def test_column_width_formatting(columns, expected):
    assert format_width(column_width(columns)) == expected


def test_column_css_targets_both_page_classes():
    css = build_column_css("wc_cross_sell_shortcode", 4)

    assert css.startswith("<style>")
    assert css.endswith("</style>")
    assert ".woocommerce .wc_cross_sell_shortcode ul.products li.product," in css
    assert ".woocommerce-page .wc_cross_sell_shortcode ul.products li.product {" in css
    assert "width: 22.5%;" in css
    assert "margin-top: 1em;" in css
