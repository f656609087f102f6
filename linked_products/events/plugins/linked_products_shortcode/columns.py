"""Column count parsing and the width CSS derived from it."""
from __future__ import annotations

import re
from typing import Any

DEFAULT_COLUMNS = 3

# share of the row used by the items, the rest is spacing
ROW_WIDTH_RATIO = 0.90
ITEM_MARGIN_TOP = "1em"

RE_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def parse_columns(value: Any) -> int:
    """Resolve the ``columns`` shortcode attribute.

    The leading integer of the value is used ("4abc" gives 4, "3.7" gives 3).
    Zero, negative or non-numeric input falls back to ``DEFAULT_COLUMNS``.
    """

    match = RE_LEADING_INTEGER.match("" if value is None else str(value))
    columns = int(match.group(1)) if match else 0
    if columns <= 0:
        return DEFAULT_COLUMNS
    return columns


def column_width(columns: int) -> float:
    """Percentage width of one product in a row of ``columns`` items."""

    return (100 / columns) * ROW_WIDTH_RATIO


def format_width(width: float) -> str:
    """Format a percentage with 14 significant digits, trailing zeros dropped."""

    return f"{width:.14g}"


def build_column_css(css_class: str, columns: int) -> str:
    """Style block sizing the products of the ``css_class`` container."""

    width = format_width(column_width(columns))
    return (
        "<style>\n"
        f"\t\t.woocommerce .{css_class} ul.products li.product,\n"
        f"\t\t.woocommerce-page .{css_class} ul.products li.product {{\n"
        f"\t\t\twidth: {width}%;\n"
        f"\t\t\tmargin-top: {ITEM_MARGIN_TOP};\n"
        "\t\t}</style>"
    )
