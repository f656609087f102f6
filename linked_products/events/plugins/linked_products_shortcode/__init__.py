"""
Linked Products Shortcode Plugin

Shortcodes for product cross-sells and up-sells, replacing the default lists
when used.
"""

from linked_products.events.plugins.linked_products_shortcode.plugin import LinkedProductsShortcodePlugin, get_plugin

__all__ = ["LinkedProductsShortcodePlugin", "get_plugin"]
__version__ = "1.0.0"
