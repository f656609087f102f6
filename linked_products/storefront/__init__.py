"""Reference storefront host: page context, shortcodes, templates and products."""
