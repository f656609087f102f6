"""Linked-products shortcodes for the storefront."""

__version__ = "1.0.0"
