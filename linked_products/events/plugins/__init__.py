"""Plugins shipped with the storefront."""
