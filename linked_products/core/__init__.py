"""Storefront core: settings, errors and repository plumbing."""
