"""Custom exceptions for the hook system."""

from __future__ import annotations


class HookRegistryError(Exception):
    """Base exception for the hook system."""


class InvalidHookCallbackError(HookRegistryError, TypeError):
    """Raised when something that is not callable is attached to a hook."""

    def __init__(self, hook: str, callback: object) -> None:
        self.hook = hook
        self.callback = callback
        super().__init__(f"Callback {callback!r} registered on '{hook}' is not callable")


class DuplicateShortcodeError(HookRegistryError):
    """Raised when a shortcode tag is registered twice without ``replace``."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Shortcode '{tag}' is already registered")
