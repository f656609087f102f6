"""Hook and plugin system of the storefront."""

from .core.hook import HookName, ShortcodeTag
from .core.hook_registry import HookRegistry

__all__ = ["HookName", "ShortcodeTag", "HookRegistry"]
