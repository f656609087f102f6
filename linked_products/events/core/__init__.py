"""Core components of the hook system."""

from .hook import HookCallback, HookName, ShortcodeTag
from .hook_registry import HookRegistry

__all__ = ["HookCallback", "HookName", "ShortcodeTag", "HookRegistry"]
