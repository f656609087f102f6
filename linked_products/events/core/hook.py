"""Definitions for the extension points exposed by the storefront."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional


class HookName(str, Enum):
    """Filters and actions fired during a product page render."""

    AFTER_SINGLE_PRODUCT_SUMMARY = "after_single_product_summary"
    FOOTER_SCRIPTS = "footer_scripts"
    GETTEXT = "gettext"

    CROSS_SELLS_COLUMN_COUNT = "cross_sells_column_count"
    CROSS_SELL_DISPLAY_ARGS = "cross_sell_display_args"
    CROSS_SELLS_ORDERBY = "cross_sells_orderby"
    CROSS_SELLS_TOTAL = "cross_sells_total"

    UP_SELLS_COLUMN_COUNT = "up_sells_column_count"
    UPSELL_DISPLAY_ARGS = "upsell_display_args"
    UP_SELLS_ORDERBY = "up_sells_orderby"
    UP_SELLS_TOTAL = "up_sells_total"


class ShortcodeTag(str, Enum):
    """Shortcode tags provided by the linked-products plugin."""

    PRODUCT_CROSS_SELLS = "product_cross_sells"
    PRODUCT_UPSELLS = "product_upsells"


DEFAULT_PRIORITY = 10


def hook_key(hook: str | HookName) -> str:
    """Normalise enum members and plain strings to the registry key."""

    return hook.value if isinstance(hook, Enum) else str(hook)


def callback_name(callback: Callable[..., Any]) -> str:
    """Name under which a callback is registered when none is given."""

    name = getattr(callback, "__qualname__", None) or getattr(callback, "__name__", None)
    if name is None:
        name = type(callback).__qualname__
    return name


@dataclass(frozen=True, slots=True)
class HookCallback:
    """A callback attached to a filter or action."""

    hook: str
    callback: Callable[..., Any]
    priority: int = DEFAULT_PRIORITY
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.name is None:
            object.__setattr__(self, "name", callback_name(self.callback))

    def matches(self, callback: Callable[..., Any] | str, priority: Optional[int] = None) -> bool:
        """True when this entry was registered for ``callback`` (object or name)."""

        if priority is not None and priority != self.priority:
            return False
        if isinstance(callback, str):
            return callback == self.name
        return callback == self.callback
