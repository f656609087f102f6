"""Per-render state handed to every shortcode, filter and action."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

from linked_products.events.core.hook import DEFAULT_PRIORITY, HookName, hook_key
from linked_products.models.product import Product
from linked_products.repository.interfaces.product_repository_interface import IProductRepository


@dataclass(slots=True)
class RenderOverride:
    """Column counts chosen by shortcodes during the current render."""

    cross_sell_columns: Optional[int] = None
    upsell_columns: Optional[int] = None


class CapturedOutput:
    """Holds the text collected by :meth:`RenderContext.capture`."""

    __slots__ = ("text",)

    def __init__(self) -> None:
        self.text = ""

    def __str__(self) -> str:
        return self.text


@dataclass
class RenderContext:
    """Everything that belongs to a single page render.

    A fresh context is built for each request, so nothing set here can leak
    into another render.
    """

    product: Optional[Product] = None
    is_single_product: bool = False
    repository: Optional[IProductRepository] = None
    overrides: RenderOverride = field(default_factory=RenderOverride)
    loop: Dict[str, Any] = field(default_factory=dict)
    _buffers: List[List[str]] = field(default_factory=lambda: [[]], repr=False)
    _removed_actions: Dict[str, Set[Tuple[str, int]]] = field(default_factory=dict, repr=False)

    def echo(self, text: str) -> None:
        """Write ``text`` to the innermost output buffer."""

        self._buffers[-1].append(str(text))

    @contextmanager
    def capture(self) -> Iterator[CapturedOutput]:
        """Collect everything echoed inside the block instead of emitting it."""

        captured = CapturedOutput()
        self._buffers.append([])
        try:
            yield captured
        finally:
            captured.text = "".join(self._buffers.pop())

    def flush(self) -> str:
        """Return and clear the top-level output."""

        text = "".join(self._buffers[0])
        self._buffers[0].clear()
        return text

    def remove_action(
        self,
        hook: str | HookName,
        name: str,
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Suppress a registered action for the rest of this render."""

        self._removed_actions.setdefault(hook_key(hook), set()).add((name, priority))

    def is_action_removed(
        self,
        hook: str | HookName,
        name: str,
        priority: int = DEFAULT_PRIORITY,
    ) -> bool:
        return (name, priority) in self._removed_actions.get(hook_key(hook), ())

    def removed_actions(self, hook: str | HookName) -> frozenset:
        return frozenset(self._removed_actions.get(hook_key(hook), ()))

    def set_loop_prop(self, prop: str, value: Any) -> None:
        self.loop[prop] = value

    def get_loop_prop(self, prop: str, default: Any = None) -> Any:
        return self.loop.get(prop, default)
