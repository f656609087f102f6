"""Synchronous registry of filters and actions."""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from typing import Any, Callable, Collection, Dict, List, Optional, Tuple

from .exceptions import InvalidHookCallbackError
from .hook import DEFAULT_PRIORITY, HookCallback, HookName, hook_key

logger = logging.getLogger(__name__)

Callback = Callable[..., Any]


class HookRegistry:
    """Thread-safe mapping from hook name to its ordered callbacks.

    Callbacks run in ascending priority; equal priorities keep registration
    order. Filters and actions share one table, as a hook name identifies
    exactly one extension point. Exceptions raised by callbacks propagate
    to the caller of ``apply_filters``/``do_action``.
    """

    def __init__(self) -> None:
        self._callbacks: Dict[str, List[HookCallback]] = defaultdict(list)
        self._lock = threading.RLock()

    def add_filter(
        self,
        hook: str | HookName,
        callback: Callback,
        priority: int = DEFAULT_PRIORITY,
        name: Optional[str] = None,
    ) -> HookCallback:
        """Attach ``callback`` to ``hook``."""

        key = hook_key(hook)
        if not callable(callback):
            raise InvalidHookCallbackError(key, callback)

        entry = HookCallback(hook=key, callback=callback, priority=priority, name=name)
        with self._lock:
            entries = self._callbacks[key]
            entries.append(entry)
            # sort is stable, so equal priorities keep insertion order
            entries.sort(key=lambda item: item.priority)
        logger.debug("Callback %s attached to '%s' (priority %s)", entry.name, key, priority)
        return entry

    add_action = add_filter

    def remove_filter(
        self,
        hook: str | HookName,
        callback: Callback | str,
        priority: int = DEFAULT_PRIORITY,
    ) -> bool:
        """Detach ``callback`` (object or registered name); no-op when absent."""

        key = hook_key(hook)
        with self._lock:
            entries = self._callbacks.get(key)
            if not entries:
                return False
            remaining = [entry for entry in entries if not entry.matches(callback, priority)]
            removed = len(remaining) != len(entries)
            if remaining:
                self._callbacks[key] = remaining
            else:
                self._callbacks.pop(key, None)

        if removed:
            logger.debug("Callback %s detached from '%s'", callback, key)
        return removed

    remove_action = remove_filter

    def has_filter(
        self,
        hook: str | HookName,
        callback: Callback | str | None = None,
        priority: Optional[int] = None,
    ) -> bool:
        key = hook_key(hook)
        with self._lock:
            entries = tuple(self._callbacks.get(key, ()))
        if callback is None:
            return bool(entries)
        return any(entry.matches(callback, priority) for entry in entries)

    has_action = has_filter

    def callbacks(self, hook: str | HookName) -> Tuple[HookCallback, ...]:
        """Snapshot of the callbacks attached to ``hook``, in invocation order."""

        with self._lock:
            return tuple(self._callbacks.get(hook_key(hook), ()))

    def apply_filters(self, hook: str | HookName, value: Any, *args: Any) -> Any:
        """Pass ``value`` through every callback of ``hook`` and return the result."""

        for entry in self.callbacks(hook):
            value = entry.callback(value, *args)
        return value

    def do_action(
        self,
        hook: str | HookName,
        *args: Any,
        skip: Collection[Tuple[str, int]] = (),
    ) -> None:
        """Call every callback of ``hook``.

        ``skip`` holds ``(name, priority)`` pairs that must not run for this
        invocation only; the registry itself is left untouched.
        """

        entries = self.callbacks(hook)
        if not entries:
            logger.debug("No callbacks attached to '%s'", hook_key(hook))
            return

        for entry in entries:
            if (entry.name, entry.priority) in skip:
                logger.debug("Skipping suppressed callback %s on '%s'", entry.name, entry.hook)
                continue
            entry.callback(*args)
