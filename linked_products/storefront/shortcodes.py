"""Shortcode registry and expansion for page content."""

from __future__ import annotations

import logging
import re
import threading
from typing import Any, Callable, Dict, List, Mapping, Optional

from linked_products.events.core.exceptions import DuplicateShortcodeError, InvalidHookCallbackError
from linked_products.events.core.hook import hook_key

logger = logging.getLogger(__name__)

# handler(attributes, context, content) -> replacement text
ShortcodeHandler = Callable[[Dict[Any, str], Any, Optional[str]], Optional[str]]

# name="value" | name='value' | name=value | "value" | 'value' | value
RE_ATTRIBUTE = re.compile(
    r'([\w-]+)\s*=\s*"([^"]*)"(?:\s|$)'
    r"|([\w-]+)\s*=\s*'([^']*)'(?:\s|$)"
    r'|([\w-]+)\s*=\s*([^\s\'"]+)(?:\s|$)'
    r'|"([^"]*)"(?:\s|$)'
    r"|'([^']*)'(?:\s|$)"
    r"|(\S+)(?:\s|$)"
)

# non-breaking and zero-width spaces are treated as plain spaces inside tags
RE_ATTRIBUTE_SPACES = re.compile("[\u00a0\u200b]")


def parse_attributes(text: str) -> Dict[Any, str]:
    """Parse the attribute part of a shortcode tag.

    Named attributes get lower-cased string keys; positional values are
    keyed by their index.
    """

    attributes: Dict[Any, str] = {}
    text = RE_ATTRIBUTE_SPACES.sub(" ", text or "").strip()
    position = 0
    for match in RE_ATTRIBUTE.finditer(text):
        if match.group(1):
            attributes[match.group(1).lower()] = match.group(2)
        elif match.group(3):
            attributes[match.group(3).lower()] = match.group(4)
        elif match.group(5):
            attributes[match.group(5).lower()] = match.group(6)
        else:
            value = next(group for group in match.groups()[6:] if group is not None)
            attributes[position] = value
            position += 1
    return attributes


def shortcode_atts(defaults: Mapping[str, Any], attributes: Optional[Mapping[Any, Any]]) -> Dict[str, Any]:
    """Merge user attributes over ``defaults``, dropping unknown keys."""

    attributes = attributes or {}
    return {key: attributes.get(key, default) for key, default in defaults.items()}


class ShortcodeRegistry:
    """Map of shortcode tags to their handlers."""

    def __init__(self) -> None:
        self._handlers: Dict[str, ShortcodeHandler] = {}
        self._lock = threading.RLock()
        self._pattern: Optional[re.Pattern[str]] = None

    def add(self, tag: str, handler: ShortcodeHandler, *, replace: bool = False) -> None:
        key = hook_key(tag)
        if not callable(handler):
            raise InvalidHookCallbackError(key, handler)
        if not re.fullmatch(r"[\w-]+", key):
            raise ValueError(f"Invalid shortcode tag '{key}'")

        with self._lock:
            if key in self._handlers and not replace:
                raise DuplicateShortcodeError(key)
            self._handlers[key] = handler
            self._pattern = None
        logger.debug("Shortcode [%s] registered", key)

    def remove(self, tag: str) -> bool:
        key = hook_key(tag)
        with self._lock:
            removed = self._handlers.pop(key, None) is not None
            self._pattern = None
        if removed:
            logger.debug("Shortcode [%s] removed", key)
        return removed

    def exists(self, tag: str) -> bool:
        with self._lock:
            return hook_key(tag) in self._handlers

    def get(self, tag: str) -> Optional[ShortcodeHandler]:
        with self._lock:
            return self._handlers.get(hook_key(tag))

    @property
    def tags(self) -> List[str]:
        with self._lock:
            return sorted(self._handlers)

    def do_shortcode(self, content: str, context: Any = None) -> str:
        """Replace every registered shortcode in ``content`` with its output.

        Unregistered tags are left as they are; ``[[tag]]`` renders the
        literal ``[tag]``.
        """

        if not content or "[" not in content:
            return content or ""

        pattern = self._get_pattern()
        if pattern is None:
            return content

        def _replace(match: re.Match[str]) -> str:
            if match.group(1) == "[" and match.group(6) == "]":
                return match.group(0)[1:-1]

            tag = match.group(2)
            handler = self.get(tag)
            if handler is None:
                return match.group(0)

            attributes = parse_attributes(match.group(3))
            inner = match.group(5)
            output = handler(attributes, context, inner)
            return match.group(1) + (output or "") + match.group(6)

        return pattern.sub(_replace, content)

    def _get_pattern(self) -> Optional[re.Pattern[str]]:
        with self._lock:
            if self._pattern is None and self._handlers:
                tags = "|".join(re.escape(tag) for tag in sorted(self._handlers, key=len, reverse=True))
                self._pattern = re.compile(
                    r"\[(\[?)"                              # 1: opening bracket for escaping
                    rf"({tags})"                            # 2: tag
                    r"(?![\w-])"
                    r"([^\]/]*(?:/(?!\])[^\]/]*)*?)"        # 3: attributes
                    r"(?:(/)\]"                             # 4: self-closing
                    r"|\](?:(.*?)\[/\2\])?)"                # 5: enclosed content
                    r"(\]?)",                               # 6: closing bracket for escaping
                    re.DOTALL,
                )
            return self._pattern
