"""Replacement labels for the linked-products headings."""
from __future__ import annotations

from typing import Callable, Dict

Translate = Callable[[str, str], str]

RELABELED_STRINGS: Dict[str, str] = {
    # up-sells heading on the product page
    "You may also like…": "Related Products",
    "You may also like&hellip;": "Related Products",
    # cross-sells heading
    "You may be interested in…": "You May Also Need",
    "You may be interested in&hellip;": "You May Also Need",
    # admin product data labels
    "Upsells": "Related Products:",
    "Cross-sells": "You May Also Need:",
}


def relabel_strings(translated_text: str, text: str, domain: str, *, translate: Translate) -> str:
    """``gettext`` filter swapping the known headings for the new labels.

    The replacement is itself translated in the same domain. Anything else is
    returned untouched.
    """

    replacement = RELABELED_STRINGS.get(translated_text)
    if replacement is None:
        return translated_text
    return translate(replacement, domain)
