"""Translation catalogue consulted before the ``gettext`` filter runs."""

from __future__ import annotations

from typing import Dict, Mapping, Optional


class TranslationCatalog:
    """Per-domain lookup tables of translated strings."""

    def __init__(self, catalogs: Optional[Mapping[str, Mapping[str, str]]] = None) -> None:
        self._catalogs: Dict[str, Dict[str, str]] = {
            domain: dict(entries) for domain, entries in (catalogs or {}).items()
        }

    def add(self, domain: str, text: str, translated: str) -> None:
        self._catalogs.setdefault(domain, {})[text] = translated

    def gettext(self, text: str, domain: str) -> str:
        """Return the translation of ``text`` or ``text`` itself."""

        return self._catalogs.get(domain, {}).get(text, text)
