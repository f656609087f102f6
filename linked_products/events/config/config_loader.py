"""Read and persist the YAML plugin configuration."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional

import yaml

from .config_schema import StorefrontConfig

logger = logging.getLogger(__name__)


class StorefrontConfigLoader:
    """YAML-backed store for :class:`StorefrontConfig`.

    Callers always receive a deep copy, so editing a returned config has no
    effect until it is passed back to :meth:`save`.
    """

    def __init__(self, config_path: str | Path) -> None:
        self._path = Path(config_path)
        self._lock = threading.RLock()
        self._current: Optional[StorefrontConfig] = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self, *, use_cache: bool = True) -> StorefrontConfig:
        with self._lock:
            if self._current is None or not use_cache:
                self._current = self._parse()
            return self._current.model_copy(deep=True)

    def refresh(self) -> StorefrontConfig:
        return self.load(use_cache=False)

    def save(self, config: StorefrontConfig) -> None:
        """Write ``config`` through a temporary file so readers never see half a file."""
        document = yaml.safe_dump(
            config.model_dump(mode="json", exclude_none=True),
            sort_keys=True,
            allow_unicode=True,
        )
        with self._lock:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            staging = self._path.with_name(self._path.name + ".tmp")
            staging.write_text(document, encoding="utf-8")
            staging.replace(self._path)
            self._current = config.model_copy(deep=True)
        logger.debug("Plugin configuration written to %s", self._path)

    def _parse(self) -> StorefrontConfig:
        if not self._path.exists():
            raise FileNotFoundError(f"Plugin configuration file '{self._path}' does not exist")

        data = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Plugin configuration in '{self._path}' must be a YAML mapping")
        return StorefrontConfig.model_validate(data)
