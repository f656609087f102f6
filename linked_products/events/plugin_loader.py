"""Discovery and import of storefront plugins."""

from __future__ import annotations

import importlib
import importlib.util
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

BUILTIN_PLUGIN_DIRECTORY = Path(__file__).parent / "plugins"
BUILTIN_PLUGIN_PACKAGE = "linked_products.events.plugins"


@dataclass(frozen=True, slots=True)
class PluginDescriptor:
    """Where a plugin lives and how to import it."""

    name: str
    base_path: Path
    entrypoint: Path
    module_name: Optional[str] = None

    @property
    def source(self) -> str:
        return self.module_name or str(self.entrypoint)


class PluginLoader:
    """Find plugin candidates on disk and import them.

    Plugins shipped with the package are imported by module name, so they
    share module state with the rest of the application; plugins found in
    configured directories are imported from their file.
    """

    def __init__(self, directories: Optional[Iterable[str]] = None, *, include_builtin: bool = True) -> None:
        self._include_builtin = include_builtin
        self._directories: List[Path] = []
        self.set_directories(directories or [])

    @property
    def directories(self) -> List[Path]:
        return list(self._directories)

    def set_directories(self, directories: Iterable[str]) -> None:
        paths = [Path(directory) for directory in directories]
        if self._include_builtin and BUILTIN_PLUGIN_DIRECTORY not in paths:
            paths.insert(0, BUILTIN_PLUGIN_DIRECTORY)
        self._directories = paths

    def discover(self) -> Dict[str, PluginDescriptor]:
        discovered: Dict[str, PluginDescriptor] = {}
        for base_dir in self._directories:
            if not base_dir.is_dir():
                logger.debug("Plugin directory %s does not exist", base_dir)
                continue

            for candidate in sorted(base_dir.iterdir()):
                if candidate.name.startswith("_"):
                    continue
                descriptor = self._build_descriptor(candidate)
                if descriptor is None:
                    continue

                if descriptor.name in discovered:
                    logger.warning(
                        "Plugin name '%s' already discovered at %s; skipping %s",
                        descriptor.name,
                        discovered[descriptor.name].source,
                        descriptor.source,
                    )
                    continue

                discovered[descriptor.name] = descriptor

        return discovered

    def load_module(self, descriptor: PluginDescriptor) -> ModuleType:
        if descriptor.module_name:
            return importlib.import_module(descriptor.module_name)

        module_name = f"storefront_plugin_{descriptor.name}"
        spec = importlib.util.spec_from_file_location(module_name, descriptor.entrypoint)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load plugin '{descriptor.name}' from {descriptor.source}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception:
            sys.modules.pop(module_name, None)
            raise
        return module

    def _build_descriptor(self, candidate: Path) -> Optional[PluginDescriptor]:
        builtin = candidate.parent == BUILTIN_PLUGIN_DIRECTORY

        if candidate.is_dir():
            entry = candidate / "plugin.py"
            if not entry.exists():
                entry = candidate / "__init__.py"
            if not entry.exists():
                return None
            module_name = None
            if builtin:
                module_name = f"{BUILTIN_PLUGIN_PACKAGE}.{candidate.name}"
                if entry.stem != "__init__":
                    module_name = f"{module_name}.{entry.stem}"
            return PluginDescriptor(
                name=candidate.name,
                base_path=candidate,
                entrypoint=entry,
                module_name=module_name,
            )

        if candidate.is_file() and candidate.suffix == ".py":
            return PluginDescriptor(
                name=candidate.stem,
                base_path=candidate.parent,
                entrypoint=candidate,
                module_name=f"{BUILTIN_PLUGIN_PACKAGE}.{candidate.stem}" if builtin else None,
            )

        return None
