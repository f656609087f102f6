"""Pydantic models describing the plugin configuration structure."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PluginSettings(BaseModel):
    """Configuration for a single plugin."""

    model_config = ConfigDict(extra="allow")

    enabled: Optional[bool] = None


class StorefrontConfig(BaseModel):
    """Root configuration model for the plugin system."""

    model_config = ConfigDict(extra="forbid")

    plugin_directories: List[str] = Field(default_factory=list)
    plugins: Dict[str, PluginSettings] = Field(default_factory=dict)

    @field_validator("plugin_directories", mode="after")
    @classmethod
    def normalise_directories(cls, value: Sequence[str]) -> List[str]:
        seen: set[str] = set()
        ordered: list[str] = []
        for directory in value:
            if not str(directory).strip():
                continue
            normalised = str(Path(directory))
            if normalised not in seen:
                seen.add(normalised)
                ordered.append(normalised)
        return ordered

    def is_plugin_enabled(self, plugin_name: str) -> bool:
        settings = self.plugins.get(plugin_name)
        if settings and settings.enabled is not None:
            return settings.enabled
        return True

    def get_plugin_settings(self, plugin_name: str) -> Dict[str, object]:
        """Extra keys configured for a plugin, without the enabled flag."""
        settings = self.plugins.get(plugin_name)
        if settings is None:
            return {}
        return settings.model_dump(exclude={"enabled"})
