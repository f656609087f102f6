"""Router exposing management endpoints for the plugin system."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Path

from linked_products.events.plugin_manager import PluginManager
from linked_products.events.runtime import get_plugin_manager

logger = logging.getLogger(__name__)


def get_manager() -> PluginManager:
    try:
        return get_plugin_manager()
    except RuntimeError as exc:
        logger.exception("Plugin manager not initialised")
        raise HTTPException(status_code=503, detail=str(exc)) from exc


router = APIRouter(prefix="/api/v1/plugins", tags=["Plugins"])


@router.get(
    "",
    summary="List plugins",
    response_description="Current state of the loaded plugins",
)
def list_plugins(plugin_manager: PluginManager = Depends(get_manager)):
    return {"plugins": plugin_manager.get_status()}


@router.post(
    "/reload",
    summary="Reload plugin configuration",
    response_description="Configuration reloaded",
)
def reload_plugins(plugin_manager: PluginManager = Depends(get_manager)):
    config = plugin_manager.reload()
    return {"message": "Plugin configuration reloaded", "config": config.model_dump(mode="json")}


@router.post(
    "/{plugin_name}/enable",
    summary="Enable a plugin",
    response_description="Plugin enabled",
)
def enable_plugin(
    plugin_name: str = Path(..., min_length=1),
    plugin_manager: PluginManager = Depends(get_manager),
):
    config = plugin_manager.enable_plugin(plugin_name)
    return {
        "message": f"Plugin '{plugin_name}' enabled",
        "config": config.model_dump(mode="json"),
    }


@router.post(
    "/{plugin_name}/disable",
    summary="Disable a plugin",
    response_description="Plugin disabled",
)
def disable_plugin(
    plugin_name: str = Path(..., min_length=1),
    plugin_manager: PluginManager = Depends(get_manager),
):
    config = plugin_manager.disable_plugin(plugin_name)
    return {
        "message": f"Plugin '{plugin_name}' disabled",
        "config": config.model_dump(mode="json"),
    }
