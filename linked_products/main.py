import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from linked_products.core.exceptions import BaseApplicationException
from linked_products.core.settings import get_settings
from linked_products.database import Base, engine
from linked_products.events.config import StorefrontConfig, StorefrontConfigLoader
from linked_products.events.plugin_loader import PluginLoader
from linked_products.events.plugin_manager import PluginManager
from linked_products.events.runtime import set_plugin_manager, set_storefront_host
from linked_products.routers import plugins, product_page
from linked_products.storefront.host import StorefrontHost

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def init_storefront() -> PluginManager:
    """Build the host, load the plugin configuration and activate enabled plugins."""
    Base.metadata.create_all(bind=engine)

    host = StorefrontHost(settings=settings)
    config_loader = StorefrontConfigLoader(settings.plugin_config_path)
    if not config_loader.path.exists():
        logger.info("No plugin configuration at %s; writing defaults", config_loader.path)
        config_loader.save(StorefrontConfig())

    manager = PluginManager(host, config_loader, PluginLoader())
    manager.initialise()

    set_storefront_host(host)
    set_plugin_manager(manager)
    return manager


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    manager = init_storefront()
    logger.info("Storefront started with plugins: %s", ", ".join(manager.get_loaded_plugins()) or "none")
    yield
    set_plugin_manager(None)
    set_storefront_host(None)


app = FastAPI(
    title="Linked Products Storefront",
    lifespan=lifespan
)


@app.exception_handler(BaseApplicationException)
async def custom_application_exception_handler(request: Request, exc: BaseApplicationException):
    """Serialise application exceptions"""
    logger.error(f"Application exception: {exc.error_code} - {exc.message}", extra={
        "error_code": exc.error_code,
        "details": exc.details,
        "path": str(request.url),
        "method": request.method
    })

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


app.include_router(product_page.router)
app.include_router(plugins.router)


@app.get("/health")
async def health():
    return {"status": "healthy"}
