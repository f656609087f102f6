"""
Shared fixtures for the storefront tests
"""
from typing import Dict, Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from linked_products.core.settings import StorefrontSettings
from linked_products.database import Base
from linked_products.events.plugins.linked_products_shortcode.plugin import LinkedProductsShortcodePlugin
from linked_products.models.product import Product, ProductLink
from linked_products.repository.product_repository import ProductRepository
from linked_products.storefront.context import RenderContext
from linked_products.storefront.host import StorefrontHost
from linked_products.storefront.page import ProductPageRenderer

SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Isolated database session for each test; tables are dropped afterwards.
    """
    Base.metadata.create_all(bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture()
def repository(db_session: Session) -> ProductRepository:
    return ProductRepository(db_session)


def make_product(repository: ProductRepository, name: str, **fields) -> Product:
    fields.setdefault("sku", name.upper().replace(" ", "-")[:32])
    fields.setdefault("price", 10.0)
    return repository.create({"name": name, **fields})


@pytest.fixture()
def catalog(repository: ProductRepository) -> Dict[str, Product]:
    """
    A thruster with two up-sells and three cross-sells, one of them hidden,
    plus products whose descriptions embed the shortcodes.
    """
    products = {
        "thruster": make_product(repository, "Thruster", price=199.0, description="<p>Brushless thruster.</p>"),
        "esc": make_product(repository, "Speed Controller", price=35.0),
        "propeller": make_product(repository, "Propeller Set", price=12.5),
        "cable": make_product(repository, "Tether Cable", price=2.0),
        "connector": make_product(repository, "Connector Kit", price=8.0),
        "prototype": make_product(repository, "Prototype Frame", catalog_visibility="hidden"),
        "draft": make_product(repository, "Unreleased Light", status="draft"),
        "cross_sell_page": make_product(
            repository, "ROV Kit", description="<p>Everything you need.</p>[product_cross_sells columns=4]"
        ),
        "upsell_page": make_product(repository, "Camera", description="[product_upsells columns=\"2\"]"),
        "both_page": make_product(
            repository, "Gripper", description="[product_upsells][product_cross_sells columns=abc]"
        ),
    }

    for key in ("thruster", "cross_sell_page", "upsell_page", "both_page"):
        owner = products[key].id_product
        repository.add_link(owner, products["esc"].id_product, ProductLink.UPSELL)
        repository.add_link(owner, products["propeller"].id_product, ProductLink.UPSELL)
        repository.add_link(owner, products["cable"].id_product, ProductLink.CROSS_SELL)
        repository.add_link(owner, products["connector"].id_product, ProductLink.CROSS_SELL)
        repository.add_link(owner, products["prototype"].id_product, ProductLink.CROSS_SELL)

    return products


@pytest.fixture()
def settings() -> StorefrontSettings:
    return StorefrontSettings(random_seed=7, database_url=SQLALCHEMY_TEST_DATABASE_URL)


@pytest.fixture()
def host(settings: StorefrontSettings) -> StorefrontHost:
    return StorefrontHost(settings=settings)


@pytest.fixture()
def plugin(host: StorefrontHost) -> Generator[LinkedProductsShortcodePlugin, None, None]:
    plugin = LinkedProductsShortcodePlugin()
    plugin.register(host)
    yield plugin
    plugin.unregister(host)


@pytest.fixture()
def page_renderer(host: StorefrontHost, plugin: LinkedProductsShortcodePlugin) -> ProductPageRenderer:
    return ProductPageRenderer(host)


@pytest.fixture()
def product_context(catalog: Dict[str, Product], repository: ProductRepository) -> RenderContext:
    return RenderContext(product=catalog["thruster"], is_single_product=True, repository=repository)


@pytest.fixture()
def archive_context(repository: ProductRepository) -> RenderContext:
    """A render that is not a single product page."""
    return RenderContext(product=None, is_single_product=False, repository=repository)
