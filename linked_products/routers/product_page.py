"""
Product page router
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Path
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from linked_products.database import get_db
from linked_products.events.runtime import get_storefront_host
from linked_products.repository.product_repository import ProductRepository
from linked_products.storefront.host import StorefrontHost
from linked_products.storefront.page import ProductPageRenderer

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/products",
    tags=["Storefront"]
)


def get_host() -> StorefrontHost:
    try:
        return get_storefront_host()
    except RuntimeError as exc:
        logger.exception("Storefront host not initialised")
        raise HTTPException(status_code=503, detail=str(exc)) from exc


@router.get("/{product_id}", response_class=HTMLResponse)
def get_product_page(
    product_id: int = Path(gt=0),
    db: Session = Depends(get_db),
    host: StorefrontHost = Depends(get_host),
):
    """
    Render the single product page, expanding the shortcodes in its description.
    """
    html = ProductPageRenderer(host).render(product_id, ProductRepository(db))
    return HTMLResponse(content=html)
