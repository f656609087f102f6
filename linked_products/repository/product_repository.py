"""
Product Repository
"""
from sqlalchemy import func
from sqlalchemy.orm import Session

from linked_products.core.base_repository import BaseRepository
from linked_products.core.exceptions import ValidationException
from linked_products.models.product import Product, ProductLink
from linked_products.repository.interfaces.product_repository_interface import IProductRepository

LINK_TYPES = (ProductLink.UPSELL, ProductLink.CROSS_SELL)


class ProductRepository(BaseRepository[Product, int], IProductRepository):
    """Products and their up-sell/cross-sell links"""

    def __init__(self, session: Session):
        super().__init__(session, Product)

    def add_link(self, id_product: int, id_linked_product: int, link_type: str) -> None:
        """Append a link after the existing ones of the same type"""
        if link_type not in LINK_TYPES:
            raise ValidationException(f"Unknown link type '{link_type}'", details={"link_type": link_type})

        with self._database_errors("linking", rollback=True):
            position = self._session.query(func.count(ProductLink.id_product_link)).filter(
                ProductLink.id_product == id_product,
                ProductLink.link_type == link_type,
            ).scalar() or 0
            self._session.add(ProductLink(
                id_product=id_product,
                id_linked_product=id_linked_product,
                link_type=link_type,
                position=position,
            ))
            self._session.commit()
