"""
Product Repository interface
"""
from abc import abstractmethod
from linked_products.core.interfaces import IRepository
from linked_products.models.product import Product

class IProductRepository(IRepository[Product, int]):
    """Interface for the product repository"""

    @abstractmethod
    def add_link(self, id_product: int, id_linked_product: int, link_type: str) -> None:
        """Link a product to an up-sell or cross-sell"""
        pass
