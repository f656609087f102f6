from .product_repository_interface import IProductRepository

__all__ = ["IProductRepository"]
