from .product import Product, ProductLink

__all__ = ["Product", "ProductLink"]
