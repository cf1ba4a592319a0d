from .brand import BrandModel
from .product import ProductModel

__all__ = [
    "BrandModel",
    "ProductModel",
]
