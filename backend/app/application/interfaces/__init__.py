from .brand_repository import BrandRepository
from .product_repository import ProductRepository

__all__ = [
    "BrandRepository",
    "ProductRepository",
]
