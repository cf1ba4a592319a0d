from .brand_repository import SQLAlchemyBrandRepository
from .product_repository import SQLAlchemyProductRepository

__all__ = [
    "SQLAlchemyBrandRepository",
    "SQLAlchemyProductRepository",
]
