from .brand import Brand
from .product import Product
from .filters import BrandFilter, ProductFilter

__all__ = [
    "Brand",
    "Product",
    "BrandFilter",
    "ProductFilter",
]
