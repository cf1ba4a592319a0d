from .brand import BrandCreate, BrandUpdate, BrandResponse, BrandFilterRequest
from .product import ProductCreate, ProductUpdate, ProductResponse, ProductFilterRequest
from .envelope import PaginationMeta, ResponseEnvelope
from .common import calculate_offset, format_timestamp

__all__ = [
    "BrandCreate",
    "BrandUpdate",
    "BrandResponse",
    "BrandFilterRequest",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductFilterRequest",
    "PaginationMeta",
    "ResponseEnvelope",
    "calculate_offset",
    "format_timestamp",
]
