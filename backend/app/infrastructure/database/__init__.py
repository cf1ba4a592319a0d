from .base import Base
from .session import Database, get_db_session
from .models import BrandModel, ProductModel

__all__ = [
    "Base",
    "Database",
    "get_db_session",
    "BrandModel",
    "ProductModel",
]
