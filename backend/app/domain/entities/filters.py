"""Repository-level filters — what the persistence layer is asked to match."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class BrandFilter:
    """Brand listing filter; ``search`` is a case-insensitive substring."""

    search: str | None = None
    limit: int = 10
    offset: int = 0


@dataclass
class ProductFilter:
    """Product listing filter.

    Each bound is inclusive and only applied when it is not ``None``.
    """

    brand_id: UUID | None = None
    min_price: float | None = None
    max_price: float | None = None
    min_qty: int | None = None
    max_qty: int | None = None
    limit: int = 10
    offset: int = 0
