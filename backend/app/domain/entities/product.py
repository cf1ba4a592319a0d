"""Domain entity — pure Python business object for a product."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from .brand import Brand


@dataclass
class Product:
    """A stocked product belonging to exactly one brand.

    ``brand`` is only populated when the repository loaded the brand
    alongside the product; it is never persisted through the product.
    """

    product_name: str
    price: float
    quantity: int
    brand_id: UUID
    id: UUID = field(default_factory=uuid4)
    brand: Brand | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    deleted_at: datetime | None = None

    def update(
        self,
        product_name: str | None = None,
        price: float | None = None,
        quantity: int | None = None,
        brand_id: UUID | None = None,
    ) -> None:
        """Apply a partial update.

        Empty names, non-positive prices and negative quantities count as
        "not provided" and leave the current value in place.
        """
        if product_name:
            self.product_name = product_name
        if price is not None and price > 0:
            self.price = price
        if quantity is not None and quantity >= 0:
            self.quantity = quantity
        if brand_id is not None and brand_id != self.brand_id:
            self.brand_id = brand_id
            self.brand = None
        self.updated_at = datetime.now(timezone.utc)
