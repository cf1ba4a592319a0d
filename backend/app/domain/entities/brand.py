"""Domain entity — pure Python business object for a brand."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass
class Brand:
    """A brand owning zero or more products.

    Brands do not hold product identifiers; products point back at their
    brand through ``Product.brand_id``.
    """

    brand_name: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    deleted_at: datetime | None = None

    def update(self, brand_name: str | None = None) -> None:
        """Rename the brand when a non-empty name is given."""
        if brand_name:
            self.brand_name = brand_name
        self.updated_at = datetime.now(timezone.utc)
