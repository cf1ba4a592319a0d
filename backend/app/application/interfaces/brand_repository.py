"""Abstract repository interface (port) for Brand persistence."""

from abc import ABC, abstractmethod
from uuid import UUID

from app.domain.entities import Brand, BrandFilter


class BrandRepository(ABC):
    """Port for brand persistence — implemented in the infrastructure layer.

    Lookups return ``None`` for absent (or soft-deleted) brands; the caller
    decides whether absence is an error.
    """

    @abstractmethod
    async def create(self, brand: Brand) -> Brand:
        """Persist a new brand and return it with store-assigned timestamps."""
        ...

    @abstractmethod
    async def get_by_id(self, brand_id: UUID) -> Brand | None:
        """Retrieve a live brand by its UUID."""
        ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Brand | None:
        """Retrieve a live brand by its exact name."""
        ...

    @abstractmethod
    async def exists_by_id(self, brand_id: UUID) -> bool:
        ...

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool:
        ...

    @abstractmethod
    async def get_all_with_filter(self, brand_filter: BrandFilter) -> tuple[list[Brand], int]:
        """Return one page of matching brands plus the total match count."""
        ...

    @abstractmethod
    async def update(self, brand: Brand) -> None:
        """Write the mutable columns back. Raises EntityNotFoundError if the row is gone."""
        ...

    @abstractmethod
    async def delete(self, brand_id: UUID) -> None:
        """Soft-delete a brand.

        Raises EntityInUseError while live products still reference it and
        EntityNotFoundError when no live row matched.
        """
        ...

    @abstractmethod
    async def commit(self) -> None:
        """Make every write issued through this repository durable."""
        ...
