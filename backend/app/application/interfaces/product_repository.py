"""Abstract repository interface (port) for Product persistence."""

from abc import ABC, abstractmethod
from uuid import UUID

from app.domain.entities import Product, ProductFilter


class ProductRepository(ABC):
    """Port for product persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Persist a new product and return it with store-assigned timestamps."""
        ...

    @abstractmethod
    async def get_by_id(self, product_id: UUID) -> Product | None:
        """Retrieve a live product by its UUID, with its brand embedded."""
        ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Product | None:
        ...

    @abstractmethod
    async def exists_by_id(self, product_id: UUID) -> bool:
        ...

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool:
        ...

    @abstractmethod
    async def get_all_with_filter(
        self, product_filter: ProductFilter
    ) -> tuple[list[Product], int]:
        """Return one page of matching products plus the total match count."""
        ...

    @abstractmethod
    async def update(self, product: Product) -> None:
        """Write the mutable columns back. Raises EntityNotFoundError if the row is gone."""
        ...

    @abstractmethod
    async def delete(self, product_id: UUID) -> None:
        """Soft-delete a product. Raises EntityNotFoundError when no live row matched."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        """Make every write issued through this repository durable."""
        ...
