"""Application service (use case) for Brand operations."""

import logging
from uuid import UUID

from app.application.interfaces import BrandRepository
from app.application.schemas import BrandCreate, BrandFilterRequest, BrandResponse, BrandUpdate
from app.domain.entities import Brand
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from app.infrastructure.telemetry import count_success, traced
from app.infrastructure.telemetry.metrics import (
    brands_created_total,
    brands_deleted_total,
    brands_updated_total,
)

logger = logging.getLogger(__name__)


class BrandService:
    """Orchestrates brand business rules. Depends on the repository port (DI)."""

    def __init__(self, repository: BrandRepository):
        self._repository = repository

    @traced("service.brand.create")
    @count_success(brands_created_total)
    async def create_brand(self, data: BrandCreate) -> BrandResponse:
        if await self._repository.exists_by_name(data.brand_name):
            raise DuplicateEntityError("Brand", "brand_name", data.brand_name)

        brand = await self._repository.create(Brand(brand_name=data.brand_name))
        await self._repository.commit()
        logger.info("Created brand %s (%s)", brand.id, brand.brand_name)
        return BrandResponse.from_entity(brand)

    @traced("service.brand.get")
    async def get_brand(self, brand_id: UUID) -> BrandResponse:
        brand = await self._get_or_raise(brand_id)
        return BrandResponse.from_entity(brand)

    @traced("service.brand.list")
    async def list_brands(self, filters: BrandFilterRequest) -> tuple[list[BrandResponse], int]:
        brands, total = await self._repository.get_all_with_filter(filters.to_filter())
        return [BrandResponse.from_entity(b) for b in brands], total

    @traced("service.brand.update")
    @count_success(brands_updated_total)
    async def update_brand(self, brand_id: UUID, data: BrandUpdate) -> BrandResponse:
        brand = await self._get_or_raise(brand_id)

        if data.brand_name != brand.brand_name:
            if await self._repository.exists_by_name(data.brand_name):
                raise DuplicateEntityError("Brand", "brand_name", data.brand_name)

        brand.update(brand_name=data.brand_name)
        await self._repository.update(brand)
        await self._repository.commit()
        return BrandResponse.from_entity(await self._get_or_raise(brand_id))

    @traced("service.brand.delete")
    @count_success(brands_deleted_total)
    async def delete_brand(self, brand_id: UUID) -> None:
        if not await self._repository.exists_by_id(brand_id):
            raise EntityNotFoundError("Brand", brand_id)
        await self._repository.delete(brand_id)
        await self._repository.commit()
        logger.info("Deleted brand %s", brand_id)

    async def _get_or_raise(self, brand_id: UUID) -> Brand:
        brand = await self._repository.get_by_id(brand_id)
        if brand is None:
            raise EntityNotFoundError("Brand", brand_id)
        return brand
