"""Application service (use case) for Product operations."""

import logging
from uuid import UUID

from app.application.interfaces import BrandRepository, ProductRepository
from app.application.schemas import (
    ProductCreate,
    ProductFilterRequest,
    ProductResponse,
    ProductUpdate,
)
from app.domain.entities import Product
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from app.infrastructure.telemetry import count_success, traced
from app.infrastructure.telemetry.metrics import (
    products_created_total,
    products_deleted_total,
    products_updated_total,
)

logger = logging.getLogger(__name__)


class ProductService:
    """Orchestrates product business rules.

    Needs the brand repository as well, to verify that the brand a product
    points at exists before the product is written.
    """

    def __init__(self, repository: ProductRepository, brand_repository: BrandRepository):
        self._repository = repository
        self._brand_repository = brand_repository

    @traced("service.product.create")
    @count_success(products_created_total)
    async def create_product(self, data: ProductCreate) -> ProductResponse:
        if not await self._brand_repository.exists_by_id(data.brand_id):
            raise EntityNotFoundError("Brand", data.brand_id)

        if await self._repository.exists_by_name(data.product_name):
            raise DuplicateEntityError("Product", "product_name", data.product_name)

        product = await self._repository.create(
            Product(
                product_name=data.product_name,
                price=data.price,
                quantity=data.quantity,
                brand_id=data.brand_id,
            )
        )
        await self._repository.commit()
        logger.info("Created product %s (%s)", product.id, product.product_name)
        return ProductResponse.from_entity(product)

    @traced("service.product.get")
    async def get_product(self, product_id: UUID) -> ProductResponse:
        product = await self._get_or_raise(product_id)
        return ProductResponse.from_entity(product)

    @traced("service.product.list")
    async def list_products(
        self, filters: ProductFilterRequest
    ) -> tuple[list[ProductResponse], int]:
        products, total = await self._repository.get_all_with_filter(filters.to_filter())
        return [ProductResponse.from_entity(p) for p in products], total

    @traced("service.product.update")
    @count_success(products_updated_total)
    async def update_product(self, product_id: UUID, data: ProductUpdate) -> ProductResponse:
        product = await self._get_or_raise(product_id)

        if data.product_name and data.product_name != product.product_name:
            if await self._repository.exists_by_name(data.product_name):
                raise DuplicateEntityError("Product", "product_name", data.product_name)

        if data.brand_id is not None and data.brand_id != product.brand_id:
            if not await self._brand_repository.exists_by_id(data.brand_id):
                raise EntityNotFoundError("Brand", data.brand_id)

        product.update(
            product_name=data.product_name,
            price=data.price,
            quantity=data.quantity,
            brand_id=data.brand_id,
        )
        await self._repository.update(product)
        await self._repository.commit()
        return ProductResponse.from_entity(await self._get_or_raise(product_id))

    @traced("service.product.delete")
    @count_success(products_deleted_total)
    async def delete_product(self, product_id: UUID) -> None:
        if not await self._repository.exists_by_id(product_id):
            raise EntityNotFoundError("Product", product_id)
        await self._repository.delete(product_id)
        await self._repository.commit()
        logger.info("Deleted product %s", product_id)

    async def _get_or_raise(self, product_id: UUID) -> Product:
        product = await self._repository.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return product
