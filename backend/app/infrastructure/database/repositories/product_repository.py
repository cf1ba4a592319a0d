"""Concrete repository implementation for Product backed by SQLAlchemy."""

from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.application.interfaces import ProductRepository
from app.domain.entities import Product, ProductFilter
from app.domain.exceptions import DomainValidationError, EntityNotFoundError
from app.infrastructure.database.models import ProductModel

from .base import repository_operation, utcnow
from .brand_repository import SQLAlchemyBrandRepository


class SQLAlchemyProductRepository(ProductRepository):
    """Implements the ProductRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def to_entity(model: ProductModel, with_brand: bool = False) -> Product:
        """Map ORM model → domain entity, embedding the brand when it was loaded."""
        return Product(
            id=model.id,
            product_name=model.product_name,
            price=float(model.price),
            quantity=model.quantity,
            brand_id=model.brand_id,
            brand=SQLAlchemyBrandRepository.to_entity(model.brand) if with_brand else None,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )

    def _live(self):
        return (
            select(ProductModel)
            .where(ProductModel.deleted_at.is_(None))
            .execution_options(populate_existing=True)
        )

    @repository_operation("repository.product.create", "create product")
    async def create(self, product: Product) -> Product:
        now = utcnow()
        model = ProductModel(
            id=product.id,
            product_name=product.product_name,
            price=product.price,
            quantity=product.quantity,
            brand_id=product.brand_id,
            created_at=now,
            updated_at=now,
        )
        self._session.add(model)
        await self._session.flush()
        return self.to_entity(model)

    @repository_operation("repository.product.get_by_id", "get product")
    async def get_by_id(self, product_id: UUID) -> Product | None:
        result = await self._session.execute(
            self._live()
            .options(joinedload(ProductModel.brand))
            .where(ProductModel.id == product_id)
        )
        model = result.scalar_one_or_none()
        return self.to_entity(model, with_brand=True) if model else None

    @repository_operation("repository.product.get_by_name", "get product by name")
    async def get_by_name(self, name: str) -> Product | None:
        result = await self._session.execute(
            self._live()
            .options(joinedload(ProductModel.brand))
            .where(ProductModel.product_name == name)
        )
        model = result.scalar_one_or_none()
        return self.to_entity(model, with_brand=True) if model else None

    @repository_operation("repository.product.exists_by_id", "check product existence")
    async def exists_by_id(self, product_id: UUID) -> bool:
        stmt = select(self._live().where(ProductModel.id == product_id).exists())
        return bool(await self._session.scalar(stmt))

    @repository_operation("repository.product.exists_by_name", "check product name existence")
    async def exists_by_name(self, name: str) -> bool:
        stmt = select(self._live().where(ProductModel.product_name == name).exists())
        return bool(await self._session.scalar(stmt))

    @repository_operation("repository.product.get_all_with_filter", "list products")
    async def get_all_with_filter(
        self, product_filter: ProductFilter
    ) -> tuple[list[Product], int]:
        if product_filter.limit < 0 or product_filter.offset < 0:
            raise DomainValidationError(
                "invalid pagination parameters: limit and offset must be non-negative"
            )

        stmt = self._live()
        if product_filter.brand_id is not None:
            stmt = stmt.where(ProductModel.brand_id == product_filter.brand_id)
        if product_filter.min_price is not None:
            stmt = stmt.where(ProductModel.price >= product_filter.min_price)
        if product_filter.max_price is not None:
            stmt = stmt.where(ProductModel.price <= product_filter.max_price)
        if product_filter.min_qty is not None:
            stmt = stmt.where(ProductModel.quantity >= product_filter.min_qty)
        if product_filter.max_qty is not None:
            stmt = stmt.where(ProductModel.quantity <= product_filter.max_qty)

        total = await self._session.scalar(
            select(func.count()).select_from(stmt.subquery())
        ) or 0
        if product_filter.offset >= total:
            return [], total

        stmt = (
            stmt.options(joinedload(ProductModel.brand))
            .order_by(ProductModel.created_at.desc(), ProductModel.id.desc())
            .offset(product_filter.offset)
            .limit(product_filter.limit)
        )
        result = await self._session.execute(stmt)
        return [
            self.to_entity(row, with_brand=True) for row in result.scalars().all()
        ], total

    @repository_operation("repository.product.update", "update product")
    async def update(self, product: Product) -> None:
        result = await self._session.execute(
            update(ProductModel)
            .where(ProductModel.id == product.id, ProductModel.deleted_at.is_(None))
            .values(
                product_name=product.product_name,
                price=product.price,
                quantity=product.quantity,
                brand_id=product.brand_id,
                updated_at=utcnow(),
            )
        )
        if result.rowcount == 0:
            raise EntityNotFoundError("Product", product.id)

    @repository_operation("repository.product.delete", "delete product")
    async def delete(self, product_id: UUID) -> None:
        now = utcnow()
        result = await self._session.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id, ProductModel.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now)
        )
        if result.rowcount == 0:
            raise EntityNotFoundError("Product", product_id)

    @repository_operation("repository.product.commit", "commit product changes")
    async def commit(self) -> None:
        await self._session.commit()
