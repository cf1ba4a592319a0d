"""Concrete repository implementation for Brand backed by SQLAlchemy."""

from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import BrandRepository
from app.domain.entities import Brand, BrandFilter
from app.domain.exceptions import DomainValidationError, EntityInUseError, EntityNotFoundError
from app.infrastructure.database.models import BrandModel, ProductModel

from .base import repository_operation, utcnow


class SQLAlchemyBrandRepository(BrandRepository):
    """Implements the BrandRepository port using SQLAlchemy async sessions.

    Every query is restricted to live rows (``deleted_at IS NULL``).
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def to_entity(model: BrandModel) -> Brand:
        """Map ORM model → domain entity."""
        return Brand(
            id=model.id,
            brand_name=model.brand_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )

    def _live(self):
        return (
            select(BrandModel)
            .where(BrandModel.deleted_at.is_(None))
            .execution_options(populate_existing=True)
        )

    @repository_operation("repository.brand.create", "create brand")
    async def create(self, brand: Brand) -> Brand:
        now = utcnow()
        model = BrandModel(
            id=brand.id,
            brand_name=brand.brand_name,
            created_at=now,
            updated_at=now,
        )
        self._session.add(model)
        await self._session.flush()
        return self.to_entity(model)

    @repository_operation("repository.brand.get_by_id", "get brand")
    async def get_by_id(self, brand_id: UUID) -> Brand | None:
        result = await self._session.execute(self._live().where(BrandModel.id == brand_id))
        model = result.scalar_one_or_none()
        return self.to_entity(model) if model else None

    @repository_operation("repository.brand.get_by_name", "get brand by name")
    async def get_by_name(self, name: str) -> Brand | None:
        result = await self._session.execute(
            self._live().where(BrandModel.brand_name == name)
        )
        model = result.scalar_one_or_none()
        return self.to_entity(model) if model else None

    @repository_operation("repository.brand.exists_by_id", "check brand existence")
    async def exists_by_id(self, brand_id: UUID) -> bool:
        stmt = select(
            self._live().where(BrandModel.id == brand_id).exists()
        )
        return bool(await self._session.scalar(stmt))

    @repository_operation("repository.brand.exists_by_name", "check brand name existence")
    async def exists_by_name(self, name: str) -> bool:
        stmt = select(
            self._live().where(BrandModel.brand_name == name).exists()
        )
        return bool(await self._session.scalar(stmt))

    @repository_operation("repository.brand.get_all_with_filter", "list brands")
    async def get_all_with_filter(self, brand_filter: BrandFilter) -> tuple[list[Brand], int]:
        if brand_filter.limit < 0 or brand_filter.offset < 0:
            raise DomainValidationError(
                "invalid pagination parameters: limit and offset must be non-negative"
            )

        stmt = self._live()
        if brand_filter.search:
            stmt = stmt.where(
                BrandModel.brand_name.icontains(brand_filter.search, autoescape=True)
            )

        total = await self._session.scalar(
            select(func.count()).select_from(stmt.subquery())
        ) or 0
        if brand_filter.offset >= total:
            return [], total

        stmt = (
            stmt.order_by(BrandModel.created_at.desc(), BrandModel.id.desc())
            .offset(brand_filter.offset)
            .limit(brand_filter.limit)
        )
        result = await self._session.execute(stmt)
        return [self.to_entity(row) for row in result.scalars().all()], total

    @repository_operation("repository.brand.update", "update brand")
    async def update(self, brand: Brand) -> None:
        result = await self._session.execute(
            update(BrandModel)
            .where(BrandModel.id == brand.id, BrandModel.deleted_at.is_(None))
            .values(brand_name=brand.brand_name, updated_at=utcnow())
        )
        if result.rowcount == 0:
            raise EntityNotFoundError("Brand", brand.id)

    @repository_operation("repository.brand.delete", "delete brand")
    async def delete(self, brand_id: UUID) -> None:
        dependents = await self._session.scalar(
            select(func.count())
            .select_from(ProductModel)
            .where(ProductModel.brand_id == brand_id, ProductModel.deleted_at.is_(None))
        ) or 0
        if dependents > 0:
            raise EntityInUseError("Brand", brand_id, "Product", dependents)

        now = utcnow()
        result = await self._session.execute(
            update(BrandModel)
            .where(BrandModel.id == brand_id, BrandModel.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now)
        )
        if result.rowcount == 0:
            raise EntityNotFoundError("Brand", brand_id)

    @repository_operation("repository.brand.commit", "commit brand changes")
    async def commit(self) -> None:
        await self._session.commit()
