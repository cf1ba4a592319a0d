"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services import BrandService, ProductService
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.repositories import (
    SQLAlchemyBrandRepository,
    SQLAlchemyProductRepository,
)


async def get_brand_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[BrandService, None]:
    """Provides a BrandService instance with its repository wired up."""
    yield BrandService(SQLAlchemyBrandRepository(session))


async def get_product_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProductService, None]:
    """Provides a ProductService wired to both the product and brand repositories."""
    yield ProductService(
        repository=SQLAlchemyProductRepository(session),
        brand_repository=SQLAlchemyBrandRepository(session),
    )
