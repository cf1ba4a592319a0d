"""Brand CRUD endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.application.schemas import BrandCreate, BrandFilterRequest, BrandUpdate
from app.application.services import BrandService
from app.infrastructure.dependencies import get_brand_service
from app.presentation.api import responses
from app.presentation.api.errors import translate_errors
from app.presentation.api.params import brand_filter_params

router = APIRouter(prefix="/brands", tags=["Brands"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_brand(
    data: BrandCreate,
    service: BrandService = Depends(get_brand_service),
) -> JSONResponse:
    """Create a new brand."""
    with translate_errors("Failed to create brand"):
        brand = await service.create_brand(data)
    return responses.created(brand, "Brand created successfully")


@router.get("")
async def list_brands(
    filters: BrandFilterRequest = Depends(brand_filter_params),
    service: BrandService = Depends(get_brand_service),
) -> JSONResponse:
    """Retrieve a paginated list of brands, optionally filtered by name."""
    with translate_errors("Failed to get brands"):
        brands, total = await service.list_brands(filters)
    return responses.with_pagination(
        brands,
        "Brands retrieved successfully",
        filters.page,
        filters.per_page,
        total,
    )


@router.get("/{brand_id}")
async def get_brand(
    brand_id: UUID,
    service: BrandService = Depends(get_brand_service),
) -> JSONResponse:
    """Retrieve a single brand by ID."""
    with translate_errors("Failed to get brand"):
        brand = await service.get_brand(brand_id)
    return responses.success(brand, "Brand retrieved successfully")


@router.put("/{brand_id}")
async def update_brand(
    brand_id: UUID,
    data: BrandUpdate,
    service: BrandService = Depends(get_brand_service),
) -> JSONResponse:
    """Rename an existing brand."""
    with translate_errors("Failed to update brand"):
        brand = await service.update_brand(brand_id, data)
    return responses.success(brand, "Brand updated successfully")


@router.delete("/{brand_id}")
async def delete_brand(
    brand_id: UUID,
    service: BrandService = Depends(get_brand_service),
) -> JSONResponse:
    """Delete a brand; refused while products still reference it."""
    with translate_errors("Failed to delete brand"):
        await service.delete_brand(brand_id)
    return responses.success(None, "Brand deleted successfully")
