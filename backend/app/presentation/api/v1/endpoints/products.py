"""Product CRUD endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.application.schemas import ProductCreate, ProductFilterRequest, ProductUpdate
from app.application.services import ProductService
from app.infrastructure.dependencies import get_product_service
from app.presentation.api import responses
from app.presentation.api.errors import translate_errors
from app.presentation.api.params import product_filter_params

router = APIRouter(prefix="/products", tags=["Products"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    """Create a new product for an existing brand."""
    with translate_errors("Failed to create product"):
        product = await service.create_product(data)
    return responses.created(product, "Product created successfully")


@router.get("")
async def list_products(
    filters: ProductFilterRequest = Depends(product_filter_params),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    """Retrieve a paginated list of products filtered by brand, price or quantity."""
    with translate_errors("Failed to get products"):
        products, total = await service.list_products(filters)
    return responses.with_pagination(
        products,
        "Products retrieved successfully",
        filters.page,
        filters.per_page,
        total,
    )


@router.get("/{product_id}")
async def get_product(
    product_id: UUID,
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    """Retrieve a single product, with its brand, by ID."""
    with translate_errors("Failed to get product"):
        product = await service.get_product(product_id)
    return responses.success(product, "Product retrieved successfully")


@router.put("/{product_id}")
async def update_product(
    product_id: UUID,
    data: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    """Partially update a product; omitted fields keep their current value."""
    with translate_errors("Failed to update product"):
        product = await service.update_product(product_id, data)
    return responses.success(product, "Product updated successfully")


@router.delete("/{product_id}")
async def delete_product(
    product_id: UUID,
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    """Delete a product by ID."""
    with translate_errors("Failed to delete product"):
        await service.delete_product(product_id)
    return responses.success(None, "Product deleted successfully")
