"""Pydantic DTOs (Data Transfer Objects) for the Product feature."""

from uuid import UUID

from pydantic import BaseModel, Field

from app.domain.entities import Product, ProductFilter

from .brand import BrandResponse
from .common import calculate_offset, format_timestamp

# NUMERIC(15, 2) and a 32-bit INTEGER column
MAX_PRICE = 9_999_999_999_999.99
MAX_QUANTITY = 2**31 - 1


class ProductCreate(BaseModel):
    """Schema for creating a new product."""

    product_name: str = Field(..., min_length=1, max_length=255, examples=["Widget"])
    price: float = Field(..., gt=0, le=MAX_PRICE, allow_inf_nan=False, examples=[19.99])
    quantity: int = Field(..., ge=0, le=MAX_QUANTITY, examples=[100])
    brand_id: UUID


class ProductUpdate(BaseModel):
    """Schema for updating a product — every field optional.

    An empty name, a non-positive price or a negative quantity is accepted
    and treated the same as an omitted field.
    """

    product_name: str | None = Field(None, max_length=255)
    price: float | None = Field(None, le=MAX_PRICE, allow_inf_nan=False)
    quantity: int | None = Field(None, le=MAX_QUANTITY)
    brand_id: UUID | None = None


class ProductResponse(BaseModel):
    """Schema returned to the client."""

    id: UUID
    product_name: str
    price: float
    quantity: int
    brand_id: UUID
    brand: BrandResponse | None = None
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            product_name=product.product_name,
            price=product.price,
            quantity=product.quantity,
            brand_id=product.brand_id,
            brand=BrandResponse.from_entity(product.brand) if product.brand else None,
            created_at=format_timestamp(product.created_at),
            updated_at=format_timestamp(product.updated_at),
        )


class ProductFilterRequest(BaseModel):
    """Normalized query parameters for listing products."""

    brand_id: UUID | None = None
    min_price: float | None = None
    max_price: float | None = None
    min_qty: int | None = None
    max_qty: int | None = None
    page: int = 1
    per_page: int = 10

    def to_filter(self) -> ProductFilter:
        return ProductFilter(
            brand_id=self.brand_id,
            min_price=self.min_price,
            max_price=self.max_price,
            min_qty=self.min_qty,
            max_qty=self.max_qty,
            limit=self.per_page,
            offset=calculate_offset(self.page, self.per_page),
        )
