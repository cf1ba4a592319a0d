"""Pydantic DTOs (Data Transfer Objects) for the Brand feature."""

from uuid import UUID

from pydantic import BaseModel, Field

from app.domain.entities import Brand, BrandFilter

from .common import calculate_offset, format_timestamp


class BrandCreate(BaseModel):
    """Schema for creating a new brand."""

    brand_name: str = Field(..., min_length=1, max_length=255, examples=["Acme"])


class BrandUpdate(BaseModel):
    """Schema for renaming a brand — the name is the only mutable field."""

    brand_name: str = Field(..., min_length=1, max_length=255, examples=["Acme Corp"])


class BrandResponse(BaseModel):
    """Schema returned to the client."""

    id: UUID
    brand_name: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, brand: Brand) -> "BrandResponse":
        return cls(
            id=brand.id,
            brand_name=brand.brand_name,
            created_at=format_timestamp(brand.created_at),
            updated_at=format_timestamp(brand.updated_at),
        )


class BrandFilterRequest(BaseModel):
    """Normalized query parameters for listing brands."""

    search: str | None = None
    page: int = 1
    per_page: int = 10

    def to_filter(self) -> BrandFilter:
        return BrandFilter(
            search=self.search or None,
            limit=self.per_page,
            offset=calculate_offset(self.page, self.per_page),
        )
