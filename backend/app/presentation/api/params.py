"""Permissive query-parameter parsing.

List endpoints never fail on a bad query string: unparseable values fall
back to "not provided" (filters) or to the defaults (pagination).
"""

from typing import Callable, TypeVar
from uuid import UUID

from fastapi import Query

from app.application.schemas import BrandFilterRequest, ProductFilterRequest
from app.presentation.api.responses import normalize_pagination

T = TypeVar("T")


def parse_optional(raw: str | None, parser: Callable[[str], T]) -> T | None:
    """Parse ``raw`` with ``parser``; empty or invalid input yields None."""
    if raw is None or raw.strip() == "":
        return None
    try:
        return parser(raw.strip())
    except ValueError:
        return None


def _parse_float(raw: str) -> float:
    value = float(raw)
    if value != value or value in (float("inf"), float("-inf")):
        raise ValueError(f"not a finite number: {raw}")
    return value


def brand_filter_params(
    page: str | None = Query(None, description="Page number (default: 1)"),
    per_page: str | None = Query(None, description="Items per page (default: 10, max: 100)"),
    search: str | None = Query(None, description="Case-insensitive substring of the brand name"),
) -> BrandFilterRequest:
    page_no, size = normalize_pagination(parse_optional(page, int), parse_optional(per_page, int))
    return BrandFilterRequest(search=search or None, page=page_no, per_page=size)


def product_filter_params(
    page: str | None = Query(None, description="Page number (default: 1)"),
    per_page: str | None = Query(None, description="Items per page (default: 10, max: 100)"),
    brand_id: str | None = Query(None, description="Filter by brand ID"),
    min_price: str | None = Query(None, description="Minimum price (inclusive)"),
    max_price: str | None = Query(None, description="Maximum price (inclusive)"),
    min_qty: str | None = Query(None, description="Minimum quantity (inclusive)"),
    max_qty: str | None = Query(None, description="Maximum quantity (inclusive)"),
) -> ProductFilterRequest:
    page_no, size = normalize_pagination(parse_optional(page, int), parse_optional(per_page, int))
    return ProductFilterRequest(
        brand_id=parse_optional(brand_id, UUID),
        min_price=parse_optional(min_price, _parse_float),
        max_price=parse_optional(max_price, _parse_float),
        min_qty=parse_optional(min_qty, int),
        max_qty=parse_optional(max_qty, int),
        page=page_no,
        per_page=size,
    )
