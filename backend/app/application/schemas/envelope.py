"""Uniform response envelope wrapped around every HTTP response body."""

from typing import Any

from pydantic import BaseModel


class PaginationMeta(BaseModel):
    page: int
    per_page: int
    total: int
    total_page: int


class ResponseEnvelope(BaseModel):
    """``{code, message, data?, meta?, errors?}`` — unset members are omitted on output."""

    code: int
    message: str
    data: Any = None
    meta: PaginationMeta | None = None
    errors: list[str] | None = None
