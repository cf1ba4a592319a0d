"""Response envelope helpers — every endpoint answers through these."""

import math
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from app.application.schemas import PaginationMeta, ResponseEnvelope

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100


def render(envelope: ResponseEnvelope) -> JSONResponse:
    return JSONResponse(
        status_code=envelope.code,
        content=envelope.model_dump(mode="json", exclude_none=True),
    )


def success(data: Any, message: str) -> JSONResponse:
    return render(ResponseEnvelope(code=status.HTTP_200_OK, message=message, data=data))


def created(data: Any, message: str) -> JSONResponse:
    return render(ResponseEnvelope(code=status.HTTP_201_CREATED, message=message, data=data))


def error(code: int, message: str, errors: list[str]) -> JSONResponse:
    return render(ResponseEnvelope(code=code, message=message, errors=errors))


def with_pagination(
    data: list[Any], message: str, page: int, per_page: int, total: int
) -> JSONResponse:
    meta = PaginationMeta(
        page=page,
        per_page=per_page,
        total=total,
        total_page=math.ceil(total / per_page),
    )
    return render(
        ResponseEnvelope(code=status.HTTP_200_OK, message=message, data=data, meta=meta)
    )


def normalize_pagination(page: int | None, per_page: int | None) -> tuple[int, int]:
    """Coerce page/per_page into range instead of rejecting them."""
    if page is None or page < 1:
        page = DEFAULT_PAGE
    if per_page is None or per_page < 1:
        per_page = DEFAULT_PER_PAGE
    if per_page > MAX_PER_PAGE:
        per_page = MAX_PER_PAGE
    return page, per_page
