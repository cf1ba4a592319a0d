"""Mapping of domain outcomes to HTTP status codes and error envelopes.

This is the only place where exceptions become status codes:
    EntityNotFoundError                      → 404
    DomainValidationError, ConflictError     → 400
    StorageError and anything unexpected     → 500
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.exceptions import (
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
    StorageError,
)
from app.presentation.api import responses

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """An error already classified for transport; rendered as an error envelope."""

    def __init__(self, status_code: int, message: str, errors: list[str]):
        self.status_code = status_code
        self.message = message
        self.errors = errors
        super().__init__(message)


@contextmanager
def translate_errors(message: str) -> Iterator[None]:
    """Re-raise domain exceptions from the enclosed block as ApiError.

    ``message`` is the envelope message (e.g. "Failed to create brand");
    the exception text becomes the single entry of ``errors``.
    """
    try:
        yield
    except EntityNotFoundError as exc:
        raise ApiError(status.HTTP_404_NOT_FOUND, message, [str(exc)]) from exc
    except (DomainValidationError, ConflictError) as exc:
        logger.info("%s: %s", message, exc)
        raise ApiError(status.HTTP_400_BAD_REQUEST, message, [str(exc)]) from exc
    except StorageError as exc:
        logger.error("%s: %s", message, exc, exc_info=True)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, message, [str(exc)]) from exc


def _format_validation_error(error: dict) -> str:
    location = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
    if error.get("type") == "json_invalid":
        detail = error.get("ctx", {}).get("error")
        return f"{error['msg']}: {detail}" if detail else error["msg"]
    if location:
        return f"{'.'.join(location)}: {error['msg']}"
    return error["msg"]


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return responses.error(exc.status_code, exc.message, exc.errors)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        message = "Invalid request body"
    elif errors and all(err.get("loc", ("",))[0] == "path" for err in errors):
        message = "Invalid path parameter"
    else:
        message = "Validation failed"
    return responses.error(
        status.HTTP_400_BAD_REQUEST,
        message,
        [_format_validation_error(err) for err in errors],
    )


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return responses.error(exc.status_code, str(exc.detail), [str(exc.detail)])


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return responses.error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        [str(exc)],
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
