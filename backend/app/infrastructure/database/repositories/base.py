"""Shared plumbing for the SQLAlchemy repositories."""

import functools
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import ParamSpec, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.domain.exceptions import StorageConflictError, StorageError
from app.infrastructure.telemetry.metrics import db_calls_total, db_errors_total
from app.infrastructure.telemetry.tracing import traced

P = ParamSpec("P")
R = TypeVar("R")

logger = logging.getLogger(__name__)

_UNIQUE_VIOLATION = "23505"


def repository_operation(
    span_name: str, operation: str
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Trace, count and translate store failures for one repository method.

    Domain exceptions raised by the method pass through untouched. A
    unique-index violation becomes StorageConflictError; any other SQLAlchemy
    failure (CHECK and foreign-key violations included) becomes StorageError
    carrying ``operation`` as context.
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @traced(span_name)
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            db_calls_total.labels(operation=operation).inc()
            try:
                return await func(*args, **kwargs)
            except IntegrityError as exc:
                db_errors_total.labels(operation=operation).inc()
                if is_unique_violation(exc):
                    raise StorageConflictError(operation, str(exc.orig)) from exc
                raise StorageError(operation, str(exc.orig)) from exc
            except SQLAlchemyError as exc:
                db_errors_total.labels(operation=operation).inc()
                raise StorageError(operation, str(exc)) from exc

        return wrapper

    return decorator


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the driver reports a unique-constraint violation.

    PostgreSQL drivers expose SQLSTATE 23505 on the error (asyncpg on the
    wrapped cause); SQLite only says so in the message.
    """
    for error in (exc.orig, getattr(exc.orig, "__cause__", None)):
        if error is None:
            continue
        code = getattr(error, "sqlstate", None) or getattr(error, "pgcode", None)
        if code == _UNIQUE_VIOLATION:
            return True
    return "UNIQUE constraint failed" in str(exc.orig)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
