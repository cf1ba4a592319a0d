"""Shared helpers for DTO assembly."""

from datetime import datetime, timezone


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as ISO-8601 with second precision.

    Naive values (SQLite drops the offset) are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec="seconds")


def calculate_offset(page: int, per_page: int) -> int:
    """Row offset of the first item on a 1-based ``page``."""
    return (page - 1) * per_page
