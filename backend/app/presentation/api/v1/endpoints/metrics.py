"""Prometheus scrape endpoint."""

from fastapi import APIRouter, Response

from app.infrastructure.telemetry import render_latest

router = APIRouter(tags=["Metrics"])


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    payload, content_type = render_latest()
    return Response(content=payload, media_type=content_type)
