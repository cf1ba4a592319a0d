"""Tests for the health check and metrics endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/v1/health", "/health"])
async def test_health_check_returns_200(client: AsyncClient, path: str):
    response = await client.get(path)

    assert response.status_code == 200
    assert response.json() == {"status": "OK"}


@pytest.mark.asyncio
async def test_metrics_endpoint_exposes_request_counters(client: AsyncClient):
    await client.get("/health")

    response = await client.get("/metrics")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "http_requests_total" in response.text
    assert "brands_created_total" in response.text


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client: AsyncClient):
    response = await client.get("/api/v1/nowhere")

    assert response.status_code == 404
    body = response.json()
    assert body["code"] == 404
    assert body["errors"]
