"""Failure paths through the HTTP layer: store errors, store-level conflicts, bad ids."""

import uuid

import pytest
from fastapi import Depends, FastAPI
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services import BrandService
from app.domain.exceptions import StorageError
from app.infrastructure.database import get_db_session
from app.infrastructure.database.repositories import SQLAlchemyBrandRepository
from app.infrastructure.dependencies import get_brand_service
from tests.unit.fakes import FakeBrandRepository

BRANDS = "/api/v1/brands"


class UnavailableBrandRepository(FakeBrandRepository):
    async def get_all_with_filter(self, brand_filter):
        raise StorageError("list brands", "connection refused")


class UncheckedBrandRepository(SQLAlchemyBrandRepository):
    """Skips the name pre-check so only the unique index can catch duplicates."""

    async def exists_by_name(self, name: str) -> bool:
        return False


class RecordingBrandRepository(FakeBrandRepository):
    def __init__(self):
        super().__init__()
        self.calls: list[str] = []

    async def get_by_id(self, brand_id):
        self.calls.append("get_by_id")
        return await super().get_by_id(brand_id)

    async def exists_by_id(self, brand_id):
        self.calls.append("exists_by_id")
        return await super().exists_by_id(brand_id)

    async def update(self, brand):
        self.calls.append("update")
        await super().update(brand)

    async def delete(self, brand_id):
        self.calls.append("delete")
        await super().delete(brand_id)


@pytest.mark.asyncio
async def test_failed_commit_is_reported_and_nothing_is_persisted(
    client: AsyncClient, monkeypatch
):
    async def failing_commit(self):
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(AsyncSession, "commit", failing_commit)

    response = await client.post(BRANDS, json={"brand_name": "Acme"})

    assert response.status_code == 500
    body = response.json()
    assert body["message"] == "Failed to create brand"
    assert body["errors"][0].startswith("failed to commit brand changes")
    assert "data" not in body

    listing = await client.get(BRANDS)
    assert listing.json()["meta"]["total"] == 0


@pytest.mark.asyncio
async def test_storage_error_maps_to_500(app: FastAPI, client: AsyncClient):
    app.dependency_overrides[get_brand_service] = lambda: BrandService(
        UnavailableBrandRepository()
    )

    response = await client.get(BRANDS)

    assert response.status_code == 500
    assert response.json() == {
        "code": 500,
        "message": "Failed to get brands",
        "errors": ["failed to list brands: connection refused"],
    }


@pytest.mark.asyncio
async def test_store_level_duplicate_maps_to_400(app: FastAPI, client: AsyncClient):
    async def unchecked_brand_service(session: AsyncSession = Depends(get_db_session)):
        yield BrandService(UncheckedBrandRepository(session))

    app.dependency_overrides[get_brand_service] = unchecked_brand_service

    first = await client.post(BRANDS, json={"brand_name": "Acme"})
    second = await client.post(BRANDS, json={"brand_name": "Acme"})

    assert first.status_code == 201
    assert second.status_code == 400
    body = second.json()
    assert body["message"] == "Failed to create brand"
    assert "UNIQUE constraint failed" in body["errors"][0]

    listing = await client.get(BRANDS)
    assert listing.json()["meta"]["total"] == 1


@pytest.mark.asyncio
async def test_malformed_id_never_reaches_the_repository(app: FastAPI, client: AsyncClient):
    repository = RecordingBrandRepository()
    app.dependency_overrides[get_brand_service] = lambda: BrandService(repository)

    responses = [
        await client.get(f"{BRANDS}/not-a-uuid"),
        await client.put(f"{BRANDS}/not-a-uuid", json={"brand_name": "Acme"}),
        await client.delete(f"{BRANDS}/not-a-uuid"),
    ]

    assert [r.status_code for r in responses] == [400, 400, 400]
    assert all(r.json()["message"] == "Invalid path parameter" for r in responses)
    assert repository.calls == []

    missing = await client.get(f"{BRANDS}/{uuid.uuid4()}")
    assert missing.status_code == 404
    assert repository.calls == ["get_by_id"]
