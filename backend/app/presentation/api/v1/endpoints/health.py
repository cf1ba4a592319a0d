"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Liveness probe; does not touch the database."""
    return {"status": "OK"}
