"""Health & Readiness — liveness and inventory readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 unless the store answers AND the products
      collection is readable; when ready it reports the collection's document count
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from inventory.core.errors import DatabaseError
from inventory.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "healthy", "service": "inventory-api"}


@router.get("/ready")
async def readiness_check():
    """Store connectivity plus a count of the products collection."""
    manager = database.db_manager
    if not manager or not await manager.health_check():
        return _not_ready("database_unavailable")
    try:
        documents = await manager.count_documents()
    except DatabaseError as e:
        # Store reachable but migrations not applied
        logger.error(f"Products collection unreadable: {e.detail}")
        return _not_ready("products_collection_unavailable")
    return {
        "status": "ready",
        "checks": {"database": "healthy"},
        "products": {"collection": "products", "documents": documents},
    }
