"""Health Routes — is the blog API up, and can it reach the post store.

Invariants:
    - GET /api/health/ answers 200 without touching the database
    - GET /api/health/ready answers 503 when the posts database cannot run SELECT 1
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from blog.infrastructure import database

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "healthy", "service": "blog-api"}


@router.get("/ready")
async def readiness_check():
    """200 once the post store answers; 503 before init_db() or while it is down."""
    manager = database.db_manager
    store_ok = await manager.health_check() if manager else False
    if not store_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "post_store_unavailable"},
        )
    return {"status": "ready", "checks": {"post_store": "healthy"}}
