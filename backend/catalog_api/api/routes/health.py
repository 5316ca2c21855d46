"""Health & Version — constant/near-constant system endpoints.

Invariants:
    - GET /api/v1/health always returns 200 with the current UTC timestamp
    - GET /api/v1/version returns the configured version pair
    - Neither touches the database
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from catalog_api.config import Settings, get_settings

router = APIRouter(prefix="/api/v1", tags=["system"])


@router.get("/health")
async def health_check():
    """Liveness check."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/version")
async def version(settings: Settings = Depends(get_settings)):
    return {
        "version": settings.app_version,
        "api_version": settings.api_version,
    }
