"""API v1 router module."""

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.api.v1.geocode import router as geocode_router
from app.api.v1.permit_offices.router import router as permit_offices_router
from app.core.config import settings

router = APIRouter(default_response_class=JSONResponse)


@router.get("/health")
async def health_check(request: Request) -> dict[str, Any]:
    """Basic liveness check.

    The database is not checked: office search keeps answering
    from the embedded dataset while the store is down.
    """
    return {
        "status": "healthy",
        "version": settings.version,
        "correlation_id": getattr(request.state, "correlation_id", None),
    }


router.include_router(geocode_router)
router.include_router(permit_offices_router)
