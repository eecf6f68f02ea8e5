"""Permit office search endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.permit_offices.search_service import OfficeFilters, OfficeSearchService
from app.core.config import settings
from app.core.db import get_session
from app.database.repositories import PermitOfficeRepository
from app.models.geocoding import GeoPoint
from app.models.permit_office import OfficeSearchResponse

router = APIRouter(prefix="/permit-offices", tags=["permit-offices"])


def get_office_search_service(
    session: AsyncSession | None = Depends(get_session),
) -> OfficeSearchService:
    """Build the search service for the request's database session."""
    return OfficeSearchService(PermitOfficeRepository(session))


@router.get("", response_model=OfficeSearchResponse)
async def search_permit_offices(
    lat: Optional[float] = Query(
        None, ge=-90, le=90, description="Latitude to rank offices from"
    ),
    lng: Optional[float] = Query(
        None, ge=-180, le=180, description="Longitude to rank offices from"
    ),
    city: Optional[str] = Query(None, description="City name or part of it"),
    county: Optional[str] = Query(None, description="County name or part of it"),
    state: Optional[str] = Query(
        None, description=f"State code (defaults to '{settings.DEFAULT_STATE}')"
    ),
    service: OfficeSearchService = Depends(get_office_search_service),
) -> OfficeSearchResponse:
    """
    Search permit offices for a jurisdiction.

    Offices are ranked by distance when both ``lat`` and ``lng`` are given.
    """
    point = None
    if lat is not None and lng is not None:
        point = GeoPoint(latitude=lat, longitude=lng)

    result = await service.search(
        OfficeFilters(state=state, city=city, county=county),
        point=point,
        limit=settings.OFFICE_SEARCH_LIMIT,
    )
    return OfficeSearchResponse(
        success=True,
        offices=result.offices,
        count=result.count,
        source=result.source,
    )
