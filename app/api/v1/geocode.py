"""Geocoding API endpoints."""

from fastapi import APIRouter, Body, Depends

from app.core.geocoding.service import GeocodingService, get_geocoding_service
from app.models.geocoding import GeocodeRequest, GeocodeResponse

router = APIRouter(prefix="/geocode", tags=["geocode"])


@router.post("", response_model=GeocodeResponse)
def geocode_address(
    payload: GeocodeRequest | None = Body(None),
    service: GeocodingService = Depends(get_geocoding_service),
) -> GeocodeResponse:
    """
    Geocode a street address.

    Tries LocationIQ first and Google Maps second; ``source`` tells which
    provider slot answered. Providers make blocking HTTP calls, so this route
    runs in the threadpool.
    """
    result = service.resolve(payload.address if payload else None)
    return GeocodeResponse.from_result(result)
