"""API and domain models."""

from .geocoding import (
    GeocodeRequest,
    GeocodeResponse,
    GeocodeResult,
    GeocodeSource,
    GeoPoint,
)
from .permit_office import (
    OfficeSearchResponse,
    OfficeSource,
    PermitOffice,
    RankedOffice,
)

__all__ = [
    "GeoPoint",
    "GeocodeRequest",
    "GeocodeResponse",
    "GeocodeResult",
    "GeocodeSource",
    "OfficeSearchResponse",
    "OfficeSource",
    "PermitOffice",
    "RankedOffice",
]
