"""Geocoding module for the application.

This package provides:
- Provider adapters for LocationIQ and Google Maps
- Locality extraction from free-text display labels
- The geocoding service that chains providers in priority order
"""

from app.core.geocoding.extractor import (
    extract_city,
    extract_components,
    extract_county,
    extract_state,
)
from app.core.geocoding.providers import (
    GeoProvider,
    GoogleMapsProvider,
    LocationIQProvider,
    ProviderOutcome,
)
from app.core.geocoding.service import GeocodingService, get_geocoding_service

__all__ = [
    "GeoProvider",
    "GeocodingService",
    "GoogleMapsProvider",
    "LocationIQProvider",
    "ProviderOutcome",
    "extract_city",
    "extract_components",
    "extract_county",
    "extract_state",
    "get_geocoding_service",
]
