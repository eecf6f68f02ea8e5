"""Geocoding service for the application.

This module chains geocoding providers in priority order:
- LocationIQ first (lower cost, OpenStreetMap based)
- Google Maps as the fallback
The first provider with a match answers; later providers are never called.
"""

from collections.abc import Sequence

from app.core.config import Settings, settings
from app.core.events import GEOCODE_ATTEMPTS_TOTAL
from app.core.exceptions import AddressRequiredError, GeocodeNotFoundError
from app.core.geocoding.providers import (
    GeoProvider,
    GoogleMapsProvider,
    LocationIQProvider,
)
from app.core.logging import get_logger
from app.models.geocoding import GeocodeResult, GeocodeSource

logger = get_logger()


class GeocodingService:
    """Resolve addresses by trying providers one after another."""

    def __init__(self, providers: Sequence[GeoProvider]):
        self.providers = list(providers)

    @classmethod
    def from_settings(cls, config: Settings) -> "GeocodingService":
        """Build the default LocationIQ -> Google chain from configuration."""
        return cls(
            [
                LocationIQProvider(
                    api_key=config.LOCATIONIQ_ACCESS_TOKEN,
                    source=GeocodeSource.PRIMARY,
                    domain=config.LOCATIONIQ_DOMAIN,
                    country_codes=config.GEOCODING_COUNTRY_CODES,
                    timeout=config.GEOCODING_TIMEOUT,
                ),
                GoogleMapsProvider(
                    api_key=config.GOOGLE_MAPS_API_KEY,
                    source=GeocodeSource.SECONDARY,
                    timeout=config.GEOCODING_TIMEOUT,
                ),
            ]
        )

    def resolve(self, address: str | None) -> GeocodeResult:
        """Geocode an address to coordinates and locality fields.

        Args:
            address: Free-text address

        Returns:
            The first provider's result, tagged with that provider's slot

        Raises:
            AddressRequiredError: If the address is missing or blank
            GeocodeNotFoundError: If no provider produced a match
        """
        if not address or not address.strip():
            raise AddressRequiredError()

        address = address.strip()
        for provider in self.providers:
            outcome = provider.geocode(address)
            GEOCODE_ATTEMPTS_TOTAL.labels(
                provider=provider.name, outcome=outcome.status.value
            ).inc()

            if outcome.is_found and outcome.value is not None:
                logger.info(
                    "geocode_resolved",
                    provider=provider.name,
                    source=provider.source.value,
                )
                return outcome.value

            logger.info(
                "geocode_provider_missed",
                provider=provider.name,
                outcome=outcome.status.value,
                error=outcome.error,
            )

        logger.warning("geocode_not_found", address=address[:100])
        raise GeocodeNotFoundError()


# Singleton instance
_geocoding_service: GeocodingService | None = None


def get_geocoding_service() -> GeocodingService:
    """Get or create the singleton geocoding service instance.

    Returns:
        GeocodingService instance
    """
    global _geocoding_service
    if _geocoding_service is None:
        _geocoding_service = GeocodingService.from_settings(settings)
    return _geocoding_service
