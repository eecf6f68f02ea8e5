"""Geocoding provider adapters.

Each adapter wraps one upstream geocoding service, issues a single lookup per
call and normalizes the first match into a ``GeocodeResult``. Failures are
logged and reported as a failed ``Outcome``; adapters never raise.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from geopy.exc import (
    GeocoderServiceError,
    GeocoderTimedOut,
    GeocoderUnavailable,
    GeopyError,
)
from geopy.geocoders import GoogleV3, Nominatim
from geopy.location import Location

from app.core.exceptions import UpstreamProviderError
from app.core.geocoding.extractor import extract_components
from app.core.outcome import Outcome
from app.models.geocoding import GeocodeResult, GeocodeSource

logger = logging.getLogger(__name__)

ProviderOutcome = Outcome[GeocodeResult]

COUNTY_SUFFIX = " County"

LOCATIONIQ_DOMAIN = "us1.locationiq.com"
USER_AGENT = "permit-office-locator"


class LocationIQGeocoder(Nominatim):
    """LocationIQ search API, a hosted Nominatim with key authentication.

    Requests go to ``https://<domain>/v1/search`` with the access token sent
    as the ``key`` query parameter. Response parsing is Nominatim's.
    """

    geocode_path = "/v1/search"
    reverse_path = "/v1/reverse"

    def __init__(
        self,
        api_key: str,
        *,
        domain: str = LOCATIONIQ_DOMAIN,
        timeout: int = 10,
        user_agent: str = USER_AGENT,
        adapter_factory: Any = None,
    ) -> None:
        super().__init__(
            timeout=timeout,
            domain=domain,
            user_agent=user_agent,
            adapter_factory=adapter_factory,
        )
        self.api_key = api_key

    def _construct_url(self, base_api: str, params: dict[str, Any]) -> str:
        params["key"] = self.api_key
        return super()._construct_url(base_api, params)


class GeoProvider(ABC):
    """Base class for a single upstream geocoding service."""

    name: str = "provider"

    def __init__(self, source: GeocodeSource) -> None:
        self.source = source

    @property
    @abstractmethod
    def configured(self) -> bool:
        """Whether the provider has the credentials it needs."""

    @abstractmethod
    def _lookup(self, address: str) -> Location | None:
        """Issue the upstream request and return the first match, if any."""

    @abstractmethod
    def _normalize(self, location: Location) -> GeocodeResult:
        """Convert the provider's match into a ``GeocodeResult``."""

    def geocode(self, address: str) -> ProviderOutcome:
        """Geocode an address with this provider.

        Args:
            address: Non-empty address string

        Returns:
            Found outcome with the normalized result, empty outcome when the
            provider is unconfigured or has no match, failed outcome otherwise
        """
        if not self.configured:
            logger.warning(f"{self.name} geocoder not configured, skipping")
            return Outcome.empty()

        try:
            location = self._lookup(address)
            if location is None:
                logger.info(f"{self.name} found no match for '{address[:50]}'")
                return Outcome.empty()
            try:
                result = self._normalize(location)
            except (KeyError, TypeError, ValueError) as e:
                raise UpstreamProviderError(self.name, f"malformed response: {e}") from e
        except (GeocoderTimedOut, GeocoderUnavailable, GeocoderServiceError) as e:
            logger.warning(f"{self.name} geocoding failed for '{address[:50]}': {e}")
            return Outcome.failed(str(e))
        except (GeopyError, UpstreamProviderError) as e:
            logger.warning(f"{self.name} returned an unusable response: {e}")
            return Outcome.failed(str(e))
        except Exception as e:
            logger.exception(f"Unexpected {self.name} error for '{address[:50]}': {e}")
            return Outcome.failed(str(e))

        return Outcome.found(result.model_copy(update={"source": self.source}))


class LocationIQProvider(GeoProvider):
    """LocationIQ search API (OpenStreetMap data, single display label)."""

    name = "locationiq"

    def __init__(
        self,
        api_key: str | None,
        source: GeocodeSource = GeocodeSource.PRIMARY,
        domain: str = LOCATIONIQ_DOMAIN,
        country_codes: str | None = "us",
        timeout: int = 10,
        client: Any = None,
        adapter_factory: Any = None,
    ) -> None:
        super().__init__(source)
        self.api_key = api_key
        self.country_codes = country_codes
        self.client = client
        if self.client is None and api_key:
            self.client = LocationIQGeocoder(
                api_key, domain=domain, timeout=timeout, adapter_factory=adapter_factory
            )

    @property
    def configured(self) -> bool:
        return bool(self.api_key) and self.client is not None

    def _lookup(self, address: str) -> Location | None:
        return self.client.geocode(
            address, exactly_one=True, limit=1, country_codes=self.country_codes
        )

    def _normalize(self, location: Location) -> GeocodeResult:
        display_name = location.raw.get("display_name") or location.address or ""
        city, county, state = extract_components(display_name)
        return GeocodeResult(
            latitude=float(location.latitude),
            longitude=float(location.longitude),
            formatted_address=display_name,
            city=city,
            county=county,
            state=state,
        )


def _component(components: list[dict[str, Any]], kind: str, field: str) -> str:
    """Return ``field`` of the first address component tagged ``kind``."""
    for component in components:
        if kind in component.get("types", []):
            return component.get(field) or ""
    return ""


class GoogleMapsProvider(GeoProvider):
    """Google Geocoding API (structured address components)."""

    name = "google"

    def __init__(
        self,
        api_key: str | None,
        source: GeocodeSource = GeocodeSource.SECONDARY,
        timeout: int = 10,
        client: Any = None,
    ) -> None:
        super().__init__(source)
        self.api_key = api_key
        self.client = client
        if self.client is None and api_key:
            self.client = GoogleV3(api_key=api_key, timeout=timeout)

    @property
    def configured(self) -> bool:
        return bool(self.api_key) and self.client is not None

    def _lookup(self, address: str) -> Location | None:
        return self.client.geocode(address, exactly_one=True)

    def _normalize(self, location: Location) -> GeocodeResult:
        components = location.raw["address_components"]
        county = _component(components, "administrative_area_level_2", "long_name")
        return GeocodeResult(
            latitude=float(location.latitude),
            longitude=float(location.longitude),
            formatted_address=location.raw.get("formatted_address")
            or location.address
            or "",
            city=_component(components, "locality", "long_name"),
            county=county.removesuffix(COUNTY_SUFFIX),
            state=_component(components, "administrative_area_level_1", "short_name"),
        )
