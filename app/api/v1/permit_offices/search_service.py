"""Permit office search with static-data fallback and distance ranking."""

import logging
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, field_validator

from app.core.config import settings
from app.core.distance import rank_by_distance
from app.core.events import OFFICE_SEARCH_TOTAL
from app.core.outcome import OutcomeStatus
from app.data.georgia_offices import GEORGIA_PERMIT_OFFICES
from app.database.repositories import PermitOfficeRepository
from app.models.geocoding import GeoPoint
from app.models.permit_office import OfficeSource, PermitOffice, RankedOffice

logger = logging.getLogger(__name__)


class OfficeFilters(BaseModel):
    """Jurisdiction filters; blank values count as absent."""

    model_config = ConfigDict(frozen=True)

    state: str | None = None
    city: str | None = None
    county: str | None = None

    @field_validator("state", "city", "county", mode="before")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        if isinstance(value, str):
            value = value.strip()
        return value or None

    @property
    def state_code(self) -> str:
        """Uppercase state code, defaulting to the configured jurisdiction."""
        return (self.state or settings.DEFAULT_STATE).upper()


class OfficeSearchResult(BaseModel):
    """Ranked offices plus where they came from."""

    offices: list[RankedOffice]
    source: OfficeSource

    @property
    def count(self) -> int:
        return len(self.offices)


def _contains(value: str, needle: str | None) -> bool:
    return needle is None or needle.lower() in value.lower()


def filter_static_offices(
    offices: Iterable[PermitOffice],
    city: str | None = None,
    county: str | None = None,
) -> list[PermitOffice]:
    """Apply the store's city/county substring filters to an in-memory corpus.

    Results are ordered by jurisdiction type, then city, like the store query.
    """
    matches = [
        office
        for office in offices
        if office.active
        and _contains(office.city, city)
        and _contains(office.county, county)
    ]
    return sorted(matches, key=lambda office: (office.jurisdiction_type, office.city))


class OfficeSearchService:
    """Find permit offices for a jurisdiction, nearest first."""

    def __init__(
        self,
        repository: PermitOfficeRepository,
        fallback_offices: Sequence[PermitOffice] = GEORGIA_PERMIT_OFFICES,
    ):
        self.repository = repository
        self.fallback_offices = fallback_offices

    async def search(
        self,
        filters: OfficeFilters,
        point: GeoPoint | None = None,
        limit: int = 10,
    ) -> OfficeSearchResult:
        """Search the store, falling back to the embedded dataset.

        Args:
            filters: State/city/county filters
            point: Optional point to rank offices by distance from
            limit: Maximum number of rows taken from the store

        Returns:
            Ranked offices tagged with the answering source
        """
        outcome = await self.repository.search_offices(
            filters.state_code,
            city=filters.city,
            county=filters.county,
            limit=limit,
        )

        if outcome.is_found and outcome.value:
            offices = outcome.value
            source = OfficeSource.DATABASE
        else:
            reason = (
                "store_error" if outcome.status is OutcomeStatus.FAILED else "no_rows"
            )
            logger.warning(
                f"Using fallback permit office data ({reason}) for "
                f"state={filters.state_code} city={filters.city} county={filters.county}"
            )
            offices = filter_static_offices(
                self.fallback_offices, city=filters.city, county=filters.county
            )
            source = OfficeSource.FALLBACK

        OFFICE_SEARCH_TOTAL.labels(source=source.value).inc()
        return OfficeSearchResult(
            offices=rank_by_distance(offices, point),
            source=source,
        )
