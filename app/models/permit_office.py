"""Permit office models."""

from datetime import datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

JurisdictionType = Literal["city", "county", "state", "special_district"]
OfficeType = Literal["building", "planning", "zoning", "combined", "other"]
DataSource = Literal["crawled", "api", "manual"]
CrawlFrequency = Literal["daily", "weekly", "monthly"]


class OfficeSource(str, Enum):
    """Where a permit office search was answered from."""

    DATABASE = "database"
    FALLBACK = "fallback"


class PermitOffice(BaseModel):
    """A government office that issues permits for one jurisdiction."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    created_at: datetime
    updated_at: datetime

    # Location
    city: str
    county: str
    state: str = Field(..., max_length=2)
    jurisdiction_type: JurisdictionType

    # Office details
    department_name: str
    office_type: OfficeType

    # Contact
    address: str
    phone: str | None = None
    email: str | None = None
    website: str | None = None

    # Operating hours, free text
    hours_monday: str | None = None
    hours_tuesday: str | None = None
    hours_wednesday: str | None = None
    hours_thursday: str | None = None
    hours_friday: str | None = None
    hours_saturday: str | None = None
    hours_sunday: str | None = None

    # Services offered
    building_permits: bool = False
    electrical_permits: bool = False
    plumbing_permits: bool = False
    mechanical_permits: bool = False
    zoning_permits: bool = False
    planning_review: bool = False
    inspections: bool = False

    # Online services
    online_applications: bool = False
    online_payments: bool = False
    permit_tracking: bool = False
    online_portal_url: str | None = None

    # Geographic data
    latitude: float | None = None
    longitude: float | None = None
    service_area_bounds: dict[str, Any] | None = None  # GeoJSON polygon

    # Provenance
    data_source: DataSource = "manual"
    last_verified: datetime | None = None
    crawl_frequency: CrawlFrequency = "monthly"
    active: bool = True

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class RankedOffice(PermitOffice):
    """A permit office with its distance from the searched point."""

    distance_miles: float | None = Field(
        default=None,
        description="Great-circle distance in miles, null when unknown",
    )


class OfficeSearchResponse(BaseModel):
    """Response body of a permit office search."""

    success: bool = True
    offices: list[RankedOffice]
    count: int = Field(..., ge=0)
    source: OfficeSource
