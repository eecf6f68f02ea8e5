"""SQLAlchemy models for permit offices."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Float,
    Index,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB

from .base import Base

JURISDICTION_TYPES = ("city", "county", "state", "special_district")
OFFICE_TYPES = ("building", "planning", "zoning", "combined", "other")
DATA_SOURCES = ("crawled", "api", "manual")
CRAWL_FREQUENCIES = ("daily", "weekly", "monthly")


def _one_of(column: str, values: tuple[str, ...]) -> CheckConstraint:
    allowed = ", ".join(f"'{value}'" for value in values)
    return CheckConstraint(
        f"{column} IN ({allowed})", name=f"permit_offices_{column}_check"
    )


class PermitOfficeModel(Base):
    """A permit-issuing office row.

    Enumerated columns are stored as text with check constraints so that
    ``ORDER BY jurisdiction_type`` sorts alphabetically, the same way the
    embedded fallback dataset is ordered.
    """

    __tablename__ = "permit_offices"

    id = Column(
        Text,
        primary_key=True,
        default=lambda: str(uuid4()),
        nullable=False,
    )

    # Location information
    city = Column(Text, nullable=False)
    county = Column(Text, nullable=False)
    state = Column(Text, nullable=False, default="GA")
    jurisdiction_type = Column(Text, nullable=False)

    # Office details
    department_name = Column(Text, nullable=False)
    office_type = Column(Text, nullable=False)

    # Contact information
    address = Column(Text, nullable=False)
    phone = Column(Text, nullable=True)
    email = Column(Text, nullable=True)
    website = Column(Text, nullable=True)

    # Operating hours
    hours_monday = Column(Text, nullable=True)
    hours_tuesday = Column(Text, nullable=True)
    hours_wednesday = Column(Text, nullable=True)
    hours_thursday = Column(Text, nullable=True)
    hours_friday = Column(Text, nullable=True)
    hours_saturday = Column(Text, nullable=True)
    hours_sunday = Column(Text, nullable=True)

    # Services offered
    building_permits = Column(Boolean, nullable=False, default=False)
    electrical_permits = Column(Boolean, nullable=False, default=False)
    plumbing_permits = Column(Boolean, nullable=False, default=False)
    mechanical_permits = Column(Boolean, nullable=False, default=False)
    zoning_permits = Column(Boolean, nullable=False, default=False)
    planning_review = Column(Boolean, nullable=False, default=False)
    inspections = Column(Boolean, nullable=False, default=False)

    # Online services
    online_applications = Column(Boolean, nullable=False, default=False)
    online_payments = Column(Boolean, nullable=False, default=False)
    permit_tracking = Column(Boolean, nullable=False, default=False)
    online_portal_url = Column(Text, nullable=True)

    # Geographic data
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    service_area_bounds = Column(JSONB, nullable=True)  # GeoJSON polygon

    # Metadata
    data_source = Column(Text, nullable=False, default="manual")
    last_verified = Column(DateTime, nullable=True)
    crawl_frequency = Column(Text, nullable=False, default="monthly")
    active = Column(Boolean, nullable=False, default=True)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint(
            "city", "county", "department_name", name="uq_permit_office_department"
        ),
        Index("ix_permit_offices_state_active", "state", "active"),
        _one_of("jurisdiction_type", JURISDICTION_TYPES),
        _one_of("office_type", OFFICE_TYPES),
        _one_of("data_source", DATA_SOURCES),
        _one_of("crawl_frequency", CRAWL_FREQUENCIES),
    )
