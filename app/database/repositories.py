"""Repository pattern for database operations."""

import logging
from collections.abc import Sequence

from pydantic import ValidationError
from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import StoreError
from app.core.outcome import Outcome
from app.models.permit_office import PermitOffice

from .models import PermitOfficeModel

logger = logging.getLogger(__name__)

StoreOutcome = Outcome[list[PermitOffice]]


class PermitOfficeRepository:
    """Read-only access to the ``permit_offices`` table."""

    def __init__(self, session: AsyncSession | None):
        self.session = session
        self.model = PermitOfficeModel

    def build_search_query(
        self,
        state: str,
        city: str | None = None,
        county: str | None = None,
        limit: int = 10,
    ) -> Select:
        """Build the filtered, ordered and capped office query.

        ``state`` is compared as an uppercase code; ``city`` and ``county``
        are case-insensitive literal substring matches, so LIKE wildcards in
        the input are escaped.
        """
        query = select(self.model).filter(
            self.model.active.is_(True),
            self.model.state == state.upper(),
        )

        if city:
            query = query.filter(self.model.city.icontains(city, autoescape=True))

        if county:
            query = query.filter(self.model.county.icontains(county, autoescape=True))

        return (
            query.order_by(
                self.model.jurisdiction_type.asc(),
                self.model.city.asc(),
            )
            .limit(limit)
        )

    async def fetch_offices(
        self,
        state: str,
        city: str | None = None,
        county: str | None = None,
        limit: int = 10,
    ) -> Sequence[PermitOfficeModel]:
        """Run the office query.

        Raises:
            StoreError: If there is no session, or the store is unreachable or
                rejects the query
        """
        if self.session is None:
            raise StoreError("permit office store unavailable")

        query = self.build_search_query(state, city=city, county=county, limit=limit)
        try:
            result = await self.session.execute(query)
            return result.scalars().all()
        except (SQLAlchemyError, OSError) as e:
            raise StoreError(str(e)) from e

    async def search_offices(
        self,
        state: str,
        city: str | None = None,
        county: str | None = None,
        limit: int = 10,
    ) -> StoreOutcome:
        """Search active offices, reporting store faults as a failed outcome."""
        try:
            rows = await self.fetch_offices(state, city=city, county=county, limit=limit)
        except StoreError as e:
            logger.error(f"Permit office store error: {e}")
            return Outcome.failed(str(e))

        if not rows:
            return Outcome.empty()

        try:
            offices = [PermitOffice.model_validate(row) for row in rows]
        except ValidationError as e:
            logger.error(f"Permit office store returned invalid rows: {e}")
            return Outcome.failed(str(e))
        return Outcome.found(offices)
