"""Tests for the permit office repository."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from app.core.outcome import OutcomeStatus
from app.database.repositories import PermitOfficeRepository


def compile_query(query):
    return query.compile(dialect=postgresql.dialect())


def as_row(office, **overrides):
    """Mimic an ORM row: plain attribute access."""
    return SimpleNamespace(**{**office.model_dump(), **overrides})


class TestBuildSearchQuery:
    """Tests for the generated SQL."""

    def test_filters_active_offices_in_state(self, mock_session):
        repo = PermitOfficeRepository(mock_session)

        compiled = compile_query(repo.build_search_query("ga"))
        sql = str(compiled)

        assert "permit_offices.active IS" in sql
        assert "permit_offices.state = " in sql
        assert "GA" in compiled.params.values()
        assert "ILIKE" not in sql

    def test_city_and_county_are_substring_matches(self, mock_session):
        repo = PermitOfficeRepository(mock_session)

        compiled = compile_query(
            repo.build_search_query("GA", city="atl", county="Ful")
        )
        sql = str(compiled)

        assert "permit_offices.city ILIKE '%' ||" in sql
        assert "permit_offices.county ILIKE '%' ||" in sql
        assert "atl" in compiled.params.values()
        assert "Ful" in compiled.params.values()

    @pytest.mark.parametrize(
        "city, escaped",
        [("_", "/_"), ("100%", "100/%"), ("a/b", "a//b")],
    )
    def test_like_wildcards_are_literal(self, mock_session, city, escaped):
        repo = PermitOfficeRepository(mock_session)

        compiled = compile_query(repo.build_search_query("GA", city=city))

        assert "ESCAPE '/'" in str(compiled)
        assert escaped in compiled.params.values()

    def test_orders_by_jurisdiction_then_city_and_caps(self, mock_session):
        repo = PermitOfficeRepository(mock_session)

        compiled = compile_query(repo.build_search_query("GA", limit=5))
        sql = str(compiled)

        assert (
            "ORDER BY permit_offices.jurisdiction_type ASC, permit_offices.city ASC"
            in sql
        )
        assert "LIMIT" in sql
        assert 5 in compiled.params.values()


class TestSearchOffices:
    """Tests for the outcome reported to the search service."""

    @pytest.mark.asyncio
    async def test_rows_are_found(self, mock_session, make_office):
        rows = [as_row(make_office(id="a")), as_row(make_office(id="b"))]
        mock_session.execute.return_value.scalars.return_value.all.return_value = rows
        repo = PermitOfficeRepository(mock_session)

        outcome = await repo.search_offices("GA", city="Spring")

        assert outcome.status is OutcomeStatus.FOUND
        assert [office.id for office in outcome.value] == ["a", "b"]
        mock_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_no_rows_is_empty(self, mock_session):
        repo = PermitOfficeRepository(mock_session)

        outcome = await repo.search_offices("GA")

        assert outcome.status is OutcomeStatus.EMPTY

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            OperationalError("SELECT 1", {}, Exception("connection refused")),
            ConnectionRefusedError("connection refused"),
        ],
    )
    async def test_store_errors_are_failures(self, mock_session, error):
        mock_session.execute = AsyncMock(side_effect=error)
        repo = PermitOfficeRepository(mock_session)

        outcome = await repo.search_offices("GA")

        assert outcome.status is OutcomeStatus.FAILED
        assert "connection refused" in outcome.error

    @pytest.mark.asyncio
    async def test_invalid_rows_are_failures(self, mock_session, make_office):
        rows = [as_row(make_office(), jurisdiction_type="borough")]
        mock_session.execute.return_value.scalars.return_value.all.return_value = rows
        repo = PermitOfficeRepository(mock_session)

        outcome = await repo.search_offices("GA")

        assert outcome.status is OutcomeStatus.FAILED

    @pytest.mark.asyncio
    async def test_missing_session_is_a_failure(self):
        repo = PermitOfficeRepository(None)

        outcome = await repo.search_offices("GA")

        assert outcome.status is OutcomeStatus.FAILED
        assert outcome.error == "permit office store unavailable"
