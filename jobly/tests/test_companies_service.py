"""
Tests for the company repository against a mock asyncpg connection.

Covers statement/parameter wiring and translation of missing rows and
constraint violations into NotFoundError / ConflictError.
"""

from decimal import Decimal
from typing import Any, Dict
from unittest.mock import AsyncMock

import asyncpg
import pytest

from jobly.core.exceptions import (
    BadRequestError,
    ConflictError,
    InvalidFieldError,
    NoFieldsProvidedError,
    NotFoundError,
)
from jobly.models.schemas import CompanyCreate, CompanyFilters
from jobly.services.companies import (
    create_company,
    find_companies,
    get_company,
    remove_company,
    update_company,
)


pytestmark = pytest.mark.asyncio


NEW_COMPANY = CompanyCreate(
    handle="new",
    name="New",
    description="New Description",
    numEmployees=1,
    logoUrl="http://new.img",
)


class TestCreateCompany:

    async def test_returns_inserted_row(self, mock_conn: AsyncMock) -> None:
        mock_conn.fetchrow.return_value = NEW_COMPANY.model_dump()

        company = await create_company(mock_conn, NEW_COMPANY)

        assert company.model_dump() == NEW_COMPANY.model_dump()
        args = mock_conn.fetchrow.call_args.args
        assert "INSERT INTO companies" in args[0]
        assert args[1:] == ("new", "New", "New Description", 1, "http://new.img")

    async def test_duplicate_is_conflict(self, mock_conn: AsyncMock) -> None:
        mock_conn.fetchrow.side_effect = asyncpg.UniqueViolationError("duplicate key")

        with pytest.raises(ConflictError):
            await create_company(mock_conn, NEW_COMPANY)


class TestFindCompanies:

    async def test_no_filter_binds_nothing(
        self,
        mock_conn: AsyncMock,
        company_row: Dict[str, Any],
    ) -> None:
        mock_conn.fetch.return_value = [company_row]

        companies = await find_companies(mock_conn, CompanyFilters())

        assert [c.handle for c in companies] == ["c1"]
        args = mock_conn.fetch.call_args.args
        assert len(args) == 1
        assert "WHERE" not in args[0]

    async def test_filters_bound_in_order(self, mock_conn: AsyncMock) -> None:
        await find_companies(
            mock_conn,
            CompanyFilters(name="c", minEmployees=1, maxEmployees=2),
        )

        args = mock_conn.fetch.call_args.args
        assert "name ILIKE $1 AND num_employees >= $2 AND num_employees <= $3" in args[0]
        assert args[1:] == ("%c%", 1, 2)

    async def test_empty_result(self, mock_conn: AsyncMock) -> None:
        companies = await find_companies(mock_conn, CompanyFilters(name="not name"))

        assert companies == []


class TestGetCompany:

    async def test_includes_jobs(
        self,
        mock_conn: AsyncMock,
        company_row: Dict[str, Any],
    ) -> None:
        mock_conn.fetchrow.return_value = company_row
        mock_conn.fetch.return_value = [
            {"id": 1, "title": "job1", "salary": 100, "equity": Decimal("0.1")},
            {"id": 2, "title": "job2", "salary": 200, "equity": None},
        ]

        company = await get_company(mock_conn, "c1")

        assert company.handle == "c1"
        assert [j.model_dump() for j in company.jobs] == [
            {"id": 1, "title": "job1", "salary": 100, "equity": "0.1"},
            {"id": 2, "title": "job2", "salary": 200, "equity": None},
        ]

    async def test_not_found(self, mock_conn: AsyncMock) -> None:
        with pytest.raises(NotFoundError):
            await get_company(mock_conn, "nope")

        mock_conn.fetch.assert_not_called()


class TestUpdateCompany:

    async def test_updates_with_aliases(
        self,
        mock_conn: AsyncMock,
        company_row: Dict[str, Any],
    ) -> None:
        mock_conn.fetchrow.return_value = {**company_row, "numEmployees": None, "logoUrl": None}

        company = await update_company(
            mock_conn, "c1", {"name": "C1", "numEmployees": None, "logoUrl": None}
        )

        assert company.numEmployees is None
        args = mock_conn.fetchrow.call_args.args
        assert 'SET "name"=$1, "num_employees"=$2, "logo_url"=$3' in args[0]
        assert "WHERE handle = $4" in args[0]
        assert args[1:] == ("C1", None, None, "c1")

    async def test_empty_update_rejected_before_query(self, mock_conn: AsyncMock) -> None:
        with pytest.raises(NoFieldsProvidedError):
            await update_company(mock_conn, "c1", {})

        mock_conn.fetchrow.assert_not_called()

    async def test_handle_not_updatable(self, mock_conn: AsyncMock) -> None:
        with pytest.raises(InvalidFieldError):
            await update_company(mock_conn, "c1", {"handle": "c9"})

        mock_conn.fetchrow.assert_not_called()

    async def test_not_found(self, mock_conn: AsyncMock) -> None:
        with pytest.raises(NotFoundError):
            await update_company(mock_conn, "nope", {"name": "x"})

    async def test_duplicate_name_is_conflict(self, mock_conn: AsyncMock) -> None:
        mock_conn.fetchrow.side_effect = asyncpg.UniqueViolationError("duplicate key")

        with pytest.raises(ConflictError):
            await update_company(mock_conn, "c1", {"name": "C2"})

    async def test_constraint_violation_is_bad_request(self, mock_conn: AsyncMock) -> None:
        mock_conn.fetchrow.side_effect = asyncpg.CheckViolationError(
            'new row for relation "companies" violates check constraint'
        )

        with pytest.raises(BadRequestError) as exc_info:
            await update_company(mock_conn, "c1", {"numEmployees": 5})

        assert exc_info.value.message == "Invalid data for company c1"
        assert "relation" not in exc_info.value.message


class TestRemoveCompany:

    async def test_removes(self, mock_conn: AsyncMock) -> None:
        mock_conn.fetchrow.return_value = {"handle": "c1"}

        await remove_company(mock_conn, "c1")

        args = mock_conn.fetchrow.call_args.args
        assert "DELETE FROM companies" in args[0]
        assert args[1:] == ("c1",)

    async def test_not_found(self, mock_conn: AsyncMock) -> None:
        with pytest.raises(NotFoundError):
            await remove_company(mock_conn, "nope")
