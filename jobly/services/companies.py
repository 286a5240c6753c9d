"""
Company repository.

Data access for the companies table. Each function takes an asyncpg
connection (injected per request by jobly.core.dependencies) and returns
Pydantic models from jobly.models.

Error translation:
- no row for a handle          -> NotFoundError
- duplicate handle or name     -> ConflictError
- other constraint violations  -> BadRequestError
- empty PATCH body             -> NoFieldsProvidedError (before any query)
"""

import logging
from typing import Any, List, Mapping

import asyncpg
from asyncpg import Connection

from jobly.core.exceptions import BadRequestError, ConflictError, NotFoundError
from jobly.models.schemas import (
    Company,
    CompanyCreate,
    CompanyDetail,
    CompanyFilters,
    CompanyJob,
)
from jobly.sql import (
    COMPANY_COLUMN_ALIASES,
    COMPANY_UPDATABLE_FIELDS,
    build_partial_update,
    compose_company_filters,
    get_company_by_handle_query,
    get_company_delete_query,
    get_company_insert_query,
    get_company_jobs_query,
    get_company_list_query,
    get_company_update_query,
)
from jobly.services.records import equity_to_str


logger = logging.getLogger(__name__)


async def create_company(conn: Connection, data: CompanyCreate) -> Company:
    """
    Insert a new company.

    Raises:
        ConflictError: If the handle or name is already taken.
    """
    try:
        row = await conn.fetchrow(
            get_company_insert_query(),
            data.handle,
            data.name,
            data.description,
            data.numEmployees,
            data.logoUrl,
        )
    except asyncpg.UniqueViolationError:
        logger.warning(f"Rejected duplicate company: handle={data.handle}")
        raise ConflictError(f"Duplicate company: {data.handle}")

    logger.info(f"Created company {data.handle}")
    return Company(**dict(row))


async def find_companies(conn: Connection, filters: CompanyFilters) -> List[Company]:
    """
    List companies ordered by name, narrowed by any active filters.
    """
    fragment = compose_company_filters(filters)
    rows = await conn.fetch(get_company_list_query(fragment), *fragment.values)
    return [Company(**dict(row)) for row in rows]


async def get_company(conn: Connection, handle: str) -> CompanyDetail:
    """
    Fetch one company together with its jobs.

    Raises:
        NotFoundError: If no company has this handle.
    """
    row = await conn.fetchrow(get_company_by_handle_query(), handle)
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    job_rows = await conn.fetch(get_company_jobs_query(), handle)
    jobs = [
        CompanyJob(
            id=job["id"],
            title=job["title"],
            salary=job["salary"],
            equity=equity_to_str(job["equity"]),
        )
        for job in job_rows
    ]
    return CompanyDetail(**dict(row), jobs=jobs)


async def update_company(conn: Connection, handle: str, fields: Mapping[str, Any]) -> Company:
    """
    Apply a partial update to a company.

    Only the keys present in ``fields`` are written; an explicit None sets
    the column to NULL.

    Raises:
        NoFieldsProvidedError: If fields is empty.
        InvalidFieldError: If fields names anything but name, description,
            numEmployees or logoUrl.
        NotFoundError: If no company has this handle.
        ConflictError: If the new name is already taken.
        BadRequestError: If the new values violate a table constraint.
    """
    set_fragment = build_partial_update(
        fields,
        COMPANY_COLUMN_ALIASES,
        allowed_fields=COMPANY_UPDATABLE_FIELDS,
    )

    try:
        row = await conn.fetchrow(
            get_company_update_query(set_fragment),
            *set_fragment.values,
            handle,
        )
    except asyncpg.UniqueViolationError:
        logger.warning(f"Rejected company update with duplicate name: handle={handle}")
        raise ConflictError(f"Duplicate company name for {handle}")
    except asyncpg.IntegrityConstraintViolationError:
        logger.warning(f"Rejected company update violating a constraint: handle={handle}")
        raise BadRequestError(f"Invalid data for company {handle}")

    if row is None:
        logger.warning(f"Update of missing company: handle={handle}")
        raise NotFoundError(f"No company: {handle}")

    logger.info(f"Updated company {handle}: {', '.join(fields)}")
    return Company(**dict(row))


async def remove_company(conn: Connection, handle: str) -> None:
    """
    Delete a company and, through the foreign key, its jobs.

    Raises:
        NotFoundError: If no company has this handle.
    """
    row = await conn.fetchrow(get_company_delete_query(), handle)
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    logger.info(f"Deleted company {handle}")
