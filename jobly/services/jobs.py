"""
Job repository.

Data access for the jobs table. Mirrors jobly.services.companies:
functions take an asyncpg connection and return Pydantic models.

Error translation:
- no row for an id                 -> NotFoundError
- unknown companyHandle on insert  -> BadRequestError
- duplicate key                    -> ConflictError
- empty PATCH body                 -> NoFieldsProvidedError (before any query)
"""

import logging
from typing import Any, List, Mapping

import asyncpg
from asyncpg import Connection

from jobly.core.exceptions import BadRequestError, ConflictError, NotFoundError
from jobly.models.schemas import Company, Job, JobCreate, JobDetail, JobFilters
from jobly.sql import (
    JOB_COLUMN_ALIASES,
    JOB_UPDATABLE_FIELDS,
    build_partial_update,
    compose_job_filters,
    get_company_by_handle_query,
    get_job_by_id_query,
    get_job_delete_query,
    get_job_insert_query,
    get_job_list_query,
    get_job_update_query,
)
from jobly.services.records import equity_to_str, record_to_job


logger = logging.getLogger(__name__)


async def create_job(conn: Connection, data: JobCreate) -> Job:
    """
    Insert a new job for an existing company.

    Raises:
        BadRequestError: If companyHandle does not name a company.
        ConflictError: If a uniqueness constraint rejects the row.
    """
    try:
        row = await conn.fetchrow(
            get_job_insert_query(),
            data.title,
            data.salary,
            data.equity,
            data.companyHandle,
        )
    except asyncpg.ForeignKeyViolationError:
        logger.warning(f"Rejected job for unknown company: {data.companyHandle}")
        raise BadRequestError(f"No company: {data.companyHandle}")
    except asyncpg.UniqueViolationError:
        raise ConflictError(f"Duplicate job: {data.title}")

    job = record_to_job(row)
    logger.info(f"Created job {job.id} for company {job.companyHandle}")
    return job


async def find_jobs(conn: Connection, filters: JobFilters) -> List[Job]:
    """
    List jobs ordered by title, narrowed by any active filters.
    """
    fragment = compose_job_filters(filters)
    rows = await conn.fetch(get_job_list_query(fragment), *fragment.values)
    return [record_to_job(row) for row in rows]


async def get_job(conn: Connection, job_id: int) -> JobDetail:
    """
    Fetch one job with its company nested in place of the handle.

    Raises:
        NotFoundError: If no job has this id.
    """
    row = await conn.fetchrow(get_job_by_id_query(), job_id)
    if row is None:
        raise NotFoundError(f"No job: {job_id}")

    company_row = await conn.fetchrow(get_company_by_handle_query(), row["companyHandle"])

    return JobDetail(
        id=row["id"],
        title=row["title"],
        salary=row["salary"],
        equity=equity_to_str(row["equity"]),
        company=Company(**dict(company_row)) if company_row is not None else None,
    )


async def update_job(conn: Connection, job_id: int, fields: Mapping[str, Any]) -> Job:
    """
    Apply a partial update to a job.

    Raises:
        NoFieldsProvidedError: If fields is empty.
        InvalidFieldError: If fields names anything but title, salary or equity.
        NotFoundError: If no job has this id.
        BadRequestError: If the new values violate a table constraint.
    """
    set_fragment = build_partial_update(
        fields,
        JOB_COLUMN_ALIASES,
        allowed_fields=JOB_UPDATABLE_FIELDS,
    )

    try:
        row = await conn.fetchrow(
            get_job_update_query(set_fragment),
            *set_fragment.values,
            job_id,
        )
    except asyncpg.UniqueViolationError:
        raise ConflictError(f"Duplicate job: {job_id}")
    except asyncpg.IntegrityConstraintViolationError:
        logger.warning(f"Rejected job update violating a constraint: id={job_id}")
        raise BadRequestError(f"Invalid data for job {job_id}")

    if row is None:
        logger.warning(f"Update of missing job: id={job_id}")
        raise NotFoundError(f"No job: {job_id}")

    logger.info(f"Updated job {job_id}: {', '.join(fields)}")
    return record_to_job(row)


async def remove_job(conn: Connection, job_id: int) -> None:
    """
    Delete a job.

    Raises:
        NotFoundError: If no job has this id.
    """
    row = await conn.fetchrow(get_job_delete_query(), job_id)
    if row is None:
        raise NotFoundError(f"No job: {job_id}")

    logger.info(f"Deleted job {job_id}")
