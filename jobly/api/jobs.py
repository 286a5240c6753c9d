"""
FastAPI router module for jobs.

Key Endpoints:
- POST /jobs - Post a job for a company (admin)
- GET /jobs - List jobs, filterable by title, minSalary, hasEquity
- GET /jobs/{job_id} - Job detail with its company nested
- PATCH /jobs/{job_id} - Partial update of title/salary/equity (admin)
- DELETE /jobs/{job_id} - Delete a job (admin)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from jobly.core.dependencies import DBSessionDep, ensure_admin
from jobly.models.schemas import JobCreate, JobFilters, JobUpdate
from jobly.services.jobs import (
    create_job,
    find_jobs,
    get_job,
    remove_job,
    update_job,
)


router = APIRouter()


@router.post("", status_code=201, dependencies=[Depends(ensure_admin)])
async def create_job_endpoint(job_data: JobCreate, db: DBSessionDep) -> dict:
    """
    Post a job.

    Body: { title, salary?, equity?, companyHandle }

    Returns:
        { job: { id, title, salary, equity, companyHandle } }

    Authorization required: admin
    """
    job = await create_job(db, job_data)
    return {"job": job}


@router.get("")
async def list_jobs(
    filters: Annotated[JobFilters, Query()],
    db: DBSessionDep,
) -> dict:
    """
    List jobs ordered by title.

    Query parameters (all optional):
        title: case-insensitive substring of the title
        minSalary: inclusive lower bound on salary
        hasEquity: when true, only jobs with non-zero equity

    Authorization required: none
    """
    jobs = await find_jobs(db, filters)
    return {"jobs": jobs}


@router.get("/{job_id}")
async def get_job_endpoint(job_id: int, db: DBSessionDep) -> dict:
    """
    Returns:
        { job: { id, title, salary, equity, company } }

    Authorization required: none
    """
    job = await get_job(db, job_id)
    return {"job": job}


@router.patch("/{job_id}", dependencies=[Depends(ensure_admin)])
async def update_job_endpoint(job_id: int, job_data: JobUpdate, db: DBSessionDep) -> dict:
    """
    Partially update a job. id and companyHandle cannot be changed.

    Authorization required: admin
    """
    job = await update_job(db, job_id, job_data.model_dump(exclude_unset=True))
    return {"job": job}


@router.delete("/{job_id}", dependencies=[Depends(ensure_admin)])
async def delete_job_endpoint(job_id: int, db: DBSessionDep) -> dict:
    """
    Authorization required: admin
    """
    await remove_job(db, job_id)
    return {"deleted": job_id}
