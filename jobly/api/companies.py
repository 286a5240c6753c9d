"""
FastAPI router module for companies.

Key Endpoints:
- POST /companies - Create a company (admin)
- GET /companies - List companies, filterable by name, minEmployees, maxEmployees
- GET /companies/{handle} - Company detail including its jobs
- PATCH /companies/{handle} - Partial update (admin)
- DELETE /companies/{handle} - Delete a company (admin)

Response shapes:
- { company: {...} } for single-company endpoints
- { companies: [...] } for the list endpoint
- { deleted: handle } for DELETE

Errors are raised as jobly.core.exceptions types and rendered by the
handler registered in jobly.main.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from jobly.core.dependencies import DBSessionDep, ensure_admin
from jobly.core.exceptions import BadRequestError
from jobly.models.schemas import CompanyCreate, CompanyFilters, CompanyUpdate
from jobly.services.companies import (
    create_company,
    find_companies,
    get_company,
    remove_company,
    update_company,
)


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=201, dependencies=[Depends(ensure_admin)])
async def create_company_endpoint(company_data: CompanyCreate, db: DBSessionDep) -> dict:
    """
    Create a company.

    Body: { handle, name, description, numEmployees?, logoUrl? }

    Returns:
        { company: { handle, name, description, numEmployees, logoUrl } }

    Authorization required: admin
    """
    company = await create_company(db, company_data)
    return {"company": company}


@router.get("")
async def list_companies(
    filters: Annotated[CompanyFilters, Query()],
    db: DBSessionDep,
) -> dict:
    """
    List companies ordered by name.

    Query parameters (all optional):
        name: case-insensitive substring of the company name
        minEmployees / maxEmployees: inclusive bounds on numEmployees

    Authorization required: none
    """
    if (
        filters.minEmployees is not None
        and filters.maxEmployees is not None
        and filters.minEmployees > filters.maxEmployees
    ):
        logger.warning(
            f"GET /companies rejected: minEmployees={filters.minEmployees} "
            f"> maxEmployees={filters.maxEmployees}"
        )
        raise BadRequestError("minEmployees cannot be greater than maxEmployees")

    companies = await find_companies(db, filters)
    return {"companies": companies}


@router.get("/{handle}")
async def get_company_endpoint(handle: str, db: DBSessionDep) -> dict:
    """
    Returns:
        { company: { handle, name, description, numEmployees, logoUrl, jobs } }
        where jobs is [{ id, title, salary, equity }, ...]

    Authorization required: none
    """
    company = await get_company(db, handle)
    return {"company": company}


@router.patch("/{handle}", dependencies=[Depends(ensure_admin)])
async def update_company_endpoint(
    handle: str,
    company_data: CompanyUpdate,
    db: DBSessionDep,
) -> dict:
    """
    Partially update a company.

    Body: any of { name, description, numEmployees, logoUrl }

    Authorization required: admin
    """
    company = await update_company(db, handle, company_data.model_dump(exclude_unset=True))
    return {"company": company}


@router.delete("/{handle}", dependencies=[Depends(ensure_admin)])
async def delete_company_endpoint(handle: str, db: DBSessionDep) -> dict:
    """
    Authorization required: admin
    """
    await remove_company(db, handle)
    return {"deleted": handle}
