"""
Package initialization file for Jobly models.

Re-exports the Pydantic schemas from schemas.py so other modules can write:

    from jobly.models import CompanyCreate, JobFilters
"""

from jobly.models.schemas import (
    # Companies
    Company,
    CompanyCreate,
    CompanyDetail,
    CompanyFilters,
    CompanyJob,
    CompanyUpdate,
    # Jobs
    Job,
    JobCreate,
    JobDetail,
    JobFilters,
    JobUpdate,
)

__all__ = [
    "Company",
    "CompanyCreate",
    "CompanyDetail",
    "CompanyFilters",
    "CompanyJob",
    "CompanyUpdate",
    "Job",
    "JobCreate",
    "JobDetail",
    "JobFilters",
    "JobUpdate",
]
