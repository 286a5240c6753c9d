"""
Pydantic request/response models for the Jobly FastAPI backend.

Field names are the API's camelCase names. The repositories translate the
ones that differ from the physical columns (numEmployees -> num_employees,
logoUrl -> logo_url, companyHandle -> company_handle).

Request models forbid unknown keys so that only known fields can reach the
SQL builders in jobly.sql.

All models use Pydantic v2 syntax.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Companies
# =============================================================================


class CompanyCreate(BaseModel):
    """Payload for POST /companies."""

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "handle": "anderson-arias-morrow",
                "name": "Anderson, Arias and Morrow",
                "description": "Somebody program how I.",
                "numEmployees": 245,
                "logoUrl": "/logos/logo3.png",
            }
        },
    )

    handle: str = Field(..., min_length=1, max_length=25, description="URL-safe unique key")
    name: str = Field(..., min_length=1, description="Display name, unique")
    description: str = Field(..., description="Free-text company description")
    numEmployees: Optional[int] = Field(default=None, ge=0)
    logoUrl: Optional[str] = Field(default=None)


class CompanyUpdate(BaseModel):
    """Payload for PATCH /companies/{handle}. The handle itself is immutable."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    numEmployees: Optional[int] = Field(default=None, ge=0)
    logoUrl: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v: Optional[str]) -> str:
        # only runs when the key is present; name is NOT NULL
        if v is None:
            raise ValueError("name cannot be null")
        return v


class Company(BaseModel):
    handle: str
    name: str
    description: Optional[str] = None
    numEmployees: Optional[int] = None
    logoUrl: Optional[str] = None


class CompanyJob(BaseModel):
    """A job as listed under its company."""

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None


class CompanyDetail(Company):
    jobs: List[CompanyJob] = Field(default_factory=list)


class CompanyFilters(BaseModel):
    """
    Query parameters accepted by GET /companies.

    Every filter is optional; an absent filter places no constraint.
    """

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, description="Case-insensitive substring of the name")
    minEmployees: Optional[int] = Field(default=None, ge=0)
    maxEmployees: Optional[int] = Field(default=None, ge=0)


# =============================================================================
# Jobs
# =============================================================================


class JobCreate(BaseModel):
    """Payload for POST /jobs."""

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "title": "Conservator, furniture",
                "salary": 110000,
                "equity": "0",
                "companyHandle": "watson-davis",
            }
        },
    )

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[Decimal] = Field(default=None, ge=0, le=1)
    companyHandle: str = Field(..., min_length=1, max_length=25)


class JobUpdate(BaseModel):
    """Payload for PATCH /jobs/{id}. id and companyHandle cannot change."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    title: Optional[str] = Field(default=None, min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[Decimal] = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("title cannot be null")
        return v


class Job(BaseModel):
    id: int
    title: str
    salary: Optional[int] = None
    # NUMERIC column, serialized as text to keep its exact scale
    equity: Optional[str] = None
    companyHandle: str


class JobDetail(BaseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company: Optional[Company] = None


class JobFilters(BaseModel):
    """
    Query parameters accepted by GET /jobs.

    hasEquity only narrows the search when it is true.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(default=None, description="Case-insensitive substring of the title")
    minSalary: Optional[int] = Field(default=None, ge=0)
    hasEquity: Optional[bool] = None
