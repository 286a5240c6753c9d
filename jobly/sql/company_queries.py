"""
Parameterized SQL for the companies table.

Columns are aliased back to the API's camelCase names so rows can be fed
straight into the response models.

Table layout:
    companies(handle PK, name UNIQUE, description, num_employees, logo_url)
"""

from typing import Dict

from jobly.sql.filters import PredicateFragment
from jobly.sql.partial_update import SetFragment


# API field name -> column name, for the fields whose names differ
COMPANY_COLUMN_ALIASES: Dict[str, str] = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

# Fields a PATCH may change
COMPANY_UPDATABLE_FIELDS = frozenset({"name", "description", "numEmployees", "logoUrl"})

_COMPANY_COLUMNS = ", ".join([
    "handle",
    "name",
    "description",
    'num_employees AS "numEmployees"',
    'logo_url AS "logoUrl"',
])


def get_company_insert_query() -> str:
    """
    INSERT one company. Parameters: handle, name, description,
    numEmployees, logoUrl.
    """
    return f"""
    INSERT INTO companies (handle, name, description, num_employees, logo_url)
    VALUES ($1, $2, $3, $4, $5)
    RETURNING {_COMPANY_COLUMNS}
    """


def get_company_list_query(filters: PredicateFragment) -> str:
    """SELECT companies matching the filter fragment, ordered by name."""
    return f"""
    SELECT {_COMPANY_COLUMNS}
    FROM companies{filters.where_clause}
    ORDER BY name
    """


def get_company_by_handle_query() -> str:
    """SELECT one company. Parameters: handle."""
    return f"""
    SELECT {_COMPANY_COLUMNS}
    FROM companies
    WHERE handle = $1
    """


def get_company_jobs_query() -> str:
    """SELECT the jobs posted by one company, ordered by id. Parameters: handle."""
    return """
    SELECT id, title, salary, equity
    FROM jobs
    WHERE company_handle = $1
    ORDER BY id
    """


def get_company_update_query(set_fragment: SetFragment) -> str:
    """
    UPDATE one company with a partial SET fragment.

    The handle is bound after the SET values, at
    ``set_fragment.next_placeholder``.
    """
    return f"""
    UPDATE companies
    SET {set_fragment.sql}
    WHERE handle = ${set_fragment.next_placeholder}
    RETURNING {_COMPANY_COLUMNS}
    """


def get_company_delete_query() -> str:
    """DELETE one company. Parameters: handle."""
    return """
    DELETE FROM companies
    WHERE handle = $1
    RETURNING handle
    """
