"""
Parameterized SQL for the jobs table.

Table layout:
    jobs(id SERIAL PK, title, salary, equity NUMERIC, company_handle FK -> companies)
"""

from typing import Dict

from jobly.sql.filters import PredicateFragment
from jobly.sql.partial_update import SetFragment


JOB_COLUMN_ALIASES: Dict[str, str] = {
    "companyHandle": "company_handle",
}

# id and companyHandle are fixed once a job is posted
JOB_UPDATABLE_FIELDS = frozenset({"title", "salary", "equity"})

_JOB_COLUMNS = ", ".join([
    "id",
    "title",
    "salary",
    "equity",
    'company_handle AS "companyHandle"',
])


def get_job_insert_query() -> str:
    """INSERT one job. Parameters: title, salary, equity, companyHandle."""
    return f"""
    INSERT INTO jobs (title, salary, equity, company_handle)
    VALUES ($1, $2, $3, $4)
    RETURNING {_JOB_COLUMNS}
    """


def get_job_list_query(filters: PredicateFragment) -> str:
    """SELECT jobs matching the filter fragment, ordered by title then id."""
    return f"""
    SELECT {_JOB_COLUMNS}
    FROM jobs{filters.where_clause}
    ORDER BY title, id
    """


def get_job_by_id_query() -> str:
    """SELECT one job. Parameters: id."""
    return f"""
    SELECT {_JOB_COLUMNS}
    FROM jobs
    WHERE id = $1
    """


def get_job_update_query(set_fragment: SetFragment) -> str:
    """UPDATE one job; the id is bound at ``set_fragment.next_placeholder``."""
    return f"""
    UPDATE jobs
    SET {set_fragment.sql}
    WHERE id = ${set_fragment.next_placeholder}
    RETURNING {_JOB_COLUMNS}
    """


def get_job_delete_query() -> str:
    """DELETE one job. Parameters: id."""
    return """
    DELETE FROM jobs
    WHERE id = $1
    RETURNING id
    """
