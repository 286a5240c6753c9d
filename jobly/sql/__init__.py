"""
SQL Query Module for the Jobly Backend.

Provides injection-safe SQL construction for the repository layer:
- Partial-update SET fragments from sparse field sets (partial_update)
- AND-joined filter predicates for list queries (filters)
- Statement text for companies and jobs (company_queries, job_queries)

Every fragment is paired with the values to bind, and placeholders are
numbered $1..$N in the order the values appear. No caller-supplied value
is ever written into SQL text.

Example usage:
    from jobly.sql import build_partial_update, get_company_update_query

    set_fragment = build_partial_update(
        {"numEmployees": 10},
        COMPANY_COLUMN_ALIASES,
        allowed_fields=COMPANY_UPDATABLE_FIELDS,
    )
    sql = get_company_update_query(set_fragment)
    row = await conn.fetchrow(sql, *set_fragment.values, handle)
"""

# =============================================================================
# FRAGMENT BUILDERS
# =============================================================================

from jobly.sql.partial_update import SetFragment, build_partial_update
from jobly.sql.filters import (
    PredicateFragment,
    compose_company_filters,
    compose_job_filters,
    escape_like,
)

# =============================================================================
# COMPANY QUERIES
# =============================================================================

from jobly.sql.company_queries import (
    get_company_insert_query,
    get_company_list_query,
    get_company_by_handle_query,
    get_company_jobs_query,
    get_company_update_query,
    get_company_delete_query,
    COMPANY_COLUMN_ALIASES,
    COMPANY_UPDATABLE_FIELDS,
)

# =============================================================================
# JOB QUERIES
# =============================================================================

from jobly.sql.job_queries import (
    get_job_insert_query,
    get_job_list_query,
    get_job_by_id_query,
    get_job_update_query,
    get_job_delete_query,
    JOB_COLUMN_ALIASES,
    JOB_UPDATABLE_FIELDS,
)

__all__ = [
    # Fragment builders
    'SetFragment',
    'build_partial_update',
    'PredicateFragment',
    'compose_company_filters',
    'compose_job_filters',
    'escape_like',
    # Company queries
    'get_company_insert_query',
    'get_company_list_query',
    'get_company_by_handle_query',
    'get_company_jobs_query',
    'get_company_update_query',
    'get_company_delete_query',
    'COMPANY_COLUMN_ALIASES',
    'COMPANY_UPDATABLE_FIELDS',
    # Job queries
    'get_job_insert_query',
    'get_job_list_query',
    'get_job_by_id_query',
    'get_job_update_query',
    'get_job_delete_query',
    'JOB_COLUMN_ALIASES',
    'JOB_UPDATABLE_FIELDS',
]
