"""
Jobly Services Module

Repository layer for companies and jobs. Each function is stateless, takes
an asyncpg connection, builds its statement with jobly.sql and translates
storage-level failures into the error kinds in jobly.core.exceptions.

All services are consumed by the API layer (jobly/api/).
"""

# =============================================================================
# Company Repository Exports
# =============================================================================

from jobly.services.companies import (
    create_company,
    find_companies,
    get_company,
    update_company,
    remove_company,
)

# =============================================================================
# Job Repository Exports
# =============================================================================

from jobly.services.jobs import (
    create_job,
    find_jobs,
    get_job,
    update_job,
    remove_job,
)

__all__ = [
    'create_company',
    'find_companies',
    'get_company',
    'update_company',
    'remove_company',
    'create_job',
    'find_jobs',
    'get_job',
    'update_job',
    'remove_job',
]
