"""
Core infrastructure package for the Jobly backend.

Provides:
- Configuration management via pydantic-settings
- Async PostgreSQL database connectivity via asyncpg
- FastAPI dependency injection and authorization guards
- The application's error kinds

Allows simplified imports like:

    from jobly.core import get_settings, DBSessionDep, NotFoundError
"""

# =============================================================================
# Re-exports from jobly.core.config
# =============================================================================
from jobly.core.config import Settings, get_settings

# =============================================================================
# Re-exports from jobly.core.database
# =============================================================================
from jobly.core.database import init_db, close_db, get_db_pool

# =============================================================================
# Re-exports from jobly.core.dependencies
# =============================================================================
from jobly.core.dependencies import (
    get_db_session,
    get_current_user_optional,
    ensure_logged_in,
    ensure_admin,
    DBSessionDep,
    CurrentUserOptionalDep,
)

# =============================================================================
# Re-exports from jobly.core.exceptions
# =============================================================================
from jobly.core.exceptions import (
    JoblyError,
    BadRequestError,
    NoFieldsProvidedError,
    InvalidFieldError,
    UnauthorizedError,
    NotFoundError,
    ConflictError,
)

__all__ = [
    # Configuration management (from config.py)
    'Settings',
    'get_settings',
    # Database pool lifecycle (from database.py)
    'init_db',
    'close_db',
    'get_db_pool',
    # FastAPI dependency injection (from dependencies.py)
    'get_db_session',
    'get_current_user_optional',
    'ensure_logged_in',
    'ensure_admin',
    'DBSessionDep',
    'CurrentUserOptionalDep',
    # Error kinds (from exceptions.py)
    'JoblyError',
    'BadRequestError',
    'NoFieldsProvidedError',
    'InvalidFieldError',
    'UnauthorizedError',
    'NotFoundError',
    'ConflictError',
]
