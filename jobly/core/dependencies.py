"""
FastAPI dependency injection module for the Jobly backend.

This module provides reusable FastAPI dependencies for database sessions
and authorization.

Key Dependencies Provided:
- get_db_session: Async generator yielding database connections from the pool
- get_current_user_optional: The authenticated user, if any
- ensure_logged_in / ensure_admin: Authorization guards for write routes
- DBSessionDep, CurrentUserOptionalDep: Annotated type aliases

Authentication:
    Token verification happens upstream of this application. The
    authentication layer places the verified token payload on
    ``request.state.user`` as ``{"username": ..., "isAdmin": ...}``.
    Requests without that attribute are anonymous.

Usage Examples:
    @router.patch("/{handle}", dependencies=[Depends(ensure_admin)])
    async def update_company(handle: str, data: CompanyUpdate, db: DBSessionDep):
        ...

    # In tests
    app.dependency_overrides[get_db_session] = lambda: mock_conn
"""

from typing import AsyncGenerator, Annotated, Optional

from fastapi import Depends, Request
from asyncpg import Connection

from jobly.core.database import get_db_pool
from jobly.core.exceptions import UnauthorizedError


# =============================================================================
# Database Session Dependency
# =============================================================================

async def get_db_session() -> AsyncGenerator[Connection, None]:
    """
    Yield an async database connection from the pool.

    The connection is released back to the pool when the endpoint completes,
    regardless of whether the operation succeeded or raised an exception.

    Yields:
        asyncpg.Connection: An active database connection from the pool.
    """
    pool = await get_db_pool()
    async with pool.acquire() as connection:
        yield connection


# =============================================================================
# Type Aliases for Dependency Injection
# =============================================================================

DBSessionDep = Annotated[Connection, Depends(get_db_session)]


# =============================================================================
# Authorization Dependencies
# =============================================================================

async def get_current_user_optional(request: Request) -> Optional[dict]:
    """
    Return the authenticated user placed on the request, or None.

    Returns:
        dict with ``username`` and ``isAdmin`` keys, or None for anonymous
        requests.
    """
    return getattr(request.state, "user", None)


CurrentUserOptionalDep = Annotated[Optional[dict], Depends(get_current_user_optional)]


async def ensure_logged_in(user: CurrentUserOptionalDep) -> dict:
    """
    Require any authenticated user.

    Raises:
        UnauthorizedError: If the request is anonymous.
    """
    if not user:
        raise UnauthorizedError()
    return user


async def ensure_admin(user: CurrentUserOptionalDep) -> dict:
    """
    Require an authenticated user with the admin flag set.

    Raises:
        UnauthorizedError: If the request is anonymous or the user is not an admin.
    """
    if not user or user.get("isAdmin") is not True:
        raise UnauthorizedError()
    return user
