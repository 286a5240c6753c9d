"""
Jobly Backend Package.

FastAPI service layer for the Jobly companies and jobs board.
Provides CRUD endpoints for companies and jobs backed by PostgreSQL,
with role-based authorization for write operations.

Subpackages:
    - api: FastAPI route handlers
    - core: Configuration, database, dependencies, and error types
    - models: Pydantic request/response schemas
    - services: Repository layer for companies and jobs
    - sql: Injection-safe SQL fragment builders and statement text
"""

__version__ = "1.0.0"
