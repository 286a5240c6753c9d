"""
Error kinds surfaced by the Jobly backend.

Every error the application raises on purpose derives from JoblyError and
carries the HTTP status it maps to. The exception handler registered in
jobly.main renders them as:

    {"error": {"message": "...", "status": 404}}

Raw asyncpg errors are translated by the repository layer
(jobly.services) into ConflictError / BadRequestError and never reach
the HTTP layer as-is.
"""

from typing import Any


class JoblyError(Exception):
    """Base class for all application errors."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Any = None):
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)


class BadRequestError(JoblyError):
    """Client sent malformed or inconsistent input."""

    status_code = 400
    default_message = "Bad request"


class NoFieldsProvidedError(BadRequestError):
    """A partial update was requested with an empty field set."""

    default_message = "No data"


class InvalidFieldError(BadRequestError):
    """A field name is not a known, updatable column for the entity."""

    default_message = "Invalid field"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Invalid field: {field}")


class UnauthorizedError(JoblyError):
    status_code = 401
    default_message = "Unauthorized"


class NotFoundError(JoblyError):
    status_code = 404
    default_message = "Not found"


class ConflictError(JoblyError):
    """A uniqueness constraint rejected an insert or update."""

    status_code = 409
    default_message = "Conflict"
