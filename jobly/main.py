"""
FastAPI application entry point for the Jobly API.

Configures logging, CORS, error rendering and the API routers.

Error rendering:
- JoblyError subclasses -> their status_code, {"error": {"message", "status"}}
- Request validation failures -> 400 in the same envelope, with the
  pydantic error messages as a list
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobly.core.config import get_settings
from jobly.core.database import init_db, close_db
from jobly.core.exceptions import JoblyError
from jobly.api import api_router


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    On startup the database pool is created; on shutdown it is closed.
    """
    logger.info("Jobly API starting")
    await init_db()
    logger.info("Database connection pool initialized")

    yield

    logger.info("Jobly API shutting down")
    await close_db()
    logger.info("Database connection pool closed")


async def jobly_error_handler(request: Request, exc: JoblyError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"message": exc.message, "status": exc.status_code}},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]
    logger.debug(f"{request.method} {request.url.path} rejected: {messages}")
    return JSONResponse(
        status_code=400,
        content={"error": {"message": messages, "status": 400}},
    )


def create_app(with_lifespan: bool = True) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        with_lifespan: Whether to open the database pool on startup. Tests
            pass False and override get_db_session instead.
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="Jobly API",
        version="1.0.0",
        description="Companies and jobs board backed by PostgreSQL.",
        lifespan=lifespan if with_lifespan else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(JoblyError, jobly_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(api_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring and load balancer probes."""
        return {"status": "healthy"}

    @app.get("/")
    async def root():
        return {
            "name": "Jobly API",
            "version": "1.0.0",
            "docs": "/docs",
            "openapi": "/openapi.json",
        }

    return app


# Run with uvicorn when executed directly:
#   uvicorn jobly.main:create_app --factory
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "jobly.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
