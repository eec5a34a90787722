"""
Canary Storage API - Main Application Entry Point.

FastAPI application exposing metric set pair lists kept in per-account
object storage.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from canary_storage import __version__
from canary_storage.api.v1.router import api_router
from canary_storage.config import get_settings
from canary_storage.core.exceptions import CanaryStorageException
from canary_storage.storage import get_registries

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Builds the registries once at startup so configuration errors fail fast.
    """
    # Startup
    logger.info(f"Starting {settings.PROJECT_NAME}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    accounts, storage_services = get_registries()
    for account in accounts.get_all():
        types = ", ".join(sorted(t.value for t in account.supported_types))
        logger.info(f"Account {account.name}: backend={account.backend} types=[{types}]")
    if not storage_services.get_all():
        logger.warning("No OBJECT_STORE account configured; object endpoints will fail")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
## Canary Storage API

Stores metric set pair lists in object storage, scoped by account.

### Features
- **Account resolution**: explicit `accountName` or the single configured OBJECT_STORE account
- **Backends**: in-memory, local filesystem, S3/MinIO, Azure Blob
    """,
    version=__version__,
    openapi_tags=[
        {"name": "metricSetPairList", "description": "Metric set pair list storage"},
        {"name": "health", "description": "Service health and configured accounts"},
    ],
    lifespan=lifespan,
)


@app.exception_handler(CanaryStorageException)
async def canary_storage_exception_handler(request: Request, exc: CanaryStorageException) -> JSONResponse:
    """
    Global exception handler for Canary Storage API exceptions.
    Returns standardized error responses.
    """
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all exception handler for unexpected errors.
    Logs the full error but returns a sanitized response.
    """
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
        },
    )


# Include API routers
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint with service information."""
    return {
        "name": settings.PROJECT_NAME,
        "version": __version__,
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "canary_storage.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
