# src/province_glow/main.py
"""Main entry point for the Province Glow application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from province_glow.api.v1 import dev_router, geo_router, provinces_router
from province_glow.api.v1.errors import domain_error_handler
from province_glow.core.settings import settings
from province_glow.services.errors import DomainError

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Province Glow API",
    description="Light up your province once a day and leave a message",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

app.add_exception_handler(DomainError, domain_error_handler)

# Include API routers
app.include_router(geo_router, prefix="/api/v1")
app.include_router(provinces_router, prefix="/api/v1")
app.include_router(dev_router, prefix="/api/v1")


@app.on_event("startup")
async def on_startup() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("%s %s starting (%s)", settings.app_name, settings.app_version, settings.environment)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("province_glow.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
