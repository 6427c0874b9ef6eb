# src/province_glow/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import dev_router, geo_router, provinces_router

__all__ = [
    "dev_router",
    "geo_router",
    "provinces_router",
]
