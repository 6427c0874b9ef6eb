# src/province_glow/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .dev import router as dev_router
from .geo import router as geo_router
from .provinces import router as provinces_router

__all__ = [
    "dev_router",
    "geo_router",
    "provinces_router",
]
