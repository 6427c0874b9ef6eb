"""Translate service rejections into HTTP responses."""

from __future__ import annotations

import logging
import math

from fastapi import Request, status
from fastapi.responses import JSONResponse

from province_glow.services.errors import (
    ContentValidationError,
    DomainError,
    ProvinceNotFoundError,
    RateLimitedError,
    StorageError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ProvinceNotFoundError: status.HTTP_404_NOT_FOUND,
    RateLimitedError: status.HTTP_429_TOO_MANY_REQUESTS,
    ContentValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    StorageError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a ``DomainError`` as ``{"success": false, "message": ...}``."""
    if not isinstance(exc, DomainError):
        raise exc
    status_code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST)
    headers: dict[str, str] = {}
    if isinstance(exc, RateLimitedError) and exc.retry_after > 0:
        headers["Retry-After"] = str(math.ceil(exc.retry_after))
    logger.debug("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": exc.message},
        headers=headers,
    )
