# src/province_glow/api/v1/endpoints/dev.py
"""Development-only tooling."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from province_glow.schemas.common import ActionResult
from province_glow.schemas.geo import MockProvinceRequest

from ..dependencies import MOCK_PROVINCE_COOKIE, ClientIdentityDep, ProvinceServiceDep

router = APIRouter(prefix="/dev", tags=["dev"])


@router.post("/mock-province", response_model=ActionResult)
async def set_mock_province(
    payload: MockProvinceRequest,
    response: Response,
    identity: ClientIdentityDep,
    service: ProvinceServiceDep,
) -> ActionResult:
    """Pretend the caller is located in ``payload.province``."""
    result = service.set_mock_province(identity, payload.province)
    if not result.success:
        response.status_code = status.HTTP_403_FORBIDDEN
        return result
    response.set_cookie(MOCK_PROVINCE_COOKIE, payload.province, httponly=True, samesite="lax")
    return result
