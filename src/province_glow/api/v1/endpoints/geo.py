# src/province_glow/api/v1/endpoints/geo.py
"""Visitor location endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from province_glow.schemas.geo import GeoInfo

from ..dependencies import ClientIdentityDep, MockProvinceDep, ProvinceServiceDep

router = APIRouter(prefix="/geo", tags=["geo"])


@router.get("", response_model=GeoInfo)
async def get_geo_info(
    identity: ClientIdentityDep,
    service: ProvinceServiceDep,
    mock_province: MockProvinceDep = None,
) -> GeoInfo:
    """Return the caller's province and whether they may light it up or post."""
    return await service.resolve_location(identity, mock_province)
