# src/province_glow/api/v1/endpoints/provinces.py
"""Province counter and message board endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from province_glow.schemas.common import ActionResult
from province_glow.schemas.message import MessageCreate, MessageOut
from province_glow.schemas.province import LightUpResult, ProvinceOut

from ..dependencies import ClientIdentityDep, ProvinceServiceDep

router = APIRouter(prefix="/provinces", tags=["provinces"])


@router.get("", response_model=list[ProvinceOut])
async def list_provinces(service: ProvinceServiceDep) -> list[ProvinceOut]:
    """Return every province with its light-up counter."""
    return service.list_provinces()


@router.post("/{province_name}/light-up", response_model=LightUpResult)
async def light_up_province(
    province_name: str,
    identity: ClientIdentityDep,
    service: ProvinceServiceDep,
) -> LightUpResult:
    """Light up a province for the caller, once per local day."""
    return service.light_up(province_name, identity)


@router.get("/{province_name}/messages", response_model=list[MessageOut])
async def list_messages(province_name: str, service: ProvinceServiceDep) -> list[MessageOut]:
    """Return the newest messages on a province board."""
    return service.list_messages(province_name)


@router.post(
    "/{province_name}/messages",
    response_model=ActionResult,
    status_code=status.HTTP_201_CREATED,
)
async def post_message(
    province_name: str,
    payload: MessageCreate,
    identity: ClientIdentityDep,
    service: ProvinceServiceDep,
) -> ActionResult:
    """Post a moderated message to a province board."""
    return service.post_message(province_name, identity, payload.content)
