"""Shared API dependencies: sessions, client identity and the province service."""

from typing import Annotated

from fastapi import Cookie, Depends, Request
from sqlalchemy.orm import Session

from province_glow.db.session import get_db
from province_glow.services.geo import GeoResolver, client_address, get_geo_resolver
from province_glow.services.province_service import ProvinceService

# Cookie carrying the development-only location override.
MOCK_PROVINCE_COOKIE = "mock_province"

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_client_identity(request: Request) -> str:
    """Return the opaque identity for the caller, derived from its network address."""
    peer = request.client.host if request.client else None
    return client_address(request.headers, peer)


def get_geo_resolver_dep() -> GeoResolver:
    """Return the geolocation resolver."""
    return get_geo_resolver()


def get_province_service(
    db: SessionDep,
    resolver: Annotated[GeoResolver, Depends(get_geo_resolver_dep)],
) -> ProvinceService:
    """Build the province service over the request's database session."""
    return ProvinceService(db, resolver=resolver)


ClientIdentityDep = Annotated[str, Depends(get_client_identity)]
ProvinceServiceDep = Annotated[ProvinceService, Depends(get_province_service)]
MockProvinceDep = Annotated[str | None, Cookie(alias=MOCK_PROVINCE_COOKIE)]
