# src/province_glow/schemas/__init__.py
"""
Pydantic schemas for service results and API request/response models.

These schemas are the typed structs exchanged across the service boundary,
whether called in-process or through the HTTP transport.
"""

from .common import ActionResult
from .geo import GeoInfo, MockProvinceRequest
from .message import MessageCreate, MessageOut
from .province import LightUpResult, ProvinceOut

__all__ = [
    "ActionResult",
    "GeoInfo", "MockProvinceRequest",
    "MessageCreate", "MessageOut",
    "LightUpResult", "ProvinceOut",
]
