# src/province_glow/models/__init__.py
"""SQLAlchemy models for the Province Glow application."""

from .action_log import ActionLogEntry, ActionType
from .message import Message
from .province import Province

__all__ = [
    "ActionLogEntry", "ActionType",
    "Message",
    "Province",
]
