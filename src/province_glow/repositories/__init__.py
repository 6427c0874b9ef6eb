"""Data access helpers for provinces, messages and the action log."""

from .action_log_repo import ActionLogRepository
from .message_repo import MessageRepository
from .province_repo import ProvinceRepository

__all__ = ["ActionLogRepository", "MessageRepository", "ProvinceRepository"]
