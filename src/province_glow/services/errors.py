"""Exceptions raised by the province service layer.

Each error carries a ``message`` that is safe to show to the visitor.
"""

from __future__ import annotations


class DomainError(RuntimeError):
    """Base class for rejected operations."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ProvinceNotFoundError(DomainError):
    """Raised when the referenced province does not exist."""

    def __init__(self, province_name: str) -> None:
        super().__init__("Province not found")
        self.province_name = province_name


class RateLimitedError(DomainError):
    """Raised when an identity repeats an action inside its window."""

    def __init__(self, message: str, retry_after: float = 0.0) -> None:
        super().__init__(message)
        self.retry_after = retry_after


class ContentValidationError(DomainError):
    """Raised when submitted content is rejected before any store access."""


class StorageError(DomainError):
    """Raised when persistence fails; the caller may retry.

    The message is generic; the underlying driver error is only logged.
    """
