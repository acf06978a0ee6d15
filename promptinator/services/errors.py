"""Exceptions raised by the boundary services (providers, persistence)."""

from __future__ import annotations

from typing import Optional


class ServiceError(Exception):
    """Base class carrying a stable error code and the HTTP status to report."""

    code = "SERVICE_ERROR"
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_detail(self) -> dict:
        return {"message": self.message, "code": self.code}


class ConfigurationError(ServiceError):
    """A provider is missing its API key or other required setting."""

    code = "CONFIG_ERROR"
    status_code = 500


class ProviderError(ServiceError):
    """Upstream provider failed or returned something unusable."""

    code = "API_ERROR"
    status_code = 400


class EmptyResponseError(ServiceError):
    code = "EMPTY_RESPONSE"
    status_code = 500


class RecordNotFoundError(ServiceError):
    """Record does not exist or belongs to another user."""

    code = "NOT_FOUND"
    status_code = 404
