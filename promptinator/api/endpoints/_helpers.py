"""
Shared helper functions for API endpoints.

This module provides common utilities used across routers:
- Caller identity from the upstream auth header
- Service dependencies (overridable in tests)
- Translation of service errors into HTTP errors
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request

from ...core.config import settings
from ...services.errors import ServiceError
from ...services.generation_service import GenerationService
from ...services.review_service import ReviewService

logger = logging.getLogger(__name__)

_generation_service: Optional[GenerationService] = None
_review_service: Optional[ReviewService] = None


def get_current_user_id(request: Request) -> Optional[str]:
    """
    Read the caller's user id forwarded by the auth layer.

    Returns:
        The user id, or None for anonymous callers
    """
    value = request.headers.get(settings.auth_user_header)
    if value is None or not value.strip():
        return None
    return value.strip()


def require_user_id(user_id: Optional[str] = Depends(get_current_user_id)) -> str:
    """Dependency rejecting anonymous callers with 401."""
    if user_id is None:
        raise HTTPException(
            status_code=401,
            detail={"message": "Unauthorized", "code": "UNAUTHORIZED"},
        )
    return user_id


def get_generation_service() -> GenerationService:
    global _generation_service
    if _generation_service is None:
        _generation_service = GenerationService()
    return _generation_service


def get_review_service() -> ReviewService:
    global _review_service
    if _review_service is None:
        _review_service = ReviewService()
    return _review_service


def to_http_exception(error: ServiceError) -> HTTPException:
    """Map a service error onto an HTTPException with a {message, code} detail."""
    if error.status_code >= 500:
        logger.error(f"❌ {error.code}: {error.message}")
    else:
        logger.warning(f"⚠️ {error.code}: {error.message}")
    return HTTPException(status_code=error.status_code, detail=error.to_detail())


def bad_request(message: str, code: str = "VALIDATION_ERROR") -> HTTPException:
    return HTTPException(status_code=400, detail={"message": message, "code": code})
