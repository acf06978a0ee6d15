"""
System endpoints for health checks and caller identity.

This module provides endpoints for:
- Health checks with provider configuration status
- API root information
- The identity forwarded by the auth layer
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ...core.catalog import all_categories
from ...core.config import settings
from ...models import HealthResponse, UserResponse
from ._helpers import require_user_id

router = APIRouter(prefix="/api", tags=["system"])


def _health() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        app_name=settings.app_name,
        version=settings.version,
        categories=len(all_categories()),
        openai_configured=settings.openai_configured,
        gemini_configured=settings.gemini_configured,
    )


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check with catalog size and provider configuration."""
    return _health()


@router.get("/", response_model=HealthResponse)
async def root() -> HealthResponse:
    return _health()


@router.get("/me", response_model=UserResponse)
async def current_user(user_id: str = Depends(require_user_id)) -> UserResponse:
    """Echo the authenticated user id; 401 for anonymous callers."""
    return UserResponse(user_id=user_id)
