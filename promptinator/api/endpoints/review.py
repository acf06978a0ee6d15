"""Prompt review endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ...models import ReviewPromptRequest, ReviewPromptResponse
from ...services.errors import ServiceError
from ...services.review_service import ReviewService
from ._helpers import get_review_service, to_http_exception

router = APIRouter(prefix="/api", tags=["review"])


@router.post("/review-prompt", response_model=ReviewPromptResponse)
async def review_prompt(
    request: ReviewPromptRequest,
    service: ReviewService = Depends(get_review_service),
) -> ReviewPromptResponse:
    """Return improvement suggestions for a prompt from the review model."""
    try:
        suggestions = await service.review(request.prompt)
    except ServiceError as e:
        raise to_http_exception(e)
    return ReviewPromptResponse(suggestions=suggestions)
