"""
Saved prompt endpoints.

Prompts are stored per user together with the SelectionState snapshot that
produced them, so a saved prompt reloads into the builder unchanged.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from ...models import PromptImageRequest, SavedPromptRequest, SavedPromptResponse
from ...services.errors import RecordNotFoundError
from ...services.store import RecordStore, get_prompt_store
from ._helpers import require_user_id, to_http_exception

router = APIRouter(prefix="/api/prompts", tags=["prompts"])


def _payload(request: SavedPromptRequest) -> dict:
    return {
        "name": request.name,
        "prompt": request.prompt,
        "state": request.state.model_dump(),
        "image": request.image,
        "image_full": request.image_full,
    }


@router.get("", response_model=List[SavedPromptResponse])
async def list_prompts(
    user_id: str = Depends(require_user_id),
    store: RecordStore = Depends(get_prompt_store),
) -> List[SavedPromptResponse]:
    """Saved prompts of the caller, newest first."""
    return [SavedPromptResponse(**record) for record in store.list_by_user(user_id)]


@router.post("", response_model=SavedPromptResponse)
async def create_prompt(
    request: SavedPromptRequest,
    user_id: str = Depends(require_user_id),
    store: RecordStore = Depends(get_prompt_store),
) -> SavedPromptResponse:
    return SavedPromptResponse(**store.create(user_id, _payload(request)))


@router.put("/{prompt_id}", response_model=SavedPromptResponse)
async def update_prompt(
    prompt_id: str,
    request: SavedPromptRequest,
    user_id: str = Depends(require_user_id),
    store: RecordStore = Depends(get_prompt_store),
) -> SavedPromptResponse:
    try:
        record = store.update(user_id, prompt_id, _payload(request))
    except RecordNotFoundError as e:
        raise to_http_exception(e)
    return SavedPromptResponse(**record)


@router.patch("/{prompt_id}/image", response_model=SavedPromptResponse)
async def update_prompt_image(
    prompt_id: str,
    request: PromptImageRequest,
    user_id: str = Depends(require_user_id),
    store: RecordStore = Depends(get_prompt_store),
) -> SavedPromptResponse:
    """Attach or clear the thumbnail and full-size image of a saved prompt."""
    try:
        record = store.update(
            user_id,
            prompt_id,
            {"image": request.image, "image_full": request.image_full},
        )
    except RecordNotFoundError as e:
        raise to_http_exception(e)
    return SavedPromptResponse(**record)


@router.delete("/{prompt_id}")
async def delete_prompt(
    prompt_id: str,
    user_id: str = Depends(require_user_id),
    store: RecordStore = Depends(get_prompt_store),
) -> dict:
    try:
        store.delete(user_id, prompt_id)
    except RecordNotFoundError as e:
        raise to_http_exception(e)
    return {"success": True}
