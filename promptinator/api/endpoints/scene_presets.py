"""
Scene preset endpoints.

Presets are named reusable values for the action, wardrobe, environment and
subjects fields, stored per user.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ...models import ScenePresetCreateRequest, ScenePresetResponse, ScenePresetUpdateRequest
from ...services.errors import RecordNotFoundError
from ...services.store import VALID_PRESET_CATEGORIES, ScenePresetStore, get_preset_store
from ._helpers import bad_request, require_user_id, to_http_exception

router = APIRouter(prefix="/api/scene-presets", tags=["scene-presets"])


@router.get("", response_model=List[ScenePresetResponse])
async def list_presets(
    category: Optional[str] = Query(default=None, description="Filter by preset category"),
    user_id: str = Depends(require_user_id),
    store: ScenePresetStore = Depends(get_preset_store),
) -> List[ScenePresetResponse]:
    if category is not None and category not in VALID_PRESET_CATEGORIES:
        raise bad_request(
            f"Invalid category. Must be one of: {', '.join(VALID_PRESET_CATEGORIES)}"
        )
    return [
        ScenePresetResponse(**record)
        for record in store.list_by_user(user_id, category=category)
    ]


@router.post("", response_model=ScenePresetResponse)
async def create_preset(
    request: ScenePresetCreateRequest,
    user_id: str = Depends(require_user_id),
    store: ScenePresetStore = Depends(get_preset_store),
) -> ScenePresetResponse:
    try:
        record = store.create(user_id, request.model_dump())
    except ValueError as e:
        raise bad_request(str(e))
    return ScenePresetResponse(**record)


@router.patch("/{preset_id}", response_model=ScenePresetResponse)
async def update_preset(
    preset_id: str,
    request: ScenePresetUpdateRequest,
    user_id: str = Depends(require_user_id),
    store: ScenePresetStore = Depends(get_preset_store),
) -> ScenePresetResponse:
    """Rename a preset or change its value; the category is fixed."""
    try:
        record = store.update(user_id, preset_id, request.model_dump(exclude_none=True))
    except RecordNotFoundError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(str(e))
    return ScenePresetResponse(**record)


@router.delete("/{preset_id}")
async def delete_preset(
    preset_id: str,
    user_id: str = Depends(require_user_id),
    store: ScenePresetStore = Depends(get_preset_store),
) -> dict:
    try:
        store.delete(user_id, preset_id)
    except RecordNotFoundError as e:
        raise to_http_exception(e)
    return {"success": True}
