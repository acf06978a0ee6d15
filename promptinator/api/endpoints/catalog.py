"""
Catalog endpoints exposing the prompt vocabulary.

Categories, lenses and camera bodies are static; these routes only
serialize them for the client.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from ...core.catalog import (
    CAMERA_TYPE_DESCRIPTIONS,
    DEFAULT_CAMERA_ID,
    LENS_STYLE_DESCRIPTIONS,
    Category,
    CameraType,
    FreeTextCategory,
    LensStyle,
    OnePerGroupCategory,
    all_categories,
    cameras_for_type,
    category_by_id,
    lenses_for_style,
    parse_camera_type,
    parse_lens_style,
)
from ...models import CameraCatalogResponse, CategoryModel, LensCatalogResponse
from ...models.schemas import CameraModel, FilterModel, LensModel, OptionModel

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def _category_model(category: Category) -> CategoryModel:
    return CategoryModel(
        id=category.id,
        label=category.label,
        description=category.description,
        kind=category.kind,
        options=[
            OptionModel(
                id=option.id,
                label=option.label,
                prompt_value=option.prompt_value,
                group=option.group,
                tooltip=option.tooltip,
                image=option.image,
            )
            for option in category.options
        ],
        groups=list(category.groups) if isinstance(category, OnePerGroupCategory) else [],
        allow_custom=category.allow_custom,
        show_descriptions=category.show_descriptions,
        custom_placeholder=category.custom_placeholder,
        hint_text=category.hint_text,
        default_custom_value=(
            category.default_custom_value if isinstance(category, FreeTextCategory) else None
        ),
    )


@router.get("/categories", response_model=List[CategoryModel])
async def list_categories() -> List[CategoryModel]:
    """All categories in catalog order."""
    return [_category_model(category) for category in all_categories()]


@router.get("/categories/{category_id}", response_model=CategoryModel)
async def get_category(category_id: str) -> CategoryModel:
    category = category_by_id(category_id)
    if category is None:
        raise HTTPException(
            status_code=404,
            detail={"message": f"Unknown category '{category_id}'", "code": "NOT_FOUND"},
        )
    return _category_model(category)


@router.get("/lenses", response_model=LensCatalogResponse)
async def list_lenses(
    style: Optional[str] = Query(default=None, description="Style code or label (A, anamorphic, ...)"),
) -> LensCatalogResponse:
    """Lenses, optionally filtered by style. Unknown styles return every lens."""
    lenses = lenses_for_style(parse_lens_style(style))
    return LensCatalogResponse(
        styles=[
            FilterModel(id=s.value, label=s.label, description=LENS_STYLE_DESCRIPTIONS[s])
            for s in LensStyle
        ],
        lenses=[
            LensModel(
                id=lens.id,
                name=lens.name,
                image_path=lens.image_path,
                styles=[s.value for s in lens.styles],
                prompt_value=lens.prompt_value,
                tooltip=lens.tooltip,
            )
            for lens in lenses
        ],
    )


@router.get("/cameras", response_model=CameraCatalogResponse)
async def list_cameras(
    camera_type: Optional[str] = Query(default=None, description="Type code or label (D, film, ...)"),
) -> CameraCatalogResponse:
    cameras = cameras_for_type(parse_camera_type(camera_type))
    return CameraCatalogResponse(
        camera_types=[
            FilterModel(id=t.value, label=t.label, description=CAMERA_TYPE_DESCRIPTIONS[t])
            for t in CameraType
        ],
        cameras=[
            CameraModel(
                id=camera.id,
                name=camera.name,
                image_path=camera.image_path,
                camera_type=camera.camera_type.value,
                prompt_value=camera.prompt_value,
                tooltip=camera.tooltip,
            )
            for camera in cameras
        ],
        default_camera_id=DEFAULT_CAMERA_ID,
    )
