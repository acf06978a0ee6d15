from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .selection import ParsedPrompt, SelectionState, Subject


AspectRatio = Literal["auto", "1:1", "4:3", "16:9", "21:9", "9:19.5", "19.5:9", "9:16"]
Resolution = Literal["1K", "2K", "4K"]
ImageModel = Literal["gpt-image", "nano-banana"]
PresetCategory = Literal["action", "wardrobe", "environment", "subjects"]


class HealthResponse(BaseModel):
    status: str
    app_name: str
    version: str
    categories: int = Field(..., description="Number of catalog categories loaded")
    openai_configured: bool
    gemini_configured: bool


class UserResponse(BaseModel):
    user_id: str


# ============================================================================
# CATALOG
# ============================================================================

class OptionModel(BaseModel):
    id: str
    label: str
    prompt_value: str
    group: Optional[str] = None
    tooltip: Optional[str] = None
    image: Optional[str] = None


class CategoryModel(BaseModel):
    id: str
    label: str
    description: str
    kind: Literal["single", "multiple", "one_per_group", "free_text"]
    options: List[OptionModel]
    groups: List[str] = Field(default_factory=list)
    allow_custom: bool = False
    show_descriptions: bool = False
    custom_placeholder: Optional[str] = None
    hint_text: Optional[str] = None
    default_custom_value: Optional[str] = None


class LensModel(BaseModel):
    id: str
    name: str
    image_path: str
    styles: List[str]
    prompt_value: str
    tooltip: Optional[str] = None


class CameraModel(BaseModel):
    id: str
    name: str
    image_path: str
    camera_type: str
    prompt_value: str
    tooltip: Optional[str] = None


class FilterModel(BaseModel):
    id: str
    label: str
    description: str


class LensCatalogResponse(BaseModel):
    styles: List[FilterModel]
    lenses: List[LensModel]


class CameraCatalogResponse(BaseModel):
    camera_types: List[FilterModel]
    cameras: List[CameraModel]
    default_camera_id: str


# ============================================================================
# PROMPT BUILDER
# ============================================================================

class ComposeRequest(BaseModel):
    state: SelectionState = Field(default_factory=SelectionState)


class ComposeResponse(BaseModel):
    prompt: str
    length: int


class ParseRequest(BaseModel):
    text: str = Field(..., description="Prompt text pasted by the user")


class ParseResponse(BaseModel):
    parsed: ParsedPrompt
    state: SelectionState
    summary: List[str]


class SelectRequest(BaseModel):
    state: SelectionState = Field(default_factory=SelectionState)
    category_id: str
    option_id: str


class DisabledRequest(BaseModel):
    selected_ids: List[str] = Field(default_factory=list, description="Selected framing option ids")


class DisabledResponse(BaseModel):
    disabled: Dict[str, str] = Field(..., description="Disabled option id -> reason")


class ReconcileRequest(BaseModel):
    state: SelectionState
    edited_text: str = Field(..., description="Prompt text after manual edits")


class StateResponse(BaseModel):
    state: SelectionState
    prompt: str
    disabled: Dict[str, str] = Field(default_factory=dict)


# ============================================================================
# SAVED PROMPTS
# ============================================================================

class SavedPromptRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    prompt: str
    state: SelectionState = Field(default_factory=SelectionState)
    image: Optional[str] = Field(default=None, description="Thumbnail as data URL")
    image_full: Optional[str] = Field(default=None, description="Full-size image as data URL")


class PromptImageRequest(BaseModel):
    image: Optional[str] = Field(default=None, description="Thumbnail as data URL; null clears")
    image_full: Optional[str] = None


class SavedPromptResponse(BaseModel):
    id: str
    name: str
    prompt: str
    state: SelectionState
    image: Optional[str] = None
    image_full: Optional[str] = None
    created_at: datetime
    updated_at: datetime


# ============================================================================
# SCENE PRESETS
# ============================================================================

class ScenePresetCreateRequest(BaseModel):
    name: str
    category: str
    value: str


class ScenePresetUpdateRequest(BaseModel):
    name: Optional[str] = None
    value: Optional[str] = None


class ScenePresetResponse(BaseModel):
    id: str
    name: str
    category: str
    value: str
    created_at: datetime
    updated_at: datetime


# ============================================================================
# PROVIDERS
# ============================================================================

class GenerateImageRequest(BaseModel):
    prompt: str = Field(..., min_length=1, description="Prompt text to render")
    aspect_ratio: AspectRatio = "auto"
    resolution: Resolution = "2K"
    model: ImageModel = "gpt-image"


class GenerateImageResponse(BaseModel):
    image_data: str = Field(..., description="Base64 encoded image")
    mime_type: str


class ReviewPromptRequest(BaseModel):
    prompt: str = Field(..., min_length=1)


class ReviewPromptResponse(BaseModel):
    suggestions: str


__all__ = [
    "AspectRatio",
    "CameraCatalogResponse",
    "CameraModel",
    "CategoryModel",
    "ComposeRequest",
    "ComposeResponse",
    "DisabledRequest",
    "DisabledResponse",
    "FilterModel",
    "GenerateImageRequest",
    "GenerateImageResponse",
    "HealthResponse",
    "ImageModel",
    "LensCatalogResponse",
    "LensModel",
    "OptionModel",
    "ParseRequest",
    "ParseResponse",
    "PresetCategory",
    "PromptImageRequest",
    "ReconcileRequest",
    "Resolution",
    "ReviewPromptRequest",
    "ReviewPromptResponse",
    "SavedPromptRequest",
    "SavedPromptResponse",
    "ScenePresetCreateRequest",
    "ScenePresetResponse",
    "ScenePresetUpdateRequest",
    "SelectRequest",
    "StateResponse",
    "Subject",
    "UserResponse",
]
