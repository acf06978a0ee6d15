"""
Models package for the Promptinator backend.

This package contains Pydantic models:
- selection: SelectionState, Subject and ParsedPrompt shared by the prompt engine
- schemas: API request/response models

All models use Pydantic BaseModel for automatic validation and serialization.
"""

from .schemas import (
    CameraCatalogResponse,
    CategoryModel,
    ComposeRequest,
    ComposeResponse,
    DisabledRequest,
    DisabledResponse,
    GenerateImageRequest,
    GenerateImageResponse,
    HealthResponse,
    LensCatalogResponse,
    ParseRequest,
    ParseResponse,
    PromptImageRequest,
    ReconcileRequest,
    ReviewPromptRequest,
    ReviewPromptResponse,
    SavedPromptRequest,
    SavedPromptResponse,
    ScenePresetCreateRequest,
    ScenePresetResponse,
    ScenePresetUpdateRequest,
    SelectRequest,
    StateResponse,
    UserResponse,
)
from .selection import ParsedPrompt, SelectionState, Subject

__all__ = [
    "CameraCatalogResponse",
    "CategoryModel",
    "ComposeRequest",
    "ComposeResponse",
    "DisabledRequest",
    "DisabledResponse",
    "GenerateImageRequest",
    "GenerateImageResponse",
    "HealthResponse",
    "LensCatalogResponse",
    "ParseRequest",
    "ParseResponse",
    "ParsedPrompt",
    "PromptImageRequest",
    "ReconcileRequest",
    "ReviewPromptRequest",
    "ReviewPromptResponse",
    "SavedPromptRequest",
    "SavedPromptResponse",
    "ScenePresetCreateRequest",
    "ScenePresetResponse",
    "ScenePresetUpdateRequest",
    "SelectRequest",
    "SelectionState",
    "StateResponse",
    "Subject",
    "UserResponse",
]
