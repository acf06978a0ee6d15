"""
Selection state threaded through the prompt builder.

``SelectionState`` is immutable: every helper that changes it returns a new
instance built with ``model_copy``. Saved prompts store it as a JSON snapshot
and reload it unchanged.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Subject(BaseModel):
    id: str = Field(..., description="Stable subject identifier")
    name: str = ""
    age: str = ""
    appearance: str = ""
    action: str = ""

    @property
    def is_present(self) -> bool:
        """True when any descriptive field carries text."""
        return any(
            value.strip() for value in (self.name, self.age, self.appearance, self.action)
        )


class SelectionState(BaseModel):
    """Per-session prompt builder state."""

    model_config = ConfigDict(frozen=True)

    selections: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Category id -> ordered option ids",
    )
    custom_values: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Category id -> free-text values",
    )
    subject_description: str = Field(default="", description="Free-text first paragraph")
    selected_lens_id: Optional[str] = None
    selected_lens_style: Optional[str] = Field(
        default=None, description="Lens style filter code (A, S, M, T)"
    )
    selected_camera_id: Optional[str] = None
    selected_camera_type: Optional[str] = Field(
        default=None, description="Camera type filter code (D, F)"
    )
    subjects: List[Subject] = Field(default_factory=list)
    lighting_custom_text: str = Field(
        default="", description="Manually typed suffix kept on the [Lighting] line"
    )

    def selected(self, category_id: str) -> List[str]:
        return list(self.selections.get(category_id, []))

    def customs(self, category_id: str) -> List[str]:
        return list(self.custom_values.get(category_id, []))


class ParsedPrompt(BaseModel):
    """Best-effort selections recovered from pasted prompt text."""

    selections: Dict[str, List[str]] = Field(default_factory=dict)
    custom_values: Dict[str, List[str]] = Field(default_factory=dict)
    matched_lens_id: Optional[str] = None
    matched_camera_id: Optional[str] = None
    subjects: List[Subject] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (
            self.selections
            or self.custom_values
            or self.matched_lens_id
            or self.matched_camera_id
            or self.subjects
        )

    def to_state(self, base: Optional[SelectionState] = None) -> SelectionState:
        """
        Build a SelectionState from the parsed result.

        Args:
            base: Optional state whose unrelated fields (subject description,
                lens/camera filters) are carried over

        Returns:
            New SelectionState holding the parsed selections
        """
        base = base or SelectionState()
        return base.model_copy(
            update={
                "selections": {k: list(v) for k, v in self.selections.items()},
                "custom_values": {k: list(v) for k, v in self.custom_values.items()},
                "selected_lens_id": self.matched_lens_id,
                "selected_camera_id": self.matched_camera_id,
                "subjects": [s.model_copy() for s in self.subjects],
                "lighting_custom_text": "",
            }
        )
