"""
Selection rules for the prompt builder.

Framing (camera height / view / shot size) allows one option per group and
carries a table of cross-group exclusions. The same table drives both
``apply_selection`` (mutation) and ``is_disabled`` / ``disabled_reason``
(display), so the two never disagree.

Other categories follow their kind: multi-select and free-text toggle
membership, single-select replaces or clears.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from ..core.catalog import (
    FreeTextCategory,
    MultiSelectCategory,
    OnePerGroupCategory,
    SingleSelectCategory,
    all_categories,
    category_by_id,
    find_camera,
    find_lens,
    parse_camera_type,
    parse_lens_style,
)
from ..models.selection import SelectionState, Subject

logger = logging.getLogger(__name__)

FRAMING_CATEGORY_ID = "angles"
LIGHTING_CATEGORY_ID = "lighting"

_STEEP_HEIGHTS = ("height-high", "height-low", "height-worm", "height-top", "height-aerial")


@dataclass(frozen=True)
class ExclusionRule:
    """Selecting ``trigger`` removes every id in ``excluded``."""

    trigger: str
    excluded: Tuple[str, ...]
    reason: str


EXCLUSION_RULES: Tuple[ExclusionRule, ...] = (
    ExclusionRule("view-ots", ("size-close", "size-xclose", "size-xwide"), "OTS view"),
    ExclusionRule("view-ots", _STEEP_HEIGHTS, "OTS view"),
    *(ExclusionRule(height, ("view-ots",), "selected height") for height in _STEEP_HEIGHTS),
    ExclusionRule(
        "height-top",
        ("view-side", "view-three-quarter", "view-ots", "view-rear", "view-dutch", "view-front"),
        "Top view",
    ),
    ExclusionRule("height-worm", ("view-dutch",), "Worm view"),
    ExclusionRule("view-dutch", ("height-worm", "height-top"), "Dutch view"),
    ExclusionRule("view-front", ("height-top",), "Front view"),
    ExclusionRule("height-aerial", ("size-close", "size-xclose"), "Aerial height"),
)


def _build_exclusions(rules: Iterable[ExclusionRule]) -> Dict[str, FrozenSet[str]]:
    merged: Dict[str, set] = {}
    for rule in rules:
        merged.setdefault(rule.trigger, set()).update(rule.excluded)
    return {trigger: frozenset(ids) for trigger, ids in merged.items()}


def _build_reasons(rules: Iterable[ExclusionRule]) -> Dict[Tuple[str, str], str]:
    reasons: Dict[Tuple[str, str], str] = {}
    for rule in rules:
        for excluded in rule.excluded:
            reasons.setdefault((rule.trigger, excluded), rule.reason)
    return reasons


EXCLUSIONS: Dict[str, FrozenSet[str]] = _build_exclusions(EXCLUSION_RULES)
_REASONS: Dict[Tuple[str, str], str] = _build_reasons(EXCLUSION_RULES)


# ============================================================================
# FRAMING
# ============================================================================

def _group_of(option_id: str) -> Optional[str]:
    framing = category_by_id(FRAMING_CATEGORY_ID)
    return framing.group_of(option_id) if framing else None


def apply_selection(current_ids: Sequence[str], new_id: str, group: Optional[str]) -> List[str]:
    """
    Apply one framing selection.

    Args:
        current_ids: Currently selected framing ids (insertion order kept)
        new_id: Option being clicked
        group: Group of ``new_id`` (Height, View or Size)

    Returns:
        New ordered list of selected ids. Clicking a selected id removes it;
        otherwise the previous member of the same group and everything the
        new id excludes are dropped, and ``new_id`` is appended last.
    """
    if new_id in current_ids:
        return [option_id for option_id in current_ids if option_id != new_id]

    excluded = EXCLUSIONS.get(new_id, frozenset())
    result = [
        option_id
        for option_id in current_ids
        if not (group and _group_of(option_id) == group) and option_id not in excluded
    ]
    result.append(new_id)
    return result


def excluding_triggers(option_id: str, current_ids: Iterable[str]) -> List[str]:
    """Selected ids whose exclusions cover ``option_id``, in selection order."""
    return [
        selected
        for selected in current_ids
        if option_id in EXCLUSIONS.get(selected, frozenset())
    ]


def is_disabled(option_id: str, current_ids: Iterable[str]) -> bool:
    return bool(excluding_triggers(option_id, current_ids))


def disabled_reason(option_id: str, current_ids: Iterable[str]) -> Optional[str]:
    """Tooltip text for a disabled option, or None when it is selectable."""
    triggers = excluding_triggers(option_id, current_ids)
    if not triggers:
        return None
    return f"Not available with {_REASONS[(triggers[0], option_id)]}"


def disabled_options(current_ids: Sequence[str]) -> Dict[str, str]:
    """Map every disabled framing option id to its reason."""
    framing = category_by_id(FRAMING_CATEGORY_ID)
    if framing is None:
        return {}
    disabled: Dict[str, str] = {}
    for option in framing.options:
        reason = disabled_reason(option.id, current_ids)
        if reason:
            disabled[option.id] = reason
    return disabled


# ============================================================================
# STATE TRANSITIONS
# ============================================================================

def _toggle(current: List[str], option_id: str) -> List[str]:
    if option_id in current:
        return [existing for existing in current if existing != option_id]
    return current + [option_id]


def _with_selection(state: SelectionState, category_id: str, ids: List[str]) -> SelectionState:
    selections = {k: list(v) for k, v in state.selections.items()}
    if ids:
        selections[category_id] = ids
    else:
        selections.pop(category_id, None)

    update = {"selections": selections}
    if category_id == LIGHTING_CATEGORY_ID and ids != state.selected(category_id):
        update["lighting_custom_text"] = ""
    return state.model_copy(update=update)


def select_option(state: SelectionState, category_id: str, option_id: str) -> SelectionState:
    """
    Apply a single option click to the state.

    Unknown category or option ids, framing options disabled by the current
    selection, and options of text-only categories leave the state unchanged.
    Text-only categories are edited through set_custom_values.
    """
    category = category_by_id(category_id)
    if category is None or category.option(option_id) is None:
        logger.debug(f"Ignoring unknown selection {category_id}/{option_id}")
        return state

    current = state.selected(category_id)

    if isinstance(category, OnePerGroupCategory):
        if option_id not in current and is_disabled(option_id, current):
            logger.debug(f"Ignoring disabled framing option {option_id}")
            return state
        updated = apply_selection(current, option_id, category.group_of(option_id))
    elif isinstance(category, FreeTextCategory):
        logger.debug(f"Ignoring option click on text-only category {category_id}")
        return state
    elif isinstance(category, MultiSelectCategory):
        updated = _toggle(current, option_id)
    elif isinstance(category, SingleSelectCategory):
        updated = [] if current == [option_id] else [option_id]
    else:
        return state

    return _with_selection(state, category_id, updated)


def set_custom_values(state: SelectionState, category_id: str, values: Sequence[str]) -> SelectionState:
    """Replace a category's custom values, dropping blanks."""
    category = category_by_id(category_id)
    if category is None:
        return state
    cleaned = [value for value in values if value and value.strip()]
    custom_values = {k: list(v) for k, v in state.custom_values.items()}
    if cleaned:
        custom_values[category_id] = cleaned
    else:
        custom_values.pop(category_id, None)
    return state.model_copy(update={"custom_values": custom_values})


def set_lens(state: SelectionState, lens_id: Optional[str]) -> SelectionState:
    """Select a lens; selecting the current lens again clears it."""
    if lens_id is None:
        return state.model_copy(update={"selected_lens_id": None})
    if find_lens(lens_id) is None:
        return state
    if state.selected_lens_id == lens_id:
        return state.model_copy(update={"selected_lens_id": None})
    return state.model_copy(update={"selected_lens_id": lens_id})


def set_lens_style(state: SelectionState, style: Optional[str]) -> SelectionState:
    parsed = parse_lens_style(style)
    return state.model_copy(update={"selected_lens_style": parsed.value if parsed else None})


def set_camera(state: SelectionState, camera_id: Optional[str]) -> SelectionState:
    """Select a camera body; selecting the current body again clears it."""
    if camera_id is None:
        return state.model_copy(update={"selected_camera_id": None})
    if find_camera(camera_id) is None:
        return state
    if state.selected_camera_id == camera_id:
        return state.model_copy(update={"selected_camera_id": None})
    return state.model_copy(update={"selected_camera_id": camera_id})


def set_camera_type(state: SelectionState, camera_type: Optional[str]) -> SelectionState:
    parsed = parse_camera_type(camera_type)
    return state.model_copy(update={"selected_camera_type": parsed.value if parsed else None})


def set_subjects(state: SelectionState, subjects: Sequence[Subject]) -> SelectionState:
    return state.model_copy(update={"subjects": [s.model_copy() for s in subjects]})


def set_subject_description(state: SelectionState, text: str) -> SelectionState:
    return state.model_copy(update={"subject_description": text or ""})


def reset_state() -> SelectionState:
    """Fresh state seeded with each free-text category's default text."""
    custom_values: Dict[str, List[str]] = {}
    for category in all_categories():
        if isinstance(category, FreeTextCategory) and category.default_custom_value:
            custom_values[category.id] = [category.default_custom_value]
    return SelectionState(custom_values=custom_values)
