"""
Prompt Composition System.

Renders a ``SelectionState`` into one multi-section prompt:

    subject description
    [Camera/Lens] framing + lens look, genre, film stock, ISO, aperture, shutter, body
    [Subjects] / [Actions] with [Primary:] and [Secondary:] lines
    remaining categories ([Details], [Environment], [Lighting], unprefixed lines)
    negative prompt block

Sections are separated by one blank line. Composition is pure: the same state
always renders the same text, and unknown ids are skipped.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional

from ..core.catalog import (
    FRAMING_GROUP_ORDER,
    category_by_id,
    all_categories,
    find_camera,
    find_lens,
    lens_style_label,
)
from ..models.selection import SelectionState, Subject

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "\n\n"

CAMERA_SECTION_PREFIX = "[Camera/Lens]"
SUBJECTS_HEADING = "[Subjects]"
ACTIONS_HEADING = "[Actions]"
PRIMARY_LABEL = "[Primary:]"
SECONDARY_LABEL = "[Secondary:]"
LIGHTING_PREFIX = "[Lighting]"

PHOTOREALISTIC_ID = "photorealistic"
PHOTOREALISTIC_TAIL = "natural film grain, photorealistic"

# Categories rendered after the framing/lens string, in this order
CAMERA_DETAIL_CATEGORIES = ("style", "filmStock", "iso", "aperture", "shutter")

# Categories the generic pass skips (rendered elsewhere or superseded)
HANDLED_CATEGORIES = frozenset(
    {"angles", "lensStyle", "lens", "action", "finalTouches", *CAMERA_DETAIL_CATEGORIES}
)

SECTION_PREFIXES: Dict[str, str] = {
    "wardrobe": "[Details]",
    "environment": "[Environment]",
    "lighting": LIGHTING_PREFIX,
}

NEGATIVE_CATEGORY_ID = "finalTouches"

_LIGHTING_LINE = re.compile(r"\[Lighting\] (.+?)(?:\n|$)")


def category_fragments(state: SelectionState, category_id: str) -> List[str]:
    """
    Fragments a category contributes: selected option fragments, then custom text.

    Photorealistic is left out of the genre list; it renders at the end of the
    camera section instead.
    """
    category = category_by_id(category_id)
    if category is None:
        return []

    fragments: List[str] = []
    for option_id in state.selected(category_id):
        if category_id == "style" and option_id == PHOTOREALISTIC_ID:
            continue
        option = category.option(option_id)
        if option and option.prompt_value:
            fragments.append(option.prompt_value)

    fragments.extend(value for value in state.customs(category_id) if value.strip())
    return fragments


def framing_text(state: SelectionState) -> str:
    """One fragment per framing group, Height then View then Size."""
    framing = category_by_id("angles")
    if framing is None:
        return ""
    selected = set(state.selected("angles"))
    parts: List[str] = []
    for group in FRAMING_GROUP_ORDER:
        for option in framing.options:
            if option.group == group and option.id in selected:
                parts.append(option.prompt_value)
                break
    return " ".join(parts)


def lens_descriptor(state: SelectionState) -> str:
    """Lens fragment with optional style prefix, suffixed with "look"."""
    lens = find_lens(state.selected_lens_id)
    if lens is None:
        return ""
    value = lens.prompt_value
    style_name = lens_style_label(state.selected_lens_style)
    if style_name and style_name.lower() not in value.lower():
        value = f"{style_name.lower()} {value}"
    return f"{value} look"


def camera_section(state: SelectionState) -> str:
    parts: List[str] = []

    head = " ".join(part for part in (framing_text(state), lens_descriptor(state)) if part)
    if head:
        parts.append(head)

    for category_id in CAMERA_DETAIL_CATEGORIES:
        parts.extend(category_fragments(state, category_id))

    camera = find_camera(state.selected_camera_id)
    if camera is not None:
        parts.append(camera.prompt_value)

    if PHOTOREALISTIC_ID in state.selected("style"):
        parts.append(PHOTOREALISTIC_TAIL)

    if not parts:
        return ""
    return f"{CAMERA_SECTION_PREFIX} {', '.join(parts)}"


def _label(index: int) -> str:
    return PRIMARY_LABEL if index == 0 else SECONDARY_LABEL


def subject_sections(subjects: List[Subject]) -> List[str]:
    """
    Render the [Subjects] and [Actions] blocks.

    Labels follow each subject's position among present subjects. Either
    block is dropped when it has no lines.
    """
    present = [subject for subject in subjects if subject.is_present]
    if not present:
        return []

    sections: List[str] = []

    subject_lines = [SUBJECTS_HEADING]
    for index, subject in enumerate(present):
        description = ", ".join(
            value for value in (subject.name, subject.age, subject.appearance) if value
        )
        if description:
            if index == 1:
                subject_lines.append("")
            subject_lines.append(f"{_label(index)} {description}")
    if len(subject_lines) > 1:
        sections.append("\n".join(subject_lines))

    action_lines = [ACTIONS_HEADING]
    for index, subject in enumerate(present):
        if subject.action:
            if index == 1 and len(action_lines) > 1:
                action_lines.append("")
            action_lines.append(f"{_label(index)} {subject.action}")
    if len(action_lines) > 1:
        sections.append("\n".join(action_lines))

    return sections


def remaining_sections(state: SelectionState) -> List[str]:
    sections: List[str] = []
    for category in all_categories():
        if category.id in HANDLED_CATEGORIES:
            continue
        fragments = category_fragments(state, category.id)
        if not fragments:
            continue

        prefix = SECTION_PREFIXES.get(category.id)
        if prefix is None:
            sections.extend(fragments)
            continue

        line = f"{prefix} {', '.join(fragments)}"
        if category.id == "lighting" and state.lighting_custom_text:
            line += state.lighting_custom_text
        sections.append(line)
    return sections


def compose(state: SelectionState) -> str:
    """
    Compose the full prompt for a selection state.

    Args:
        state: Current selection state

    Returns:
        Prompt text, or an empty string when nothing renders. The negative
        block is only appended to a non-empty prompt.
    """
    parts: List[str] = []

    description = state.subject_description.strip()
    if description:
        parts.append(description)

    camera = camera_section(state)
    if camera:
        parts.append(camera)

    parts.extend(subject_sections(state.subjects))
    parts.extend(remaining_sections(state))

    main_prompt = SECTION_SEPARATOR.join(parts)
    if not main_prompt:
        return ""

    negative = ", ".join(category_fragments(state, NEGATIVE_CATEGORY_ID))
    if negative:
        return f"{main_prompt}{SECTION_SEPARATOR}{negative}"
    return main_prompt


# ============================================================================
# LIGHTING RECONCILIATION
# ============================================================================

def base_lighting_line(state: SelectionState) -> str:
    """Canonical [Lighting] line for the selected options, without custom text."""
    category = category_by_id("lighting")
    if category is None:
        return ""
    fragments = []
    for option_id in state.selected("lighting"):
        option = category.option(option_id)
        if option and option.prompt_value:
            fragments.append(option.prompt_value)
    if not fragments:
        return ""
    return f"{LIGHTING_PREFIX} {', '.join(fragments)}"


def extract_lighting_suffix(edited_text: str, state: SelectionState) -> Optional[str]:
    """
    Text a user appended after the canonical lighting fragments.

    Only the first [Lighting] line is inspected, and only when it starts with
    the canonical content for the current selection.

    Returns:
        The appended text (possibly empty), or None when no suffix can be
        recovered
    """
    base = base_lighting_line(state)
    if not base:
        return None
    match = _LIGHTING_LINE.search(edited_text or "")
    if match is None:
        return None
    content = match.group(1)
    base_content = base[len(LIGHTING_PREFIX) + 1:]
    if not content.startswith(base_content):
        return None
    return content[len(base_content):]


def reconcile_manual_edit(state: SelectionState, edited_text: str) -> SelectionState:
    """Keep a manually typed lighting suffix for subsequent recompositions."""
    suffix = extract_lighting_suffix(edited_text, state)
    if suffix is None:
        return state
    if suffix != state.lighting_custom_text:
        logger.debug(f"Lighting suffix updated: {suffix!r}")
    return state.model_copy(update={"lighting_custom_text": suffix})
