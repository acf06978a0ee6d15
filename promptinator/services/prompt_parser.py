"""
Best-effort parsing of pasted prompt text back into selections.

Two passes over the input:

1. Structural: bracketed markers split the text into segments. ``[Subjects]``
   and ``[Actions]`` carry ``[Primary:]`` / ``[Secondary:]`` sub-segments;
   ``[Details]`` and ``[Environment]`` become free-text custom values.
2. Vocabulary: every catalog fragment is searched case-insensitively. A hit
   must not be glued to neighbouring letters or digits, and a hit lying
   inside a longer accepted hit does not count.

Parsing never raises. Anything that does not match is dropped.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..core.catalog import (
    CAMERA_BODIES,
    LENSES,
    FreeTextCategory,
    MultiSelectCategory,
    OnePerGroupCategory,
    all_categories,
    category_by_id,
    find_camera,
    find_lens,
)
from ..models.selection import ParsedPrompt, Subject

logger = logging.getLogger(__name__)

SUMMARY_TRUNCATE_AT = 30

# Marker (lowercase, without brackets) -> free-text category it fills
SECTION_CATEGORIES: Dict[str, str] = {
    "details": "wardrobe",
    "environment": "environment",
    "lighting": "lighting",
}

SUBJECT_SECTIONS = ("subjects", "actions")
SUBJECT_SLOTS = ("primary:", "secondary:")
TOP_LEVEL_MARKERS = (
    "subjects",
    "actions",
    "details",
    "environment",
    "lighting",
    "consistency",
    "camera/lens",
    "negative",
)

_MARKER_RE = re.compile(
    r"\[("
    + "|".join(re.escape(marker) for marker in TOP_LEVEL_MARKERS + SUBJECT_SLOTS)
    + r")\]",
    re.IGNORECASE,
)


# ============================================================================
# SEGMENTS
# ============================================================================

def split_segments(text: str) -> List[Tuple[str, str]]:
    """
    Split text at recognised markers.

    Returns:
        List of (marker, content) with the marker lowercased and the content
        running up to the next marker or the end of text, stripped
    """
    matches = list(_MARKER_RE.finditer(text))
    segments: List[Tuple[str, str]] = []
    for index, match in enumerate(matches):
        end = matches[index + 1].start() if index + 1 < len(matches) else len(text)
        segments.append((match.group(1).lower(), text[match.end():end].strip()))
    return segments


def _subject_slots(segments: List[Tuple[str, str]]) -> Dict[str, Dict[str, str]]:
    """Collect [Primary:]/[Secondary:] contents under their enclosing section."""
    slots: Dict[str, Dict[str, str]] = {section: {} for section in SUBJECT_SECTIONS}
    current: Optional[str] = None
    for marker, content in segments:
        if marker in TOP_LEVEL_MARKERS:
            current = marker if marker in SUBJECT_SECTIONS else None
        elif current is not None and marker not in slots[current]:
            slots[current][marker] = content
    return slots


def _split_subject_fields(content: str) -> Tuple[str, str, str]:
    parts = [part.strip() for part in content.split(",")]
    name = parts[0] if parts else ""
    age = parts[1] if len(parts) > 1 else ""
    appearance = ", ".join(parts[2:])
    return name, age, appearance


def parse_subjects(segments: List[Tuple[str, str]]) -> List[Subject]:
    """
    Build subjects from [Subjects] and [Actions] segments.

    Primary pairs with primary and secondary with secondary. A slot that only
    has an action still yields a subject.
    """
    slots = _subject_slots(segments)
    subjects: List[Subject] = []
    for index, slot in enumerate(SUBJECT_SLOTS):
        description = slots["subjects"].get(slot)
        action = slots["actions"].get(slot)
        if description is None and action is None:
            continue
        name, age, appearance = _split_subject_fields(description or "")
        subjects.append(
            Subject(
                id=f"subject-parsed-{index + 1}",
                name=name,
                age=age,
                appearance=appearance,
                action=action or "",
            )
        )
    return subjects


def parse_section_values(segments: List[Tuple[str, str]]) -> Dict[str, List[str]]:
    """Map [Details]/[Environment]/[Lighting] content onto free-text categories."""
    custom_values: Dict[str, List[str]] = {}
    for marker, content in segments:
        category_id = SECTION_CATEGORIES.get(marker)
        if category_id is None or not content:
            continue
        if isinstance(category_by_id(category_id), FreeTextCategory):
            custom_values[category_id] = [content]
    return custom_values


# ============================================================================
# VOCABULARY MATCHING
# ============================================================================

def _occurrences(haystack: str, needle: str) -> Iterable[int]:
    start = haystack.find(needle)
    while start != -1:
        yield start
        start = haystack.find(needle, start + 1)


def _is_bounded(text: str, start: int, end: int) -> bool:
    if text[start].isalnum() and start > 0 and text[start - 1].isalnum():
        return False
    if text[end - 1].isalnum() and end < len(text) and text[end].isalnum():
        return False
    return True


def _vocabulary() -> Set[str]:
    phrases: Set[str] = set()
    for category in all_categories():
        phrases.update(option.prompt_value for option in category.options)
    for lens in LENSES:
        phrases.update((lens.prompt_value, lens.name))
    for camera in CAMERA_BODIES:
        phrases.update((camera.prompt_value, camera.name))
    return {phrase.lower() for phrase in phrases if phrase}


def find_phrases(text: str, phrases: Iterable[str]) -> Set[str]:
    """
    Phrases (lowercased) that occur in ``text`` as standalone hits.

    Longer phrases claim their span first; a shorter hit strictly inside a
    claimed span is discarded.
    """
    lowered = text.lower()
    accepted: List[Tuple[int, int]] = []
    found: Set[str] = set()
    for phrase in sorted(set(phrases), key=len, reverse=True):
        for start in _occurrences(lowered, phrase):
            end = start + len(phrase)
            if not _is_bounded(lowered, start, end):
                continue
            nested = any(
                a_start <= start and end <= a_end and (a_end - a_start) > len(phrase)
                for a_start, a_end in accepted
            )
            if nested:
                continue
            accepted.append((start, end))
            found.add(phrase)
    return found


def match_categories(found: Set[str]) -> Dict[str, List[str]]:
    """Option ids per non-free-text category, in catalog order."""
    selections: Dict[str, List[str]] = {}
    for category in all_categories():
        if isinstance(category, FreeTextCategory):
            continue
        matched = [
            option.id
            for option in category.options
            if option.prompt_value and option.prompt_value.lower() in found
        ]
        if not matched:
            continue
        if isinstance(category, (MultiSelectCategory, OnePerGroupCategory)):
            selections[category.id] = matched
        else:
            selections[category.id] = matched[:1]
    return selections


def _first_match(items, found: Set[str]) -> Optional[str]:
    for item in items:
        if item.prompt_value.lower() in found:
            return item.id
    for item in items:
        if item.name.lower() in found:
            return item.id
    return None


def parse(text: str) -> ParsedPrompt:
    """
    Recover selections from arbitrary prompt text.

    Args:
        text: Pasted prompt, possibly produced by the composer

    Returns:
        ParsedPrompt with only the categories that matched
    """
    if not text or not text.strip():
        return ParsedPrompt()

    segments = split_segments(text)
    found = find_phrases(text, _vocabulary())

    result = ParsedPrompt(
        selections=match_categories(found),
        custom_values=parse_section_values(segments),
        matched_lens_id=_first_match(LENSES, found),
        matched_camera_id=_first_match(CAMERA_BODIES, found),
        subjects=parse_subjects(segments),
    )
    logger.debug(
        f"Parsed prompt: {len(result.selections)} categories, "
        f"{len(result.custom_values)} custom values, {len(result.subjects)} subjects"
    )
    return result


def match_summary(result: ParsedPrompt) -> List[str]:
    """Human-readable lines describing what a parse recovered."""
    summaries: List[str] = []

    for category_id, values in result.custom_values.items():
        category = category_by_id(category_id)
        if category is None or not values:
            continue
        value = values[0]
        if len(value) > SUMMARY_TRUNCATE_AT:
            value = value[:SUMMARY_TRUNCATE_AT] + "..."
        summaries.append(f'{category.label}: "{value}"')

    for category_id, option_ids in result.selections.items():
        category = category_by_id(category_id)
        if category is None or not option_ids:
            continue
        labels = []
        for option_id in option_ids:
            option = category.option(option_id)
            labels.append(option.label if option else option_id)
        summaries.append(f"{category.label}: {', '.join(labels)}")

    lens = find_lens(result.matched_lens_id)
    if lens is not None:
        summaries.append(f"Lens: {lens.name}")

    camera = find_camera(result.matched_camera_id)
    if camera is not None:
        summaries.append(f"Camera: {camera.name}")

    return summaries
