"""
Test suite for promptinator.services.constraint_resolver.

Covers the framing exclusion table (mutation and display share it), the
one-per-group and toggle properties, and state transitions for every
category kind.
"""

from __future__ import annotations

import itertools
import random

import pytest

from promptinator.core.catalog import category_by_id
from promptinator.models.selection import SelectionState, Subject
from promptinator.services import constraint_resolver as resolver
from promptinator.services.constraint_resolver import (
    EXCLUSION_RULES,
    EXCLUSIONS,
    apply_selection,
    disabled_reason,
    is_disabled,
)


FRAMING = category_by_id("angles")
GROUP_OF = {option.id: option.group for option in FRAMING.options}


def _apply(current, option_id):
    return apply_selection(current, option_id, GROUP_OF[option_id])


# ============================================================================
# TESTS: apply_selection()
# ============================================================================

class TestApplySelection:
    """Test cases for apply_selection()."""

    def test_select_into_empty(self):
        assert _apply([], "height-eye") == ["height-eye"]

    def test_toggle_off(self):
        assert _apply(["height-eye", "view-front"], "height-eye") == ["view-front"]

    def test_replaces_same_group(self):
        assert _apply(["height-eye", "view-side"], "height-low") == ["view-side", "height-low"]

    def test_new_id_appended_last(self):
        result = _apply(["size-wide", "height-eye"], "view-side")
        assert result == ["size-wide", "height-eye", "view-side"]

    def test_ots_then_worm(self):
        """Selecting a steep height after OTS drops the OTS view."""
        result = _apply(_apply([], "view-ots"), "height-worm")
        assert result == ["height-worm"]

    def test_ots_drops_tight_sizes_and_steep_heights(self):
        result = _apply(["height-top", "size-close"], "view-ots")
        assert result == ["view-ots"]

    def test_ots_keeps_eye_level_and_medium(self):
        result = _apply(["height-eye", "size-medium"], "view-ots")
        assert result == ["height-eye", "size-medium", "view-ots"]

    def test_top_down_drops_every_view(self):
        for view in FRAMING.group_members("View"):
            assert _apply([view], "height-top") == ["height-top"]

    def test_aerial_drops_closeups(self):
        assert _apply(["size-xclose"], "height-aerial") == ["height-aerial"]
        assert _apply(["size-wide"], "height-aerial") == ["size-wide", "height-aerial"]

    def test_dutch_drops_worm_and_top(self):
        assert _apply(["height-worm"], "view-dutch") == ["view-dutch"]

    def test_front_drops_top(self):
        assert _apply(["height-top"], "view-front") == ["view-front"]

    def test_unknown_ids_kept(self):
        """Stale ids outside the catalog are left alone."""
        assert _apply(["legacy-id"], "height-eye") == ["legacy-id", "height-eye"]

    @pytest.mark.parametrize("rule", EXCLUSION_RULES, ids=lambda r: f"{r.trigger}")
    def test_exclusion_closure(self, rule):
        """Test that no excluded id survives selecting its trigger."""
        for excluded in rule.excluded:
            seeded = [excluded]
            result = _apply(seeded, rule.trigger)
            assert excluded not in result
            assert rule.trigger in result

    def test_toggle_idempotence(self):
        """Selecting then deselecting an id restores the previous set."""
        for start in (["height-eye"], ["height-eye", "view-side"], ["size-medium"]):
            for option in FRAMING.options:
                if option.id in start or is_disabled(option.id, start):
                    continue
                once = _apply(start, option.id)
                if set(start) - set(once):
                    continue
                assert _apply(once, option.id) == start

    def test_one_per_group_invariant(self):
        rng = random.Random(42)
        ids = [option.id for option in FRAMING.options]
        current = []
        for _ in range(500):
            current = _apply(current, rng.choice(ids))
            groups = [GROUP_OF[option_id] for option_id in current]
            assert len(groups) == len(set(groups))


# ============================================================================
# TESTS: is_disabled() / disabled_reason()
# ============================================================================

class TestDisabled:
    """Test cases for the display-side queries."""

    def test_ots_disables_tight_sizes(self):
        assert is_disabled("size-close", ["view-ots"])
        assert disabled_reason("size-close", ["view-ots"]) == "Not available with OTS view"

    def test_height_disables_ots(self):
        assert disabled_reason("view-ots", ["height-high"]) == "Not available with selected height"

    def test_top_view_reason(self):
        assert disabled_reason("view-side", ["height-top"]) == "Not available with Top view"

    def test_nothing_selected(self):
        assert not is_disabled("view-ots", [])
        assert disabled_reason("view-ots", []) is None

    def test_display_matches_mutation(self):
        """Every option disabled by a selection is exactly what selecting would remove."""
        for trigger, excluded in EXCLUSIONS.items():
            for option in FRAMING.options:
                assert is_disabled(option.id, [trigger]) == (option.id in excluded)

    def test_disabled_options_map(self):
        disabled = resolver.disabled_options(["height-aerial"])
        assert set(disabled) == {"view-ots", "size-close", "size-xclose"}
        assert disabled["size-close"] == "Not available with Aerial height"

    def test_pairwise_selection_never_conflicts(self):
        """A framing set built through select_option never holds a disabled option."""
        ids = [option.id for option in FRAMING.options]
        for first, second in itertools.permutations(ids, 2):
            state = resolver.select_option(SelectionState(), "angles", first)
            state = resolver.select_option(state, "angles", second)
            result = state.selected("angles")
            for option_id in result:
                assert not is_disabled(option_id, result)


# ============================================================================
# TESTS: select_option() and state helpers
# ============================================================================

class TestSelectOption:
    """Test cases for state transitions per category kind."""

    def test_single_select_replaces(self):
        state = resolver.select_option(SelectionState(), "iso", "iso-100")
        state = resolver.select_option(state, "iso", "iso-200")
        assert state.selections["iso"] == ["iso-200"]

    def test_single_select_toggles_off(self):
        state = resolver.select_option(SelectionState(), "iso", "iso-100")
        state = resolver.select_option(state, "iso", "iso-100")
        assert "iso" not in state.selections

    def test_multi_select_toggles(self):
        state = resolver.select_option(SelectionState(), "style", "cinematic")
        state = resolver.select_option(state, "style", "photorealistic")
        assert state.selections["style"] == ["cinematic", "photorealistic"]
        state = resolver.select_option(state, "style", "cinematic")
        assert state.selections["style"] == ["photorealistic"]

    def test_free_text_options_not_selectable(self):
        """Text-only categories are edited through custom values, never option clicks."""
        state = SelectionState(selections={"iso": ["iso-100"]})
        for category_id, option_id in (("wardrobe", "casual"), ("environment", "rooftop"), ("finalTouches", "high-detail")):
            assert resolver.select_option(state, category_id, option_id) is state

    def test_framing_uses_exclusions(self):
        state = resolver.select_option(SelectionState(), "angles", "view-side")
        state = resolver.select_option(state, "angles", "height-top")
        assert state.selections["angles"] == ["height-top"]

    def test_excluded_framing_click_ignored(self):
        state = resolver.select_option(SelectionState(), "angles", "view-ots")
        after = resolver.select_option(state, "angles", "height-worm")
        assert after.selections["angles"] == ["view-ots"]

    def test_disabled_framing_option_ignored(self):
        state = resolver.select_option(SelectionState(), "angles", "view-ots")
        after = resolver.select_option(state, "angles", "size-close")
        assert after == state

    def test_unknown_ids_leave_state(self):
        state = SelectionState(selections={"iso": ["iso-100"]})
        assert resolver.select_option(state, "nope", "iso-200") is state
        assert resolver.select_option(state, "iso", "iso-9999") is state

    def test_state_is_not_mutated(self):
        state = SelectionState(selections={"style": ["cinematic"]})
        resolver.select_option(state, "style", "photorealistic")
        assert state.selections == {"style": ["cinematic"]}

    def test_lighting_change_clears_custom_text(self):
        state = SelectionState(selections={"lighting": ["cinematic"]}, lighting_custom_text=", warm glow")
        changed = resolver.select_option(state, "lighting", "bokeh")
        assert changed.lighting_custom_text == ""

    def test_other_change_keeps_lighting_text(self):
        state = SelectionState(selections={"lighting": ["cinematic"]}, lighting_custom_text=", warm glow")
        changed = resolver.select_option(state, "iso", "iso-100")
        assert changed.lighting_custom_text == ", warm glow"


class TestStateHelpers:
    """Test cases for lens, camera, custom value and reset helpers."""

    def test_set_lens_toggles(self):
        state = resolver.set_lens(SelectionState(), "50mm-a")
        assert state.selected_lens_id == "50mm-a"
        assert resolver.set_lens(state, "50mm-a").selected_lens_id is None

    def test_set_lens_unknown_ignored(self):
        state = resolver.set_lens(SelectionState(), "50mm-a")
        assert resolver.set_lens(state, "999mm").selected_lens_id == "50mm-a"

    def test_set_camera(self):
        state = resolver.set_camera(SelectionState(), "sony-venice")
        assert state.selected_camera_id == "sony-venice"
        assert resolver.set_camera(state, None).selected_camera_id is None

    def test_set_filters(self):
        state = resolver.set_lens_style(SelectionState(), "anamorphic")
        state = resolver.set_camera_type(state, "F")
        assert state.selected_lens_style == "A"
        assert state.selected_camera_type == "F"

    def test_set_custom_values_drops_blanks(self):
        state = resolver.set_custom_values(SelectionState(), "environment", ["on a pier", "  ", ""])
        assert state.custom_values == {"environment": ["on a pier"]}
        cleared = resolver.set_custom_values(state, "environment", [])
        assert cleared.custom_values == {}

    def test_set_subjects_and_description(self):
        state = resolver.set_subjects(SelectionState(), [Subject(id="s1", name="Sarah")])
        state = resolver.set_subject_description(state, "A quiet morning")
        assert state.subjects[0].name == "Sarah"
        assert state.subject_description == "A quiet morning"

    def test_reset_state_seeds_defaults(self):
        state = resolver.reset_state()
        assert state.selections == {}
        assert list(state.custom_values) == ["finalTouches"]
        assert state.custom_values["finalTouches"][0].startswith("[Consistency]")
