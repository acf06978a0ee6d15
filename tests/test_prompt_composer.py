"""
Test suite for promptinator.services.prompt_composer.

Covers section ordering, the camera/lens section rules, subject and action
blocks, prefixed categories, the negative block and lighting reconciliation.
"""

from __future__ import annotations

import pytest

from promptinator.models.selection import SelectionState, Subject
from promptinator.services import prompt_composer
from promptinator.services.constraint_resolver import reset_state, select_option
from promptinator.services.prompt_composer import compose


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def sarah() -> Subject:
    return Subject(id="s1", name="Sarah", age="mid-20s", appearance="red hair", action="reading a book")


@pytest.fixture
def full_state(sarah: Subject) -> SelectionState:
    """State touching every section of the composed prompt."""
    return SelectionState(
        subject_description="  A lone figure at dusk  ",
        selections={
            "angles": ["size-wide", "height-low", "view-side"],
            "style": ["cinematic", "photorealistic"],
            "filmStock": ["kodak-portra-400"],
            "iso": ["iso-400"],
            "aperture": ["f2.8"],
            "shutter": ["1-125"],
            "camera": ["leica"],
            "wardrobe": ["casual"],
            "lighting": ["rembrandt"],
            "finalTouches": ["high-detail"],
        },
        custom_values={
            "wardrobe": ["denim jacket"],
            "environment": ["on a rooftop, volumetric haze"],
            "finalTouches": ["[Negative] no text"],
        },
        selected_lens_id="50mm-a",
        selected_lens_style="A",
        selected_camera_id="arri-alexa",
        subjects=[sarah, Subject(id="s2", name="Tom", appearance="tall")],
    )


# ============================================================================
# TESTS: compose()
# ============================================================================

class TestCompose:
    """Test cases for compose()."""

    def test_empty_state(self):
        assert compose(SelectionState()) == ""

    def test_negative_block_alone_renders_nothing(self):
        """Test that default negative text does not produce a prompt on its own."""
        assert compose(reset_state()) == ""

    def test_full_order(self, full_state: SelectionState):
        expected = "\n\n".join(
            [
                "A lone figure at dusk",
                "[Camera/Lens] Low-angle from the side wide shot, 50mm anamorphic lens look, "
                "cinematic, Kodak Portra 400 film, ISO 400, f/2.8 aperture, 1/125 shutter speed, "
                "shot on ARRI Alexa, natural film grain, photorealistic",
                "[Subjects]\n[Primary:] Sarah, mid-20s, red hair\n\n[Secondary:] Tom, tall",
                "[Actions]\n[Primary:] reading a book",
                "Leica",
                "[Details] wearing casual clothes, denim jacket",
                "[Environment] on a rooftop, volumetric haze",
                "[Lighting] High-contrast Rembrandt lighting",
                "highly detailed, sharp focus, [Negative] no text",
            ]
        )
        assert compose(full_state) == expected

    def test_deterministic(self, full_state: SelectionState):
        assert compose(full_state) == compose(full_state)

    def test_photorealistic_renders_last(self):
        """Test that photorealistic moves to the fixed tail of the camera section."""
        prompt = compose(SelectionState(selections={"style": ["photorealistic"]}))
        assert prompt == "[Camera/Lens] natural film grain, photorealistic"
        assert prompt.count("photorealistic") == 1

    def test_photorealistic_after_camera_body(self):
        state = SelectionState(
            selections={"style": ["photorealistic", "ultra-realistic"]},
            selected_camera_id="red",
        )
        assert compose(state) == (
            "[Camera/Lens] ultra-realistic, shot on RED camera, natural film grain, photorealistic"
        )

    def test_framing_ignores_insertion_order(self):
        state = SelectionState(selections={"angles": ["size-close", "view-front", "height-eye"]})
        assert compose(state) == "[Camera/Lens] Eye-level from the front closeup shot,"

    def test_lens_without_framing(self):
        state = SelectionState(selected_lens_id="100mm-m")
        assert compose(state) == "[Camera/Lens] 100mm macro lens look"

    def test_lens_style_prefix_added(self):
        state = SelectionState(selected_lens_id="35mm-s", selected_lens_style="A")
        assert compose(state) == "[Camera/Lens] anamorphic 35mm spherical lens look"

    def test_lens_style_prefix_skipped_when_present(self):
        state = SelectionState(selected_lens_id="35mm-s", selected_lens_style="S")
        assert compose(state) == "[Camera/Lens] 35mm spherical lens look"

    def test_unknown_ids_dropped(self):
        state = SelectionState(
            selections={"iso": ["iso-99999"], "missing": ["x"]},
            selected_lens_id="nope",
            selected_camera_id="nope",
        )
        assert compose(state) == ""

    def test_old_lens_categories_not_rendered(self):
        state = SelectionState(selections={"lens": ["fisheye"], "lensStyle": ["vintage"]})
        assert compose(state) == ""

    def test_blank_custom_values_skipped(self):
        state = SelectionState(custom_values={"environment": ["   "], "wardrobe": ["hat"]})
        assert compose(state) == "[Details] hat"

    def test_unprefixed_category_one_line_per_fragment(self):
        state = SelectionState(selections={"camera": ["polaroid"]}, custom_values={"camera": ["toy camera"]})
        assert compose(state) == "Polaroid instant photo\n\ntoy camera"


# ============================================================================
# TESTS: subjects and actions
# ============================================================================

class TestSubjects:
    """Test cases for the [Subjects] and [Actions] blocks."""

    def test_single_subject(self, sarah: Subject):
        prompt = compose(SelectionState(subjects=[sarah]))
        assert "[Subjects]\n[Primary:] Sarah, mid-20s, red hair" in prompt
        assert "[Actions]\n[Primary:] reading a book" in prompt

    def test_empty_subjects_skipped(self):
        state = SelectionState(subjects=[Subject(id="s1"), Subject(id="s2", name="  ")])
        assert compose(state) == ""

    def test_labels_follow_present_subjects(self):
        """Test that an empty first subject does not shift labels."""
        state = SelectionState(subjects=[Subject(id="s1"), Subject(id="s2", name="Tom")])
        assert compose(state) == "[Subjects]\n[Primary:] Tom"

    def test_secondary_action_without_primary_action(self):
        state = SelectionState(
            subjects=[Subject(id="s1", name="Ana"), Subject(id="s2", name="Ben", action="waving")]
        )
        assert compose(state) == (
            "[Subjects]\n[Primary:] Ana\n\n[Secondary:] Ben\n\n[Actions]\n[Secondary:] waving"
        )

    def test_two_actions_separated(self):
        state = SelectionState(
            subjects=[
                Subject(id="s1", action="running"),
                Subject(id="s2", action="laughing"),
            ]
        )
        assert compose(state) == "[Actions]\n[Primary:] running\n\n[Secondary:] laughing"


# ============================================================================
# TESTS: lighting reconciliation
# ============================================================================

class TestLightingReconciliation:
    """Test cases for keeping manually typed lighting text."""

    @pytest.fixture
    def lit_state(self) -> SelectionState:
        return SelectionState(
            selections={"lighting": ["rembrandt"]},
            custom_values={"environment": ["in a barn"]},
        )

    def test_base_line(self, lit_state: SelectionState):
        assert prompt_composer.base_lighting_line(lit_state) == "[Lighting] High-contrast Rembrandt lighting"

    def test_suffix_extracted_and_reapplied(self, lit_state: SelectionState):
        composed = compose(lit_state)
        edited = composed.replace(
            "Rembrandt lighting", "Rembrandt lighting, warm practicals in background"
        )
        reconciled = prompt_composer.reconcile_manual_edit(lit_state, edited)
        assert reconciled.lighting_custom_text == ", warm practicals in background"
        assert compose(reconciled) == edited

    def test_suffix_only_up_to_line_end(self, lit_state: SelectionState):
        edited = "[Lighting] High-contrast Rembrandt lighting and fog\n\nnext block"
        assert prompt_composer.extract_lighting_suffix(edited, lit_state) == " and fog"

    def test_non_prefix_edit_ignored(self, lit_state: SelectionState):
        edited = "[Lighting] soft window light"
        assert prompt_composer.extract_lighting_suffix(edited, lit_state) is None
        assert prompt_composer.reconcile_manual_edit(lit_state, edited) is lit_state

    def test_no_lighting_selected(self):
        state = SelectionState()
        assert prompt_composer.extract_lighting_suffix("[Lighting] anything", state) is None

    def test_changing_lighting_drops_suffix(self, lit_state: SelectionState):
        edited = compose(lit_state).replace("Rembrandt lighting", "Rembrandt lighting, hazy")
        reconciled = prompt_composer.reconcile_manual_edit(lit_state, edited)
        switched = select_option(reconciled, "lighting", "bokeh")
        assert "hazy" not in compose(switched)
