"""
Test suite for promptinator.core.catalog.

Covers lookups, category kinds, the lens/camera collections and the
fragment distinctness invariant the parser depends on.
"""

from __future__ import annotations

import pytest

from promptinator.core import catalog
from promptinator.core.catalog import (
    CameraType,
    FreeTextCategory,
    LensStyle,
    MultiSelectCategory,
    OnePerGroupCategory,
    Option,
    SingleSelectCategory,
)


# ============================================================================
# TESTS: lookups
# ============================================================================

class TestLookups:
    """Test cases for category and option lookups."""

    def test_category_order(self):
        """Test that categories come back in catalog order."""
        ids = [c.id for c in catalog.all_categories()]
        assert ids == [
            "style", "camera", "angles", "lensStyle", "lens", "filmStock", "iso",
            "aperture", "shutter", "action", "wardrobe", "environment", "lighting",
            "finalTouches",
        ]

    def test_find_option(self):
        option = catalog.find_option("angles", "view-ots")
        assert option is not None
        assert option.prompt_value == "over-the-shoulder"
        assert option.group == "View"

    @pytest.mark.parametrize(
        "category_id,option_id",
        [("angles", "nope"), ("nope", "view-ots"), ("", "")],
    )
    def test_unknown_ids_return_none(self, category_id: str, option_id: str):
        assert catalog.find_option(category_id, option_id) is None

    def test_category_by_id_unknown(self):
        assert catalog.category_by_id("missing") is None

    def test_category_kinds(self):
        """Test that each category carries the variant matching its semantics."""
        assert isinstance(catalog.category_by_id("style"), MultiSelectCategory)
        assert isinstance(catalog.category_by_id("camera"), SingleSelectCategory)
        assert isinstance(catalog.category_by_id("angles"), OnePerGroupCategory)
        assert isinstance(catalog.category_by_id("lighting"), SingleSelectCategory)
        for category_id in ("action", "wardrobe", "environment", "finalTouches"):
            assert isinstance(catalog.category_by_id(category_id), FreeTextCategory)

    def test_framing_groups(self):
        framing = catalog.category_by_id("angles")
        assert framing.groups == ("Height", "View", "Size")
        assert framing.group_members("Height") == (
            "height-eye", "height-high", "height-low", "height-worm", "height-top", "height-aerial",
        )

    def test_negative_prompt_default(self):
        final_touches = catalog.category_by_id("finalTouches")
        assert final_touches.label == "Negative Prompts"
        assert final_touches.default_custom_value.startswith("[Consistency]")
        assert "[Negative]" in final_touches.default_custom_value


# ============================================================================
# TESTS: lenses and cameras
# ============================================================================

class TestLensesAndCameras:
    """Test cases for lens and camera-body collections."""

    def test_dual_tagged_lens_listed_under_both_styles(self):
        anamorphic = {lens.id for lens in catalog.lenses_for_style(LensStyle.ANAMORPHIC)}
        spherical = {lens.id for lens in catalog.lenses_for_style(LensStyle.SPHERICAL)}
        for lens_id in ("6mm-fisheye", "8mm-fisheye", "14mm-ultrawide"):
            assert lens_id in anamorphic
            assert lens_id in spherical

    def test_no_filter_lists_every_lens(self):
        assert len(catalog.lenses_for_style(None)) == len(catalog.LENSES)

    def test_cameras_for_type(self):
        film = [camera.id for camera in catalog.cameras_for_type(CameraType.FILM)]
        assert film == ["arriflex-16sr", "panaflex-millennium", "panavision-panaflex"]

    def test_find_lens_and_camera(self):
        assert catalog.find_lens("50mm-a").prompt_value == "50mm anamorphic lens"
        assert catalog.find_camera("red").prompt_value == "shot on RED camera"
        assert catalog.find_lens("missing") is None
        assert catalog.find_camera(None) is None

    def test_default_camera_exists(self):
        assert catalog.find_camera(catalog.DEFAULT_CAMERA_ID) is not None

    @pytest.mark.parametrize("value,expected", [("A", "Anamorphic"), ("macro", "Macro"), ("x", ""), (None, "")])
    def test_lens_style_label(self, value, expected):
        assert catalog.lens_style_label(value) == expected

    def test_parse_camera_type(self):
        assert catalog.parse_camera_type("D") is CameraType.DIGITAL
        assert catalog.parse_camera_type("film") is CameraType.FILM
        assert catalog.parse_camera_type("polaroid") is None


# ============================================================================
# TESTS: distinctness invariant
# ============================================================================

class TestFragmentDistinctness:
    """Test cases for the fragment distinctness invariant."""

    def test_catalog_has_no_collisions(self):
        assert catalog.find_fragment_collisions() == []

    def test_collision_detected(self):
        """Test that two options rendering the same fragment are reported."""
        broken = SingleSelectCategory(
            "iso",
            "ISO",
            "Sensitivity",
            (
                Option("iso-400-low", "400", "ISO 400", "Low"),
                Option("iso-400-med", "400", "ISO 400", "Medium"),
            ),
        )
        assert catalog.find_fragment_collisions([broken]) == [("iso", "iso-400-low", "iso-400-med")]

    def test_option_ids_unique_within_category(self):
        for category in catalog.all_categories():
            ids = [option.id for option in category.options]
            assert len(ids) == len(set(ids)), category.id

    def test_iso_listed_once(self):
        iso_values = [o.prompt_value for o in catalog.category_by_id("iso").options]
        assert iso_values.count("ISO 400") == 1
        assert iso_values.count("ISO 1600") == 1
