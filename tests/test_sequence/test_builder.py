"""Tests for EffectBuilder and location/anchor normalization."""

from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from sequencer.builder import JB2A_GRID_SIZE, JB2A_TRIM_POINTS, EffectBuilder, to_anchor, to_location
from sequencer.errors import ConfigurationError
from sequencer.models.locations import EntityRef, NameRef, Point, PointRef, TemplateRef


# --- to_location ---


def test_string_is_a_name_reference():
    assert to_location("impact") == NameRef(name="impact")


def test_pair_is_a_point():
    assert to_location((3, 4)) == PointRef(x=3, y=4)
    assert to_location(Point(x=1, y=2)) == PointRef(x=1, y=2)


def test_mapping_with_size_is_an_entity():
    ref = to_location({"x": 10, "y": 20, "width": 2})
    assert ref == EntityRef(x=10, y=20, width=2, height=1)


def test_object_with_center_uses_center():
    token = SimpleNamespace(x=0, y=0, center={"x": 150, "y": 250}, width=1, height=1)
    assert to_location(token) == EntityRef(x=150, y=250, width=1, height=1)


def test_tagged_mapping_is_validated():
    ref = to_location({"kind": "template", "shape": "ray", "end": {"x": 5, "y": 5}})
    assert isinstance(ref, TemplateRef)
    assert ref.is_directional
    assert ref.end == Point(x=5, y=5)


def test_refs_pass_through():
    ref = EntityRef(x=1, y=1)
    assert to_location(ref) is ref


# --- to_anchor ---


def test_anchor_forms():
    assert to_anchor(0.25) == Point(x=0.25, y=0.25)
    assert to_anchor({"y": 1}) == Point(x=0.5, y=1)
    assert to_anchor() == Point(x=0.5, y=0.5)


# --- EffectBuilder ---


def test_build_defaults():
    options = EffectBuilder("a.webm").build()
    assert options.file == "a.webm"
    assert options.rotation_only
    assert options.origin is None
    assert options.overrides == ()


def test_file_variants_become_a_tuple():
    assert EffectBuilder(["a.webm", "b.webm"]).build().file == ("a.webm", "b.webm")


def test_base_folder_is_normalized():
    assert EffectBuilder("a.webm").base_folder("fx\\fire").build().base_folder == "fx/fire/"
    assert EffectBuilder("a.webm").base_folder("fx/").build().base_folder == "fx/"


def test_reach_and_rotate_toggle_mode():
    builder = EffectBuilder("a.webm").at_location((0, 0)).reach_towards((1, 1))
    assert builder.build().reaches
    assert not builder.rotate_towards((1, 1)).build().reaches


def test_jb2a_preset():
    options = EffectBuilder("a.webm").jb2a().build()
    assert options.grid_size == JB2A_GRID_SIZE
    assert options.start_point == options.end_point == JB2A_TRIM_POINTS
    assert options.structured_asset_names

    reset = EffectBuilder("a.webm").jb2a().jb2a(False).build()
    assert reset.grid_size is None
    assert reset.start_point == reset.end_point == 0
    assert not reset.structured_asset_names


def test_center_overrides_anchor():
    options = EffectBuilder("a.webm").anchor(0).center().build()
    assert options.anchor == Point(x=0.5, y=0.5)


def test_scale_forms():
    assert EffectBuilder("a.webm").scale(2).build().scale == 2
    assert EffectBuilder("a.webm").scale(0.5, 1.5).build().scale == (0.5, 1.5)
    assert EffectBuilder("a.webm").scale({"x": 2}).build().scale == Point(x=2, y=1)


def test_scale_range_needs_numeric_minimum():
    with pytest.raises(ConfigurationError):
        EffectBuilder("a.webm").scale({"x": 1}, 2)


def test_inverted_scale_range_is_rejected_at_build():
    builder = EffectBuilder("a.webm").scale(2, 1)
    with pytest.raises(ConfigurationError, match="exceeds maximum"):
        builder.build()


def test_empty_file_is_rejected():
    with pytest.raises(ConfigurationError, match="file"):
        EffectBuilder("").build()
    with pytest.raises(ConfigurationError):
        EffectBuilder([]).build()


def test_negative_trim_point_is_rejected():
    with pytest.raises(ConfigurationError, match="start_point"):
        EffectBuilder("a.webm").start_point(-1).build()


def test_hooks_must_be_callable():
    with pytest.raises(ConfigurationError):
        EffectBuilder("a.webm").add_override("not a hook")
    with pytest.raises(ConfigurationError):
        EffectBuilder("a.webm").add_post_override(None)


def test_hooks_keep_registration_order():
    def first(ctx, d):
        return d

    def second(ctx, d):
        return d

    options = EffectBuilder("a.webm").add_override(first).add_override(second).add_post_override(first).build()
    assert options.overrides == (first, second)
    assert options.post_overrides == (first,)


def test_repetitions():
    builder = EffectBuilder("a.webm")
    assert builder.repetition_count == 1
    assert builder.repetitions(3).repetition_count == 3
    with pytest.raises(ConfigurationError):
        builder.repetitions(0)


def test_then_without_sequence():
    with pytest.raises(ConfigurationError):
        EffectBuilder("a.webm").then()


def test_built_options_are_frozen():
    options = EffectBuilder("a.webm").build()
    with pytest.raises(ValidationError):
        options.file = "b.webm"
