"""Tests for options module."""

import dataclasses

import pytest
from ctree.options import (
    DEFAULT_STAR,
    InvalidOptionType,
    TreeOptions,
    merge_options,
)


class TestMergeDefaults:
    def test_no_options(self):
        opts = merge_options()
        assert isinstance(opts, TreeOptions)
        assert dict(opts.star) == DEFAULT_STAR
        assert opts.balls == "O"
        assert opts.stars == "*"

    def test_none_and_empty_are_equivalent(self):
        a, b = merge_options(None), merge_options({})
        assert dict(a.star) == dict(b.star)
        assert (a.balls, a.stars) == (b.balls, b.stars)

    def test_scalar_override_keeps_default_star(self):
        opts = merge_options({"balls": "X"})
        assert opts.balls == "X"
        assert opts.stars == "*"
        assert dict(opts.star) == DEFAULT_STAR

    def test_partial_star_replaces_whole_group(self):
        """The overlay is shallow: missing star keys do not fall back."""
        opts = merge_options({"star": {"TOP": "^"}})
        assert dict(opts.star) == {"TOP": "^"}
        assert "TREE_STAR" not in opts.star

    def test_unknown_keys_are_dropped(self):
        opts = merge_options({"garland": "~"})
        assert not hasattr(opts, "garland")

    def test_defaults_not_mutated(self):
        merge_options({"star": {"TOP": "^"}, "balls": "X"})
        assert DEFAULT_STAR["TOP"] == "|"


class TestImmutability:
    def test_frozen_fields(self):
        opts = merge_options()
        with pytest.raises(dataclasses.FrozenInstanceError):
            opts.balls = "X"

    def test_read_only_star_group(self):
        opts = merge_options()
        with pytest.raises(TypeError):
            opts.star["TOP"] = "^"

    def test_caller_dict_changes_do_not_leak(self):
        star = {"TOP": "^"}
        opts = merge_options({"star": star})
        star["TOP"] = "!"
        assert opts.star["TOP"] == "^"


class TestValidation:
    @pytest.mark.parametrize(
        "options, key_path, actual_type",
        [
            ({"balls": 5}, "balls", "int"),
            ({"stars": ["*"]}, "stars", "list"),
            ({"stars": None}, "stars", "NoneType"),
            ({"star": {"TOP": True}}, "star.TOP", "bool"),
            ({"star": {"TOP": "^", "LEFT": 1.5}}, "star.LEFT", "float"),
            ({"garland": 3}, "garland", "int"),
        ],
    )
    def test_non_text_leaf(self, options, key_path, actual_type):
        with pytest.raises(InvalidOptionType) as exc:
            merge_options(options)
        assert exc.value.key_path == key_path
        assert exc.value.actual_type == actual_type

    def test_message_names_path_and_type(self):
        with pytest.raises(InvalidOptionType, match=r"star\.TOP: expected a string but got int"):
            merge_options({"star": {"TOP": 1}})

    def test_glyph_star_fills_every_position(self):
        opts = merge_options({"star": "+"})
        assert dict(opts.star) == {key: "+" for key in DEFAULT_STAR}

    def test_glyph_group_for_balls_is_joined(self):
        opts = merge_options({"balls": {"a": "<", "b": ">"}, "stars": {}})
        assert opts.balls == "<>"
        assert opts.stars == ""

    def test_glyph_group_leaf_still_checked(self):
        with pytest.raises(InvalidOptionType) as exc:
            merge_options({"balls": {"a": 1}})
        assert exc.value.key_path == "balls.a"

    def test_options_must_be_a_mapping(self):
        with pytest.raises(InvalidOptionType) as exc:
            merge_options(["balls", "X"])
        assert exc.value.key_path == "options"

    def test_is_a_type_error(self):
        with pytest.raises(TypeError):
            merge_options({"balls": 0})
