"""Tests for RectCutSide and side validation."""

import pytest

from rectcut import RectCutSide, validate_side


class TestRectCutSide:
    def test_members(self):
        assert [s.value for s in RectCutSide] == ["left", "right", "top", "bottom"]

    def test_total_order(self):
        shuffled = [
            RectCutSide.BOTTOM,
            RectCutSide.LEFT,
            RectCutSide.TOP,
            RectCutSide.RIGHT,
        ]
        assert sorted(shuffled) == list(RectCutSide)
        assert RectCutSide.LEFT < RectCutSide.RIGHT < RectCutSide.TOP < RectCutSide.BOTTOM
        assert RectCutSide.TOP >= RectCutSide.TOP
        assert RectCutSide.BOTTOM > RectCutSide.LEFT

    def test_not_ordered_against_other_types(self):
        with pytest.raises(TypeError):
            RectCutSide.LEFT < "right"
        with pytest.raises(TypeError):
            RectCutSide.TOP >= 2

    def test_equality(self):
        assert RectCutSide("left") is RectCutSide.LEFT
        assert RectCutSide.LEFT != RectCutSide.RIGHT

    @pytest.mark.parametrize(
        "side,opposite",
        [
            (RectCutSide.LEFT, RectCutSide.RIGHT),
            (RectCutSide.RIGHT, RectCutSide.LEFT),
            (RectCutSide.TOP, RectCutSide.BOTTOM),
            (RectCutSide.BOTTOM, RectCutSide.TOP),
        ],
    )
    def test_opposite(self, side, opposite):
        assert side.opposite is opposite
        assert side.opposite.opposite is side


class TestValidateSide:
    def test_member_passes_through(self):
        assert validate_side(RectCutSide.TOP) is RectCutSide.TOP

    @pytest.mark.parametrize("name", ["left", "LEFT", " Left "])
    def test_names_are_case_insensitive(self, name):
        assert validate_side(name) is RectCutSide.LEFT

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="'left', 'right', 'top', 'bottom'"):
            validate_side("center")

    def test_wrong_type(self):
        with pytest.raises(TypeError, match="got int"):
            validate_side(0)
