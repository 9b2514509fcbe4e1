"""RectCutSide: the four edges a rectangle can be cut from."""

from __future__ import annotations

import functools
from enum import Enum


@functools.total_ordering
class RectCutSide(Enum):
    """One side of a rectangle.

    Members are ordered LEFT < RIGHT < TOP < BOTTOM. Values are the
    lowercase names, so ``RectCutSide("top")`` looks a member up by name.
    """

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    @property
    def opposite(self) -> RectCutSide:
        return _OPPOSITES[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RectCutSide):
            return NotImplemented
        return _RANKS[self] < _RANKS[other]


_RANKS = {side: rank for rank, side in enumerate(RectCutSide)}

_OPPOSITES = {
    RectCutSide.LEFT: RectCutSide.RIGHT,
    RectCutSide.RIGHT: RectCutSide.LEFT,
    RectCutSide.TOP: RectCutSide.BOTTOM,
    RectCutSide.BOTTOM: RectCutSide.TOP,
}
