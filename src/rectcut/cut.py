"""RectCut: a rectangle bound to the side future cuts come from."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Rect
from .side import RectCutSide
from .validation import validate_side


@dataclass
class RectCut:
    """Pairs a Rect with a fixed side so both travel as one value.

    The RectCut owns a copy of the rectangle it is given, so ``cut``
    shrinks that copy exactly as calling the matching ``Rect.cut_*``
    method would while the caller's Rect stays untouched. The side
    never changes after construction.
    """

    rect: Rect
    side: RectCutSide

    def __post_init__(self) -> None:
        self.rect = self.rect.copy()
        self.side = validate_side(self.side)

    def cut(self, a: float) -> Rect:
        """Cut ``a`` off the held rectangle's side and return the strip."""
        return self.rect.cut(self.side, a)

    def get(self, a: float) -> Rect:
        """Return the strip ``cut`` would produce, without mutating."""
        return self.rect.get(self.side, a)

    def add(self, a: float) -> Rect:
        """Return a strip of size ``a`` just outside the held side."""
        return self.rect.add(self.side, a)
