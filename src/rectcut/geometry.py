"""Geometric primitives for rect-cut layout computation.

A Rect is carved up by repeatedly cutting strips off its edges. The
``cut_*`` family mutates the rectangle and returns the removed strip,
``get_*`` returns the same strip without mutating, and ``add_*`` returns
a strip just outside an edge. Coordinates grow rightward (x) and
downward (y), so "top" is the minimum-y edge.
"""

from __future__ import annotations

import dataclasses
import functools
import logging
from dataclasses import dataclass

import numpy as np

from .side import RectCutSide
from .validation import validate_side

_LOG = logging.getLogger("rectcut.geometry")

# All bounds and amounts are held in single precision.
SCALAR = np.float32


def _log_clamp(side: str, requested: float, available: float) -> None:
    if _LOG.isEnabledFor(logging.DEBUG):
        _LOG.debug(
            "cut_clamped side=%s requested=%s available=%s",
            side,
            float(requested),
            float(available),
        )


def _ieee(func):
    """Let float32 overflow round to inf quietly, as IEEE arithmetic does."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with np.errstate(over="ignore", invalid="ignore"):
            return func(*args, **kwargs)

    return wrapper


@dataclass
class Rect:
    """An axis-aligned rectangle given by its min and max bounds.

    Bounds are stored verbatim as ``numpy.float32`` scalars, and every
    amount is coerced the same way, so the bounds, ``width`` and
    ``height`` read back as float32 rather than Python floats.
    ``minx <= maxx`` is not enforced. Cuts clamp so a well-formed
    rectangle stays well-formed. Overflow rounds to inf and other
    special values pass through uninspected.
    """

    minx: float
    miny: float
    maxx: float
    maxy: float

    @_ieee
    def __post_init__(self) -> None:
        self.minx = SCALAR(self.minx)
        self.miny = SCALAR(self.miny)
        self.maxx = SCALAR(self.maxx)
        self.maxy = SCALAR(self.maxy)

    def __repr__(self) -> str:
        return (
            f"Rect(minx={float(self.minx)}, miny={float(self.miny)}, "
            f"maxx={float(self.maxx)}, maxy={float(self.maxy)})"
        )

    @property
    @_ieee
    def width(self) -> np.float32:
        return self.maxx - self.minx

    @property
    @_ieee
    def height(self) -> np.float32:
        return self.maxy - self.miny

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """(minx, miny, maxx, maxy) as plain floats."""
        return (
            float(self.minx),
            float(self.miny),
            float(self.maxx),
            float(self.maxy),
        )

    def copy(self) -> Rect:
        return dataclasses.replace(self)

    # --- cut: shrink self, return the removed strip ---

    @_ieee
    def cut_left(self, a: float) -> Rect:
        """Cut a strip of width ``a`` off the left edge and return it."""
        a = SCALAR(a)
        minx = self.minx
        if self.maxx < self.minx + a:
            _log_clamp("left", a, self.width)
            self.minx = self.maxx
        else:
            self.minx = self.minx + a
        return Rect(minx, self.miny, self.minx, self.maxy)

    @_ieee
    def cut_right(self, a: float) -> Rect:
        """Cut a strip of width ``a`` off the right edge and return it."""
        a = SCALAR(a)
        maxx = self.maxx
        if self.minx > self.maxx - a:
            _log_clamp("right", a, self.width)
            self.maxx = self.minx
        else:
            self.maxx = self.maxx - a
        return Rect(self.maxx, self.miny, maxx, self.maxy)

    @_ieee
    def cut_top(self, a: float) -> Rect:
        """Cut a strip of height ``a`` off the top edge and return it."""
        a = SCALAR(a)
        miny = self.miny
        if self.maxy < self.miny + a:
            _log_clamp("top", a, self.height)
            self.miny = self.maxy
        else:
            self.miny = self.miny + a
        return Rect(self.minx, miny, self.maxx, self.miny)

    @_ieee
    def cut_bottom(self, a: float) -> Rect:
        """Cut a strip of height ``a`` off the bottom edge and return it."""
        a = SCALAR(a)
        maxy = self.maxy
        if self.miny > self.maxy - a:
            _log_clamp("bottom", a, self.height)
            self.maxy = self.miny
        else:
            self.maxy = self.maxy - a
        return Rect(self.minx, self.maxy, self.maxx, maxy)

    # --- get: the strip a cut would return, self untouched ---

    @_ieee
    def get_left(self, a: float) -> Rect:
        a = SCALAR(a)
        if self.maxx < self.minx + a:
            maxx = self.maxx
        else:
            maxx = self.minx + a
        return Rect(self.minx, self.miny, maxx, self.maxy)

    @_ieee
    def get_right(self, a: float) -> Rect:
        a = SCALAR(a)
        if self.minx > self.maxx - a:
            minx = self.minx
        else:
            minx = self.maxx - a
        return Rect(minx, self.miny, self.maxx, self.maxy)

    @_ieee
    def get_top(self, a: float) -> Rect:
        a = SCALAR(a)
        if self.maxy < self.miny + a:
            maxy = self.maxy
        else:
            maxy = self.miny + a
        return Rect(self.minx, self.miny, self.maxx, maxy)

    @_ieee
    def get_bottom(self, a: float) -> Rect:
        a = SCALAR(a)
        if self.miny > self.maxy - a:
            miny = self.miny
        else:
            miny = self.maxy - a
        return Rect(self.minx, miny, self.maxx, self.maxy)

    # --- add: a strip just outside an edge, unclamped ---

    @_ieee
    def add_left(self, a: float) -> Rect:
        a = SCALAR(a)
        return Rect(self.minx - a, self.miny, self.minx, self.maxy)

    @_ieee
    def add_right(self, a: float) -> Rect:
        a = SCALAR(a)
        return Rect(self.maxx, self.miny, self.maxx + a, self.maxy)

    @_ieee
    def add_top(self, a: float) -> Rect:
        a = SCALAR(a)
        return Rect(self.minx, self.miny - a, self.maxx, self.miny)

    @_ieee
    def add_bottom(self, a: float) -> Rect:
        a = SCALAR(a)
        return Rect(self.minx, self.maxy, self.maxx, self.maxy + a)

    @_ieee
    def extend(self, a: float) -> Rect:
        """Grow every side outward by ``a``."""
        a = SCALAR(a)
        return Rect(self.minx - a, self.miny - a, self.maxx + a, self.maxy + a)

    @_ieee
    def contract(self, a: float) -> Rect:
        """Shrink every side inward by ``a``.

        Not clamped: contracting by more than half the width or height
        yields an inverted rectangle.
        """
        a = SCALAR(a)
        return Rect(self.minx + a, self.miny + a, self.maxx - a, self.maxy - a)

    # --- dispatch on a side chosen at runtime ---

    def cut(self, side: RectCutSide | str, a: float) -> Rect:
        side = validate_side(side)
        if side is RectCutSide.LEFT:
            return self.cut_left(a)
        if side is RectCutSide.RIGHT:
            return self.cut_right(a)
        if side is RectCutSide.TOP:
            return self.cut_top(a)
        return self.cut_bottom(a)

    def get(self, side: RectCutSide | str, a: float) -> Rect:
        side = validate_side(side)
        if side is RectCutSide.LEFT:
            return self.get_left(a)
        if side is RectCutSide.RIGHT:
            return self.get_right(a)
        if side is RectCutSide.TOP:
            return self.get_top(a)
        return self.get_bottom(a)

    def add(self, side: RectCutSide | str, a: float) -> Rect:
        side = validate_side(side)
        if side is RectCutSide.LEFT:
            return self.add_left(a)
        if side is RectCutSide.RIGHT:
            return self.add_right(a)
        if side is RectCutSide.TOP:
            return self.add_top(a)
        return self.add_bottom(a)
