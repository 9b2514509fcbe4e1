"""rectcut: rect-cutting primitives for UI layout partitioning."""

from ._version import __version__
from .side import RectCutSide
from .geometry import Rect
from .cut import RectCut
from .validation import validate_side

__all__ = [
    "__version__",
    "Rect",
    "RectCut",
    "RectCutSide",
    "validate_side",
]
