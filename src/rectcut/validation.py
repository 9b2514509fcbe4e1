"""Input validation with clear error messages for layout code."""

from __future__ import annotations

from typing import Any

from .side import RectCutSide


def validate_side(side: Any) -> RectCutSide:
    """Validate a side given as a RectCutSide or a side name.

    Names are case-insensitive (``"left"``, ``"Top"``, ...).
    Returns the matching RectCutSide member.
    """
    if isinstance(side, RectCutSide):
        return side
    if not isinstance(side, str):
        raise TypeError(
            f"Expected a RectCutSide or side name, got {type(side).__name__}."
        )
    try:
        return RectCutSide(side.strip().lower())
    except ValueError:
        names = ", ".join(f"'{s.value}'" for s in RectCutSide)
        raise ValueError(
            f"Unknown side '{side}'. Use one of {names}."
        ) from None
