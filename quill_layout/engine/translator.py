"""Conversion of points between the page frame and a region's local frame.

The absolute frame has its origin at the bottom-left corner of the page.
A region's local frame has its origin at the region's bottom-left corner,
so ``(0, region.height)`` is the region's top-left corner.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Sequence, Union

from .geometry import Point

if TYPE_CHECKING:
    from ..layout.region import Region


class TranslationDirection(Enum):
    """Which way a point is converted."""
    TO_ABSOLUTE = "to_absolute"
    TO_LOCAL = "to_local"


def translate(
    region: "Region",
    point: Union[Point, Sequence[float]],
    direction: TranslationDirection = TranslationDirection.TO_ABSOLUTE,
) -> Point:
    """Translate ``point`` relative to ``region``.

    Args:
        region: Region whose frame is used (usually the active region)
        point: Point or ``(x, y)`` pair
        direction: ``TO_ABSOLUTE`` for local -> page coordinates,
            ``TO_LOCAL`` for page -> local coordinates

    Returns:
        Translated point
    """
    source = Point.coerce(point)
    if direction is TranslationDirection.TO_ABSOLUTE:
        return Point(source.x + region.absolute_left, source.y + region.absolute_bottom)
    return Point(source.x - region.absolute_left, source.y - region.absolute_bottom)
