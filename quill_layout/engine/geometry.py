"""Geometry primitives and helpers for layout calculations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, Union


POINTS_PER_INCH = 72.0
MM_PER_INCH = 25.4


@dataclass(slots=True, frozen=True)
class Point:
    x: float
    y: float

    @classmethod
    def coerce(cls, value: Union["Point", Sequence[float]]) -> "Point":
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(slots=True)
class Size:
    width: float
    height: float

    @classmethod
    def from_tuple(cls, value: Iterable[float]) -> "Size":
        width, height = value
        return cls(float(width), float(height))


@dataclass(slots=True)
class Margins:
    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> "Margins":
        return cls(value, value, value, value)

    @classmethod
    def from_tuple(cls, value: Iterable[float]) -> "Margins":
        """Build margins from a CSS-like ``(top, right, bottom, left)`` tuple."""
        top, right, bottom, left = value
        return cls(top=float(top), bottom=float(bottom), left=float(left), right=float(right))


class PageSize(Enum):
    """Standard page sizes (mm)."""
    A3 = (297.0, 420.0)
    A4 = (210.0, 297.0)
    A5 = (148.0, 210.0)
    LETTER = (215.9, 279.4)
    LEGAL = (215.9, 355.6)

    def to_points(self) -> Size:
        width, height = self.value
        return Size(mm_to_points(width), mm_to_points(height))


def mm_to_points(value: float | None) -> float:
    if value is None:
        return 0.0
    return float(value) * POINTS_PER_INCH / MM_PER_INCH


def inch_to_points(value: float | None) -> float:
    if value is None:
        return 0.0
    return float(value) * POINTS_PER_INCH
