"""Geometry, coordinate translation and text metrics."""

from .geometry import Margins, PageSize, Point, Size, inch_to_points, mm_to_points
from .text_metrics import LineMetrics, TextMetrics
from .translator import TranslationDirection, translate

__all__ = [
    "LineMetrics",
    "Margins",
    "PageSize",
    "Point",
    "Size",
    "TextMetrics",
    "TranslationDirection",
    "inch_to_points",
    "mm_to_points",
    "translate",
]
