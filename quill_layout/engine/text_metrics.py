"""
Text metrics backed by ReportLab font tables.

Only measurement happens here: string width, ascent, descent and the line
height used to advance the layout cursor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from reportlab.pdfbase import pdfmetrics


DEFAULT_FONT = "Helvetica"


@dataclass(slots=True)
class LineMetrics:
    """Vertical metrics of a single line of text."""
    ascent: float
    descent: float
    line_height: float


def _resolve_font(font_name: str) -> str:
    if font_name not in pdfmetrics.getRegisteredFontNames():
        try:
            pdfmetrics.getFont(font_name)
        except KeyError:
            raise ValueError(f"Unknown font: {font_name}") from None
    return font_name


class TextMetrics:
    """Measures strings for a given font family using ReportLab metrics."""

    def __init__(self, font_name: str = DEFAULT_FONT, leading: float = 1.2):
        _resolve_font(font_name)
        if leading <= 0:
            raise ValueError("Leading must be positive")
        self.font_name = font_name
        self.leading = leading
        self._line_cache: Dict[Tuple[str, float], LineMetrics] = {}

    def string_width(self, text: str, font_size: float, font_name: str | None = None) -> float:
        name = _resolve_font(font_name) if font_name else self.font_name
        return pdfmetrics.stringWidth(text, name, font_size)

    def line_metrics(self, font_size: float, font_name: str | None = None) -> LineMetrics:
        """
        Get ascent, descent and line height for a font size.

        Args:
            font_size: Font size in points
            font_name: Font override (defaults to the instance font)

        Returns:
            LineMetrics for the font and size
        """
        name = _resolve_font(font_name) if font_name else self.font_name
        key = (name, float(font_size))
        cached = self._line_cache.get(key)
        if cached is not None:
            return cached

        ascent, descent = pdfmetrics.getAscentDescent(name, font_size)
        metrics = LineMetrics(
            ascent=float(ascent),
            descent=float(descent),
            line_height=float(font_size) * self.leading,
        )
        self._line_cache[key] = metrics
        return metrics
