"""Layout configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

from .engine.geometry import Margins, PageSize, Size
from .exceptions import GeometryError
from .layout.region import Region


DEFAULT_MARGIN = 36.0
MARGIN_SIDES = frozenset({"top", "right", "bottom", "left"})


def _default_page_size() -> Size:
    return PageSize.A4.to_points()


def _default_margins() -> Margins:
    return Margins.uniform(DEFAULT_MARGIN)


@dataclass(slots=True)
class LayoutConfig:
    """Configuration for a layout context (all lengths in points)."""
    page_size: Size = field(default_factory=_default_page_size)
    margins: Margins = field(default_factory=_default_margins)
    font_name: str = "Helvetica"
    font_size: float = 12.0
    leading: float = 1.2

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "LayoutConfig":
        """
        Build a configuration from plain values.

        ``page_size`` may be a ``PageSize`` name, a ``(width, height)`` pair
        or a ``Size``. ``margins`` may be a number, a ``(top, right, bottom,
        left)`` tuple, a dict or a ``Margins``.
        """
        return cls().merged(values)

    def merged(self, values: Mapping[str, Any]) -> "LayoutConfig":
        """Return a copy with ``values`` applied on top of this configuration."""
        known = {f.name for f in fields(self)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        updates = dict(values)
        if "page_size" in updates:
            updates["page_size"] = _coerce_page_size(updates["page_size"])
        if "margins" in updates:
            updates["margins"] = _coerce_margins(updates["margins"])
        for key in ("font_size", "leading"):
            if key in updates:
                updates[key] = float(updates[key])
        return replace(self, **updates)

    def margin_box(self) -> Region:
        """Content area of a page: page size minus margins."""
        width = self.page_size.width - self.margins.left - self.margins.right
        height = self.page_size.height - self.margins.top - self.margins.bottom
        if width <= 0 or height <= 0:
            raise GeometryError(
                "Margins leave no content area",
                f"page={self.page_size.width}x{self.page_size.height}, margins={self.margins}",
            )
        return Region(
            x=self.margins.left,
            y=self.page_size.height - self.margins.top,
            width=width,
            height=height,
        )


def _coerce_page_size(value: Any) -> Size:
    if isinstance(value, Size):
        return value
    if isinstance(value, PageSize):
        return value.to_points()
    if isinstance(value, str):
        try:
            return PageSize[value.upper()].to_points()
        except KeyError:
            raise ValueError(f"Unknown page size: {value}") from None
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return Size.from_tuple(value)
    raise ValueError("Page size must be a PageSize name, a Size or a (width, height) pair")


def _coerce_margins(value: Any) -> Margins:
    if isinstance(value, Margins):
        return value
    if isinstance(value, (int, float)):
        return Margins.uniform(float(value))
    if isinstance(value, dict):
        unknown = set(value) - MARGIN_SIDES
        if unknown:
            raise ValueError(f"Unknown margin keys: {', '.join(sorted(unknown))}")
        return Margins(
            top=float(value.get('top', 0.0)),
            bottom=float(value.get('bottom', 0.0)),
            left=float(value.get('left', 0.0)),
            right=float(value.get('right', 0.0)),
        )
    if isinstance(value, (tuple, list)) and len(value) == 4:
        return Margins.from_tuple(value)
    raise ValueError("Margins must be a number, a dictionary or tuple of 4 values")
