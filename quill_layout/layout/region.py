"""
Layout regions.

A ``Region`` is a frozen rectangle: its absolute top-left corner is resolved
once, when the region is created, and never follows later changes of the
layout context. Behaviour is attached through the ``Activatable`` interface:
``ImmediateRegion`` runs its action at once, ``DeferredRegion`` (see
``deferred.py``) runs it on demand.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, Sequence, Union

from ..engine.geometry import Point
from ..engine.translator import TranslationDirection, translate
from ..exceptions import GeometryError

if TYPE_CHECKING:
    from .context import LayoutContext

logger = logging.getLogger(__name__)

Action = Callable[[], Any]

REGION_OPTIONS = frozenset({"width", "height"})


@dataclass(slots=True, frozen=True)
class Region:
    """Rectangle anchored at an absolute top-left corner ``(x, y)``."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise GeometryError(
                "Region size must be positive",
                f"width={self.width}, height={self.height}",
            )

    @classmethod
    def within(
        cls,
        parent: "Region",
        origin: Union[Point, Sequence[float]],
        width: float,
        height: float,
    ) -> "Region":
        """Create a region whose ``origin`` is given in ``parent``'s local frame."""
        anchor = translate(parent, origin, TranslationDirection.TO_ABSOLUTE)
        return cls(anchor.x, anchor.y, float(width), float(height))

    # Local edges
    @property
    def left(self) -> float:
        return 0.0

    @property
    def bottom(self) -> float:
        return 0.0

    @property
    def right(self) -> float:
        return self.width

    @property
    def top(self) -> float:
        return self.height

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def top_right(self) -> Point:
        return Point(self.right, self.top)

    @property
    def bottom_left(self) -> Point:
        return Point(self.left, self.bottom)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    # Absolute edges
    @property
    def absolute_left(self) -> float:
        return self.x

    @property
    def absolute_top(self) -> float:
        return self.y

    @property
    def absolute_right(self) -> float:
        return self.x + self.width

    @property
    def absolute_bottom(self) -> float:
        return self.y - self.height


def resolve_size(
    options: Optional[Mapping[str, Any]],
    default_width: float,
    default_height: float,
) -> Dict[str, float]:
    """
    Resolve ``width``/``height`` options against defaults.

    Args:
        options: Mapping with optional ``width`` and ``height`` keys
        default_width: Width used when the option is missing or ``None``
        default_height: Height used when the option is missing or ``None``

    Returns:
        Dict with resolved ``width`` and ``height``
    """
    options = dict(options or {})
    unknown = set(options) - REGION_OPTIONS
    if unknown:
        raise ValueError(f"Unknown region options: {', '.join(sorted(unknown))}")

    width = options.get("width")
    height = options.get("height")
    return {
        "width": float(default_width if width is None else width),
        "height": float(default_height if height is None else height),
    }


class Activatable(ABC):
    """A region paired with behaviour that runs inside it."""

    def __init__(self, context: "LayoutContext", region: Region):
        self.context = context
        self.region = region

    @abstractmethod
    def activate(self) -> None:
        """Run the region's action with the region as the active region."""

    @property
    def width(self) -> float:
        return self.region.width

    @property
    def height(self) -> float:
        return self.region.height

    @property
    def absolute_left(self) -> float:
        return self.region.absolute_left

    @property
    def absolute_top(self) -> float:
        return self.region.absolute_top

    @property
    def absolute_right(self) -> float:
        return self.region.absolute_right

    @property
    def absolute_bottom(self) -> float:
        return self.region.absolute_bottom


class ImmediateRegion(Activatable):
    """Region whose action runs right away and leaves the cursor below it."""

    def __init__(self, context: "LayoutContext", region: Region, action: Action):
        if not callable(action):
            raise TypeError("Region action must be callable")
        super().__init__(context, region)
        self.action = action

    def activate(self) -> None:
        self.context.run_in_region(self.region, self.action)


def padded_region(context: "LayoutContext", margin: float, action: Action) -> ImmediateRegion:
    """
    Run ``action`` inside the active region shrunk by ``margin`` on all sides.

    Raises:
        GeometryError: If ``margin`` is negative or leaves no room
    """
    bounds = context.bounds
    if margin < 0:
        raise GeometryError("Padding margin must not be negative", f"margin={margin}")
    if margin * 2 >= min(bounds.width, bounds.height):
        raise GeometryError(
            "Padding margin leaves no room",
            f"margin={margin}, width={bounds.width}, height={bounds.height}",
        )

    inner = Region.within(
        bounds,
        (bounds.left + margin, bounds.top - margin),
        bounds.width - margin * 2,
        bounds.height - margin * 2,
    )
    logger.debug(f"Padded region: margin={margin} -> {inner.width}x{inner.height}")
    box = ImmediateRegion(context, inner, action)
    box.activate()
    return box
