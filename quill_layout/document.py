"""
High-level document API.

Wraps a ``LayoutContext`` and exposes the region helpers used while
composing pages::

    doc = Document()
    doc.header(doc.margin_box.top_left, lambda: doc.text("Report", align="center"),
               {"height": 30})
    counter = doc.lazy_region((doc.bounds.right - 50, doc.bounds.bottom + 25),
                              lambda: doc.text(f"Page {doc.page_count}"),
                              {"width": 50, "height": 25})
    for _ in range(3):
        doc.start_new_page()
        counter.activate()
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .config import LayoutConfig
from .engine.geometry import Point
from .engine.translator import TranslationDirection
from .layout.context import LayoutContext
from .layout.deferred import DeferredRegion
from .layout.page import Page
from .layout.region import Action, ImmediateRegion, Region, padded_region, resolve_size
from .layout.repeating import RepeatingSlot, bind_repeating

logger = logging.getLogger(__name__)

PointLike = Union[Point, Sequence[float]]


class Document:
    """Document being laid out page by page."""

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        skip_page_creation: bool = False,
        **overrides: Any,
    ):
        """
        Initialize document.

        Args:
            config: Layout configuration (defaults to ``LayoutConfig()``)
            skip_page_creation: Do not start the first page automatically
            **overrides: Configuration values applied on top of ``config``
        """
        config = config or LayoutConfig()
        if overrides:
            config = config.merged(overrides)
        self.config = config
        self.context = LayoutContext(config)

        if not skip_page_creation:
            self.start_new_page()

        logger.debug(
            f"Document initialized: {config.page_size.width}x{config.page_size.height}pt"
        )

    # State of the underlying context
    @property
    def bounds(self) -> Region:
        return self.context.bounds

    @property
    def y(self) -> float:
        return self.context.y

    @y.setter
    def y(self, value: float) -> None:
        self.context.y = value

    @property
    def cursor(self) -> float:
        return self.context.cursor

    @property
    def margin_box(self) -> Region:
        return self.context.margin_box

    @property
    def pages(self) -> List[Page]:
        return self.context.pages

    @property
    def page_count(self) -> int:
        return self.context.page_count

    def start_new_page(self) -> Page:
        return self.context.start_new_page()

    def translate(
        self,
        point: PointLike,
        direction: TranslationDirection = TranslationDirection.TO_ABSOLUTE,
    ) -> Point:
        return self.context.translate(point, direction)

    # Regions
    def lazy_region(
        self,
        origin: PointLike,
        action: Action,
        options: Optional[Mapping[str, Any]] = None,
    ) -> DeferredRegion:
        """
        Create a region whose action runs later, on each ``activate()``.

        Takes the same arguments as ``region`` but returns the region instead
        of running the action.
        """
        box = DeferredRegion(self.context, origin, options)
        box.bind_action(action)
        return box

    def region(
        self,
        origin: PointLike,
        action: Action,
        options: Optional[Mapping[str, Any]] = None,
    ) -> ImmediateRegion:
        """Run ``action`` inside a region anchored at ``origin`` right away."""
        bounds = self.context.bounds
        size = resolve_size(options, bounds.width, bounds.height)
        inner = Region.within(bounds, origin, size["width"], size["height"])
        box = ImmediateRegion(self.context, inner, action)
        box.activate()
        return box

    def padded_region(self, margin: float, action: Action) -> ImmediateRegion:
        """Run ``action`` inside the active region minus ``margin`` on all sides."""
        return padded_region(self.context, margin, action)

    def header(
        self,
        top_left: PointLike,
        action: Action,
        options: Optional[Mapping[str, Any]] = None,
    ) -> DeferredRegion:
        """
        Bind the header drawn on every following page.

        Unless ``width`` or ``height`` are given, the margin box size is used.
        """
        return bind_repeating(self.context, RepeatingSlot.HEADER, top_left, options, action)

    def footer(
        self,
        top_left: PointLike,
        action: Action,
        options: Optional[Mapping[str, Any]] = None,
    ) -> DeferredRegion:
        """
        Bind the footer drawn on every following page.

        Unless ``width`` or ``height`` are given, the margin box size is used.
        """
        return bind_repeating(self.context, RepeatingSlot.FOOTER, top_left, options, action)

    # Content placement
    def text(self, string: str, **options: Any) -> Dict[str, Any]:
        return self.context.text(string, **options)

    def move_down(self, amount: float) -> None:
        self.context.move_down(amount)
