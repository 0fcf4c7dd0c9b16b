"""
Layout context.

The context owns the mutable layout state of a document: the active region
(``bounds``), the vertical write position (``y``, absolute), the margin box,
the repeating element slots and the list of started pages.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Union

from ..engine.geometry import Point
from ..engine.text_metrics import TextMetrics
from ..engine.translator import TranslationDirection, translate
from ..exceptions import LayoutError
from .mask import mask
from .page import Page
from .region import Action, Region
from .repeating import RepeatingSlot, activate_repeating

if TYPE_CHECKING:
    from ..config import LayoutConfig
    from .deferred import DeferredRegion

logger = logging.getLogger(__name__)

ALIGNMENTS = ("left", "center", "right")


class LayoutContext:
    """Mutable layout state shared by every region of a document."""

    def __init__(self, config: "LayoutConfig"):
        self.config = config
        self.margin_box: Region = config.margin_box()
        self.bounds: Region = self.margin_box
        self.y: float = self.margin_box.absolute_top
        self.metrics = TextMetrics(config.font_name, config.leading)
        self.repeating: Dict[RepeatingSlot, "DeferredRegion"] = {}
        self.pages: List[Page] = []

    @property
    def cursor(self) -> float:
        """Write position relative to the bottom of the active region."""
        return self.y - self.bounds.absolute_bottom

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def current_page(self) -> Optional[Page]:
        return self.pages[-1] if self.pages else None

    @property
    def header(self) -> Optional["DeferredRegion"]:
        return self.repeating.get(RepeatingSlot.HEADER)

    @property
    def footer(self) -> Optional["DeferredRegion"]:
        return self.repeating.get(RepeatingSlot.FOOTER)

    def translate(
        self,
        point: Union[Point, Sequence[float]],
        direction: TranslationDirection = TranslationDirection.TO_ABSOLUTE,
    ) -> Point:
        """Translate ``point`` against the active region."""
        return translate(self.bounds, point, direction)

    def run_in_region(self, region: Region, action: Action) -> None:
        """
        Run ``action`` with ``region`` as the active region.

        The previous region is restored afterwards. On success the cursor is
        left at the bottom of ``region``; on failure it is restored too.
        """
        with mask(self, "bounds", "y"):
            self.bounds = region
            self.y = region.absolute_top
            action()
        self.y = region.absolute_bottom

    def start_new_page(self) -> Page:
        """
        Start a new page and draw the repeating elements on it.

        Returns:
            The new page
        """
        page = Page(len(self.pages) + 1, self.config.page_size, self.config.margins)
        self.pages.append(page)
        self.bounds = self.margin_box
        self.y = self.margin_box.absolute_top
        logger.debug(f"Started page {page.page_number}")

        activate_repeating(self)
        return page

    def move_down(self, amount: float) -> None:
        self.y -= amount

    def text(
        self,
        string: str,
        size: Optional[float] = None,
        font_name: Optional[str] = None,
        align: str = "left",
    ) -> Dict[str, Any]:
        """
        Place one line of text at the cursor and move the cursor below it.

        Args:
            string: Text to place
            size: Font size (defaults to the configured size)
            font_name: Font (defaults to the configured font)
            align: ``left``, ``center`` or ``right`` within the active region

        Returns:
            The placement record added to the current page

        Raises:
            LayoutError: If no page has been started
        """
        page = self.current_page
        if page is None:
            raise LayoutError("Cannot place text before the first page is started")
        if align not in ALIGNMENTS:
            raise ValueError(f"Invalid alignment: {align}")

        font_size = float(size if size is not None else self.config.font_size)
        font_name = font_name or self.config.font_name
        width = self.metrics.string_width(string, font_size, font_name)
        line = self.metrics.line_metrics(font_size, font_name)

        bounds = self.bounds
        x = bounds.absolute_left
        if align == "center":
            x += (bounds.width - width) / 2.0
        elif align == "right":
            x += bounds.width - width

        record = {
            'type': 'text',
            'text': string,
            'x': x,
            'y': self.y - line.ascent,
            'width': width,
            'font_name': font_name,
            'font_size': font_size,
            'region': bounds,
        }
        page.add_content(record)
        self.y -= line.line_height
        return record
