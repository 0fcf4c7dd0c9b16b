"""
Page model for laid-out documents.

Holds page geometry and the placement records produced while the page was
the current page.
"""

from typing import Dict, Any, Optional, List
import logging

from ..engine.geometry import Margins, Size

logger = logging.getLogger(__name__)


class Page:
    """
    Represents a page in the document.

    Content items are plain dictionaries with at least a ``type`` key.
    """

    def __init__(self, page_number: int, size: Size, margins: Margins):
        """
        Initialize page.

        Args:
            page_number: Page number (1-based)
            size: Page size in points
            margins: Page margins in points
        """
        if page_number < 1:
            raise ValueError("Page number must be 1 or greater")

        self.page_number = page_number
        self.width = size.width
        self.height = size.height
        self.margins = margins

        self.content_width = self.width - margins.left - margins.right
        self.content_height = self.height - margins.top - margins.bottom

        self.content: List[Dict[str, Any]] = []

        logger.debug(f"Page {page_number} initialized: {self.width}x{self.height}pt")

    def add_content(self, content: Dict[str, Any]) -> None:
        """
        Add content to page.

        Args:
            content: Placement record
        """
        if not isinstance(content, dict):
            raise ValueError("Page content must be a dictionary")
        content['page'] = self.page_number
        self.content.append(content)

        logger.debug(f"Content added to page {self.page_number}: {content.get('type', 'unknown')}")

    def get_content(self, content_type: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Get page content.

        Args:
            content_type: Optional content type filter

        Returns:
            List of content elements
        """
        if content_type:
            return [item for item in self.content if item.get('type') == content_type]
        return self.content.copy()

    def get_content_area(self) -> Dict[str, float]:
        """Get content area dimensions."""
        return {
            'width': self.content_width,
            'height': self.content_height,
            'x': self.margins.left,
            'y': self.height - self.margins.top
        }

    def get_page_info(self) -> Dict[str, Any]:
        """Get complete page information."""
        return {
            'page_number': self.page_number,
            'width': self.width,
            'height': self.height,
            'margins': {
                'top': self.margins.top,
                'right': self.margins.right,
                'bottom': self.margins.bottom,
                'left': self.margins.left
            },
            'content_area': self.get_content_area(),
            'content_count': len(self.content),
        }

    def is_empty(self) -> bool:
        """Check if page is empty."""
        return len(self.content) == 0
