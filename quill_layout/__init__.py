"""
Quill Layout - page layout regions for document generation.

Provides the region machinery used while composing pages:

- Region: frozen rectangle resolved against its parent at creation
- DeferredRegion: region with an action run on demand, any number of times
- Headers and footers: deferred regions activated on every new page
- padded_region: run content inside the active region minus a margin
- mask: scoped save/restore of layout state

Layout only decides *where* content goes; nothing is rendered.
"""

from .config import LayoutConfig
from .document import Document
from .engine import (
    Margins,
    PageSize,
    Point,
    Size,
    TextMetrics,
    TranslationDirection,
    translate,
)
from .exceptions import (
    GeometryError,
    LayoutError,
    NoActionBoundError,
    QuillLayoutError,
)
from .layout import (
    Activatable,
    DeferredRegion,
    ImmediateRegion,
    LayoutContext,
    Page,
    Region,
    RepeatingSlot,
    bind_repeating,
    clear_repeating,
    mask,
    padded_region,
)

__version__ = "0.1.0"

__all__ = [
    "Activatable",
    "DeferredRegion",
    "Document",
    "GeometryError",
    "ImmediateRegion",
    "LayoutConfig",
    "LayoutContext",
    "LayoutError",
    "Margins",
    "NoActionBoundError",
    "Page",
    "PageSize",
    "Point",
    "QuillLayoutError",
    "Region",
    "RepeatingSlot",
    "Size",
    "TextMetrics",
    "TranslationDirection",
    "bind_repeating",
    "clear_repeating",
    "mask",
    "padded_region",
    "translate",
]
