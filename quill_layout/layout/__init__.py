"""
Layout module: regions, masking, repeating page elements and page state.
"""

from .context import LayoutContext
from .deferred import DeferredRegion
from .mask import mask
from .page import Page
from .region import Activatable, ImmediateRegion, Region, padded_region
from .repeating import RepeatingSlot, bind_repeating, clear_repeating

__all__ = [
    "Activatable",
    "DeferredRegion",
    "ImmediateRegion",
    "LayoutContext",
    "Page",
    "Region",
    "RepeatingSlot",
    "bind_repeating",
    "clear_repeating",
    "mask",
    "padded_region",
]
