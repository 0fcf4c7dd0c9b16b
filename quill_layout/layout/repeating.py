"""
Repeating page elements (headers and footers).

A repeating element is a deferred region stored in a named slot of the
layout context. The page lifecycle activates the ``header`` slot and then
the ``footer`` slot once on every new page.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence, Union

from ..engine.geometry import Point
from .deferred import DeferredRegion
from .region import Action, resolve_size

if TYPE_CHECKING:
    from .context import LayoutContext

logger = logging.getLogger(__name__)


class RepeatingSlot(Enum):
    """Well-known slots for repeating page elements, in activation order."""
    HEADER = "header"
    FOOTER = "footer"

    @classmethod
    def coerce(cls, value: Union["RepeatingSlot", str]) -> "RepeatingSlot":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown repeating slot: {value!r}") from None


def bind_repeating(
    context: "LayoutContext",
    slot: Union[RepeatingSlot, str],
    top_left: Union[Point, Sequence[float]],
    options: Optional[Mapping[str, Any]],
    action: Action,
) -> DeferredRegion:
    """
    Bind ``action`` as the repeating element for ``slot``.

    Unless ``width`` or ``height`` are given in ``options``, the margin box
    dimensions are used.

    Args:
        context: Layout context owning the slot
        slot: ``RepeatingSlot.HEADER``/``FOOTER`` or their string names
        top_left: Anchor in the active region's local frame
        options: Optional ``width``/``height``
        action: Zero-argument callable run on every activation

    Returns:
        The deferred region now held by the slot
    """
    slot = RepeatingSlot.coerce(slot)
    margin_box = context.margin_box
    size = resolve_size(options, margin_box.width, margin_box.height)

    element = DeferredRegion(context, top_left, size)
    element.bind_action(action)

    if context.repeating.get(slot) is not None:
        logger.info(f"Replacing existing {slot.value} element")
    context.repeating[slot] = element
    logger.debug(f"Bound {slot.value} element at ({element.absolute_left}, {element.absolute_top})")
    return element


def clear_repeating(context: "LayoutContext", slot: Union[RepeatingSlot, str]) -> Optional[DeferredRegion]:
    """Remove the element bound to ``slot`` and return it."""
    slot = RepeatingSlot.coerce(slot)
    return context.repeating.pop(slot, None)


def activate_repeating(context: "LayoutContext") -> None:
    """Activate each bound repeating element once, header first."""
    for slot in RepeatingSlot:
        element = context.repeating.get(slot)
        if element is not None:
            element.activate()
