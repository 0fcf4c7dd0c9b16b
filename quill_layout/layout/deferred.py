"""
Deferred regions.

A deferred region fixes its geometry when it is created and keeps a single
action that can be run later, any number of times, from anywhere in the
document flow. Each activation swaps in the region as the active region and
puts the cursor at its top; the caller's region and cursor are restored
afterwards even when the action fails.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence, Union

from ..engine.geometry import Point
from ..exceptions import NoActionBoundError
from .mask import mask
from .region import Action, Activatable, Region, resolve_size

if TYPE_CHECKING:
    from .context import LayoutContext

logger = logging.getLogger(__name__)


class DeferredRegion(Activatable):
    """Region bound to an action that runs on each ``activate()`` call."""

    def __init__(
        self,
        context: "LayoutContext",
        origin: Union[Point, Sequence[float]],
        options: Optional[Mapping[str, Any]] = None,
    ):
        """
        Create a deferred region anchored against the active region.

        Args:
            context: Layout context the region draws into
            origin: Top-left corner in the active region's local frame
            options: Optional ``width``/``height``; both default to the
                active region's size
        """
        parent = context.bounds
        size = resolve_size(options, parent.width, parent.height)
        super().__init__(context, Region.within(parent, origin, size["width"], size["height"]))
        self._action: Optional[Action] = None
        self.activation_count = 0
        logger.debug(
            f"Deferred region at ({self.region.x}, {self.region.y}) "
            f"size {self.region.width}x{self.region.height}"
        )

    @property
    def action(self) -> Optional[Action]:
        return self._action

    @property
    def has_action(self) -> bool:
        return self._action is not None

    def bind_action(self, action: Action) -> None:
        """Bind ``action``, replacing any previous one. The action is not run."""
        if not callable(action):
            raise TypeError("Deferred region action must be callable")
        self._action = action

    def activate(self) -> None:
        """
        Run the bound action with this region active.

        Raises:
            NoActionBoundError: If no action has been bound
        """
        if self._action is None:
            raise NoActionBoundError(
                "Deferred region has no action",
                f"region at ({self.region.x}, {self.region.y})",
            )

        self.activation_count += 1
        context = self.context
        with mask(context, "bounds", "y"):
            context.bounds = self.region
            context.y = self.region.absolute_top
            self._action()
