"""Scoped save/restore of layout context attributes."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator

logger = logging.getLogger(__name__)


@contextmanager
def mask(target: Any, *fields: str) -> Iterator[Dict[str, Any]]:
    """
    Snapshot ``fields`` of ``target`` and restore them when the block exits.

    Restoration runs on every exit path, including exceptions raised inside
    the block; the exception is re-raised after the values are back.

    Args:
        target: Object whose attributes are masked (usually a LayoutContext)
        *fields: Attribute names to save and restore

    Yields:
        The saved snapshot (attribute name -> value)
    """
    if not fields:
        raise ValueError("mask() needs at least one field name")

    saved = {name: getattr(target, name) for name in fields}
    try:
        yield dict(saved)
    finally:
        for name, value in saved.items():
            setattr(target, name, value)
        logger.debug(f"Restored masked fields: {', '.join(fields)}")
