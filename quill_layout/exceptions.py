"""Custom exceptions for Quill Layout."""

from typing import Optional


class QuillLayoutError(Exception):
    """Base exception for Quill Layout errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class LayoutError(QuillLayoutError):
    """Exception raised when the layout state is used incorrectly."""

    pass


class NoActionBoundError(LayoutError):
    """Exception raised when a deferred region is activated without an action."""

    pass


class GeometryError(QuillLayoutError):
    """Exception raised during geometry calculations."""

    pass
