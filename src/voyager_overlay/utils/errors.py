"""Typed exceptions for content-stream building and option handling."""


class OverlayError(Exception):
    """Base class for overlay generator errors."""


class NoCurrentPointError(OverlayError, RuntimeError):
    """Raised when a relative path operation runs before any move_to/line_to."""


class ConflictingOptionsError(OverlayError, ValueError):
    """Raised when mutually exclusive options are combined, or a required group is empty."""
