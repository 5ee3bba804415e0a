"""Exception hierarchy raised by gridcal."""

from __future__ import annotations

__all__ = ["GridCalError", "InvalidRangeError", "IndexOutOfRangeError"]


class GridCalError(Exception):
    """Base class for every error raised by the package."""


class InvalidRangeError(GridCalError, ValueError):
    """A date range (or selection) whose start falls after its end."""


class IndexOutOfRangeError(GridCalError, IndexError):
    """A page index outside ``[0, page_count())`` was requested."""
