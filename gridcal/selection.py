"""Continuous date-range selection driven by day clicks.

A selection moves through three states: empty, anchored (only a start date)
and ranged (start and end). :func:`fold_selection` folds one click into the
current anchors; the predicates below tell a renderer which cells belong to
the highlighted band, including in-dates and out-dates that sit on a
neighbouring page so the band stays unbroken across page edges.
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from gridcal.core.models import CalendarDay, DateSelection, DayPosition


class Highlight(str, Enum):
    """Shape a renderer draws behind a day cell."""

    NONE = "none"
    SINGLE = "single"
    START = "start"
    MIDDLE = "middle"
    END = "end"


def fold(clicked: date, selection: DateSelection) -> DateSelection:
    """Return the selection that results from clicking ``clicked``."""

    start, end = selection.start, selection.end
    if start is None or end is not None:
        return DateSelection(start=clicked)
    if clicked < start:
        return DateSelection(start=clicked)
    return DateSelection(start=start, end=clicked)


def fold_selection(
    clicked: date,
    start: date | None = None,
    end: date | None = None,
) -> DateSelection:
    """Fold a click into explicit ``start``/``end`` anchors.

    Raises :class:`~gridcal.errors.InvalidRangeError` when the anchors are
    inconsistent (an end without a start, or a start after the end).
    """

    return fold(clicked, DateSelection(start=start, end=end))


def _strictly_between(day: date, start: date | None, end: date | None) -> bool:
    if start is None or end is None:
        return False
    return start < day < end


def is_in_date_within_range(day: date, start: date | None, end: date | None) -> bool:
    """Whether an in-date cell lies inside the selected band (caps excluded)."""

    return _strictly_between(day, start, end)


def is_out_date_within_range(day: date, start: date | None, end: date | None) -> bool:
    """Whether an out-date cell lies inside the selected band (caps excluded)."""

    return _strictly_between(day, start, end)


def is_boundary_date_selected(
    day: date,
    position: DayPosition,
    start: date | None,
    end: date | None,
) -> bool:
    if position is DayPosition.IN_DATE:
        return is_in_date_within_range(day, start, end)
    if position is DayPosition.OUT_DATE:
        return is_out_date_within_range(day, start, end)
    if start is None:
        return False
    if end is None:
        return day == start
    return start <= day <= end


def highlight_for(cell: CalendarDay, selection: DateSelection) -> Highlight:
    """Classify how ``cell`` should be highlighted under ``selection``."""

    start, end = selection.start, selection.end
    if cell.position.is_boundary:
        if is_boundary_date_selected(cell.date, cell.position, start, end):
            return Highlight.MIDDLE
        return Highlight.NONE
    if start is None:
        return Highlight.NONE
    if cell.date == start and (end is None or end == start):
        return Highlight.SINGLE
    if end is None:
        return Highlight.NONE
    if cell.date == start:
        return Highlight.START
    if cell.date == end:
        return Highlight.END
    if start < cell.date < end:
        return Highlight.MIDDLE
    return Highlight.NONE


__all__ = [
    "Highlight",
    "fold",
    "fold_selection",
    "highlight_for",
    "is_boundary_date_selected",
    "is_in_date_within_range",
    "is_out_date_within_range",
]
