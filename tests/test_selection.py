from __future__ import annotations

from datetime import date

import pytest

from gridcal.core.models import CalendarDay, DateSelection, DayPosition
from gridcal.errors import InvalidRangeError
from gridcal.selection import (
    Highlight,
    fold,
    fold_selection,
    highlight_for,
    is_boundary_date_selected,
    is_in_date_within_range,
    is_out_date_within_range,
)

JAN_05 = date(2022, 1, 5)
JAN_10 = date(2022, 1, 10)
JAN_15 = date(2022, 1, 15)


def test_fold_transitions() -> None:
    assert fold_selection(JAN_10, None, None) == DateSelection(JAN_10, None)
    assert fold_selection(JAN_15, JAN_10, None) == DateSelection(JAN_10, JAN_15)
    assert fold_selection(JAN_05, JAN_10, None) == DateSelection(JAN_05, None)
    assert fold_selection(JAN_10, JAN_10, None) == DateSelection(JAN_10, JAN_10)
    assert fold_selection(JAN_05, JAN_10, JAN_15) == DateSelection(JAN_05, None)
    assert fold_selection(date(2022, 1, 12), JAN_10, JAN_15) == DateSelection(date(2022, 1, 12))


def test_fold_is_deterministic_but_not_idempotent() -> None:
    first = fold(JAN_10, DateSelection())
    second = fold(JAN_10, first)
    third = fold(JAN_10, second)

    assert first == fold(JAN_10, DateSelection())
    assert first.is_anchored
    assert second == DateSelection(JAN_10, JAN_10)
    assert third == first


def test_fold_rejects_inconsistent_anchors() -> None:
    with pytest.raises(InvalidRangeError):
        fold_selection(JAN_10, None, JAN_15)
    with pytest.raises(InvalidRangeError):
        fold_selection(JAN_10, JAN_15, JAN_05)


def test_boundary_predicates_are_strict() -> None:
    start, end = JAN_10, date(2022, 2, 10)

    assert is_in_date_within_range(date(2022, 1, 31), start, end)
    assert is_out_date_within_range(date(2022, 2, 1), start, end)
    assert not is_in_date_within_range(start, start, end)
    assert not is_out_date_within_range(end, start, end)
    assert not is_out_date_within_range(date(2022, 2, 11), start, end)
    assert not is_in_date_within_range(date(2022, 1, 31), start, None)
    assert not is_in_date_within_range(date(2022, 1, 31), None, None)


@pytest.mark.parametrize(
    "day, position, start, end, expected",
    [
        (date(2022, 1, 31), DayPosition.IN_DATE, JAN_10, date(2022, 2, 10), True),
        (JAN_10, DayPosition.IN_DATE, JAN_10, date(2022, 2, 10), False),
        (date(2022, 2, 1), DayPosition.OUT_DATE, JAN_10, date(2022, 2, 10), True),
        (JAN_10, DayPosition.MONTH_DATE, JAN_10, JAN_15, True),
        (JAN_15, DayPosition.RANGE_DATE, JAN_10, JAN_15, True),
        (JAN_05, DayPosition.MONTH_DATE, JAN_10, JAN_15, False),
        (JAN_10, DayPosition.MONTH_DATE, JAN_10, None, True),
        (JAN_15, DayPosition.MONTH_DATE, JAN_10, None, False),
        (JAN_10, DayPosition.MONTH_DATE, None, None, False),
    ],
)
def test_is_boundary_date_selected(
    day: date,
    position: DayPosition,
    start: date | None,
    end: date | None,
    expected: bool,
) -> None:
    assert is_boundary_date_selected(day, position, start, end) is expected


def test_highlight_for_range() -> None:
    selection = DateSelection(JAN_10, JAN_15)

    def shape(day: date, position: DayPosition = DayPosition.MONTH_DATE) -> Highlight:
        return highlight_for(CalendarDay(day, position), selection)

    assert shape(JAN_10) is Highlight.START
    assert shape(date(2022, 1, 12)) is Highlight.MIDDLE
    assert shape(JAN_15) is Highlight.END
    assert shape(date(2022, 1, 16)) is Highlight.NONE
    assert shape(date(2022, 1, 12), DayPosition.OUT_DATE) is Highlight.MIDDLE
    assert shape(JAN_10, DayPosition.IN_DATE) is Highlight.NONE


def test_highlight_for_single_day() -> None:
    anchored = DateSelection(JAN_10)
    one_day = DateSelection(JAN_10, JAN_10)
    cell = CalendarDay(JAN_10, DayPosition.RANGE_DATE)

    assert highlight_for(cell, anchored) is Highlight.SINGLE
    assert highlight_for(cell, one_day) is Highlight.SINGLE
    assert highlight_for(CalendarDay(JAN_15, DayPosition.RANGE_DATE), anchored) is Highlight.NONE
    assert highlight_for(cell, DateSelection()) is Highlight.NONE
