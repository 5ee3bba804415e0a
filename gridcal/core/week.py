"""Week calendar pages built on a range snapped outward to whole weeks."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from gridcal.core.base_generator import PageGenerator
from gridcal.core.models import CalendarDay, CalendarPage, DayPosition
from gridcal.utils.date_range import start_of_week, weeks_between
from gridcal.utils.weekdays import parse_weekday


@dataclass(frozen=True, slots=True)
class WeekDateRange:
    """The configured range widened to the enclosing week boundaries."""

    start_date_adjusted: date
    end_date_adjusted: date


def adjusted_week_range(start: date, end: date, first_day_of_week: int) -> WeekDateRange:
    """Snap ``[start, end]`` outward so it begins and ends on whole weeks."""

    start_adjusted = start_of_week(start, first_day_of_week)
    weeks = weeks_between(start_adjusted, end)
    end_adjusted = start_adjusted + timedelta(weeks=weeks, days=6)
    return WeekDateRange(start_date_adjusted=start_adjusted, end_date_adjusted=end_adjusted)


def week_page_index(start_date_adjusted: date, day: date) -> int:
    return weeks_between(start_date_adjusted, day)


def week_indices_count(week_range: WeekDateRange) -> int:
    # both the first and the last week are pages
    return week_page_index(week_range.start_date_adjusted, week_range.end_date_adjusted) + 1


def generate_week_page(week_start: date, range_start: date, range_end: date) -> CalendarPage:
    """Build the seven cells of the week beginning on ``week_start``.

    Days before ``range_start`` are in-dates, days after ``range_end`` are
    out-dates and everything else is a range date.
    """

    days = []
    for offset in range(7):
        day = week_start + timedelta(days=offset)
        if day < range_start:
            position = DayPosition.IN_DATE
        elif day > range_end:
            position = DayPosition.OUT_DATE
        else:
            position = DayPosition.RANGE_DATE
        days.append(CalendarDay(day, position))
    return CalendarPage(anchor=week_start, days=tuple(days))


class WeekPageGenerator(PageGenerator):
    """Pages of seven days between two dates."""

    __slots__ = ("start", "end", "first_day_of_week", "week_range", "_count")

    def __init__(self, start: date, end: date, first_day_of_week: int | str) -> None:
        self.start = start
        self.end = end
        self.first_day_of_week = parse_weekday(first_day_of_week)
        self.week_range = adjusted_week_range(start, end, self.first_day_of_week)
        self._count = week_indices_count(self.week_range)

    def page_count(self) -> int:
        return self._count

    def page_index(self, day: date) -> int:
        return week_page_index(self.week_range.start_date_adjusted, day)

    def page_anchor(self, index: int) -> date:
        return self.week_range.start_date_adjusted + timedelta(weeks=index)

    def build_page(self, index: int) -> CalendarPage:
        return generate_week_page(self.page_anchor(index), self.start, self.end)


__all__ = [
    "WeekDateRange",
    "WeekPageGenerator",
    "adjusted_week_range",
    "generate_week_page",
    "week_indices_count",
    "week_page_index",
]
