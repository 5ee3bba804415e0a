"""Month calendar pages padded with in-dates and out-dates."""

from __future__ import annotations

from datetime import date, timedelta

from gridcal.core.base_generator import PageGenerator
from gridcal.core.models import CalendarDay, CalendarPage, DayPosition, OutDatePolicy, YearMonth
from gridcal.utils.date_range import days_until, months_between
from gridcal.utils.weekdays import parse_weekday

GRID_ROWS = 6
DAYS_PER_ROW = 7


def in_date_count(month: YearMonth, first_day_of_week: int) -> int:
    """Leading cells needed before the first of ``month`` on its first row."""

    return days_until(first_day_of_week, month.first_day.weekday())


def out_date_count(in_days: int, month_length: int, policy: OutDatePolicy) -> int:
    """Trailing cells required by ``policy`` after the last day of the month."""

    if policy is OutDatePolicy.NONE:
        return 0
    filled = in_days + month_length
    end_of_row = (DAYS_PER_ROW - filled % DAYS_PER_ROW) % DAYS_PER_ROW
    if policy is OutDatePolicy.END_OF_ROW:
        return end_of_row
    if policy is OutDatePolicy.END_OF_GRID:
        rows = (filled + end_of_row) // DAYS_PER_ROW
        return end_of_row + (GRID_ROWS - rows) * DAYS_PER_ROW
    raise ValueError(f"Unsupported out-date policy: {policy!r}")


def generate_month_page(
    month: YearMonth,
    first_day_of_week: int,
    out_date_policy: OutDatePolicy | str,
) -> CalendarPage:
    """Build the cells of ``month``: in-dates, month dates, then out-dates."""

    first_day = month.first_day
    in_days = in_date_count(month, parse_weekday(first_day_of_week))
    length = month.length
    out_days = out_date_count(in_days, length, OutDatePolicy.parse(out_date_policy))

    grid_start = first_day - timedelta(days=in_days)
    days: list[CalendarDay] = []
    for offset in range(in_days + length + out_days):
        day = grid_start + timedelta(days=offset)
        if offset < in_days:
            position = DayPosition.IN_DATE
        elif offset < in_days + length:
            position = DayPosition.MONTH_DATE
        else:
            position = DayPosition.OUT_DATE
        days.append(CalendarDay(day, position))
    return CalendarPage(anchor=month, days=tuple(days))


class MonthPageGenerator(PageGenerator):
    """Pages of whole months between two dates (or months), inclusive."""

    __slots__ = ("start_month", "end_month", "first_day_of_week", "out_date_policy", "_count")

    def __init__(
        self,
        start: date | YearMonth,
        end: date | YearMonth,
        first_day_of_week: int | str,
        out_date_policy: OutDatePolicy | str = OutDatePolicy.END_OF_ROW,
    ) -> None:
        self.start_month = YearMonth.parse(start)
        self.end_month = YearMonth.parse(end)
        self.first_day_of_week = parse_weekday(first_day_of_week)
        self.out_date_policy = OutDatePolicy.parse(out_date_policy)
        self._count = months_between(self.start_month, self.end_month) + 1

    def page_count(self) -> int:
        return self._count

    def page_index(self, day: date) -> int:
        return months_between(self.start_month, day)

    def page_anchor(self, index: int) -> YearMonth:
        return self.start_month.plus_months(index)

    def build_page(self, index: int) -> CalendarPage:
        return generate_month_page(
            self.page_anchor(index), self.first_day_of_week, self.out_date_policy
        )

    def page_index_for_day(self, day: date, position: DayPosition) -> int:
        # in-dates sit on the following month's page, out-dates on the previous one
        index = self.page_index(day)
        if position is DayPosition.IN_DATE:
            return index + 1
        if position is DayPosition.OUT_DATE:
            return index - 1
        return index

    def page_indices_for_date(self, day: date) -> list[tuple[int, DayPosition]]:
        own = self.page_index(day)
        found: list[tuple[int, DayPosition]] = []
        for index in (own - 1, own, own + 1):
            if not self.in_bounds(index):
                continue
            position = self.build_page(index).position_of(day)
            if position is not None:
                found.append((index, position))
        return found


__all__ = [
    "GRID_ROWS",
    "MonthPageGenerator",
    "generate_month_page",
    "in_date_count",
    "out_date_count",
]
