"""Date arithmetic and range validation shared by the grid generators."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Protocol, Tuple

from gridcal.errors import InvalidRangeError


class _HasYearMonth(Protocol):
    year: int
    month: int


@dataclass(frozen=True, slots=True)
class DateRange:
    """Container representing a closed date range."""

    start: date
    end: date

    def as_tuple(self) -> Tuple[date, date]:
        """Return the range as a tuple of ``(start, end)``."""
        return (self.start, self.end)

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.start <= day <= self.end


def parse_date(value: str | date) -> date:
    """Parse a date string in ISO format to :class:`date`."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected an ISO date, got {value!r}")
    return datetime.strptime(value.strip(), "%Y-%m-%d").date()


def check_date_range(start: date, end: date) -> DateRange:
    """Validate that ``start`` is not after ``end`` and return the range."""

    if start > end:
        raise InvalidRangeError(
            f"start date {start.isoformat()} must not be after end date {end.isoformat()}"
        )
    return DateRange(start=start, end=end)


def days_until(first_day_of_week: int, weekday: int) -> int:
    """Return how many days lie between ``first_day_of_week`` and ``weekday``.

    Both arguments use :meth:`date.weekday` numbering (Monday is ``0``). The
    result is in ``range(7)``: the number of leading cells a row starting on
    ``first_day_of_week`` needs before it reaches ``weekday``.
    """

    return (weekday - first_day_of_week) % 7


def start_of_week(day: date, first_day_of_week: int) -> date:
    """Return the first date of the week containing ``day``."""

    return day - timedelta(days=days_until(first_day_of_week, day.weekday()))


def weeks_between(start: date, end: date) -> int:
    """Whole weeks from ``start`` to ``end``, floored for negative spans."""

    return (end - start).days // 7


def months_between(start: _HasYearMonth, end: _HasYearMonth) -> int:
    """Calendar months from ``start``'s month to ``end``'s month.

    Accepts anything with ``year`` and ``month`` attributes, so both
    :class:`date` and :class:`~gridcal.core.models.YearMonth` work.
    """

    return (end.year - start.year) * 12 + (end.month - start.month)


def _end_of_month(day: date) -> date:
    """Return the last day of the month for ``day``."""

    if day.month == 12:
        return date(day.year, 12, 31)
    first_next_month = date(day.year, day.month + 1, 1)
    return first_next_month - timedelta(days=1)


__all__ = [
    "DateRange",
    "check_date_range",
    "days_until",
    "months_between",
    "parse_date",
    "start_of_week",
    "weeks_between",
]
