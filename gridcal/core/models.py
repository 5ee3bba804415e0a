"""Data models shared by the month and week grid generators."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterator, Union

from gridcal.errors import InvalidRangeError
from gridcal.utils.date_range import _end_of_month, months_between

_YEAR_MONTH_PATTERN = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")


class DayPosition(str, Enum):
    """Where a day cell sits relative to the page that shows it."""

    IN_DATE = "in_date"
    MONTH_DATE = "month_date"
    RANGE_DATE = "range_date"
    OUT_DATE = "out_date"

    @property
    def is_boundary(self) -> bool:
        """True for cells that chronologically belong to a neighbouring page."""

        return self in (DayPosition.IN_DATE, DayPosition.OUT_DATE)


class OutDatePolicy(str, Enum):
    """How many trailing out-dates a month page receives."""

    END_OF_ROW = "end_of_row"
    END_OF_GRID = "end_of_grid"
    NONE = "none"

    @classmethod
    def parse(cls, value: "OutDatePolicy | str") -> "OutDatePolicy":
        """Normalise policy names such as ``endOfRow`` or ``end-of-grid``."""

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unsupported out-date policy: {value!r}")
        key = re.sub(r"(?<=[a-z])(?=[A-Z])", "_", value.strip())
        key = key.lower().replace("-", "_").replace(" ", "_")
        if key in {"row", "end_of_row"}:
            return cls.END_OF_ROW
        if key in {"grid", "end_of_grid"}:
            return cls.END_OF_GRID
        if key in {"none", "no", "off"}:
            return cls.NONE
        raise ValueError(
            "Unsupported out-date policy. Supported values are end_of_row, end_of_grid and none."
        )


@dataclass(frozen=True, slots=True, order=True)
class YearMonth:
    """A calendar month, used as the anchor of a month page."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {self.month}")

    @classmethod
    def from_date(cls, day: date) -> "YearMonth":
        return cls(day.year, day.month)

    @classmethod
    def parse(cls, value: "YearMonth | date | str") -> "YearMonth":
        """Accept a ``YearMonth``, a ``date`` or an ISO ``YYYY-MM`` string."""

        if isinstance(value, YearMonth):
            return value
        if isinstance(value, date):
            return cls.from_date(value)
        if not isinstance(value, str):
            raise ValueError(f"Expected a YYYY-MM month, got {value!r}")
        match = _YEAR_MONTH_PATTERN.match(value)
        if match is None:
            raise ValueError(f"Expected a YYYY-MM month, got {value!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return _end_of_month(self.first_day)

    @property
    def length(self) -> int:
        """Number of days in the month."""

        return self.last_day.day

    def plus_months(self, months: int) -> "YearMonth":
        absolute = self.year * 12 + (self.month - 1) + months
        return YearMonth(absolute // 12, absolute % 12 + 1)

    @property
    def next(self) -> "YearMonth":
        return self.plus_months(1)

    @property
    def previous(self) -> "YearMonth":
        return self.plus_months(-1)

    def months_until(self, other: "YearMonth") -> int:
        return months_between(self, other)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True, slots=True)
class CalendarDay:
    """A single day cell of a page."""

    date: date
    position: DayPosition

    @property
    def day(self) -> int:
        """Day of the month, as printed on the cell."""

        return self.date.day


PageAnchor = Union[YearMonth, date]


@dataclass(frozen=True, slots=True)
class CalendarPage:
    """One month or one week of day cells, in display order.

    ``anchor`` is the :class:`YearMonth` of a month page or the first date of
    a week page.
    """

    anchor: PageAnchor
    days: tuple[CalendarDay, ...]

    @property
    def rows(self) -> tuple[tuple[CalendarDay, ...], ...]:
        """The cells split into rows of seven; the last row may be short."""

        return tuple(self.days[index : index + 7] for index in range(0, len(self.days), 7))

    def __iter__(self) -> Iterator[CalendarDay]:
        return iter(self.days)

    def __len__(self) -> int:
        return len(self.days)

    def dates(self) -> list[date]:
        return [day.date for day in self.days]

    def position_of(self, day: date) -> DayPosition | None:
        """Return the position ``day`` has on this page, if it is shown at all."""

        for cell in self.days:
            if cell.date == day:
                return cell.position
        return None

    def contains(self, day: date, position: DayPosition | None = None) -> bool:
        found = self.position_of(day)
        if found is None:
            return False
        return position is None or found is position


@dataclass(frozen=True, slots=True)
class DateSelection:
    """Start/end anchors of a continuous date-range selection."""

    start: date | None = None
    end: date | None = None

    def __post_init__(self) -> None:
        if self.end is not None:
            if self.start is None:
                raise InvalidRangeError("a selection end requires a selection start")
            if self.start > self.end:
                raise InvalidRangeError(
                    f"selection start {self.start.isoformat()} must not be after "
                    f"selection end {self.end.isoformat()}"
                )

    @property
    def is_empty(self) -> bool:
        return self.start is None

    @property
    def is_anchored(self) -> bool:
        """Only the start anchor is set."""

        return self.start is not None and self.end is None

    @property
    def is_ranged(self) -> bool:
        return self.end is not None

    def as_tuple(self) -> tuple[date | None, date | None]:
        return (self.start, self.end)


__all__ = [
    "CalendarDay",
    "CalendarPage",
    "DateSelection",
    "DayPosition",
    "OutDatePolicy",
    "PageAnchor",
    "YearMonth",
]
