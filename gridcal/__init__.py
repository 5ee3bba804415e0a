"""Public interface for the gridcal package."""

from __future__ import annotations

import calendar
from dataclasses import dataclass, fields
from datetime import date
from enum import Enum
from importlib import metadata as importlib_metadata
from typing import TYPE_CHECKING, Any, Iterator, Mapping

from gridcal.core.base_generator import PageGenerator
from gridcal.core.models import (
    CalendarDay,
    CalendarPage,
    DateSelection,
    DayPosition,
    OutDatePolicy,
    PageAnchor,
    YearMonth,
)
from gridcal.core.month import MonthPageGenerator
from gridcal.core.week import WeekPageGenerator
from gridcal.errors import GridCalError, IndexOutOfRangeError, InvalidRangeError
from gridcal.selection import Highlight, fold_selection, highlight_for, is_boundary_date_selected
from gridcal.utils.date_range import DateRange, check_date_range, parse_date
from gridcal.utils.logger import get_logger
from gridcal.utils.weekdays import days_of_week, parse_weekday, weekday_name

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd

LOGGER = get_logger(__name__)

__all__ = [
    "__version__",
    "CalendarDay",
    "CalendarGrid",
    "CalendarMode",
    "CalendarPage",
    "DateSelection",
    "DayPosition",
    "GridCalError",
    "Highlight",
    "IndexOutOfRangeError",
    "InvalidRangeError",
    "OutDatePolicy",
    "RangeConfiguration",
    "YearMonth",
    "fold_selection",
    "highlight_for",
    "is_boundary_date_selected",
    "pages_to_frame",
]

try:
    __version__ = importlib_metadata.version("gridcal")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


class CalendarMode(str, Enum):
    """Page granularity of a calendar."""

    MONTH = "month"
    WEEK = "week"

    @classmethod
    def parse(cls, value: "CalendarMode | str") -> "CalendarMode":
        """Normalise mode names such as ``"Monthly"`` or ``"weeks"``."""

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unsupported calendar mode: {value!r}")
        key = value.strip().lower()
        if key in {"month", "months", "monthly"}:
            return cls.MONTH
        if key in {"week", "weeks", "weekly"}:
            return cls.WEEK
        raise ValueError("Unsupported calendar mode. Supported values are month and week.")


def _parse_bound(value: str | date, *, end: bool) -> date:
    """Parse an ISO date, or a ``YYYY-MM`` month expanded to its first/last day."""

    if isinstance(value, YearMonth):
        return value.last_day if end else value.first_day
    if isinstance(value, str) and value.strip().count("-") == 1:
        month = YearMonth.parse(value)
        return month.last_day if end else month.first_day
    return parse_date(value)


@dataclass(frozen=True, slots=True)
class RangeConfiguration:
    """Everything a calendar needs to lay out its pages.

    The value is validated on construction, so an instance always satisfies
    ``start <= end``.
    """

    start: date
    end: date
    first_day_of_week: int = calendar.MONDAY
    out_date_policy: OutDatePolicy = OutDatePolicy.END_OF_ROW
    mode: CalendarMode = CalendarMode.MONTH

    def __post_init__(self) -> None:
        # frozen dataclass: normalise loose values in place
        object.__setattr__(self, "start", _parse_bound(self.start, end=False))
        object.__setattr__(self, "end", _parse_bound(self.end, end=True))
        object.__setattr__(self, "first_day_of_week", parse_weekday(self.first_day_of_week))
        object.__setattr__(self, "out_date_policy", OutDatePolicy.parse(self.out_date_policy))
        object.__setattr__(self, "mode", CalendarMode.parse(self.mode))
        check_date_range(self.start, self.end)

    @property
    def bounds(self) -> DateRange:
        """The configured ``[start, end]`` range."""

        return DateRange(start=self.start, end=self.end)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "RangeConfiguration":
        """Create a configuration from loosely typed values (e.g. parsed JSON).

        Bounds may be ISO dates or ``YYYY-MM`` months; weekdays may be names or
        numbers; the policy and mode accept the aliases understood by
        :meth:`OutDatePolicy.parse` and :meth:`CalendarMode.parse`.
        """

        try:
            raw_start = values["start"]
            raw_end = values["end"]
        except KeyError as exc:
            raise ValueError(f"Missing calendar bound: {exc.args[0]}") from None
        return cls(
            start=raw_start,
            end=raw_end,
            first_day_of_week=values.get("first_day_of_week", calendar.MONDAY),
            out_date_policy=values.get("out_date_policy", OutDatePolicy.END_OF_ROW),
            mode=values.get("mode", CalendarMode.MONTH),
        )

    def build_generator(self) -> PageGenerator:
        if self.mode is CalendarMode.WEEK:
            return WeekPageGenerator(self.start, self.end, self.first_day_of_week)
        return MonthPageGenerator(
            self.start, self.end, self.first_day_of_week, self.out_date_policy
        )


class CalendarGrid:
    """Package facade holding the current configuration of one calendar.

    The configuration and the page generator derived from it are replaced
    together; a rejected configuration leaves the previous one untouched.
    """

    __slots__ = ("config", "_generator")

    __version__ = __version__

    def __init__(self, config: RangeConfiguration | Mapping[str, Any] | None = None) -> None:
        self.config: RangeConfiguration | None = None
        self._generator: PageGenerator | None = None
        if config is not None:
            if not isinstance(config, RangeConfiguration):
                config = RangeConfiguration.from_mapping(config)
            self._apply(config)

    def configure(
        self,
        start: str | date,
        end: str | date,
        first_day_of_week: int | str = calendar.MONDAY,
        out_date_policy: OutDatePolicy | str = OutDatePolicy.END_OF_ROW,
        *,
        mode: CalendarMode | str = CalendarMode.MONTH,
    ) -> RangeConfiguration:
        """Replace the whole configuration.

        Raises :class:`InvalidRangeError` when ``start`` is after ``end``.
        """

        try:
            config = RangeConfiguration.from_mapping(
                {
                    "start": start,
                    "end": end,
                    "first_day_of_week": first_day_of_week,
                    "out_date_policy": out_date_policy,
                    "mode": mode,
                }
            )
        except InvalidRangeError as exc:
            LOGGER.warning("Rejected calendar range %s → %s: %s", start, end, exc)
            raise
        self._apply(config)
        return config

    def update(self, **changes: Any) -> RangeConfiguration:
        """Replace selected fields of the current configuration atomically.

        Useful to extend a bound without touching the other settings.
        """

        current = self._require_config()
        names = [item.name for item in fields(RangeConfiguration)]
        unknown = sorted(set(changes) - set(names))
        if unknown:
            raise TypeError(f"Unknown configuration fields: {', '.join(unknown)}")
        values = {name: getattr(current, name) for name in names}
        values.update(changes)
        try:
            config = RangeConfiguration.from_mapping(values)
        except InvalidRangeError as exc:
            LOGGER.warning("Rejected calendar update %s: %s", changes, exc)
            raise
        self._apply(config)
        return config

    def _apply(self, config: RangeConfiguration) -> None:
        generator = config.build_generator()
        self.config, self._generator = config, generator
        LOGGER.info(
            "Configured %s calendar %s → %s (%d pages)",
            config.mode.value,
            config.start.isoformat(),
            config.end.isoformat(),
            generator.page_count(),
        )

    def _require_config(self) -> RangeConfiguration:
        if self.config is None:
            raise GridCalError("CalendarGrid has not been configured yet")
        return self.config

    def _require_generator(self) -> PageGenerator:
        if self._generator is None:
            raise GridCalError("CalendarGrid has not been configured yet")
        return self._generator

    def page_count(self) -> int:
        return self._require_generator().page_count()

    def page(self, index: int) -> CalendarPage:
        """Return the page at ``index``.

        Raises :class:`IndexOutOfRangeError` outside ``[0, page_count())``.
        """

        return self._require_generator().page(index)

    def pages(self, start: int = 0, stop: int | None = None) -> Iterator[CalendarPage]:
        """Lazily yield the pages ``start`` up to (excluding) ``stop``."""

        return self._require_generator().iter_pages(start, stop)

    def page_anchor(self, index: int) -> PageAnchor:
        return self._require_generator().page_anchor(index)

    def page_index_for_date(self, day: str | date) -> int:
        """Index of the page that shows ``day`` as one of its own days.

        Dates outside the configured bounds give an index outside
        ``[0, page_count())``; callers bounds-check.
        """

        return self._require_generator().page_index(parse_date(day))

    def page_index_for_day(self, day: str | date, position: DayPosition) -> int:
        """Like :meth:`page_index_for_date` but honours in-/out-date positions."""

        return self._require_generator().page_index_for_day(parse_date(day), position)

    def page_indices_for_date(self, day: str | date) -> list[tuple[int, DayPosition]]:
        """All pages on which ``day`` is visible, with its position on each."""

        return self._require_generator().page_indices_for_date(parse_date(day))

    def days_of_week(self) -> list[int]:
        """Weekday numbers in header order for the configured first day."""

        return days_of_week(self._require_config().first_day_of_week)

    def weekday_labels(self, *, short: bool = False) -> list[str]:
        """English header labels in the order of :meth:`days_of_week`."""

        return [weekday_name(weekday, short=short) for weekday in self.days_of_week()]

    def is_within_bounds(self, day: str | date) -> bool:
        """Whether ``day`` lies inside the configured ``[start, end]`` range.

        Month pages show whole months, so edge months can hold days outside
        the bounds; renderers use this to dim or disable them.
        """

        return parse_date(day) in self._require_config().bounds

    @staticmethod
    def fold_selection(
        clicked: date,
        start: date | None = None,
        end: date | None = None,
    ) -> DateSelection:
        return fold_selection(clicked, start, end)

    @staticmethod
    def is_boundary_date_selected(
        day: date,
        position: DayPosition,
        start: date | None,
        end: date | None,
    ) -> bool:
        return is_boundary_date_selected(day, position, start, end)

    def to_frame(self, start: int = 0, stop: int | None = None) -> "pd.DataFrame":
        """Return the cells of pages ``start:stop`` as a pandas DataFrame."""

        from gridcal.export import pages_to_frame as _pages_to_frame

        return _pages_to_frame(self.pages(start, stop), first_index=max(start, 0))


def __getattr__(name: str) -> Any:
    """Lazily import the pandas export helper."""

    if name == "pages_to_frame":
        from gridcal.export import pages_to_frame as _pages_to_frame

        return _pages_to_frame
    raise AttributeError(f"module 'gridcal' has no attribute {name}")
