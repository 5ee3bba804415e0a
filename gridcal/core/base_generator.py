"""Page generator interface shared by month and week calendars."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Iterator

from gridcal.core.models import CalendarPage, DayPosition, PageAnchor
from gridcal.errors import IndexOutOfRangeError


class PageGenerator(ABC):
    """Common interface implemented by every calendar mode.

    Implementations map between page indices and dates in closed form and
    build pages on demand; they hold no page cache.
    """

    @abstractmethod
    def page_count(self) -> int:
        """Number of pages between the configured bounds, both inclusive."""

    @abstractmethod
    def page_index(self, day: date) -> int:
        """Index of the page showing ``day`` as a month/range date.

        Dates outside the configured bounds yield an index outside
        ``[0, page_count())`` instead of raising.
        """

    @abstractmethod
    def page_anchor(self, index: int) -> PageAnchor:
        """Anchor (month or week start) of the page at ``index``."""

    @abstractmethod
    def build_page(self, index: int) -> CalendarPage:
        """Generate the page at ``index`` without bounds checking."""

    def page_index_for_day(self, day: date, position: DayPosition) -> int:
        """Index of the page on which ``day`` is shown with ``position``."""

        return self.page_index(day)

    def page_indices_for_date(self, day: date) -> list[tuple[int, DayPosition]]:
        """Every in-bound page index that shows ``day``, with its position there."""

        index = self.page_index(day)
        if not self.in_bounds(index):
            return []
        page = self.build_page(index)
        position = page.position_of(day)
        return [] if position is None else [(index, position)]

    def in_bounds(self, index: int) -> bool:
        return 0 <= index < self.page_count()

    def page(self, index: int) -> CalendarPage:
        if not self.in_bounds(index):
            raise IndexOutOfRangeError(
                f"page index {index} is outside [0, {self.page_count()})"
            )
        return self.build_page(index)

    def iter_pages(self, start: int = 0, stop: int | None = None) -> Iterator[CalendarPage]:
        """Lazily yield pages ``start`` up to (excluding) ``stop``."""

        count = self.page_count()
        end = count if stop is None else min(stop, count)
        for index in range(max(start, 0), end):
            yield self.build_page(index)


__all__ = ["PageGenerator"]
