"""Tabular views of generated pages for analysis and debugging."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from gridcal.core.models import CalendarPage

FRAME_COLUMNS = ("page", "anchor", "row", "column", "date", "position")


def page_records(pages: Iterable[CalendarPage], *, first_index: int = 0) -> list[dict[str, object]]:
    """Flatten pages into one record per cell, numbering pages from ``first_index``."""

    records: list[dict[str, object]] = []
    for page_number, page in enumerate(pages, start=first_index):
        for offset, cell in enumerate(page.days):
            records.append(
                {
                    "page": page_number,
                    "anchor": str(page.anchor),
                    "row": offset // 7,
                    "column": offset % 7,
                    "date": cell.date,
                    "position": cell.position.value,
                }
            )
    return records


def pages_to_frame(pages: Iterable[CalendarPage], *, first_index: int = 0) -> pd.DataFrame:
    """Return a :class:`pandas.DataFrame` with one row per day cell."""

    frame = pd.DataFrame.from_records(
        page_records(pages, first_index=first_index), columns=list(FRAME_COLUMNS)
    )
    if not frame.empty:
        frame["date"] = pd.to_datetime(frame["date"])
    return frame


__all__ = ["FRAME_COLUMNS", "page_records", "pages_to_frame"]
