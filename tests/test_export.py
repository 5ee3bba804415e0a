from __future__ import annotations

from datetime import date

import pytest

from gridcal import CalendarGrid
from gridcal.core.models import OutDatePolicy, YearMonth
from gridcal.core.month import generate_month_page


def test_page_records_flatten_cells() -> None:
    pytest.importorskip("pandas")
    from gridcal.export import page_records

    page = generate_month_page(YearMonth(2022, 1), 0, OutDatePolicy.END_OF_ROW)
    records = page_records([page], first_index=3)

    assert len(records) == 42
    assert records[0] == {
        "page": 3,
        "anchor": "2022-01",
        "row": 0,
        "column": 0,
        "date": date(2021, 12, 27),
        "position": "in_date",
    }
    assert records[-1]["row"] == 5
    assert records[-1]["column"] == 6


def test_grid_to_frame() -> None:
    pandas = pytest.importorskip("pandas")
    grid = CalendarGrid()
    grid.configure("2022-01", "2022-03", "monday", "end_of_grid")

    frame = grid.to_frame(1, 3)

    assert list(frame.columns) == ["page", "anchor", "row", "column", "date", "position"]
    assert len(frame) == 84
    assert sorted(frame["page"].unique().tolist()) == [1, 2]
    assert pandas.api.types.is_datetime64_any_dtype(frame["date"])
    assert (frame["position"] == "month_date").sum() == 28 + 31


def test_pages_to_frame_is_lazily_exported() -> None:
    pytest.importorskip("pandas")
    import gridcal

    frame = gridcal.pages_to_frame([])

    assert frame.empty
    assert list(frame.columns) == ["page", "anchor", "row", "column", "date", "position"]
