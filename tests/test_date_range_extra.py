from __future__ import annotations

from datetime import date

import pytest

from gridcal.utils.date_range import DateRange, _end_of_month, parse_date


def test_parse_date_accepts_date_instance() -> None:
    today = date(2024, 1, 1)
    assert parse_date(today) == today


def test_date_range_membership() -> None:
    range_item = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))

    assert date(2024, 1, 1) in range_item
    assert date(2024, 1, 31) in range_item
    assert date(2024, 2, 1) not in range_item
    assert "2024-01-15" not in range_item


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2024, 12, 15), date(2024, 12, 31)),
        (date(2024, 2, 10), date(2024, 2, 29)),
        (date(2023, 2, 10), date(2023, 2, 28)),
        (date(2022, 4, 1), date(2022, 4, 30)),
    ],
)
def test_end_of_month(day: date, expected: date) -> None:
    assert _end_of_month(day) == expected


@pytest.mark.parametrize("value", [None, 20240101, 1.5])
def test_parse_date_rejects_non_string_values(value: object) -> None:
    with pytest.raises(ValueError, match="Expected an ISO date"):
        parse_date(value)  # type: ignore[arg-type]
