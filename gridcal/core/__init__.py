"""Grid generators and the value types they produce."""

from __future__ import annotations

from gridcal.core.base_generator import PageGenerator
from gridcal.core.models import (
    CalendarDay,
    CalendarPage,
    DateSelection,
    DayPosition,
    OutDatePolicy,
    YearMonth,
)
from gridcal.core.month import MonthPageGenerator, generate_month_page
from gridcal.core.week import WeekDateRange, WeekPageGenerator, adjusted_week_range, generate_week_page

__all__ = [
    "CalendarDay",
    "CalendarPage",
    "DateSelection",
    "DayPosition",
    "MonthPageGenerator",
    "OutDatePolicy",
    "PageGenerator",
    "WeekDateRange",
    "WeekPageGenerator",
    "YearMonth",
    "adjusted_week_range",
    "generate_month_page",
    "generate_week_page",
]
