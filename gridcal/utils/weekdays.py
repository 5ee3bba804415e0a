"""Weekday helpers used to configure and label calendar rows."""

from __future__ import annotations

import calendar

WEEKDAY_NAMES: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)
_WEEKDAY_ALIASES: dict[str, int] = {
    **{name: index for index, name in enumerate(WEEKDAY_NAMES)},
    **{name[:3]: index for index, name in enumerate(WEEKDAY_NAMES)},
    **{name[:2]: index for index, name in enumerate(WEEKDAY_NAMES)},
}


def parse_weekday(value: int | str) -> int:
    """Normalise a weekday name or number into :meth:`date.weekday` numbering."""

    if isinstance(value, bool):
        raise ValueError(f"Unsupported weekday: {value!r}")
    if isinstance(value, int):
        if 0 <= value <= 6:
            return value
        raise ValueError(f"Weekday number must be between 0 (Monday) and 6 (Sunday): {value}")
    if not isinstance(value, str):
        raise ValueError(f"Unsupported weekday: {value!r}")
    key = value.strip().lower()
    if key.isdigit():
        return parse_weekday(int(key))
    try:
        return _WEEKDAY_ALIASES[key]
    except KeyError:
        raise ValueError(f"Unsupported weekday: {value!r}") from None


def days_of_week(first_day_of_week: int = calendar.MONDAY) -> list[int]:
    """Return the seven weekdays in display order, starting at ``first_day_of_week``."""

    return [(first_day_of_week + offset) % 7 for offset in range(7)]


def weekday_name(weekday: int, *, short: bool = False) -> str:
    """Return the English display name for ``weekday``."""

    name = WEEKDAY_NAMES[weekday].capitalize()
    return name[:3] if short else name


__all__ = ["WEEKDAY_NAMES", "days_of_week", "parse_weekday", "weekday_name"]
