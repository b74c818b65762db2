from __future__ import annotations

from collections.abc import Iterable

from ._config import EVERY_DAY_OF_MONTH, EVERY_MONTH, ScheduleConfig
from ._weekday import MONDAY_TO_FRIDAY, MONDAY_TO_SATURDAY, WEEKEND, Weekday

_MONTH_NAMES = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")

_NAMED_WEEKS: dict[frozenset[Weekday], str] = {
    frozenset(MONDAY_TO_FRIDAY): "weekdays",
    frozenset(MONDAY_TO_SATURDAY): "mon-sat",
    frozenset(WEEKEND): "weekends",
    frozenset(Weekday): "every day",
}


def display(config: ScheduleConfig) -> str:
    out = f"work {_display_weekdays(config.standard_workdays)}"

    if config.preferred_workdays is not None:
        out += f", prefer {_display_weekdays(config.preferred_workdays)}"

    if config.preferred_calendar is not None:
        out += f", on {_display_calendar(config.preferred_calendar)}"

    if config.excluded_dates:
        n = len(config.excluded_dates)
        out += f", except {n} date" + ("" if n == 1 else "s")

    out += f" ({config.algorithm})"
    return out


def _display_weekdays(days: frozenset[Weekday]) -> str:
    named = _NAMED_WEEKS.get(days)
    if named is not None:
        return named
    # Monday first reads better than the Sunday=0 ordinal order
    ordered = sorted(days, key=lambda wd: (wd.number + 6) % 7)
    return ", ".join(wd.short for wd in ordered)


def _display_calendar(table: dict[int, frozenset[int]]) -> str:
    # Group months sharing the same day set: "day 5, 15 of every month"
    groups: dict[frozenset[int], list[int]] = {}
    for month in sorted(table):
        if table[month]:
            groups.setdefault(table[month], []).append(month)

    parts: list[str] = []
    for days, months in groups.items():
        parts.append(f"{_display_days(days)} of {_display_months(months)}")
    return "; ".join(parts)


def _display_days(days: Iterable[int]) -> str:
    ordered = sorted(days)
    if tuple(ordered) == EVERY_DAY_OF_MONTH:
        return "every day"
    return "day " + ", ".join(str(d) for d in ordered)


def _display_months(months: list[int]) -> str:
    if tuple(months) == EVERY_MONTH:
        return "every month"
    return ", ".join(_MONTH_NAMES[m - 1] for m in months)
