from __future__ import annotations

from datetime import date
from enum import Enum


class Weekday(Enum):
    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"

    @property
    def number(self) -> int:
        """Day ordinal: Sunday=0, Monday=1, ..., Saturday=6."""
        return _WEEKDAY_NUMBERS[self]

    @property
    def short(self) -> str:
        return self.value[:3]

    @classmethod
    def from_number(cls, n: int) -> Weekday | None:
        return _NUMBER_TO_WEEKDAY.get(n)

    @classmethod
    def try_parse(cls, s: str) -> Weekday | None:
        return _WEEKDAY_PARSE.get(s.strip().lower())

    @classmethod
    def of(cls, d: date) -> Weekday:
        # date.weekday() is Monday=0
        return _NUMBER_TO_WEEKDAY[(d.weekday() + 1) % 7]

    def __str__(self) -> str:
        return self.value


_WEEKDAY_NUMBERS = {
    Weekday.SUNDAY: 0,
    Weekday.MONDAY: 1,
    Weekday.TUESDAY: 2,
    Weekday.WEDNESDAY: 3,
    Weekday.THURSDAY: 4,
    Weekday.FRIDAY: 5,
    Weekday.SATURDAY: 6,
}

_NUMBER_TO_WEEKDAY = {v: k for k, v in _WEEKDAY_NUMBERS.items()}

_WEEKDAY_PARSE: dict[str, Weekday] = {
    "monday": Weekday.MONDAY,
    "mon": Weekday.MONDAY,
    "tuesday": Weekday.TUESDAY,
    "tue": Weekday.TUESDAY,
    "wednesday": Weekday.WEDNESDAY,
    "wed": Weekday.WEDNESDAY,
    "thursday": Weekday.THURSDAY,
    "thu": Weekday.THURSDAY,
    "friday": Weekday.FRIDAY,
    "fri": Weekday.FRIDAY,
    "saturday": Weekday.SATURDAY,
    "sat": Weekday.SATURDAY,
    "sunday": Weekday.SUNDAY,
    "sun": Weekday.SUNDAY,
}


# --- Weekly presets ---

MONDAY_TO_FRIDAY: tuple[Weekday, ...] = (
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
)

MONDAY_TO_SATURDAY: tuple[Weekday, ...] = (*MONDAY_TO_FRIDAY, Weekday.SATURDAY)

WEEKEND: tuple[Weekday, ...] = (Weekday.SATURDAY, Weekday.SUNDAY)

EVERY_DAY_OF_WEEK: tuple[Weekday, ...] = tuple(Weekday)


def coerce_weekday(value: Weekday | int | str) -> Weekday | None:
    """Accept a Weekday, a Sunday=0 ordinal or a day name."""
    if isinstance(value, Weekday):
        return value
    # bool is an int subclass; True/False are never weekdays
    if isinstance(value, int) and not isinstance(value, bool):
        return Weekday.from_number(value)
    if isinstance(value, str):
        return Weekday.try_parse(value)
    return None
