from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from datetime import date

from ._algorithm import Algorithm
from ._config import (
    DEFAULT_EXCLUDED_DATES,
    DEFAULT_ITERATION_LIMIT,
    EVERY_DAY_OF_MONTH,
    EVERY_MONTH,
    PreferredCalendar,
    ScheduleConfig,
    build_config,
    create_preferred_calendar,
)
from ._dates import DateInput, format_day, to_day
from ._display import display
from ._error import (
    ConfigurationError,
    IterationLimitExceeded,
    ScheduleError,
    ScheduleErrorKind,
)
from ._search import find_next
from ._timer import YearTimer
from ._weekday import (
    EVERY_DAY_OF_WEEK,
    MONDAY_TO_FRIDAY,
    MONDAY_TO_SATURDAY,
    WEEKEND,
    Weekday,
)


class ScheduleFinder:
    """Finds the most appropriate date for a recurring business schedule.

    For example, a business open four days a week that ships orders on the
    5th, 15th and 25th of every month, preferring certain weekdays where it
    can, uses a finder to pick each shipping date around public holidays.
    """

    _config: ScheduleConfig

    def __init__(
        self,
        standard_workdays: Iterable[Weekday | int | str] = MONDAY_TO_FRIDAY,
        preferred_workdays: Iterable[Weekday | int | str] | None = None,
        preferred_calendar: Mapping[int, Iterable[int]] | None = None,
        excluded_dates: Iterable[DateInput] | None = None,
        algorithm: Algorithm | str = Algorithm.DEFAULT,
        iteration_limit: int = DEFAULT_ITERATION_LIMIT,
    ) -> None:
        self._config = build_config(
            standard_workdays=standard_workdays,
            preferred_workdays=preferred_workdays,
            preferred_calendar=preferred_calendar,
            excluded_dates=excluded_dates,
            algorithm=algorithm,
            iteration_limit=iteration_limit,
        )

    @classmethod
    def from_config(cls, config: ScheduleConfig) -> ScheduleFinder:
        finder = cls.__new__(cls)
        finder._config = config
        return finder

    @staticmethod
    def create_preferred_calendar(
        days_of_month: Iterable[int] = EVERY_DAY_OF_MONTH,
        months_of_year: Iterable[int] = EVERY_MONTH,
    ) -> dict[int, list[int]]:
        return create_preferred_calendar(days_of_month, months_of_year)

    def next(self, from_: DateInput | None = None, earliest: DateInput | None = None) -> date:
        """Finds the next scheduled date on or after `from_` (default: today).

        `earliest` may be before `from_` to give the "closest" algorithms room
        to pick a date before the reference date.

        Raises:
            IterationLimitExceeded: if no date is found within the iteration
                limit, which usually means the schedule cannot be satisfied.
        """
        return find_next(self._config, from_, earliest)

    def next_as_string(
        self, from_: DateInput | None = None, earliest: DateInput | None = None
    ) -> str:
        """Same as `next`, formatted as "YYYY-MM-DD"."""
        return format_day(self.next(from_, earliest))

    def is_available(self, value: DateInput) -> bool:
        return self._config.is_available(to_day(value))

    def is_preferred(self, value: DateInput) -> bool:
        return self._config.is_preferred(to_day(value))

    def is_preferred_workday(self, value: DateInput) -> bool:
        return self._config.is_preferred_workday(to_day(value))

    def is_preferred_calendar_date(self, value: DateInput) -> bool:
        return self._config.is_preferred_calendar_date(to_day(value))

    @property
    def algorithm(self) -> Algorithm:
        return self._config.algorithm

    @algorithm.setter
    def algorithm(self, value: Algorithm | str) -> None:
        # Not safe to change while another thread is inside next() on this finder.
        if isinstance(value, str):
            parsed = Algorithm.try_parse(value)
            if parsed is None:
                raise ScheduleError.config(f"unknown algorithm: {value!r}")
            value = parsed
        if not isinstance(value, Algorithm):
            raise ScheduleError.config(f"unknown algorithm: {value!r}")
        self._config = dataclasses.replace(self._config, algorithm=value)

    @property
    def config(self) -> ScheduleConfig:
        return self._config

    @property
    def excluded_dates(self) -> frozenset[date]:
        return self._config.excluded_dates

    def __str__(self) -> str:
        return display(self._config)

    def __repr__(self) -> str:
        return f"ScheduleFinder({display(self._config)!r})"


__all__ = [
    "ScheduleFinder",
    "ScheduleConfig",
    "build_config",
    "create_preferred_calendar",
    "PreferredCalendar",
    "Algorithm",
    "Weekday",
    "MONDAY_TO_FRIDAY",
    "MONDAY_TO_SATURDAY",
    "WEEKEND",
    "EVERY_DAY_OF_WEEK",
    "EVERY_MONTH",
    "EVERY_DAY_OF_MONTH",
    "DEFAULT_EXCLUDED_DATES",
    "DEFAULT_ITERATION_LIMIT",
    "YearTimer",
    "ScheduleError",
    "ScheduleErrorKind",
    "ConfigurationError",
    "IterationLimitExceeded",
    "DateInput",
    "to_day",
    "format_day",
    "find_next",
]
