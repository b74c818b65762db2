from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date

from ._algorithm import Algorithm
from ._dates import DateInput, to_day
from ._error import ScheduleError
from ._weekday import MONDAY_TO_FRIDAY, Weekday, coerce_weekday

# Read when a configuration is built; pass explicit arguments to override.
DEFAULT_EXCLUDED_DATES: tuple[str, ...] = ()
DEFAULT_ITERATION_LIMIT = 10000

EVERY_MONTH: tuple[int, ...] = tuple(range(1, 13))
EVERY_DAY_OF_MONTH: tuple[int, ...] = tuple(range(1, 32))

PreferredCalendar = dict[int, frozenset[int]]


@dataclass(frozen=True, slots=True)
class ScheduleConfig:
    """A validated schedule.

    Fields are normalised on construction, so weekday names or numbers and
    date strings are accepted here as well as in `build_config`.
    """

    standard_workdays: frozenset[Weekday]
    preferred_workdays: frozenset[Weekday] | None = None
    # excluded from the hash: a dict is unhashable
    preferred_calendar: PreferredCalendar | None = field(default=None, hash=False)
    excluded_dates: frozenset[date] = frozenset()
    algorithm: Algorithm = Algorithm.DEFAULT
    iteration_limit: int = DEFAULT_ITERATION_LIMIT

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "standard_workdays", _weekday_set(self.standard_workdays, "standard workday")
        )
        if self.preferred_workdays is not None:
            object.__setattr__(
                self,
                "preferred_workdays",
                _weekday_set(self.preferred_workdays, "preferred workday"),
            )
        if self.preferred_calendar is not None:
            object.__setattr__(self, "preferred_calendar", _calendar(self.preferred_calendar))
        object.__setattr__(self, "excluded_dates", _excluded(self.excluded_dates))
        object.__setattr__(self, "algorithm", _algorithm(self.algorithm))

        if not self.standard_workdays:
            raise ScheduleError.config("at least one standard workday must be specified")

        if self.preferred_workdays is not None:
            extra = self.preferred_workdays - self.standard_workdays
            if extra:
                names = ", ".join(sorted(str(wd) for wd in extra))
                raise ScheduleError.config(
                    f"preferred workdays must be a subset of the standard workdays (not: {names})"
                )

        if self.preferred_calendar is not None and not any(
            days for month, days in self.preferred_calendar.items() if 1 <= month <= 12
        ):
            raise ScheduleError.config(
                "at least one preferred calendar date must be specified, otherwise pass None"
            )

        if isinstance(self.iteration_limit, bool) or not isinstance(self.iteration_limit, int):
            raise ScheduleError.config(
                f"iteration limit must be an integer, got {self.iteration_limit!r}"
            )
        if self.iteration_limit <= 0:
            raise ScheduleError.config(
                f"iteration limit must be positive, got {self.iteration_limit}"
            )

    # --- Predicates ---

    def is_available(self, d: date) -> bool:
        """A standard workday that is not an excluded date."""
        return d not in self.excluded_dates and Weekday.of(d) in self.standard_workdays

    def is_preferred_workday(self, d: date) -> bool:
        workdays = (
            self.preferred_workdays
            if self.preferred_workdays is not None
            else self.standard_workdays
        )
        return Weekday.of(d) in workdays

    def is_preferred_calendar_date(self, d: date) -> bool:
        if self.preferred_calendar is None:
            return False
        return d.day in self.preferred_calendar.get(d.month, ())

    def is_preferred(self, d: date) -> bool:
        if self.preferred_calendar is not None:
            return self.is_preferred_calendar_date(d)
        if self.preferred_workdays is not None:
            return self.is_preferred_workday(d)
        return Weekday.of(d) in self.standard_workdays

    def has_preferred_days_in(self, month: int) -> bool:
        if self.preferred_calendar is None:
            return True
        return bool(self.preferred_calendar.get(month))


def create_preferred_calendar(
    days_of_month: Iterable[int] = EVERY_DAY_OF_MONTH,
    months_of_year: Iterable[int] = EVERY_MONTH,
) -> dict[int, list[int]]:
    """Map every month in `months_of_year` to the same preferred days."""
    days = list(days_of_month)
    return {month: list(days) for month in months_of_year}


def build_config(
    standard_workdays: Iterable[Weekday | int | str] = MONDAY_TO_FRIDAY,
    preferred_workdays: Iterable[Weekday | int | str] | None = None,
    preferred_calendar: Mapping[int, Iterable[int]] | None = None,
    excluded_dates: Iterable[DateInput] | None = None,
    algorithm: Algorithm | str = Algorithm.DEFAULT,
    iteration_limit: int = DEFAULT_ITERATION_LIMIT,
) -> ScheduleConfig:
    """Build a validated ScheduleConfig from loosely typed arguments.

    Raises:
        ConfigurationError: if any argument is malformed or an invariant is
            violated.
    """
    if excluded_dates is None:
        excluded_dates = DEFAULT_EXCLUDED_DATES

    return ScheduleConfig(
        standard_workdays=standard_workdays,
        preferred_workdays=preferred_workdays,
        preferred_calendar=preferred_calendar,
        excluded_dates=excluded_dates,
        algorithm=algorithm,
        iteration_limit=iteration_limit,
    )


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _weekday_set(values: Iterable[Weekday | int | str], what: str) -> frozenset[Weekday]:
    if isinstance(values, (str, Weekday)):
        values = (values,)
    out: set[Weekday] = set()
    try:
        for v in values:
            wd = coerce_weekday(v)
            if wd is None:
                raise ScheduleError.config(f"invalid {what}: {v!r}")
            out.add(wd)
    except TypeError as e:
        raise ScheduleError.config(f"{what}s must be a collection, got {values!r}") from e
    return frozenset(out)


def _calendar(table: Mapping[int, Iterable[int]]) -> PreferredCalendar:
    if not isinstance(table, Mapping):
        raise ScheduleError.config(f"preferred calendar must be a mapping, got {table!r}")
    out: PreferredCalendar = {}
    for month, days in table.items():
        if not _is_int(month) or not 1 <= month <= 12:
            raise ScheduleError.config(f"invalid month in preferred calendar: {month!r}")
        try:
            day_set = frozenset(days)
        except TypeError as e:
            raise ScheduleError.config(
                f"days of month {month} must be a collection, got {days!r}"
            ) from e
        bad = [d for d in day_set if not _is_int(d) or not 1 <= d <= 31]
        if bad:
            raise ScheduleError.config(
                f"invalid day of month in preferred calendar for month {month}: {bad[0]!r}"
            )
        out[month] = day_set
    return out


def _excluded(values: Iterable[DateInput]) -> frozenset[date]:
    if isinstance(values, (str, date)):
        values = (values,)
    out: set[date] = set()
    try:
        for v in values:
            try:
                out.add(to_day(v))
            except (TypeError, ValueError, OverflowError) as e:
                raise ScheduleError.config(f"invalid excluded date {v!r}: {e}") from e
    except TypeError as e:
        raise ScheduleError.config(f"excluded dates must be a collection, got {values!r}") from e
    return frozenset(out)


def _algorithm(value: Algorithm | str) -> Algorithm:
    if isinstance(value, Algorithm):
        return value
    if isinstance(value, str):
        parsed = Algorithm.try_parse(value)
        if parsed is not None:
            return parsed
    raise ScheduleError.config(f"unknown algorithm: {value!r}")
