from __future__ import annotations

from datetime import date

from ._dates import DateInput, add_years, format_day, to_day
from ._error import ScheduleError


class YearTimer:
    """Anniversaries of an anchor date every `period` years.

    ``YearTimer("2020-02-15", 2)`` fires on 15 February of 2018, 2020, 2022 and
    so on, in both directions from the anchor. An anchor of 29 February falls
    on 28 February in non-leap years.
    """

    _anchor: date
    _period: int

    def __init__(self, anchor: DateInput, period: int = 1) -> None:
        if isinstance(period, bool) or not isinstance(period, int) or period <= 0:
            raise ScheduleError.config(f"period must be a positive number of years, got {period!r}")
        try:
            self._anchor = to_day(anchor)
        except (TypeError, ValueError, OverflowError) as e:
            raise ScheduleError.config(f"invalid anchor date {anchor!r}: {e}") from e
        self._period = period

    @property
    def anchor(self) -> date:
        return self._anchor

    @property
    def period(self) -> int:
        return self._period

    def _nth(self, n: int) -> date:
        return add_years(self._anchor, n * self._period)

    def is_schedule_date(self, value: DateInput) -> bool:
        d = to_day(value)
        years = d.year - self._anchor.year
        if years % self._period:
            return False
        return d == self._nth(years // self._period)

    def next_date(self, offset: int = 0, from_: DateInput | None = None) -> date:
        """The anniversary `offset` periods after the first one on or after `from_`."""
        d = to_day(from_)
        # floor division keeps n at or below the target year, so one step suffices
        n = (d.year - self._anchor.year) // self._period
        if self._nth(n) < d:
            n += 1
        return self._nth(n + offset)

    def next_date_as_string(self, offset: int = 0, from_: DateInput | None = None) -> str:
        return format_day(self.next_date(offset, from_))

    def __repr__(self) -> str:
        return f"YearTimer({format_day(self._anchor)!r}, {self._period})"
