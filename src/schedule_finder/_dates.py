from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from dateutil import parser as _date_parser
from dateutil.relativedelta import relativedelta

DateInput = date | datetime | str | int

ONE_DAY = timedelta(days=1)

_RELATIVE_WORDS: dict[str, int] = {
    "today": 0,
    "now": 0,
    "tomorrow": 1,
    "yesterday": -1,
}


def to_day(value: DateInput | None = None) -> date:
    """Normalise a date-like value to a calendar day.

    Accepts a ``date``/``datetime`` (time of day is dropped), ISO or loosely
    formatted text, the words ``today``/``tomorrow``/``yesterday``, or an
    integer Unix timestamp (read in UTC). ``None`` means today.
    """
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bool):
        raise TypeError(f"expected a date-like value, got {value!r}")
    if isinstance(value, int):
        return datetime.fromtimestamp(value, tz=timezone.utc).date()
    if isinstance(value, str):
        return _parse_day(value)
    raise TypeError(f"expected a date-like value, got {type(value).__name__}")


def _parse_day(text: str) -> date:
    s = text.strip()
    offset = _RELATIVE_WORDS.get(s.lower())
    if offset is not None:
        return date.today() + timedelta(days=offset)
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    # ParserError is a ValueError; let it propagate to the caller
    return _date_parser.parse(s).date()


def first_of_next_month(d: date) -> date:
    return d.replace(day=1) + relativedelta(months=1)


def add_years(d: date, years: int) -> date:
    """Shift by whole years, clamping Feb 29 to Feb 28 in non-leap years."""
    return d + relativedelta(years=years)


def format_day(d: date) -> str:
    return d.isoformat()
