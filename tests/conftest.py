from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any

import pytest

from schedule_finder import MONDAY_TO_FRIDAY, ScheduleFinder, create_preferred_calendar

SCENARIOS_PATH = Path(__file__).parent / "fixtures" / "scenarios.json"


def load_scenarios() -> dict[str, Any]:
    with open(SCENARIOS_PATH) as f:
        return json.load(f)


def parse_calendar(table: dict[str, list[int]]) -> dict[int, list[int]]:
    """Turn the fixture form {"all": [5]} / {"3": [1]} into a preferred calendar."""
    if "all" in table:
        return create_preferred_calendar(table["all"])
    return {int(month): days for month, days in table.items()}


def finder_from_case(tc: dict[str, Any]) -> ScheduleFinder:
    calendar = tc.get("preferred_calendar")
    return ScheduleFinder(
        standard_workdays=tc.get("standard_workdays", MONDAY_TO_FRIDAY),
        preferred_workdays=tc.get("preferred_workdays"),
        preferred_calendar=parse_calendar(calendar) if calendar is not None else None,
        excluded_dates=tc.get("excluded_dates", []),
        algorithm=tc["algorithm"],
        iteration_limit=tc.get("iteration_limit", 10000),
    )


def d(s: str) -> date:
    return date.fromisoformat(s)


@pytest.fixture(scope="session")
def scenarios() -> dict[str, Any]:
    return load_scenarios()


@pytest.fixture
def weekdays_finder() -> ScheduleFinder:
    """Monday to Friday, no preferences, no excluded dates."""
    return ScheduleFinder(excluded_dates=[])
