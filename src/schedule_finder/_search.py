from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import Literal

from ._algorithm import Algorithm
from ._config import ScheduleConfig
from ._dates import ONE_DAY, DateInput, first_of_next_month, to_day
from ._display import display
from ._error import ScheduleError

log = logging.getLogger(__name__)

# =============================================================================
# Iteration Budget
# =============================================================================
# Every probe step spends one unit of a single budget shared by the
# orchestrator loop, the preferred-date stepper and every dispatcher state
# entered during one `find_next` call. The budget starts at
# `config.iteration_limit` (10000 by default) and is never refilled.
#
# A step that cannot spend a unit stops immediately and reports failure, so
# no state can run past the budget; the orchestrator then raises
# IterationLimitExceeded.
# =============================================================================

# =============================================================================
# Strategy Fallbacks
# =============================================================================
# A dispatcher state either settles the search (True/False) or names the
# state to continue with. The fallback graph is acyclic:
#
#   CLOSEST_PREFERRED_THEN_CLOSEST_STANDARD_WORKDAY
#       -> NEXT_PREFERRED_THEN_CLOSEST_STANDARD_WORKDAY
#       -> CLOSEST_STANDARD_WORKDAY
#       -> NEXT_STANDARD_WORKDAY
#   CLOSEST_PREFERRED_WORKDAY -> NEXT_PREFERRED_WORKDAY
#   ONLY_PREFERRED_DATES -> NEXT_STANDARD_WORKDAY
#
# so one dispatch visits at most four states.
#
# Backward fallbacks restart one day after the position the backward probe
# started from and raise the lower bound to that day, so a later backward
# probe never revisits dates already rejected.
# =============================================================================


@dataclass(slots=True)
class SearchState:
    cursor: date
    earliest: date
    remaining: int

    def spend(self) -> bool:
        if self.remaining <= 0:
            return False
        self.remaining -= 1
        return True

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0


Outcome = bool | Algorithm
ProbeResult = Literal["found", "bounded", "exhausted"]


# --- Probes ---


def _probe_forward(state: SearchState, accept: Callable[[date], bool]) -> ProbeResult:
    """Walk the cursor forward, starting at the cursor itself."""
    while state.spend():
        if accept(state.cursor):
            return "found"
        state.cursor += ONE_DAY
    return "exhausted"


def _probe_backward(state: SearchState, accept: Callable[[date], bool]) -> ProbeResult:
    """Walk the cursor backward down to `state.earliest`, starting at the cursor.

    On any result other than "found" the cursor is restored.
    """
    origin = state.cursor
    while state.spend():
        if state.cursor < state.earliest:
            state.cursor = origin
            return "bounded"
        if accept(state.cursor):
            return "found"
        state.cursor -= ONE_DAY
    state.cursor = origin
    return "exhausted"


def _restart_after(state: SearchState, origin: date) -> None:
    state.cursor = origin + ONE_DAY
    state.earliest = state.cursor


# --- Dispatcher states ---


def _closest_preferred_then_closest_standard(config: ScheduleConfig, state: SearchState) -> Outcome:
    origin = state.cursor

    def preferred_and_available(d: date) -> bool:
        return config.is_preferred_workday(d) and config.is_available(d)

    if _probe_backward(state, preferred_and_available) == "found":
        return True
    if _probe_backward(state, config.is_available) == "found":
        return True
    if state.exhausted:
        return False

    _restart_after(state, origin)
    return Algorithm.NEXT_PREFERRED_THEN_CLOSEST_STANDARD_WORKDAY


def _closest_preferred(config: ScheduleConfig, state: SearchState) -> Outcome:
    origin = state.cursor

    def preferred_and_available(d: date) -> bool:
        return config.is_preferred_workday(d) and config.is_available(d)

    if _probe_backward(state, preferred_and_available) == "found":
        return True
    if state.exhausted:
        return False

    _restart_after(state, origin)
    return Algorithm.NEXT_PREFERRED_WORKDAY


def _closest_standard(config: ScheduleConfig, state: SearchState) -> Outcome:
    origin = state.cursor
    match _probe_backward(state, config.is_available):
        case "found":
            return True
        case "bounded":
            _restart_after(state, origin)
            return Algorithm.NEXT_STANDARD_WORKDAY
        case _:
            return False


def _next_preferred_then_closest_standard(config: ScheduleConfig, state: SearchState) -> Outcome:
    if _probe_forward(state, config.is_preferred_workday) != "found":
        return False
    if config.is_available(state.cursor):
        return True
    # anchor a backward availability search on the preferred day just reached
    return Algorithm.CLOSEST_STANDARD_WORKDAY


def _next_preferred(config: ScheduleConfig, state: SearchState) -> Outcome:
    def preferred_and_available(d: date) -> bool:
        return config.is_preferred_workday(d) and config.is_available(d)

    return _probe_forward(state, preferred_and_available) == "found"


def _next_standard(config: ScheduleConfig, state: SearchState) -> Outcome:
    return _probe_forward(state, config.is_available) == "found"


def _only_preferred(config: ScheduleConfig, state: SearchState) -> Outcome:
    if config.preferred_calendar is not None:
        preferred = config.is_preferred_calendar_date
    elif config.preferred_workdays is not None:
        preferred = config.is_preferred_workday
    else:
        return Algorithm.NEXT_STANDARD_WORKDAY

    def preferred_and_available(d: date) -> bool:
        return preferred(d) and config.is_available(d)

    return _probe_forward(state, preferred_and_available) == "found"


_STATES: dict[Algorithm, Callable[[ScheduleConfig, SearchState], Outcome]] = {
    Algorithm.CLOSEST_PREFERRED_THEN_CLOSEST_STANDARD_WORKDAY: (
        _closest_preferred_then_closest_standard
    ),
    Algorithm.CLOSEST_PREFERRED_WORKDAY: _closest_preferred,
    Algorithm.CLOSEST_STANDARD_WORKDAY: _closest_standard,
    Algorithm.NEXT_PREFERRED_THEN_CLOSEST_STANDARD_WORKDAY: _next_preferred_then_closest_standard,
    Algorithm.NEXT_PREFERRED_WORKDAY: _next_preferred,
    Algorithm.NEXT_STANDARD_WORKDAY: _next_standard,
    Algorithm.ONLY_PREFERRED_DATES: _only_preferred,
}


def dispatch(config: ScheduleConfig, state: SearchState, algorithm: Algorithm) -> bool:
    """Run `algorithm` from the cursor, following its fallbacks.

    Returns True with the cursor on the chosen date, or False when the
    strategy gives up (in practice only when the budget is spent).
    """
    current = algorithm
    while not state.exhausted:
        outcome = _STATES[current](config, state)
        if isinstance(outcome, bool):
            return outcome
        log.debug(
            "%s fell back to %s at %s (earliest %s)",
            current,
            outcome,
            state.cursor,
            state.earliest,
        )
        current = outcome
    return False


# --- Preferred-date stepper ---


def advance_to_preferred(config: ScheduleConfig, state: SearchState) -> bool:
    """Move the cursor forward to the next preferred date.

    Months without any preferred calendar day are skipped in a single step.
    """
    while state.spend():
        if config.has_preferred_days_in(state.cursor.month):
            state.cursor += ONE_DAY
        else:
            state.cursor = first_of_next_month(state.cursor)
        if config.is_preferred(state.cursor):
            return True
    return False


# --- Public API ---


def find_next(
    config: ScheduleConfig,
    from_: DateInput | None = None,
    earliest: DateInput | None = None,
) -> date:
    start = to_day(from_)
    lower = to_day(earliest) if earliest is not None else start
    # nothing before the lower bound may be returned, whatever the strategy
    start = max(start, lower)

    state = SearchState(cursor=start, earliest=lower, remaining=config.iteration_limit)

    if not config.is_preferred(state.cursor):
        advance_to_preferred(config, state)

    while state.spend():
        if config.is_available(state.cursor) and config.is_preferred(state.cursor):
            log.debug("next date from %s: %s", start, state.cursor)
            return state.cursor

        if dispatch(config, state, config.algorithm):
            log.debug("next date from %s: %s (%s)", start, state.cursor, config.algorithm)
            return state.cursor

        advance_to_preferred(config, state)

    description = display(config)
    log.warning(
        "iteration limit of %d reached searching from %s for schedule %s",
        config.iteration_limit,
        start,
        description,
    )
    raise ScheduleError.iteration(
        "the iteration limit was reached while finding the next scheduled date; "
        "please check the schedule configuration",
        description,
    )
