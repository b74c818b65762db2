from __future__ import annotations

from enum import Enum


class Algorithm(Enum):
    """Search strategy used when the reference date is not directly usable.

    "Closest" strategies look backward from the cursor down to the earliest
    allowed date before falling back to a forward search. "Next" strategies
    only look forward.
    """

    CLOSEST_PREFERRED_THEN_CLOSEST_STANDARD_WORKDAY = (
        "closest-preferred-then-closest-standard-workday"
    )
    CLOSEST_PREFERRED_WORKDAY = "closest-preferred-workday"
    CLOSEST_STANDARD_WORKDAY = "closest-standard-workday"
    NEXT_PREFERRED_THEN_CLOSEST_STANDARD_WORKDAY = "next-preferred-then-closest-standard-workday"
    NEXT_PREFERRED_WORKDAY = "next-preferred-workday"
    NEXT_STANDARD_WORKDAY = "next-standard-workday"
    ONLY_PREFERRED_DATES = "only-preferred-dates"

    # Enum alias: Algorithm.DEFAULT is Algorithm.NEXT_PREFERRED_THEN_CLOSEST_STANDARD_WORKDAY
    DEFAULT = "next-preferred-then-closest-standard-workday"

    @classmethod
    def try_parse(cls, s: str) -> Algorithm | None:
        key = s.strip().lower().replace("_", "-")
        if key == "default":
            return cls.DEFAULT
        try:
            return cls(key)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value
