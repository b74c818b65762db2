from __future__ import annotations

from typing import Literal

ScheduleErrorKind = Literal["config", "iteration"]


class ScheduleError(Exception):
    kind: ScheduleErrorKind
    description: str | None

    def __init__(
        self,
        kind: ScheduleErrorKind,
        message: str,
        description: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.description = description

    @classmethod
    def config(cls, message: str) -> ConfigurationError:
        return ConfigurationError(message)

    @classmethod
    def iteration(cls, message: str, description: str | None = None) -> IterationLimitExceeded:
        return IterationLimitExceeded(message, description)

    def display_rich(self) -> str:
        if self.kind == "iteration" and self.description:
            return f"error: {self}\n  schedule: {self.description}"
        return f"error: {self}"


class ConfigurationError(ScheduleError):
    """The schedule configuration violates one of its construction invariants."""

    def __init__(self, message: str) -> None:
        super().__init__("config", message)


class IterationLimitExceeded(ScheduleError):
    """The search budget ran out before a qualifying date was found."""

    def __init__(self, message: str, description: str | None = None) -> None:
        super().__init__("iteration", message, description)
