"""Exception hierarchy for the streak pipeline."""

from __future__ import annotations


class StreakLabError(Exception):
    """Base class for every error raised by the pipeline."""


class PersistenceError(StreakLabError):
    """A snapshot sink could not write a stage artifact."""

    def __init__(self, name: str, cause: BaseException | None = None) -> None:
        self.name = name
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to persist stage '{name}'{detail}")


class LedgerStateError(StreakLabError):
    """generate() was handed a ledger that still holds records."""


class GradientStopError(StreakLabError, ValueError):
    """Gradient color stop outside [0, 1] or not in increasing order."""


class CanvasStateError(StreakLabError):
    """restore() called without a matching save()."""
