"""Error types for the control-flow combinators."""

from __future__ import annotations

from typing import Any


class ImpflowError(Exception):
    """Base class for errors raised by impflow itself.

    Errors raised inside caller-supplied step functions are never wrapped
    in this type; they propagate unchanged.
    """


class NoResultError(ImpflowError):
    """A switch finished without any branch producing a value.

    Preserves the final comparison value for debugging.
    """

    def __init__(self, message: str, raw_value: Any = None) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"NoResultError({super().__repr__()}, raw_value={self.raw_value!r})"


class IterationLimitError(ImpflowError):
    """A loop tried to run its body more often than its configured ceiling."""

    def __init__(self, label: str, limit: int, state: Any) -> None:
        self.label = label
        self.limit = limit
        self.state = state
        super().__init__(f"{label} exceeded max_iterations={limit}")

    def __repr__(self) -> str:
        return f"IterationLimitError(label={self.label!r}, limit={self.limit}, state={self.state!r})"
