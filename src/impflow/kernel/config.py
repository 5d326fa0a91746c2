"""Configuration for loops and switches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .trace import Trace

Fallthrough = Literal["retest", "always"]


@dataclass(frozen=True)
class LoopConfig:
    """Configuration shared by while_loop, do_while and for_loop.

    Attributes:
        max_iterations: Ceiling on body executions, None for unbounded
        trace: Optional runtime trace receiving loop events
        label: Prefix for trace actions and log records
    """

    max_iterations: int | None = None
    trace: Trace | None = None
    label: str = "loop"

    def __post_init__(self) -> None:
        if self.max_iterations is not None and self.max_iterations <= 0:
            raise ValueError("max_iterations must be positive")


@dataclass(frozen=True)
class SwitchConfig:
    """Configuration for switch.

    Attributes:
        fallthrough: What happens after a case matches without breaking.
            "retest" keeps testing later cases, comparing them against the
            matched case's own match value. "always" runs the handlers of
            later cases without testing them, as C does, passing them the
            original expression.
        trace: Optional runtime trace receiving switch events
        label: Prefix for trace actions and log records
    """

    fallthrough: Fallthrough = "retest"
    trace: Trace | None = None
    label: str = "switch"

    def __post_init__(self) -> None:
        if self.fallthrough not in ("retest", "always"):
            raise ValueError(f"Unknown fallthrough mode: {self.fallthrough!r}")
