"""Iterative drivers for the combinators.

Every driver is a plain loop over immutable carrier states, so the number
of iterations never bounds the call stack depth.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from types import TracebackType
from typing import Any, TypeVar

from impflow.kernel.config import LoopConfig, SwitchConfig
from impflow.kernel.errors import IterationLimitError
from impflow.kernel.state import LoopState, SwitchState, TransformedCaseBlock

from .steps import LoopStep, SwitchStep

logger = logging.getLogger(__name__)

S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")


class _LoopRun:
    """Trace, logging and iteration-limit bookkeeping for one loop invocation."""

    def __init__(self, kind: str, config: LoopConfig) -> None:
        self.kind = kind
        self.label = config.label
        self.max_iterations = config.max_iterations
        self.trace = config.trace
        self.iterations = 0
        self._begin_id: int | None = None

    def __enter__(self) -> _LoopRun:
        if self.trace is not None:
            self._begin_id = self.trace.record(f"{self.label}.begin", info={"kind": self.kind})
            self.trace.push(self._begin_id)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self.trace is not None and self._begin_id is not None:
            self.trace.pop()

    def enter_body(self, current: LoopState[Any]) -> None:
        """Account for one more body execution, enforcing max_iterations."""
        if self.max_iterations is not None and self.iterations >= self.max_iterations:
            raise IterationLimitError(self.label, self.max_iterations, current.state)
        self.iterations += 1

    def observe(self, before: LoopState[S], after: LoopState[S], step: str = "body") -> LoopState[S]:
        if after.broken and not before.broken:
            logger.debug("%s: break in %s at iteration %d", self.label, step, self.iterations)
            if self.trace is not None:
                self.trace.record(
                    f"{self.label}.break",
                    info={"iteration": self.iterations, "step": step},
                )
        return after

    def end_body(self, current: LoopState[Any]) -> None:
        if self.trace is not None:
            self.trace.record(
                f"{self.label}.iteration",
                info={"index": self.iterations - 1, "broken": current.broken},
            )

    def finish(self, current: LoopState[Any]) -> None:
        logger.debug(
            "%s: %s finished after %d iterations (broken=%s)",
            self.label,
            self.kind,
            self.iterations,
            current.broken,
        )
        if self.trace is not None:
            self.trace.record(
                f"{self.label}.end",
                info={"iterations": self.iterations, "broken": current.broken},
            )


def run_while(
    initial: LoopState[S],
    condition: Callable[[S], bool],
    body: LoopStep[S],
    config: LoopConfig | None = None,
) -> LoopState[S]:
    """Run body while no break occurred and condition holds.

    The break flag is checked before the condition, so a broken loop never
    evaluates the condition again.
    """
    current = initial
    with _LoopRun("while", config or LoopConfig()) as run:
        while not current.broken and condition(current.state):
            run.enter_body(current)
            current = run.observe(current, body(current))
            run.end_body(current)
        run.finish(current)
    return current


def run_do_while(
    initial: LoopState[S],
    body: LoopStep[S],
    condition: Callable[[S], bool],
    config: LoopConfig | None = None,
) -> LoopState[S]:
    """Run body once, then again while condition holds on the new state and no break occurred."""
    current = initial
    with _LoopRun("do_while", config or LoopConfig()) as run:
        while True:
            run.enter_body(current)
            current = run.observe(current, body(current))
            run.end_body(current)
            if not (condition(current.state) and not current.broken):
                break
        run.finish(current)
    return current


def run_for(
    initial: LoopState[S],
    condition: Callable[[LoopState[S]], bool],
    body: LoopStep[S],
    increment: LoopStep[S],
    config: LoopConfig | None = None,
) -> LoopState[S]:
    """Run body then increment while the lifted condition holds.

    The increment runs even when the body just signalled break; the break
    only takes effect at the next condition check.
    """
    current = initial
    with _LoopRun("for", config or LoopConfig()) as run:
        while condition(current):
            run.enter_body(current)
            current = run.observe(current, body(current), "body")
            current = run.observe(current, increment(current), "increment")
            run.end_body(current)
        run.finish(current)
    return current


def run_switch(
    initial: SwitchState[A, B],
    cases: Sequence[TransformedCaseBlock[A, B]],
    default: SwitchStep[A, B],
    config: SwitchConfig | None = None,
) -> SwitchState[A, B]:
    """Test cases in order until one breaks, falling back to the default.

    In "always" fallthrough mode, once a case has matched the remaining
    handlers run without being tested.
    """
    config = config or SwitchConfig()
    trace = config.trace
    untested = config.fallthrough == "always"

    begin_id = None
    if trace is not None:
        begin_id = trace.record(f"{config.label}.begin", info={"cases": len(cases)})
        trace.push(begin_id)

    current = initial
    index = 0
    used_default = False
    try:
        while not current.broken:
            if index >= len(cases):
                if trace is not None:
                    trace.record(f"{config.label}.default", info={"comparison_value": current.comparison_value})
                current = default(current)
                used_default = True
                break

            case = cases[index]
            index += 1
            matched = (untested and current.matched) or case.match == current.comparison_value
            if trace is not None:
                trace.record(f"{config.label}.case", info={"match": case.match, "matched": matched})
            if matched:
                current = case.step(current)

        logger.debug(
            "%s: resolved after %d of %d cases (default=%s)",
            config.label,
            index,
            len(cases),
            used_default,
        )
        if trace is not None:
            trace.record(f"{config.label}.end", info={"tested": index, "default": used_default})
    finally:
        if begin_id is not None and trace is not None:
            trace.pop()
    return current
