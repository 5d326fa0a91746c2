"""Public combinators: switch, while_loop, do_while, for_loop.

Each combinator builds a fresh carrier state, lifts the caller's functions
with the step wrappers, runs the matching driver and unwraps the final
carrier. Nothing is retained between calls.

Example:
    >>> def body(n):
    ...     return n + 1, False
    >>> while_loop(0, lambda n: n < 3, body)
    3
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from impflow.kernel.config import LoopConfig, SwitchConfig
from impflow.kernel.errors import NoResultError
from impflow.kernel.result import Result
from impflow.kernel.state import CaseBlock, LoopState, SwitchState

from .drivers import run_do_while, run_for, run_switch, run_while
from .steps import (
    Body,
    Condition,
    make_body_step,
    make_case_step,
    make_condition_step,
    make_default_step,
)

S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")


def switch(
    expression: A,
    cases: Sequence[CaseBlock[A, B]],
    default: Callable[[A], B],
    *,
    config: SwitchConfig | None = None,
) -> Result[B]:
    """Evaluate cases in order against expression.

    Returns the result of the first matching case whose handler signals
    break, or the default branch's result when no case breaks.

    Args:
        expression: The value under test
        cases: Ordered case blocks; each handler returns (result, break)
        default: Called with the current comparison value when cases run out
        config: Fallthrough mode and tracing, defaults to SwitchConfig()

    Returns:
        Result.ok(value), or a Result carrying NoResultError if no branch
        produced a value
    """
    if not callable(default):
        raise TypeError("switch requires a callable default branch")
    config = config or SwitchConfig()
    transformed = [make_case_step(case, config.fallthrough) for case in cases]
    final = run_switch(
        SwitchState(comparison_value=expression),
        transformed,
        make_default_step(default),
        config,
    )
    return switch_result(final)


def switch_result(state: SwitchState[A, B]) -> Result[B]:
    """Unwrap a final SwitchState into a Result."""
    if not state.has_result:
        return Result.error(
            NoResultError(
                f"switch produced no result for {state.comparison_value!r}",
                raw_value=state.comparison_value,
            )
        )
    return Result.ok(state.result)  # type: ignore[arg-type]


def while_loop(
    state: S,
    condition: Condition[S],
    body: Body[S],
    *,
    config: LoopConfig | None = None,
) -> S:
    """Run body while condition holds and no break was signalled.

    Returns the final state. The body is never called if condition is false
    on the initial state.
    """
    final = run_while(LoopState(state), condition, make_body_step(body), config)
    return final.state


def do_while(
    state: S,
    body: Body[S],
    condition: Condition[S],
    *,
    config: LoopConfig | None = None,
) -> S:
    """Run body at least once, repeating while condition holds on the new state.

    Returns the state produced by the last body run, including the run
    after which condition became false.
    """
    final = run_do_while(LoopState(state), make_body_step(body), condition, config)
    return final.state


def for_loop(
    state: S,
    condition: Condition[S],
    body: Body[S],
    increment: Body[S],
    *,
    config: LoopConfig | None = None,
) -> S:
    """C-style for loop over an explicit state.

    Each pass checks condition and the break flag, runs body, then runs
    increment unconditionally. A break signalled by body therefore still
    sees one increment before the loop stops.
    """
    final = run_for(
        LoopState(state),
        make_condition_step(condition),
        make_body_step(body),
        make_body_step(increment),
        config,
    )
    return final.state
