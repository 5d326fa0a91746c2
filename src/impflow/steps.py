"""Step wrappers that lift caller functions onto the carrier states.

Each factory takes a plain caller function and returns a break-aware step
operating on LoopState or SwitchState. Exceptions raised by the caller
function propagate unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from impflow.kernel.config import Fallthrough
from impflow.kernel.state import CaseBlock, LoopState, SwitchState, TransformedCaseBlock

S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")

Body = Callable[[S], tuple[S, bool]]
Condition = Callable[[S], bool]
LoopStep = Callable[[LoopState[S]], LoopState[S]]
SwitchStep = Callable[[SwitchState[A, B]], SwitchState[A, B]]


def make_case_step(case: CaseBlock[A, B], fallthrough: Fallthrough = "retest") -> TransformedCaseBlock[A, B]:
    """Lift a case handler onto SwitchState.

    The handler receives the current comparison value. Its result replaces
    the recorded one and its break flag is OR-ed into the running flag. In
    "retest" mode the case's match value becomes the comparison basis for
    the remaining cases; in "always" mode the basis is left untouched.
    """
    def step(state: SwitchState[A, B]) -> SwitchState[A, B]:
        result, broken = case.handler(state.comparison_value)
        basis = case.match if fallthrough == "retest" else state.comparison_value
        return state.with_match(basis, result, broken)

    return TransformedCaseBlock(match=case.match, step=step)


def make_default_step(default: Callable[[A], B]) -> SwitchStep[A, B]:
    """Lift the default branch onto SwitchState. The default always breaks."""
    def step(state: SwitchState[A, B]) -> SwitchState[A, B]:
        return state.with_result(default(state.comparison_value), broken=True)

    return step


def make_body_step(body: Body[S]) -> LoopStep[S]:
    """Lift a body or increment function onto LoopState.

    Used for while and do-while bodies as well as for-loop bodies and
    increments.
    """
    def step(state: LoopState[S]) -> LoopState[S]:
        new_state, broken = body(state.state)
        return state.advance(new_state, broken)

    return step


def make_condition_step(condition: Condition[S]) -> Callable[[LoopState[S]], bool]:
    """Lift a pre-condition onto LoopState: true while it holds and no break occurred."""
    def step(state: LoopState[S]) -> bool:
        return condition(state.state) and not state.broken

    return step
