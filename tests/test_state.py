"""Tests for carrier states, Result and replace_state."""

from dataclasses import FrozenInstanceError

import pytest
from pydantic import BaseModel

from impflow import Control, LoopState, Result, SwitchState, replace_state, while_loop
from impflow.kernel.state import NO_RESULT
from fakes import Factorial


def test_loop_state_break_is_sticky() -> None:
    start = LoopState(0)
    broken = start.advance(1, True)
    later = broken.advance(2, False)

    assert start.broken is False
    assert broken.broken is True
    assert later == LoopState(2, broken=True)


def test_loop_state_is_immutable() -> None:
    state = LoopState(0)
    with pytest.raises(FrozenInstanceError):
        state.broken = True  # type: ignore[misc]


def test_switch_state_starts_without_result() -> None:
    state = SwitchState(comparison_value=4)
    assert state.result is NO_RESULT
    assert not state.has_result
    assert not state.matched


def test_switch_state_result_never_reset() -> None:
    state = SwitchState(comparison_value=4).with_match(4, "four", False)
    assert state.has_result
    assert state.matched
    assert state.with_comparison_value(5).result == "four"


def test_result_helpers() -> None:
    assert Result.ok(3).unwrap() == 3
    assert Result.ok(3).control == Control.Ok()
    failed = Result.error("no branch")
    assert failed.value_or(0) == 0
    with pytest.raises(Exception, match="no branch"):
        failed.unwrap()


def test_replace_state_dataclass() -> None:
    s = Factorial(n=3)
    updated = replace_state(s, i=2, acc=5)
    assert updated == Factorial(n=3, i=2, acc=5)
    assert s == Factorial(n=3)


class Counter(BaseModel):
    count: int = 0
    total: int = 0


def test_replace_state_pydantic_model() -> None:
    s = Counter()
    updated = replace_state(s, count=1)
    assert updated == Counter(count=1)
    assert s.count == 0


def test_pydantic_state_through_loop() -> None:
    def body(s: Counter) -> tuple[Counter, bool]:
        return replace_state(s, count=s.count + 1, total=s.total + s.count), False

    assert while_loop(Counter(), lambda s: s.count < 4, body) == Counter(count=4, total=6)


@pytest.mark.parametrize("state", [Factorial(n=1), Counter()])
def test_replace_state_unknown_field(state) -> None:
    with pytest.raises(TypeError):
        replace_state(state, missing=1)


def test_replace_state_rejects_plain_values() -> None:
    with pytest.raises(TypeError):
        replace_state(5, value=1)
