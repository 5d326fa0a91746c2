"""Tests for while_loop, do_while and for_loop."""

import pytest

from impflow import LoopConfig, do_while, for_loop, while_loop
from fakes import Factorial, do_while_factorial, factorial, for_factorial, while_factorial


@pytest.mark.parametrize("n", range(1, 13))
def test_factorial_without_break(n: int) -> None:
    assert while_factorial(n).acc == factorial(n)
    assert for_factorial(n).acc == factorial(n)
    assert do_while_factorial(n).acc == factorial(n)


@pytest.mark.parametrize("n", range(5, 12))
def test_break_keeps_state_from_before_breaking_step(n: int) -> None:
    # The breaking body returns its input, so accumulation stops at 4!
    assert while_factorial(n, break_at=5) == Factorial(n=n, i=5, acc=24)
    assert do_while_factorial(n, break_at=5) == Factorial(n=n, i=5, acc=24)
    # for_loop still runs the increment after the breaking body
    assert for_factorial(n, break_at=5) == Factorial(n=n, i=6, acc=24)


@pytest.mark.parametrize("n", range(1, 5))
def test_break_never_reached_below_threshold(n: int) -> None:
    assert while_factorial(n, break_at=5).acc == factorial(n)
    assert do_while_factorial(n, break_at=5).acc == factorial(n)
    assert for_factorial(n, break_at=5).acc == factorial(n)


def test_do_while_runs_body_once_when_condition_already_false() -> None:
    calls = []

    def body(s: int) -> tuple[int, bool]:
        calls.append(s)
        return s + 1, False

    assert do_while(10, body, lambda s: s < 5) == 11
    assert calls == [10]


def test_do_while_factorial_of_one_runs_body() -> None:
    result = do_while_factorial(1)
    assert result == Factorial(n=1, i=2, acc=1)


def test_do_while_returns_post_body_state_when_condition_fails() -> None:
    assert do_while(0, lambda s: (s + 3, False), lambda s: s < 7) == 9


@pytest.mark.parametrize("run", [
    lambda body: while_loop(0, lambda s: False, body),
    lambda body: for_loop(0, lambda s: False, body, body),
])
def test_false_precondition_never_invokes_body(run) -> None:
    calls = []

    def body(s: int) -> tuple[int, bool]:
        calls.append(s)
        return s + 1, False

    assert run(body) == 0
    assert calls == []


def test_break_is_sticky_in_while() -> None:
    seen = []

    def body(s: int) -> tuple[int, bool]:
        seen.append(s)
        return s + 1, s == 2

    assert while_loop(0, lambda s: s < 100, body) == 3
    assert seen == [0, 1, 2]


def test_for_increment_runs_after_body_break() -> None:
    increments = []

    def body(s: int) -> tuple[int, bool]:
        return s * 10, True

    def increment(s: int) -> tuple[int, bool]:
        increments.append(s)
        return s + 1, False

    assert for_loop(1, lambda s: s < 1000, body, increment) == 11
    assert increments == [10]


def test_for_break_from_increment() -> None:
    def increment(s: int) -> tuple[int, bool]:
        return s + 1, s + 1 == 3

    assert for_loop(0, lambda s: s < 10, lambda s: (s, False), increment) == 3


def test_do_while_break_stops_even_if_condition_holds() -> None:
    assert do_while(0, lambda s: (s + 1, s + 1 >= 4), lambda s: True) == 4


@pytest.mark.parametrize("run", [while_factorial, do_while_factorial, for_factorial])
def test_repeated_calls_are_identical(run) -> None:
    assert run(9) == run(9)
    assert run(9, break_at=5) == run(9, break_at=5)


def test_loops_are_stack_safe() -> None:
    n = 100_000

    def step(s: int) -> tuple[int, bool]:
        return s + 1, False

    assert while_loop(0, lambda s: s < n, step) == n
    assert do_while(0, step, lambda s: s < n) == n
    assert for_loop(0, lambda s: s < n, lambda s: (s, False), step) == n


@pytest.mark.parametrize("run", [
    lambda body: while_loop(0, lambda s: True, body),
    lambda body: do_while(0, body, lambda s: True),
    lambda body: for_loop(0, lambda s: True, body, lambda s: (s, False)),
])
def test_step_exceptions_propagate_unchanged(run) -> None:
    class DomainError(Exception):
        pass

    error = DomainError("boom")

    def body(s: int) -> tuple[int, bool]:
        if s == 3:
            raise error
        return s + 1, False

    with pytest.raises(DomainError) as excinfo:
        run(body)
    assert excinfo.value is error


def test_condition_exceptions_propagate_unchanged() -> None:
    def condition(s: int) -> bool:
        raise ZeroDivisionError

    with pytest.raises(ZeroDivisionError):
        while_loop(0, condition, lambda s: (s, False))


def test_config_is_optional_and_accepted_by_keyword() -> None:
    config = LoopConfig(label="fact")
    assert while_factorial(6, config=config).acc == 720
    assert do_while_factorial(6, config=config).acc == 720
    assert for_factorial(6, config=config).acc == 720
