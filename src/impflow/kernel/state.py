"""Carrier states threaded through the drivers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, fields, is_dataclass, replace
from typing import Any, Final, Generic, Self, TypeVar

from pydantic import BaseModel

S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")


class _NoResult:
    """Marker for a switch that has not produced a value yet."""

    _instance: _NoResult | None = None

    def __new__(cls) -> _NoResult:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_RESULT"

    def __bool__(self) -> bool:
        return False


NO_RESULT: Final = _NoResult()


@dataclass(frozen=True)
class LoopState(Generic[S]):
    """One generation of loop state.

    Attributes:
        state: The caller's opaque state
        broken: Sticky break flag; once True every derived generation is True
    """

    state: S
    broken: bool = False

    def advance(self, state: S, broken: bool = False) -> LoopState[S]:
        """Derive the next generation, OR-ing the break flag."""
        return LoopState(state=state, broken=self.broken or broken)


@dataclass(frozen=True)
class SwitchState(Generic[A, B]):
    """Switch evaluation state.

    Attributes:
        comparison_value: Value the next case is compared against
        result: Latest branch output, NO_RESULT until one is produced
        broken: Sticky break flag
        matched: Whether any case has matched so far
    """

    comparison_value: A
    result: B | _NoResult = NO_RESULT
    broken: bool = False
    matched: bool = False

    @property
    def has_result(self) -> bool:
        return self.result is not NO_RESULT

    def with_comparison_value(self, value: A) -> Self:
        return replace(self, comparison_value=value)

    def with_result(self, result: B, broken: bool = False) -> Self:
        return replace(self, result=result, broken=self.broken or broken)

    def with_match(self, match: A, result: B, broken: bool) -> Self:
        return replace(self.with_result(result, broken), matched=True, comparison_value=match)


@dataclass(frozen=True)
class CaseBlock(Generic[A, B]):
    """A switch case: a match value and a handler returning (result, break)."""

    match: A
    handler: Callable[[A], tuple[B, bool]]


@dataclass(frozen=True)
class TransformedCaseBlock(Generic[A, B]):
    """A case whose handler has been lifted to operate on SwitchState."""

    match: A
    step: Callable[[SwitchState[A, B]], SwitchState[A, B]]


def replace_state(state: S, **changes: Any) -> S:
    """Copy a caller state with some fields changed.

    Works for frozen dataclasses and pydantic models, the two shapes used
    to stand in for a block of mutable locals.

    Raises:
        TypeError: If state is neither a dataclass instance nor a pydantic model
    """
    if isinstance(state, BaseModel):
        unknown = set(changes) - set(type(state).model_fields)
        if unknown:
            raise TypeError(f"{type(state).__name__} has no fields {sorted(unknown)}")
        return state.model_copy(update=changes)  # type: ignore[return-value]
    if is_dataclass(state) and not isinstance(state, type):
        names = {f.name for f in fields(state)}
        unknown = set(changes) - names
        if unknown:
            raise TypeError(f"{type(state).__name__} has no fields {sorted(unknown)}")
        return replace(state, **changes)  # type: ignore[type-var]
    raise TypeError(f"Cannot replace fields on {type(state).__name__}")
