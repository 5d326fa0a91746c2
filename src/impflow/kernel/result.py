"""Result and Control - the outcome vocabulary of switch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from .errors import NoResultError

V = TypeVar("V")


@dataclass(frozen=True)
class Control:
    """
    Outcome directive attached to a Result.

    Kinds:
    - ok: A branch produced a value
    - error: No branch produced a value; reason carries the error
    """

    kind: Literal["ok", "error"]
    reason: Any | None = None

    @staticmethod
    def Ok() -> Control:
        return Control(kind="ok")

    @staticmethod
    def Error(reason: Any) -> Control:
        return Control(kind="error", reason=reason)


@dataclass(frozen=True)
class Result(Generic[V]):
    """
    The value of a switch, or the reason there is none.

    Attributes:
        value: Output of the branch that terminated the switch
        control: Whether a value is present
    """

    value: V | None = None
    control: Control = Control.Ok()

    @staticmethod
    def ok(value: V) -> Result[V]:
        return Result(value=value, control=Control.Ok())

    @staticmethod
    def error(reason: Any) -> Result[Any]:
        return Result(control=Control.Error(reason))

    @property
    def is_ok(self) -> bool:
        return self.control.kind == "ok"

    def unwrap(self) -> V:
        """Return the value, raising the carried error when there is none."""
        if self.control.kind == "error":
            reason = self.control.reason
            if isinstance(reason, BaseException):
                raise reason
            raise NoResultError(str(reason), raw_value=reason)
        return self.value  # type: ignore[return-value]

    def value_or(self, fallback: V) -> V:
        if self.control.kind == "error":
            return fallback
        return self.value  # type: ignore[return-value]
