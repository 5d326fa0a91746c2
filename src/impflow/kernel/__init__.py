"""Kernel layer - carrier types, outcomes, errors, config and trace."""

from impflow.kernel.config import LoopConfig, SwitchConfig
from impflow.kernel.errors import ImpflowError, IterationLimitError, NoResultError
from impflow.kernel.result import Control, Result
from impflow.kernel.state import (
    NO_RESULT,
    CaseBlock,
    LoopState,
    SwitchState,
    TransformedCaseBlock,
    replace_state,
)
from impflow.kernel.trace import Evidence, Trace

__all__ = [
    "Control",
    "Result",
    # Carriers
    "LoopState",
    "SwitchState",
    "CaseBlock",
    "TransformedCaseBlock",
    "NO_RESULT",
    "replace_state",
    # Errors
    "ImpflowError",
    "NoResultError",
    "IterationLimitError",
    # Config & trace
    "LoopConfig",
    "SwitchConfig",
    "Trace",
    "Evidence",
]
