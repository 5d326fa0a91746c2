from .combinators import do_while, for_loop, switch, switch_result, while_loop
from .kernel import (
    CaseBlock,
    Control,
    Evidence,
    ImpflowError,
    IterationLimitError,
    LoopConfig,
    LoopState,
    NoResultError,
    Result,
    SwitchConfig,
    SwitchState,
    Trace,
    replace_state,
)

__all__ = [
    # Combinators
    "switch",
    "switch_result",
    "while_loop",
    "do_while",
    "for_loop",
    # Carriers
    "CaseBlock",
    "LoopState",
    "SwitchState",
    "replace_state",
    # Outcomes
    "Result",
    "Control",
    # Errors
    "ImpflowError",
    "NoResultError",
    "IterationLimitError",
    # Config & tracing
    "LoopConfig",
    "SwitchConfig",
    "Trace",
    "Evidence",
]
