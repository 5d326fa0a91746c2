from __future__ import annotations

import sys

from impflow import CaseBlock, SwitchConfig, switch

DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def day_name(day: int, config: SwitchConfig | None = None) -> str:
    # switch (day) { case 1: name = "Monday"; break; ... default: name = "Unknown"; }
    cases = [CaseBlock(i, lambda _, name=name: (name, True)) for i, name in enumerate(DAYS, start=1)]
    return switch(day, cases, lambda d: f"Unknown day {d}", config=config).unwrap()


def day_kind(day: int) -> str:
    """Weekdays fall through to a shared label, as in C."""
    cases = [CaseBlock(i, lambda _: ("", False)) for i in range(1, 5)]
    cases.append(CaseBlock(5, lambda _: ("weekday", True)))
    cases.extend(CaseBlock(i, lambda _: ("weekend", True)) for i in (6, 7))
    return switch(day, cases, lambda _: "invalid", config=SwitchConfig(fallthrough="always")).unwrap()


if __name__ == "__main__":
    days = [int(arg) for arg in sys.argv[1:]] or list(range(1, 9))
    for day in days:
        print(f"{day}: {day_name(day)} ({day_kind(day)})")
