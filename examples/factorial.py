from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass

from impflow import LoopConfig, Trace, do_while, for_loop, replace_state, while_loop


@dataclass(frozen=True)
class FactorialLocals:
    """Stands in for the locals `n`, `i` and `acc` of an imperative factorial."""

    n: int
    i: int = 1
    acc: int = 1


def multiply(break_at: int | None):
    def body(s: FactorialLocals) -> tuple[FactorialLocals, bool]:
        if s.i == break_at:
            return s, True
        return replace_state(s, acc=s.acc * s.i, i=s.i + 1), False
    return body


def while_factorial(n: int, break_at: int | None, config: LoopConfig) -> int:
    # while (i <= n) { if (i == break_at) break; acc *= i; i++; }
    return while_loop(FactorialLocals(n), lambda s: s.i <= s.n, multiply(break_at), config=config).acc


def do_while_factorial(n: int, break_at: int | None, config: LoopConfig) -> int:
    # do { if (i == break_at) break; acc *= i; i++; } while (i <= n);
    return do_while(FactorialLocals(n), multiply(break_at), lambda s: s.i <= s.n, config=config).acc


def for_factorial(n: int, break_at: int | None, config: LoopConfig) -> int:
    # for (i = 1; i <= n; i++) { if (i == break_at) break; acc *= i; }
    def body(s: FactorialLocals) -> tuple[FactorialLocals, bool]:
        if s.i == break_at:
            return s, True
        return replace_state(s, acc=s.acc * s.i), False

    def increment(s: FactorialLocals) -> tuple[FactorialLocals, bool]:
        return replace_state(s, i=s.i + 1), False

    return for_loop(FactorialLocals(n), lambda s: s.i <= s.n, body, increment, config=config).acc


def main() -> None:
    parser = argparse.ArgumentParser(description="Factorial with while, do-while and for combinators")
    parser.add_argument("n", type=int)
    parser.add_argument("--break-at", type=int, default=None)
    parser.add_argument("--trace", action="store_true", help="print recorded loop events")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    for name, run in [
        ("while", while_factorial),
        ("do_while", do_while_factorial),
        ("for", for_factorial),
    ]:
        trace = Trace(enabled=args.trace)
        value = run(args.n, args.break_at, LoopConfig(trace=trace, label=name))
        print(f"{name}: {value}")
        for event in trace.get_events():
            print(f"  [{event.id}] {event.action} {event.info}")


if __name__ == "__main__":
    main()
