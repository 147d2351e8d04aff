"""Folds, ranges and bounds over Peano naturals."""
from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Iterator

from arithmetic import add, multiply
from nat import Nat, ONE, Successor, ZERO
from ordering import is_greater_or_equal, is_less_or_equal, maximum, minimum


class InvalidStep(ValueError):
    """Raised when a range is requested with a zero step."""


def summation(values: Iterable[Nat]) -> Nat:
    return reduce(add, values, ZERO)


def product(values: Iterable[Nat]) -> Nat:
    return reduce(multiply, values, ONE)


def factorial(n: Nat) -> Nat:
    """``1 * 2 * ... * n``; the empty product makes ``factorial(ZERO)`` one."""
    return product(make_range(ONE, n, ONE))


# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NatRange:
    """Ascending arithmetic progression ``start, start+step, ...`` up to
    and including ``stop`` if it is hit.

    Like ``range``, the object holds no iteration state: each ``iter()``
    starts again from ``start``.

    Branches: RANGE-STEP-ZERO, RANGE-EMPTY, RANGE-STEP
    """

    start: Nat
    stop: Nat
    step: Nat

    def __post_init__(self) -> None:
        if not isinstance(self.step, Successor):                   # RANGE-STEP-ZERO
            raise InvalidStep("range step must be at least one")

    def __iter__(self) -> Iterator[Nat]:
        current = self.start
        while is_less_or_equal(current, self.stop):                # RANGE-STEP
            yield current
            current = add(current, self.step)
        # falls through immediately when start > stop              # RANGE-EMPTY

    def __len__(self) -> int:
        return sum(1 for _ in self)


def make_range(start: Nat, stop: Nat, step: Nat) -> NatRange:
    return NatRange(start, stop, step)


def up_to(stop: Nat) -> NatRange:
    """``0, 1, ..., stop``."""
    return NatRange(ZERO, stop, ONE)


def in_range(n: Nat, min_bound: Nat, max_bound: Nat) -> bool:
    return is_greater_or_equal(n, min_bound) and is_less_or_equal(n, max_bound)


def clamp(n: Nat, min_bound: Nat, max_bound: Nat) -> Nat:
    return maximum(min_bound, minimum(n, max_bound))
