"""Total order on natural numbers.

``compare`` is the only function here that looks at the structure of
its arguments.  Every relational predicate is a view of its three-way
result, which keeps them mutually consistent.
"""
from __future__ import annotations

from enum import Enum

from nat import Nat, Successor


class Ordering(Enum):
    LT = -1
    EQ = 0
    GT = 1


def compare(n: Nat, m: Nat) -> Ordering:
    """Three-way comparison by peeling one successor off each side.

    Branches: CMP-EQ, CMP-LT, CMP-GT
    """
    while isinstance(n, Successor) and isinstance(m, Successor):
        if n is m:
            return Ordering.EQ
        n, m = n.pred, m.pred

    if isinstance(n, Successor):                                   # CMP-GT
        return Ordering.GT
    if isinstance(m, Successor):                                   # CMP-LT
        return Ordering.LT
    return Ordering.EQ                                             # CMP-EQ


def equals(n: Nat, m: Nat) -> bool:
    return compare(n, m) is Ordering.EQ


def is_greater(n: Nat, m: Nat) -> bool:
    return compare(n, m) is Ordering.GT


def is_greater_or_equal(n: Nat, m: Nat) -> bool:
    return compare(n, m) is not Ordering.LT


def is_less(n: Nat, m: Nat) -> bool:
    return compare(n, m) is Ordering.LT


def is_less_or_equal(n: Nat, m: Nat) -> bool:
    return compare(n, m) is not Ordering.GT


def minimum(n: Nat, m: Nat) -> Nat:
    """The smaller of ``n`` and ``m`` (``m`` on a tie)."""
    return n if is_less(n, m) else m


def maximum(n: Nat, m: Nat) -> Nat:
    """The larger of ``n`` and ``m`` (``m`` on a tie)."""
    return n if is_greater(n, m) else m
