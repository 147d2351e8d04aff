"""Parity predicates and conversions out of the Peano representation."""
from __future__ import annotations

from nat import Nat, Successor


def is_even(n: Nat) -> bool:
    """Peel two successors at a time.

    Branches: PARITY-EVEN, PARITY-ODD
    """
    while isinstance(n, Successor):
        if not isinstance(n.pred, Successor):                      # PARITY-ODD
            return False
        n = n.pred.pred
    return True                                                    # PARITY-EVEN


def is_odd(n: Nat) -> bool:
    return not is_even(n)


def to_int(n: Nat) -> int:
    count = 0
    while isinstance(n, Successor):
        count += 1
        n = n.pred
    return count


def to_float(n: Nat) -> float:
    """Count successors in floating point.

    Each layer adds ``1.0`` to the running total, so once the total
    passes 2**53 increments are lost to rounding.  That is the intended
    behaviour, not a bug to paper over with ``float(to_int(n))``.
    """
    total = 0.0
    while isinstance(n, Successor):
        total += 1.0
        n = n.pred
    return total


def to_string(n: Nat) -> str:
    """Decimal text, e.g. ``"5"``."""
    return str(to_int(n))


def to_numerical_representation(n: Nat) -> str:
    """Structural form, e.g. ``"S(S(S(O)))"`` for three."""
    depth = to_int(n)
    return "S(" * depth + "O" + ")" * depth
