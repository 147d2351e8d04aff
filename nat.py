"""Peano natural numbers.

A natural number is either ``Zero()`` or ``Successor(pred)``.  The value
of a ``Successor`` is one more than the value of its ``pred``, so the
number *n* is represented by *n* nested ``Successor`` wrappers around a
single ``Zero``.  Storage and traversal cost are proportional to the
magnitude; that is the point of the representation.

Every traversal in this module (and in the modules layered on top of it)
is an explicit loop.  Python's recursion limit would otherwise put a
ceiling of roughly a thousand on the numbers we could handle.

Layers
------
nat           representation, successor / predecessor
ordering      three-way comparison and derived predicates
arithmetic    add, saturating subtract, multiply, division, power
aggregation   sums, products, factorial, ranges, clamping
conversions   parity, int / float / text conversions
"""
from __future__ import annotations

from dataclasses import dataclass


class NoPredecessor(ValueError):
    """Raised when asking for the predecessor of zero."""


# ---------------------------------------------------------------------------
# Representation
# ---------------------------------------------------------------------------

class Nat:
    """Common base of the two Peano constructors.

    Equality and hashing walk the successor chain iteratively, so two
    values are equal exactly when their chains have the same depth.
    """

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nat):
            return NotImplemented
        a, b = self, other
        while isinstance(a, Successor) and isinstance(b, Successor):
            if a is b:
                return True
            a, b = a.pred, b.pred
        return isinstance(a, Zero) and isinstance(b, Zero)

    def __hash__(self) -> int:
        return hash(("Nat", _depth(self)))

    def __repr__(self) -> str:
        return f"Nat({_depth(self)})"


@dataclass(frozen=True, eq=False, repr=False)
class Zero(Nat):
    """The natural number 0."""


@dataclass(frozen=True, eq=False, repr=False)
class Successor(Nat):
    """One more than ``pred``."""

    pred: Nat


def _depth(n: Nat) -> int:
    count = 0
    while isinstance(n, Successor):
        count += 1
        n = n.pred
    return count


# ---------------------------------------------------------------------------
# Core recursion
# ---------------------------------------------------------------------------

def successor(n: Nat) -> Nat:
    return Successor(n)


def predecessor(n: Nat) -> Nat:
    """Return the number one less than ``n``.

    Raises ``NoPredecessor`` for zero.

    Branches: PRED-SUCC, PRED-ZERO-ERROR
    """
    if isinstance(n, Successor):                                   # PRED-SUCC
        return n.pred
    raise NoPredecessor("zero has no predecessor")                 # PRED-ZERO-ERROR


def predecessor_total(n: Nat) -> Nat:
    """Like ``predecessor`` but saturates: the predecessor of zero is zero.

    Branches: PRED-SUCC, PRED-ZERO-TOTAL
    """
    if isinstance(n, Successor):                                   # PRED-SUCC
        return n.pred
    return ZERO                                                    # PRED-ZERO-TOTAL


increment = successor
decrement = predecessor_total


def is_zero(n: Nat) -> bool:
    return isinstance(n, Zero)


def from_int(value: int) -> Nat:
    """Build the successor chain for a non-negative built-in ``int``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"natural numbers are non-negative, got {value}")
    n: Nat = ZERO
    for _ in range(value):
        n = Successor(n)
    return n


# ---------------------------------------------------------------------------
# Named constants
# ---------------------------------------------------------------------------

ZERO = Zero()
ONE = Successor(ZERO)
TWO = Successor(ONE)
THREE = Successor(TWO)
FOUR = Successor(THREE)
FIVE = Successor(FOUR)
SIX = Successor(FIVE)
SEVEN = Successor(SIX)
EIGHT = Successor(SEVEN)
NINE = Successor(EIGHT)
