"""Arithmetic on Peano naturals.

Every operation is expressed through successor/predecessor and the
ordering layer.  Costs are polynomial in the represented magnitude;
there is no shortcut through built-in integers.

Decision branches are annotated with branch-IDs (see ``spec.py``
``BranchSpec``) so white-box tests can trace coverage back to the
contract.
"""
from __future__ import annotations

from nat import Nat, ONE, Successor, ZERO
from ordering import is_greater_or_equal


class DivisionByZero(ZeroDivisionError):
    """Raised by the fallible division operations when the divisor is zero."""


def add(n: Nat, m: Nat) -> Nat:
    """Move successors from ``m`` onto ``n`` until ``m`` is exhausted.

    Branches: ADD-IDENTITY, ADD-STEP
    """
    if not isinstance(m, Successor):                               # ADD-IDENTITY
        return n

    while isinstance(m, Successor):                                # ADD-STEP
        n = Successor(n)
        m = m.pred
    return n


def subtract(n: Nat, m: Nat) -> Nat:
    """Saturating subtraction: zero whenever ``m >= n``.

    Branches: SUB-REMAINDER, SUB-SATURATE
    """
    while isinstance(n, Successor) and isinstance(m, Successor):
        n, m = n.pred, m.pred

    if isinstance(m, Successor):                                   # SUB-SATURATE
        return ZERO
    return n                                                       # SUB-REMAINDER


def multiply(n: Nat, m: Nat) -> Nat:
    """Repeated addition of ``n``, once per successor of ``m``."""
    acc: Nat = ZERO
    while isinstance(m, Successor):
        acc = add(acc, n)
        m = m.pred
    return acc


def _euclid(dividend: Nat, divisor: Nat) -> tuple[Nat, Nat]:
    quotient: Nat = ZERO
    remainder = dividend
    while is_greater_or_equal(remainder, divisor):
        remainder = subtract(remainder, divisor)
        quotient = Successor(quotient)
    return quotient, remainder


def div_mod(dividend: Nat, divisor: Nat) -> tuple[Nat, Nat]:
    """Euclidean division returning ``(quotient, remainder)``.

    ``dividend == quotient * divisor + remainder`` and
    ``remainder < divisor``.  Raises ``DivisionByZero`` for a zero divisor.

    Branches: DIV-NORMAL, DIV-ZERO-ERROR
    """
    if not isinstance(divisor, Successor):                         # DIV-ZERO-ERROR
        raise DivisionByZero("division by zero")
    return _euclid(dividend, divisor)                              # DIV-NORMAL


def div_mod_total(dividend: Nat, divisor: Nat) -> tuple[Nat, Nat]:
    """Euclidean division that maps a zero divisor to ``(0, dividend)``.

    Branches: DIV-NORMAL, DIV-ZERO-TOTAL
    """
    if not isinstance(divisor, Successor):                         # DIV-ZERO-TOTAL
        return ZERO, dividend
    return _euclid(dividend, divisor)                              # DIV-NORMAL


def divide(dividend: Nat, divisor: Nat) -> Nat:
    return div_mod(dividend, divisor)[0]


def modulo(dividend: Nat, divisor: Nat) -> Nat:
    return div_mod(dividend, divisor)[1]


def divide_total(dividend: Nat, divisor: Nat) -> Nat:
    return div_mod_total(dividend, divisor)[0]


def modulo_total(dividend: Nat, divisor: Nat) -> Nat:
    return div_mod_total(dividend, divisor)[1]


def power(base: Nat, exponent: Nat) -> Nat:
    """Repeated multiplication; ``power(ZERO, ZERO)`` is ``ONE``."""
    acc = ONE
    while isinstance(exponent, Successor):
        acc = multiply(acc, base)
        exponent = exponent.pred
    return acc
