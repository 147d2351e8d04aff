"""Configured calculator over Peano naturals.

Bundles the arithmetic layer under one ``ZeroMode`` so callers (and the
contract in ``spec.py``) can switch between the fallible and the total
treatment of zero without choosing function variants by hand.
Decision branches are annotated with their spec branch-IDs.
"""
from __future__ import annotations

from dataclasses import dataclass

import arithmetic
import nat
from conversions import is_even
from nat import Nat
from ordering import Ordering, compare
from spec import ZeroMode


@dataclass(frozen=True)
class NatCalculator:
    zero_mode: ZeroMode = ZeroMode.ERROR

    @property
    def _erroring(self) -> bool:
        return self.zero_mode == ZeroMode.ERROR

    # -- core recursion -----------------------------------------------------

    def succ(self, a: Nat) -> Nat:
        return nat.successor(a)

    def pred(self, a: Nat) -> Nat:
        """Predecessor.

        Branches: PRED-ZERO-ERROR, PRED-ZERO-TOTAL
        """
        if self._erroring:                                        # PRED-ZERO-ERROR
            return nat.predecessor(a)
        return nat.predecessor_total(a)                           # PRED-ZERO-TOTAL

    # -- ordering -----------------------------------------------------------

    def cmp(self, a: Nat, b: Nat) -> Ordering:
        return compare(a, b)

    # -- arithmetic ---------------------------------------------------------

    def add(self, a: Nat, b: Nat) -> Nat:
        return arithmetic.add(a, b)

    def sub(self, a: Nat, b: Nat) -> Nat:
        """Saturating subtraction; never raises."""
        return arithmetic.subtract(a, b)

    def mul(self, a: Nat, b: Nat) -> Nat:
        return arithmetic.multiply(a, b)

    def divmod(self, a: Nat, b: Nat) -> tuple[Nat, Nat]:
        """Euclidean division.

        Branches: DIV-ZERO-ERROR, DIV-ZERO-TOTAL
        """
        if self._erroring:                                        # DIV-ZERO-ERROR
            return arithmetic.div_mod(a, b)
        return arithmetic.div_mod_total(a, b)                     # DIV-ZERO-TOTAL

    def div(self, a: Nat, b: Nat) -> Nat:
        return self.divmod(a, b)[0]

    def mod(self, a: Nat, b: Nat) -> Nat:
        return self.divmod(a, b)[1]

    def pow(self, base: Nat, exp: Nat) -> Nat:
        return arithmetic.power(base, exp)

    # -- predicates ---------------------------------------------------------

    def is_even(self, a: Nat) -> bool:
        return is_even(a)
