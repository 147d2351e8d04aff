"""Formal contract for Peano natural-number arithmetic.

Each operation is specified as a collection of:
- preconditions: what inputs must satisfy before the operation
- postconditions: what the output must satisfy given valid inputs
- error conditions: what inputs must cause specific exceptions
- algebraic properties: mathematical relationships that must hold

Postconditions are stated against the built-in ``int`` as an oracle:
the Peano result, read back through ``to_int``, must agree with what
Python's own integers say.

The spec is machine-readable.  Validation tools iterate over it to
auto-generate conformance tests and search for counterexamples.

Layers
------
Domain          the finite slice [0, max_value] used for verification
OperationSpec   per-operation contract (pre/post/error/properties)
BranchSpec      every decision point that white-box tests must cover
NatSpec         the full contract for a configured calculator
build_spec()    constructs a NatSpec for a given configuration
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Iterator

from arithmetic import DivisionByZero, add, multiply
from conversions import is_even, is_odd, to_int
from nat import Nat, NoPredecessor, ONE, Successor, ZERO, is_zero
from ordering import Ordering, compare, is_less

logger = logging.getLogger(__name__)

MAX_EXPONENT = 4


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

class ZeroMode(Enum):
    """How the two partial operations treat zero.

    ERROR   predecessor(0) and x / 0 raise
    TOTAL   predecessor(0) == 0 and divmod(x, 0) == (0, x)
    """

    ERROR = auto()
    TOTAL = auto()


@dataclass(frozen=True)
class Domain:
    """Inclusive slice [0, max_value] of the naturals."""

    max_value: int

    def __post_init__(self) -> None:
        if self.max_value < 0:
            raise ValueError(f"max_value ({self.max_value}) must be >= 0")

    @property
    def width(self) -> int:
        return self.max_value + 1

    def contains(self, n: Nat) -> bool:
        return to_int(n) <= self.max_value

    def all_values(self) -> Iterator[Nat]:
        n: Nat = ZERO
        for _ in range(self.width):
            yield n
            n = Successor(n)


# ---------------------------------------------------------------------------
# Spec building blocks
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Precondition:
    name: str
    description: str
    check: Callable[..., bool]


@dataclass(frozen=True)
class Postcondition:
    name: str
    description: str
    check: Callable[..., bool]


@dataclass(frozen=True)
class ErrorCondition:
    name: str
    description: str
    trigger: Callable[..., bool]
    exception: type


@dataclass(frozen=True)
class AlgebraicProperty:
    name: str
    description: str
    arity: int          # how many free input values the check needs
    check: Callable[..., bool]


@dataclass(frozen=True)
class OperationSpec:
    name: str
    arity: int
    preconditions: list[Precondition]
    postconditions: list[Postcondition]
    error_conditions: list[ErrorCondition]
    properties: list[AlgebraicProperty] = field(default_factory=list)


@dataclass(frozen=True)
class BranchSpec:
    """A decision point in the implementation that must be exercised."""

    id: str
    description: str
    condition: str      # human-readable boolean expression
    operation: str      # which operation / helper this belongs to


@dataclass(frozen=True)
class NatSpec:
    """Complete contract for a configured calculator."""

    domain: Domain
    zero_mode: ZeroMode
    operations: dict[str, OperationSpec]
    branches: list[BranchSpec]

    @property
    def all_properties(self) -> list[tuple[str, AlgebraicProperty]]:
        out: list[tuple[str, AlgebraicProperty]] = []
        for name, op in self.operations.items():
            for prop in op.properties:
                out.append((name, prop))
        return out

    @property
    def all_postconditions(self) -> list[tuple[str, Postcondition]]:
        out: list[tuple[str, Postcondition]] = []
        for name, op in self.operations.items():
            for post in op.postconditions:
                out.append((name, post))
        return out


# ---------------------------------------------------------------------------
# Helpers used inside the spec predicates
# ---------------------------------------------------------------------------

def _order_of(a: int, b: int) -> Ordering:
    if a < b:
        return Ordering.LT
    if a > b:
        return Ordering.GT
    return Ordering.EQ


def _inputs_in(domain: Domain) -> Precondition:
    return Precondition(
        "inputs_in_domain",
        "Every input lies within the verification domain",
        lambda *xs: all(domain.contains(x) for x in xs),
    )


# ---------------------------------------------------------------------------
# Spec builder
# ---------------------------------------------------------------------------

def build_spec(
    domain: Domain,
    zero_mode: ZeroMode = ZeroMode.ERROR,
) -> NatSpec:
    """Construct the full contract for a configuration."""

    erroring = zero_mode == ZeroMode.ERROR

    # ----------------------------------------------------------------- pred
    pred_spec = OperationSpec(
        name="pred",
        arity=1,
        preconditions=[_inputs_in(domain)],
        postconditions=[
            Postcondition(
                "result_correct",
                "Result is one less than the input, or 0 for 0 in TOTAL mode",
                lambda a, result: to_int(result) == max(to_int(a) - 1, 0),
            ),
        ],
        error_conditions=[
            ErrorCondition(
                "no_predecessor",
                "NoPredecessor when the input is 0 in ERROR mode",
                lambda a: erroring and is_zero(a),
                NoPredecessor,
            ),
        ],
        properties=[
            AlgebraicProperty(
                "succ_inverse", "pred(succ(a)) == a", 1,
                lambda calc, a: calc.pred(Successor(a)) == a,
            ),
        ],
    )

    # ------------------------------------------------------------------ cmp
    cmp_spec = OperationSpec(
        name="cmp",
        arity=2,
        preconditions=[_inputs_in(domain)],
        postconditions=[
            Postcondition(
                "result_correct",
                "Three-way result agrees with int comparison",
                lambda a, b, result: result is _order_of(to_int(a), to_int(b)),
            ),
        ],
        error_conditions=[],
        properties=[
            AlgebraicProperty(
                "reflexivity", "cmp(a, a) == EQ", 1,
                lambda calc, a: calc.cmp(a, a) is Ordering.EQ,
            ),
            AlgebraicProperty(
                "antisymmetry", "cmp(a, b) is the mirror of cmp(b, a)", 2,
                lambda calc, a, b: (
                    calc.cmp(a, b).value == -calc.cmp(b, a).value
                ),
            ),
            AlgebraicProperty(
                "equality_agrees", "cmp(a, b) == EQ iff a == b", 2,
                lambda calc, a, b: (calc.cmp(a, b) is Ordering.EQ) == (a == b),
            ),
            AlgebraicProperty(
                "transitivity", "a < b and b < c implies a < c", 3,
                lambda calc, a, b, c: not (
                    calc.cmp(a, b) is Ordering.LT
                    and calc.cmp(b, c) is Ordering.LT
                ) or calc.cmp(a, c) is Ordering.LT,
            ),
        ],
    )

    # ------------------------------------------------------------------ add
    add_spec = OperationSpec(
        name="add",
        arity=2,
        preconditions=[_inputs_in(domain)],
        postconditions=[
            Postcondition(
                "result_correct",
                "Result equals the integer sum",
                lambda a, b, result: to_int(result) == to_int(a) + to_int(b),
            ),
        ],
        error_conditions=[],
        properties=[
            AlgebraicProperty(
                "commutativity", "add(a, b) == add(b, a)", 2,
                lambda calc, a, b: calc.add(a, b) == calc.add(b, a),
            ),
            AlgebraicProperty(
                "identity", "add(a, 0) == a", 1,
                lambda calc, a: calc.add(a, ZERO) == a,
            ),
            AlgebraicProperty(
                "associativity", "add(add(a, b), c) == add(a, add(b, c))", 3,
                lambda calc, a, b, c: (
                    calc.add(calc.add(a, b), c) == calc.add(a, calc.add(b, c))
                ),
            ),
        ],
    )

    # ------------------------------------------------------------------ sub
    sub_spec = OperationSpec(
        name="sub",
        arity=2,
        preconditions=[_inputs_in(domain)],
        postconditions=[
            Postcondition(
                "result_correct",
                "Result equals the integer difference saturated at 0",
                lambda a, b, result: (
                    to_int(result) == max(to_int(a) - to_int(b), 0)
                ),
            ),
        ],
        error_conditions=[],
        properties=[
            AlgebraicProperty(
                "identity", "sub(a, 0) == a", 1,
                lambda calc, a: calc.sub(a, ZERO) == a,
            ),
            AlgebraicProperty(
                "self_inverse", "sub(a, a) == 0", 1,
                lambda calc, a: calc.sub(a, a) == ZERO,
            ),
            AlgebraicProperty(
                "saturation_or_inverse",
                "sub(a, b) == 0 when a <= b, else add(sub(a, b), b) == a", 2,
                lambda calc, a, b: (
                    calc.sub(a, b) == ZERO
                    if compare(a, b) is not Ordering.GT
                    else calc.add(calc.sub(a, b), b) == a
                ),
            ),
        ],
    )

    # ------------------------------------------------------------------ mul
    mul_spec = OperationSpec(
        name="mul",
        arity=2,
        preconditions=[_inputs_in(domain)],
        postconditions=[
            Postcondition(
                "result_correct",
                "Result equals the integer product",
                lambda a, b, result: to_int(result) == to_int(a) * to_int(b),
            ),
        ],
        error_conditions=[],
        properties=[
            AlgebraicProperty(
                "commutativity", "mul(a, b) == mul(b, a)", 2,
                lambda calc, a, b: calc.mul(a, b) == calc.mul(b, a),
            ),
            AlgebraicProperty(
                "identity", "mul(a, 1) == a", 1,
                lambda calc, a: calc.mul(a, ONE) == a,
            ),
            AlgebraicProperty(
                "zero", "mul(a, 0) == 0", 1,
                lambda calc, a: calc.mul(a, ZERO) == ZERO,
            ),
            AlgebraicProperty(
                "associativity", "mul(mul(a, b), c) == mul(a, mul(b, c))", 3,
                lambda calc, a, b, c: (
                    calc.mul(calc.mul(a, b), c) == calc.mul(a, calc.mul(b, c))
                ),
            ),
            AlgebraicProperty(
                "distributivity", "mul(a, add(b, c)) == add(mul(a, b), mul(a, c))", 3,
                lambda calc, a, b, c: (
                    calc.mul(a, calc.add(b, c))
                    == calc.add(calc.mul(a, b), calc.mul(a, c))
                ),
            ),
        ],
    )

    # --------------------------------------------------------------- divmod
    def _divmod_correct(a: Nat, b: Nat, result: tuple[Nat, Nat]) -> bool:
        q, r = result
        if is_zero(b):
            return q == ZERO and r == a
        return (to_int(q), to_int(r)) == divmod(to_int(a), to_int(b))

    divmod_spec = OperationSpec(
        name="divmod",
        arity=2,
        preconditions=[_inputs_in(domain)],
        postconditions=[
            Postcondition(
                "result_correct",
                "Quotient and remainder agree with int divmod "
                "(or (0, a) on a zero divisor in TOTAL mode)",
                _divmod_correct,
            ),
        ],
        error_conditions=[
            ErrorCondition(
                "div_by_zero_error",
                "DivisionByZero when the divisor is 0 in ERROR mode",
                lambda a, b: erroring and is_zero(b),
                DivisionByZero,
            ),
        ],
        properties=[
            AlgebraicProperty(
                "euclid",
                "a == q * b + r and r < b for b != 0", 2,
                lambda calc, a, b: is_zero(b) or (
                    add(multiply(calc.divmod(a, b)[0], b), calc.divmod(a, b)[1]) == a
                    and is_less(calc.divmod(a, b)[1], b)
                ),
            ),
        ],
    )

    # ------------------------------------------------------------------ div
    div_spec = OperationSpec(
        name="div",
        arity=2,
        preconditions=[_inputs_in(domain)],
        postconditions=[
            Postcondition(
                "result_correct",
                "Result equals the int floor quotient (0 on a zero divisor)",
                lambda a, b, result: (
                    result == ZERO if is_zero(b)
                    else to_int(result) == to_int(a) // to_int(b)
                ),
            ),
        ],
        error_conditions=[
            ErrorCondition(
                "div_by_zero_error",
                "DivisionByZero when the divisor is 0 in ERROR mode",
                lambda a, b: erroring and is_zero(b),
                DivisionByZero,
            ),
        ],
        properties=[
            AlgebraicProperty(
                "identity", "div(a, 1) == a", 1,
                lambda calc, a: calc.div(a, ONE) == a,
            ),
            AlgebraicProperty(
                "self", "div(a, a) == 1 for a != 0", 1,
                lambda calc, a: is_zero(a) or calc.div(a, a) == ONE,
            ),
            AlgebraicProperty(
                "zero_numerator", "div(0, b) == 0 for b != 0", 1,
                lambda calc, b: is_zero(b) or calc.div(ZERO, b) == ZERO,
            ),
        ],
    )

    # ------------------------------------------------------------------ mod
    mod_spec = OperationSpec(
        name="mod",
        arity=2,
        preconditions=[_inputs_in(domain)],
        postconditions=[
            Postcondition(
                "result_correct",
                "Result equals the int remainder (the dividend on a zero divisor)",
                lambda a, b, result: (
                    result == a if is_zero(b)
                    else to_int(result) == to_int(a) % to_int(b)
                ),
            ),
        ],
        error_conditions=[
            ErrorCondition(
                "div_by_zero_error",
                "DivisionByZero when the divisor is 0 in ERROR mode",
                lambda a, b: erroring and is_zero(b),
                DivisionByZero,
            ),
        ],
        properties=[
            AlgebraicProperty(
                "bounded", "mod(a, b) < b for b != 0", 2,
                lambda calc, a, b: is_zero(b) or is_less(calc.mod(a, b), b),
            ),
        ],
    )

    # ------------------------------------------------------------------ pow
    pow_spec = OperationSpec(
        name="pow",
        arity=2,
        preconditions=[
            _inputs_in(domain),
            Precondition(
                "small_exponent",
                f"Exponent at most {MAX_EXPONENT}; results are unary chains",
                lambda a, b: to_int(b) <= MAX_EXPONENT,
            ),
        ],
        postconditions=[
            Postcondition(
                "result_correct",
                "Result equals the int power (0 ** 0 == 1)",
                lambda a, b, result: to_int(result) == to_int(a) ** to_int(b),
            ),
        ],
        error_conditions=[],
        properties=[
            AlgebraicProperty(
                "zero_exponent", "pow(a, 0) == 1", 1,
                lambda calc, a: calc.pow(a, ZERO) == ONE,
            ),
            AlgebraicProperty(
                "unit_exponent", "pow(a, 1) == a", 1,
                lambda calc, a: calc.pow(a, ONE) == a,
            ),
        ],
    )

    # --------------------------------------------------------------- parity
    parity_spec = OperationSpec(
        name="is_even",
        arity=1,
        preconditions=[_inputs_in(domain)],
        postconditions=[
            Postcondition(
                "result_correct",
                "Result agrees with int parity",
                lambda a, result: result == (to_int(a) % 2 == 0),
            ),
        ],
        error_conditions=[],
        properties=[
            AlgebraicProperty(
                "complementary", "exactly one of is_even(a), is_odd(a)", 1,
                lambda calc, a: calc.is_even(a) != is_odd(a),
            ),
            AlgebraicProperty(
                "alternates", "is_even(succ(a)) == not is_even(a)", 1,
                lambda calc, a: calc.is_even(Successor(a)) == (not is_even(a)),
            ),
        ],
    )

    # -------------------------------------------------------------- branches
    branches = [
        # Core recursion
        BranchSpec("PRED-SUCC", "Predecessor of a successor", "n is Successor", "pred"),
        BranchSpec("PRED-ZERO-ERROR", "NoPredecessor raised", "n is Zero and mode == ERROR", "pred"),
        BranchSpec("PRED-ZERO-TOTAL", "Predecessor of 0 is 0", "n is Zero and mode == TOTAL", "pred"),
        # Ordering
        BranchSpec("CMP-EQ", "Both chains exhausted together", "depth(n) == depth(m)", "cmp"),
        BranchSpec("CMP-LT", "Left chain exhausted first", "depth(n) < depth(m)", "cmp"),
        BranchSpec("CMP-GT", "Right chain exhausted first", "depth(n) > depth(m)", "cmp"),
        # Addition / subtraction
        BranchSpec("ADD-IDENTITY", "Adding zero returns the left operand", "m is Zero", "add"),
        BranchSpec("ADD-STEP", "One successor moved per step", "m is Successor", "add"),
        BranchSpec("SUB-REMAINDER", "Right chain exhausted first (or both together)", "n >= m", "sub"),
        BranchSpec("SUB-SATURATE", "Left chain exhausted first, result saturates at zero", "n < m", "sub"),
        # Division
        BranchSpec("DIV-NORMAL", "Euclidean division", "divisor != 0", "divmod"),
        BranchSpec("DIV-ZERO-ERROR", "DivisionByZero raised", "divisor == 0 and mode == ERROR", "divmod"),
        BranchSpec("DIV-ZERO-TOTAL", "Return (0, dividend)", "divisor == 0 and mode == TOTAL", "divmod"),
        # Ranges
        BranchSpec("RANGE-STEP-ZERO", "InvalidStep raised", "step == 0", "range"),
        BranchSpec("RANGE-EMPTY", "No values produced", "start > stop", "range"),
        BranchSpec("RANGE-STEP", "Value produced and advanced", "current <= stop", "range"),
        # Parity
        BranchSpec("PARITY-EVEN", "Chain exhausted after an even count", "n % 2 == 0", "is_even"),
        BranchSpec("PARITY-ODD", "One successor left over", "n % 2 == 1", "is_even"),
    ]

    operations = {
        "pred": pred_spec,
        "cmp": cmp_spec,
        "add": add_spec,
        "sub": sub_spec,
        "mul": mul_spec,
        "divmod": divmod_spec,
        "div": div_spec,
        "mod": mod_spec,
        "pow": pow_spec,
        "is_even": parity_spec,
    }
    logger.debug(
        "built contract for %s over [0, %d]: %d operations, %d branches",
        zero_mode.name, domain.max_value, len(operations), len(branches),
    )

    return NatSpec(
        domain=domain,
        zero_mode=zero_mode,
        operations=operations,
        branches=branches,
    )
