"""Counterexample search — discovers gaps in implementation or tests.

This module runs independently of the test suite.  It systematically
searches a finite ``Domain`` for:

1. Postcondition violations: inputs where the implementation doesn't
   match the int oracle stated in the spec.
2. Error condition violations: inputs that should raise but don't (or
   raise the wrong exception).
3. Property violations: algebraic relationships that fail for some
   input combination.

Run directly::

    python -m validation.counterexample_search
"""
from __future__ import annotations

import itertools
import logging
import sys
from dataclasses import dataclass, field

from arithmetic import DivisionByZero
from calculator import NatCalculator
from conversions import to_int
from nat import NoPredecessor
from spec import Domain, NatSpec, ZeroMode, build_spec

logger = logging.getLogger(__name__)

# Exceptions a property check may legitimately hit on an edge input.
EXPECTED_ERRORS = (NoPredecessor, DivisionByZero)


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

@dataclass
class Counterexample:
    category: str
    operation: str
    inputs: tuple[int, ...]
    expected: str
    actual: str
    description: str


@dataclass
class SearchReport:
    counterexamples: list[Counterexample] = field(default_factory=list)
    checks_run: int = 0

    @property
    def passed(self) -> bool:
        return len(self.counterexamples) == 0

    def summary(self) -> str:
        lines = [
            "Counterexample Search Report",
            "=" * 40,
            f"Total checks: {self.checks_run}",
            f"Counterexamples found: {len(self.counterexamples)}",
        ]
        if self.counterexamples:
            lines.append("")
            for i, cx in enumerate(self.counterexamples, 1):
                lines.append(f"  [{i}] {cx.category} / {cx.operation}")
                lines.append(f"      Inputs:   {cx.inputs}")
                lines.append(f"      Expected: {cx.expected}")
                lines.append(f"      Actual:   {cx.actual}")
                lines.append(f"      {cx.description}")
        else:
            lines.append("\nNo counterexamples found — all checks passed.")
        return "\n".join(lines)


def _show(inputs) -> tuple[int, ...]:
    return tuple(to_int(x) for x in inputs)


def _record(cxs: list[Counterexample], cx: Counterexample) -> None:
    logger.warning(
        "%s in %s for inputs %s: %s",
        cx.category, cx.operation, cx.inputs, cx.description,
    )
    cxs.append(cx)


# ---------------------------------------------------------------------------
# Search functions
# ---------------------------------------------------------------------------

def search_postcondition_violations(
    calc: NatCalculator,
    spec: NatSpec,
) -> tuple[list[Counterexample], int]:
    """Exhaustively verify postconditions for every input tuple."""
    cxs: list[Counterexample] = []
    checks = 0
    values = list(spec.domain.all_values())

    for op_name, op_spec in spec.operations.items():
        op = getattr(calc, op_name)
        for inputs in itertools.product(values, repeat=op_spec.arity):
            if not all(pre.check(*inputs) for pre in op_spec.preconditions):
                continue
            checks += 1
            # Skip inputs that are supposed to error
            if any(ec.trigger(*inputs) for ec in op_spec.error_conditions):
                continue

            try:
                result = op(*inputs)
            except EXPECTED_ERRORS as e:
                _record(cxs, Counterexample(
                    category="unexpected_error",
                    operation=op_name,
                    inputs=_show(inputs),
                    expected="no error",
                    actual=f"{type(e).__name__}: {e}",
                    description="Operation raised an unexpected exception",
                ))
                continue

            for post in op_spec.postconditions:
                if not post.check(*inputs, result):
                    _record(cxs, Counterexample(
                        category="postcondition_violation",
                        operation=op_name,
                        inputs=_show(inputs),
                        expected=post.description,
                        actual=f"result={result!r}",
                        description=f"Postcondition '{post.name}' violated",
                    ))

    logger.debug("postcondition search: %d checks", checks)
    return cxs, checks


def search_error_condition_violations(
    calc: NatCalculator,
    spec: NatSpec,
) -> tuple[list[Counterexample], int]:
    """Verify every error condition triggers the right exception."""
    cxs: list[Counterexample] = []
    checks = 0
    values = list(spec.domain.all_values())

    for op_name, op_spec in spec.operations.items():
        op = getattr(calc, op_name)
        for inputs in itertools.product(values, repeat=op_spec.arity):
            for ec in op_spec.error_conditions:
                if not ec.trigger(*inputs):
                    continue
                checks += 1
                try:
                    result = op(*inputs)
                except ec.exception:
                    continue
                except EXPECTED_ERRORS as e:
                    _record(cxs, Counterexample(
                        category="wrong_error",
                        operation=op_name,
                        inputs=_show(inputs),
                        expected=ec.exception.__name__,
                        actual=f"{type(e).__name__}: {e}",
                        description=f"Wrong exception type for '{ec.name}'",
                    ))
                    continue
                _record(cxs, Counterexample(
                    category="missing_error",
                    operation=op_name,
                    inputs=_show(inputs),
                    expected=ec.exception.__name__,
                    actual=f"result={result!r}",
                    description=(
                        f"Error condition '{ec.name}' should have "
                        f"triggered but didn't"
                    ),
                ))

    logger.debug("error condition search: %d checks", checks)
    return cxs, checks


def search_property_violations(
    calc: NatCalculator,
    spec: NatSpec,
) -> tuple[list[Counterexample], int]:
    """Exhaustively check every algebraic property."""
    cxs: list[Counterexample] = []
    checks = 0
    values = list(spec.domain.all_values())

    for op_name, prop in spec.all_properties:
        for inputs in itertools.product(values, repeat=prop.arity):
            checks += 1
            try:
                ok = prop.check(calc, *inputs)
            except EXPECTED_ERRORS:
                continue
            if not ok:
                _record(cxs, Counterexample(
                    category="property_violation",
                    operation=op_name,
                    inputs=_show(inputs),
                    expected=prop.description,
                    actual="property does not hold",
                    description=f"Property '{prop.name}' violated",
                ))

    logger.debug("property search: %d checks", checks)
    return cxs, checks


# ---------------------------------------------------------------------------
# Top-level runner
# ---------------------------------------------------------------------------

def run_search(
    domain: Domain,
    zero_mode: ZeroMode,
    calc: NatCalculator | None = None,
) -> SearchReport:
    """Run complete counterexample search for one configuration."""
    if calc is None:
        calc = NatCalculator(zero_mode)
    spec = build_spec(domain, zero_mode)
    report = SearchReport()

    for search_fn in (
        search_postcondition_violations,
        search_error_condition_violations,
        search_property_violations,
    ):
        cxs, checks = search_fn(calc, spec)
        report.counterexamples.extend(cxs)
        report.checks_run += checks

    return report


def main() -> None:
    """Run counterexample search across several configurations."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    configs = [
        ("ERROR [0, 6]", Domain(6), ZeroMode.ERROR),
        ("TOTAL [0, 6]", Domain(6), ZeroMode.TOTAL),
        ("ERROR [0, 12]", Domain(12), ZeroMode.ERROR),
    ]

    all_passed = True
    for name, domain, mode in configs:
        print(f"\n--- Configuration: {name} ---")
        report = run_search(domain, mode)
        print(report.summary())
        if not report.passed:
            all_passed = False

    print("\n" + "=" * 40)
    if all_passed:
        print("ALL CONFIGURATIONS PASSED")
    else:
        print("SOME CONFIGURATIONS HAD COUNTEREXAMPLES")
        sys.exit(1)


if __name__ == "__main__":
    main()
