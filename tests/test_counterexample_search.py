"""Tests for the standalone counterexample search."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from calculator import NatCalculator
from nat import Nat, ONE, ZERO, Successor
from spec import Domain, ZeroMode
from validation.counterexample_search import (
    Counterexample,
    SearchReport,
    run_search,
)

DOMAIN = Domain(max_value=4)


@dataclass(frozen=True)
class OffByOneAdder(NatCalculator):
    """Adds one too many whenever the right operand is non-zero."""

    def add(self, a: Nat, b: Nat) -> Nat:
        result = super().add(a, b)
        return Successor(result) if b != ZERO else result


@dataclass(frozen=True)
class SilentPredecessor(NatCalculator):
    """Ignores the configured mode and never raises on zero."""

    def pred(self, a: Nat) -> Nat:
        return a.pred if isinstance(a, Successor) else ZERO


class TestCorrectImplementation:
    def test_error_mode_passes(self):
        report = run_search(DOMAIN, ZeroMode.ERROR)
        assert report.passed, report.summary()
        assert report.checks_run > 0

    def test_total_mode_passes(self):
        report = run_search(DOMAIN, ZeroMode.TOTAL)
        assert report.passed, report.summary()


class TestBrokenImplementations:
    def test_postcondition_violation_found(self):
        report = run_search(DOMAIN, ZeroMode.ERROR, calc=OffByOneAdder())
        assert not report.passed
        categories = {(cx.category, cx.operation) for cx in report.counterexamples}
        assert ("postcondition_violation", "add") in categories
        assert ("property_violation", "add") in categories

    def test_missing_error_found(self):
        report = run_search(DOMAIN, ZeroMode.ERROR, calc=SilentPredecessor())
        missing = [cx for cx in report.counterexamples if cx.category == "missing_error"]
        assert len(missing) == 1
        assert missing[0].operation == "pred"
        assert missing[0].inputs == (0,)

    def test_counterexamples_are_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="validation.counterexample_search"):
            run_search(DOMAIN, ZeroMode.ERROR, calc=SilentPredecessor())
        assert any("missing_error" in r.getMessage() for r in caplog.records)


class TestReport:
    def test_empty_report_passes(self):
        report = SearchReport()
        assert report.passed
        assert "No counterexamples found" in report.summary()

    def test_summary_lists_counterexamples(self):
        report = SearchReport(checks_run=3)
        report.counterexamples.append(Counterexample(
            category="postcondition_violation",
            operation="add",
            inputs=(1, 1),
            expected="Result equals the integer sum",
            actual="result=Nat(3)",
            description="Postcondition 'result_correct' violated",
        ))
        text = report.summary()
        assert not report.passed
        assert "Counterexamples found: 1" in text
        assert "(1, 1)" in text
        assert "result=Nat(3)" in text


def test_add_with_one_is_successor():
    # Guard for the broken adder above: it must differ from the real one.
    assert OffByOneAdder().add(ONE, ONE) != NatCalculator().add(ONE, ONE)
