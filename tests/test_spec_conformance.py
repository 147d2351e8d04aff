"""Spec conformance tests.

These tests are *driven by* the spec: they iterate over every
postcondition, error condition, and algebraic property defined in
``spec.build_spec`` and verify the implementation satisfies them.

If the spec changes (e.g. a new postcondition is added), these tests
automatically cover it — no manual test authoring required for the
new predicate.
"""
from __future__ import annotations

import itertools

import pytest
from hypothesis import given, settings
from hypothesis.strategies import integers

from arithmetic import DivisionByZero
from calculator import NatCalculator
from nat import NoPredecessor, from_int
from spec import Domain, ZeroMode, build_spec

# ---------------------------------------------------------------------------
# Configuration — a small domain so exhaustive checks are fast
# ---------------------------------------------------------------------------

DOMAIN = Domain(max_value=6)
SPEC = build_spec(DOMAIN, ZeroMode.ERROR)
CALC = NatCalculator(ZeroMode.ERROR)
TOTAL_SPEC = build_spec(DOMAIN, ZeroMode.TOTAL)
TOTAL_CALC = NatCalculator(ZeroMode.TOTAL)

in_domain = integers(min_value=0, max_value=DOMAIN.max_value).map(from_int)
EXPECTED_ERRORS = (NoPredecessor, DivisionByZero)


def _check_postconditions(spec, calc, op_name, inputs):
    op_spec = spec.operations[op_name]
    if not all(pre.check(*inputs) for pre in op_spec.preconditions):
        return
    if any(ec.trigger(*inputs) for ec in op_spec.error_conditions):
        return
    result = getattr(calc, op_name)(*inputs)
    for post in op_spec.postconditions:
        assert post.check(*inputs, result), (
            f"Postcondition '{post.name}' failed: {op_name}{inputs} = {result!r}"
        )


# ===================================================================
# DOMAIN
# ===================================================================

class TestDomain:

    def test_all_values(self):
        values = list(DOMAIN.all_values())
        assert values == [from_int(i) for i in range(7)]
        assert DOMAIN.width == 7

    def test_contains(self):
        assert DOMAIN.contains(from_int(6))
        assert not DOMAIN.contains(from_int(7))

    def test_negative_max_rejected(self):
        with pytest.raises(ValueError, match="max_value"):
            Domain(max_value=-1)

    def test_every_operation_has_postconditions(self):
        for name, op_spec in SPEC.operations.items():
            assert op_spec.postconditions, name
            assert op_spec.arity in (1, 2), name


# ===================================================================
# POSTCONDITIONS — property-based
# ===================================================================

class TestPostconditions:
    """Every postcondition in the spec holds for random inputs."""

    @given(a=in_domain, b=in_domain)
    @settings(max_examples=200)
    def test_binary_postconditions(self, a, b):
        for op_name, op_spec in SPEC.operations.items():
            if op_spec.arity == 2:
                _check_postconditions(SPEC, CALC, op_name, (a, b))

    @given(a=in_domain)
    def test_unary_postconditions(self, a):
        for op_name, op_spec in SPEC.operations.items():
            if op_spec.arity == 1:
                _check_postconditions(SPEC, CALC, op_name, (a,))

    @given(a=in_domain, b=in_domain)
    @settings(max_examples=200)
    def test_total_mode_postconditions(self, a, b):
        for op_name, op_spec in TOTAL_SPEC.operations.items():
            inputs = (a, b)[:op_spec.arity]
            _check_postconditions(TOTAL_SPEC, TOTAL_CALC, op_name, inputs)


# ===================================================================
# ERROR CONDITIONS
# ===================================================================

class TestErrorConditions:
    """Every error condition in the spec triggers correctly."""

    def test_error_mode_conditions_raise(self):
        triggered = 0
        values = list(DOMAIN.all_values())
        for op_name, op_spec in SPEC.operations.items():
            op = getattr(CALC, op_name)
            for inputs in itertools.product(values, repeat=op_spec.arity):
                for ec in op_spec.error_conditions:
                    if ec.trigger(*inputs):
                        triggered += 1
                        with pytest.raises(ec.exception):
                            op(*inputs)
        # pred(0) once, plus a zero divisor for each of divmod/div/mod
        assert triggered == 1 + 3 * DOMAIN.width

    def test_total_mode_never_triggers(self):
        values = list(DOMAIN.all_values())
        for op_spec in TOTAL_SPEC.operations.values():
            for inputs in itertools.product(values, repeat=op_spec.arity):
                for ec in op_spec.error_conditions:
                    assert not ec.trigger(*inputs)


# ===================================================================
# ALGEBRAIC PROPERTIES — property-based
# ===================================================================

class TestAlgebraicProperties:
    """Every algebraic property in the spec holds for random inputs."""

    @given(a=in_domain, b=in_domain, c=in_domain)
    @settings(max_examples=200)
    def test_all_properties(self, a, b, c):
        for op_name, prop in SPEC.all_properties:
            inputs = (a, b, c)[:prop.arity]
            try:
                ok = prop.check(CALC, *inputs)
            except EXPECTED_ERRORS:
                continue
            assert ok, (
                f"Property '{prop.name}' failed for {op_name}{inputs}"
            )

    def test_property_arities(self):
        arities = {prop.arity for _, prop in SPEC.all_properties}
        assert arities == {1, 2, 3}


# ===================================================================
# EXHAUSTIVE VERIFICATION — small domain
# ===================================================================

class TestExhaustive:
    """For a small domain, check *every* input tuple against postconditions."""

    @pytest.mark.parametrize("op_name", ["add", "sub", "mul", "cmp", "divmod", "div", "mod"])
    def test_all_pairs(self, op_name):
        checked = 0
        values = list(DOMAIN.all_values())
        for a, b in itertools.product(values, repeat=2):
            _check_postconditions(SPEC, CALC, op_name, (a, b))
            checked += 1
        assert checked == DOMAIN.width ** 2

    def test_all_pred(self):
        for a in DOMAIN.all_values():
            _check_postconditions(SPEC, CALC, "pred", (a,))
            _check_postconditions(TOTAL_SPEC, TOTAL_CALC, "pred", (a,))

    def test_pow_respects_small_exponent(self):
        pre = SPEC.operations["pow"].preconditions
        assert not all(p.check(from_int(2), from_int(5)) for p in pre)
        assert all(p.check(from_int(6), from_int(4)) for p in pre)

    def test_exhaustive_pair_count(self):
        """Sanity: confirm the expected number of pairs."""
        assert DOMAIN.width == 7
        assert DOMAIN.width ** 2 == 49
