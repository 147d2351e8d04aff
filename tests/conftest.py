"""Shared fixtures for the Peano test suite."""

from __future__ import annotations

import pytest

from calculator import NatCalculator
from spec import ZeroMode


@pytest.fixture
def calc_error() -> NatCalculator:
    return NatCalculator(ZeroMode.ERROR)


@pytest.fixture
def calc_total() -> NatCalculator:
    return NatCalculator(ZeroMode.TOTAL)
