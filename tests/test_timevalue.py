"""Tests for NPV and IRR."""

import pytest

from dealmath.errors import ValidationError
from dealmath.models import IRRStatus
from dealmath.calculations.timevalue import (
    annual_to_periodic_rate,
    calculate_irr,
    calculate_npv,
    periodic_to_annual_rate,
)


class TestNPV:
    def test_positive_npv(self):
        assert calculate_npv([50, 50, 50, 50, 50], 100, 10) > 0

    def test_zero_rate_is_plain_sum(self):
        assert calculate_npv([50, 50, 50], 100, 0) == 50
        assert calculate_npv([50, 50, 50, 50, 50], 100, 0) == 150

    def test_negative_npv(self):
        assert calculate_npv([10, 10, 10, 10, 10], 100, 15) < 0

    def test_discounting(self):
        # 110 one period out at 10% is worth exactly 100
        assert calculate_npv([110], 100, 10) == pytest.approx(0)

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            calculate_npv([], 100, 10)


class TestIRR:
    def test_simple_investment(self):
        result = calculate_irr([50, 50, 50], 100)
        assert result.converged
        assert result.status == IRRStatus.CONVERGED
        assert result.rate == pytest.approx(23.4, abs=0.1)

    def test_irr_zeroes_npv(self):
        cash_flows = [30_000, 30_000, 30_000, 30_000, 280_000]
        result = calculate_irr(cash_flows, 300_000)
        assert 0 < result.rate < 30
        assert calculate_npv(cash_flows, 300_000, result.rate) == pytest.approx(0, abs=1e-3)

    def test_negative_return(self):
        result = calculate_irr([40, 40, 10], 100)
        assert result.converged
        assert result.rate < 0

    def test_repeatable(self):
        assert calculate_irr([50, 50, 50], 100) == calculate_irr([50, 50, 50], 100)

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            calculate_irr([], 100_000)

    def test_iteration_cap(self):
        result = calculate_irr([50, 50, 50], 100, max_iterations=1)
        assert result.status == IRRStatus.MAX_ITERATIONS
        assert result.rate is None
        assert result.iterations == 1

    def test_zero_derivative(self):
        result = calculate_irr([0, 0], 100)
        assert result.status == IRRStatus.ZERO_DERIVATIVE
        assert not result.converged

    def test_invalid_guess_diverges(self):
        result = calculate_irr([50, 50, 50], 100, initial_guess=-1.5)
        assert result.status == IRRStatus.DIVERGED

    def test_no_root_does_not_converge(self):
        # money only ever goes out, so no rate makes NPV zero
        result = calculate_irr([-50], 100)
        assert not result.converged
        assert result.rate is None

    def test_value_or_fallback(self):
        assert calculate_irr([0, 0], 100).value_or(0.0) == 0.0
        converged = calculate_irr([50, 50, 50], 100)
        assert converged.value_or(0.0) == converged.rate


class TestRateConversion:
    def test_monthly_to_annual(self):
        assert periodic_to_annual_rate(1) == pytest.approx(12.6825, abs=1e-4)

    def test_annual_to_monthly(self):
        assert annual_to_periodic_rate(12.6825) == pytest.approx(1, abs=1e-4)
