"""Tests for CAGR and break-even calculations."""

import math

import pytest

from dealmath.errors import ValidationError
from dealmath.calculations.growth import break_even_months, calculate_cagr


class TestCAGR:
    def test_ten_percent(self):
        assert calculate_cagr(1000, 1610.51, 5) == pytest.approx(10, abs=0.1)

    def test_decline_is_negative(self):
        assert calculate_cagr(1000, 500, 5) < 0

    def test_no_growth(self):
        assert calculate_cagr(1000, 1000, 5) == pytest.approx(0, abs=1e-9)

    def test_total_loss(self):
        assert calculate_cagr(1000, 0, 5) == pytest.approx(-100)

    def test_negative_begin_rejected(self):
        with pytest.raises(ValidationError):
            calculate_cagr(-1000, 1610.51, 5)

    def test_zero_years_rejected(self):
        with pytest.raises(ValidationError):
            calculate_cagr(1000, 1610.51, 0)

    def test_negative_end_rejected(self):
        with pytest.raises(ValidationError) as exc:
            calculate_cagr(1000, -10, 5)
        assert "end_value" in exc.value.details


class TestBreakEvenMonths:
    def test_profitable(self):
        assert break_even_months(1000, 60_000) == 60

    def test_no_investment(self):
        assert break_even_months(1000, 0) == 0

    def test_zero_noi_never_breaks_even(self):
        assert break_even_months(0, 60_000) == math.inf

    def test_negative_noi(self):
        assert break_even_months(-1000, 60_000) == -math.inf

    def test_small_investment(self):
        assert break_even_months(1000, 100) == pytest.approx(0.1)
