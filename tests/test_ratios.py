"""Tests for the primitive ratio calculators."""

import pytest

from dealmath.errors import ValidationError
from dealmath.calculations.ratios import (
    calculate_noi,
    calculate_cap_rate,
    calculate_cash_on_cash,
    calculate_roi,
    calculate_flip_profit,
)


class TestNOI:
    def test_rental_noi(self):
        # (2000 x 0.90) x 12 - (500 x 12) = 21,600 - 6,000
        assert calculate_noi(2000, 90, 500) == pytest.approx(15_600)

    def test_full_occupancy(self):
        assert calculate_noi(2000, 100, 500) == 18_000

    def test_no_expenses(self):
        assert calculate_noi(2000, 90) == pytest.approx(21_600)

    def test_zero_occupancy_is_a_loss(self):
        assert calculate_noi(2000, 0, 500) == -6_000

    def test_negative_rent_rejected(self):
        with pytest.raises(ValidationError) as exc:
            calculate_noi(-2000, 90, 500)
        assert "monthly_rent" in exc.value.details

    def test_negative_occupancy_rejected(self):
        with pytest.raises(ValidationError):
            calculate_noi(2000, -10, 500)

    def test_negative_expenses_rejected(self):
        with pytest.raises(ValidationError):
            calculate_noi(2000, 90, -1)


class TestCapRate:
    def test_cap_rate(self):
        assert calculate_cap_rate(18_000, 300_000) == pytest.approx(6)

    def test_zero_noi(self):
        assert calculate_cap_rate(0, 300_000) == 0

    def test_negative_noi(self):
        assert calculate_cap_rate(-10_000, 300_000) == pytest.approx(-3.33, abs=0.01)

    @pytest.mark.parametrize("price", [0, -300_000])
    def test_non_positive_price_rejected(self, price):
        with pytest.raises(ValidationError) as exc:
            calculate_cap_rate(18_000, price)
        assert exc.value.details == {"purchase_price": "must be positive"}


class TestCashOnCash:
    def test_cash_on_cash(self):
        # (1500 x 12) / 60,000
        assert calculate_cash_on_cash(1500, 60_000) == pytest.approx(30)

    def test_zero_noi(self):
        assert calculate_cash_on_cash(0, 60_000) == 0

    def test_negative_noi(self):
        assert calculate_cash_on_cash(-500, 60_000) == pytest.approx(-10)

    def test_zero_down_payment_rejected(self):
        with pytest.raises(ValidationError):
            calculate_cash_on_cash(1500, 0)


class TestROI:
    def test_roi(self):
        assert calculate_roi(100_000, 500_000) == pytest.approx(20)

    def test_loss(self):
        assert calculate_roi(-50_000, 500_000) == pytest.approx(-10)

    def test_large_and_small_values(self):
        assert calculate_roi(1_000_000_000, 5_000_000_000) == pytest.approx(20)
        assert calculate_roi(0.01, 0.5) == pytest.approx(2)

    def test_zero_investment_rejected(self):
        with pytest.raises(ValidationError):
            calculate_roi(100_000, 0)

    def test_validation_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            calculate_roi(100_000, -1)


class TestFlipProfit:
    def test_profit(self):
        assert calculate_flip_profit(300_000, 50_000, 10_000, 450_000, 20_000) == 70_000

    def test_holding_costs(self):
        assert calculate_flip_profit(300_000, 50_000, 10_000, 450_000, 20_000, 5_000) == 65_000

    def test_loss(self):
        assert calculate_flip_profit(300_000, 100_000, 20_000, 350_000, 30_000) == -100_000
