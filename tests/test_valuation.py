"""Tests for ARV estimation from comparable sales."""

import pytest

from dealmath.errors import ValidationError
from dealmath.models import Comparable
from dealmath.calculations.valuation import estimate_arv, price_per_area


def _comps(*pairs) -> list[Comparable]:
    return [Comparable(sale_price=price, area=area) for price, area in pairs]


class TestEstimateARV:
    def test_median_price_per_area(self):
        comps = _comps((300_000, 2000), (350_000, 2100), (400_000, 2400))
        # $150, $166.67, $166.67 per sqft -> median $166.67
        assert estimate_arv(comps, 2000) == pytest.approx(333_333, abs=1)

    def test_even_count_averages_middle_values(self):
        comps = _comps((100_000, 1000), (400_000, 2000), (300_000, 1000), (250_000, 1000))
        # sorted: 100, 200, 250, 300 -> (200 + 250) / 2
        assert estimate_arv(comps, 1000) == pytest.approx(225_000)

    def test_single_comparable(self):
        assert estimate_arv(_comps((300_000, 2000)), 2000) == 300_000

    def test_order_does_not_matter(self):
        comps = _comps((400_000, 2400), (300_000, 2000), (350_000, 2100))
        assert estimate_arv(comps, 1500) == estimate_arv(list(reversed(comps)), 1500)

    def test_empty_rejected(self):
        with pytest.raises(ValidationError) as exc:
            estimate_arv([], 2000)
        assert "comparables" in exc.value.details

    def test_zero_subject_area_rejected(self):
        with pytest.raises(ValidationError):
            estimate_arv(_comps((300_000, 2000)), 0)

    def test_comparable_without_area_rejected(self):
        with pytest.raises(ValidationError) as exc:
            estimate_arv(_comps((300_000, 2000), (250_000, 0)), 2000)
        assert "comparables[1].area" in exc.value.details


def test_price_per_area_sorted():
    comps = _comps((400_000, 2000), (300_000, 2000))
    assert price_per_area(comps) == [150.0, 200.0]
