"""Short-term (Airbnb style) rental scenario analysis."""

from __future__ import annotations

from dealmath.analysis.rental import RentalAnalyzer
from dealmath.calculations.ratios import calculate_noi
from dealmath.models import ExitStrategy, ScenarioAssumptions


class ShortTermRentalAnalyzer(RentalAnalyzer):
    """Analyze a nightly-rental scenario.

    Income comes from a daily rate and an average occupancy instead of a
    monthly rent, and the booking platform's fee comes off gross revenue.
    Everything downstream of NOI is the long-term rental calculation.
    """

    strategy = ExitStrategy.AIRBNB

    def _annual_noi(self, a: ScenarioAssumptions) -> float:
        str_cfg = self.cfg.short_term_rental
        daily_rate = a.daily_rate if a.daily_rate is not None else str_cfg.default_daily_rate
        occupancy = (
            a.average_occupancy if a.average_occupancy is not None
            else str_cfg.default_average_occupancy
        )

        # a full month of nights at the daily rate
        monthly_rent_equivalent = daily_rate * 365 / 12
        expenses = a.monthly_expenses + a.cleaning_cost
        noi = calculate_noi(monthly_rent_equivalent, occupancy, expenses)

        gross_revenue = daily_rate * 365 * occupancy / 100
        return noi - gross_revenue * str_cfg.platform_fee_pct
