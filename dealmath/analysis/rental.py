"""Buy-and-hold rental scenario analysis."""

from __future__ import annotations

import logging

from dealmath.calculations.amortization import amortization_schedule, balance_after
from dealmath.calculations.growth import break_even_months
from dealmath.calculations.ratios import (
    calculate_cap_rate,
    calculate_cash_on_cash,
    calculate_noi,
    calculate_roi,
)
from dealmath.calculations.timevalue import (
    annual_to_periodic_rate,
    calculate_irr,
    calculate_npv,
    periodic_to_annual_rate,
)
from dealmath.config import AnalysisConfig
from dealmath.errors import require_positive
from dealmath.models import AmortizationEntry, ExitStrategy, ScenarioAssumptions, ScenarioMetrics

logger = logging.getLogger(__name__)


class RentalAnalyzer:
    """Analyze a long-term rental scenario.

    Works from annual NOI to cap rate and cash-on-cash, then builds the
    monthly levered cash flows of the hold (NOI less debt service, plus net
    sale proceeds at exit when a sale price is given) for IRR and NPV.
    Break-even uses the average monthly cash flow over the hold.
    """

    strategy = ExitStrategy.RENT

    def __init__(self, config: AnalysisConfig):
        self.cfg = config

    def analyze(self, assumptions: ScenarioAssumptions) -> ScenarioMetrics:
        a = assumptions
        annual_noi = self._annual_noi(a)
        monthly_noi = annual_noi / 12
        cap_rate = calculate_cap_rate(annual_noi, a.purchase_price)

        # Financing
        ltv = a.ltv if a.ltv is not None else self.cfg.rental.default_ltv
        loan_amount = a.purchase_price * ltv / 100
        down_payment = a.purchase_price - loan_amount
        cash_on_cash = calculate_cash_on_cash(monthly_noi, down_payment)

        hold_months = a.hold_time_months or self.cfg.default_hold_time_months
        term = a.loan_term_months or self.cfg.rental.loan_term_months
        require_positive(hold_time_months=hold_months, loan_term_months=term)

        schedule: list[AmortizationEntry] = []
        if loan_amount > 0:
            schedule = amortization_schedule(loan_amount, a.interest_rate, term)

        # Cash flows over the hold; debt service stops once the loan is paid off
        cash_flows = [
            monthly_noi - (schedule[month].payment if month < len(schedule) else 0.0)
            for month in range(hold_months)
        ]
        monthly_cash_flow = sum(cash_flows) / hold_months
        if a.sale_price is not None:
            cash_flows[-1] += a.sale_price - a.selling_costs - balance_after(schedule, hold_months)

        cash_invested = down_payment + a.rehab_cost + a.closing_costs

        # the configured guess is annual; the cash flows are monthly
        irr_cfg = self.cfg.irr
        irr_result = calculate_irr(
            cash_flows,
            cash_invested,
            initial_guess=annual_to_periodic_rate(irr_cfg.initial_guess * 100) / 100,
            max_iterations=irr_cfg.max_iterations,
            rate_tolerance=irr_cfg.rate_tolerance,
            npv_tolerance=irr_cfg.npv_tolerance,
        )
        if irr_result.converged:
            irr = periodic_to_annual_rate(irr_result.rate)
        else:
            logger.warning(
                "IRR unavailable for %r (%s); using %.2f",
                a.name, irr_result.status.value, irr_cfg.fallback_rate,
            )
            irr = irr_cfg.fallback_rate

        monthly_discount = annual_to_periodic_rate(self.cfg.default_discount_rate)
        npv = calculate_npv(cash_flows, cash_invested, monthly_discount)

        total_profit = annual_noi * (hold_months / 12)
        roi = calculate_roi(total_profit, cash_invested)

        return ScenarioMetrics(
            name=a.name,
            strategy=self.strategy,
            cap_rate=round(cap_rate, 2),
            cash_on_cash=round(cash_on_cash, 2),
            roi=round(roi, 2),
            monthly_noi=round(monthly_noi, 2),
            total_profit=round(total_profit, 2),
            irr=round(irr, 2),
            irr_available=irr_result.converged,
            npv=round(npv, 2),
            break_even_months=round(break_even_months(monthly_cash_flow, cash_invested), 2),
        )

    def _annual_noi(self, a: ScenarioAssumptions) -> float:
        occupancy = (
            a.occupancy_rate if a.occupancy_rate is not None
            else self.cfg.rental.default_occupancy_rate
        )
        return calculate_noi(a.monthly_rent, occupancy, a.monthly_expenses + a.maintenance_cost)
