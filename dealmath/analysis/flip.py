"""Fix-and-flip scenario analysis."""

from __future__ import annotations

import logging

from dealmath.calculations.growth import calculate_cagr
from dealmath.calculations.ratios import calculate_flip_profit, calculate_roi
from dealmath.calculations.sensitivity import sensitivity_analysis
from dealmath.calculations.timevalue import calculate_irr, calculate_npv
from dealmath.config import AnalysisConfig
from dealmath.errors import require_positive
from dealmath.models import (
    ExitStrategy,
    FlipBaseCase,
    ScenarioAssumptions,
    ScenarioMetrics,
    SensitivityResult,
)

logger = logging.getLogger(__name__)


class FlipAnalyzer:
    """Analyze a buy, renovate and resell scenario.

    The whole project is treated as one period: cash goes in at purchase and
    comes back (invested + profit) at sale, so IRR is the return over the
    hold. The annualized return spreads it over the hold in years.
    """

    strategy = ExitStrategy.FLIP

    def __init__(self, config: AnalysisConfig):
        self.cfg = config

    def analyze(self, assumptions: ScenarioAssumptions) -> ScenarioMetrics:
        a = assumptions
        hold_months = a.hold_time_months or self.cfg.default_hold_time_months
        require_positive(hold_time_months=hold_months)

        total_profit = calculate_flip_profit(
            a.purchase_price,
            a.rehab_cost,
            a.closing_costs,
            a.sale_price or 0.0,
            a.selling_costs,
            a.holding_costs,
        )
        invested = a.purchase_price + a.rehab_cost + a.closing_costs + a.holding_costs
        roi = calculate_roi(total_profit, invested)

        exit_cash_flows = [invested + total_profit]
        irr_cfg = self.cfg.irr
        irr_result = calculate_irr(
            exit_cash_flows,
            invested,
            initial_guess=irr_cfg.initial_guess,
            max_iterations=irr_cfg.max_iterations,
            rate_tolerance=irr_cfg.rate_tolerance,
            npv_tolerance=irr_cfg.npv_tolerance,
        )
        if not irr_result.converged:
            logger.warning(
                "IRR unavailable for %r (%s); using %.2f",
                a.name, irr_result.status.value, irr_cfg.fallback_rate,
            )
        irr = irr_result.value_or(irr_cfg.fallback_rate)

        discount_rate = a.interest_rate or self.cfg.default_discount_rate
        npv = calculate_npv(exit_cash_flows, invested, discount_rate)

        annualized_return = None
        if invested + total_profit >= 0:
            annualized_return = round(calculate_cagr(invested, invested + total_profit, hold_months / 12), 2)

        return ScenarioMetrics(
            name=a.name,
            strategy=self.strategy,
            roi=round(roi, 2),
            total_profit=round(total_profit, 2),
            irr=round(irr, 2),
            irr_available=irr_result.converged,
            npv=round(npv, 2),
            annualized_return=annualized_return,
        )

    def sensitivity(
        self,
        assumptions: ScenarioAssumptions,
        variation_percent: float | None = None,
    ) -> SensitivityResult:
        """Profit sensitivity to sale price, rehab cost and purchase price."""
        a = assumptions
        base_case = FlipBaseCase(
            purchase_price=a.purchase_price,
            rehab_cost=a.rehab_cost,
            closing_costs=a.closing_costs,
            sale_price=a.sale_price or 0.0,
            selling_costs=a.selling_costs,
            holding_costs=a.holding_costs,
        )
        if variation_percent is None:
            variation_percent = self.cfg.sensitivity.variation_percent
        return sensitivity_analysis(base_case, variation_percent)
