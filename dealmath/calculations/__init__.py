"""Pure financial calculations for real estate investment analysis."""

from dealmath.calculations.ratios import (
    calculate_noi,
    calculate_cap_rate,
    calculate_cash_on_cash,
    calculate_roi,
    calculate_flip_profit,
)
from dealmath.calculations.amortization import (
    amortization_schedule,
    balance_after,
    monthly_payment,
    mortgage_schedule,
    total_interest,
)
from dealmath.calculations.valuation import estimate_arv, price_per_area
from dealmath.calculations.growth import calculate_cagr, break_even_months
from dealmath.calculations.timevalue import (
    calculate_npv,
    calculate_irr,
    periodic_to_annual_rate,
    annual_to_periodic_rate,
)
from dealmath.calculations.sensitivity import sensitivity_analysis
