"""Primitive return ratios: NOI, cap rate, cash-on-cash, ROI and flip profit."""

from __future__ import annotations

from dealmath.errors import require_non_negative, require_positive


def calculate_noi(
    monthly_rent: float,
    occupancy_rate: float,
    monthly_expenses: float = 0.0,
) -> float:
    """Calculate annual Net Operating Income.

    NOI = (rent x occupancy x 12) - (expenses x 12)

    Args:
        monthly_rent: Gross monthly rent at full occupancy.
        occupancy_rate: Occupancy as a percentage (0-100).
        monthly_expenses: Monthly operating expenses.

    Returns:
        Annual NOI. Zero or negative values describe a loss-making property.
    """
    require_non_negative(
        monthly_rent=monthly_rent,
        occupancy_rate=occupancy_rate,
        monthly_expenses=monthly_expenses,
    )

    annual_gross_income = monthly_rent * (occupancy_rate / 100) * 12
    annual_expenses = monthly_expenses * 12
    return annual_gross_income - annual_expenses


def calculate_cap_rate(noi: float, purchase_price: float) -> float:
    """Cap rate as a percentage of purchase price."""
    require_positive(purchase_price=purchase_price)
    return (noi / purchase_price) * 100


def calculate_cash_on_cash(monthly_noi: float, down_payment: float) -> float:
    """Annualized cash-on-cash return (percentage) on the cash put down."""
    require_positive(down_payment=down_payment)
    return (monthly_noi * 12) / down_payment * 100


def calculate_roi(total_profit: float, total_invested: float) -> float:
    require_positive(total_invested=total_invested)
    return (total_profit / total_invested) * 100


def calculate_flip_profit(
    purchase_price: float,
    rehab_cost: float,
    closing_costs: float,
    sale_price: float,
    selling_costs: float,
    holding_costs: float = 0.0,
) -> float:
    """Profit from buying, renovating and reselling a property.

    profit = sale - (purchase + rehab + closing + holding + selling)

    Negative results are losses, not errors.
    """
    total_invested = purchase_price + rehab_cost + closing_costs + holding_costs
    return sale_price - (total_invested + selling_costs)
