"""Growth rate and break-even calculations."""

from __future__ import annotations

import math

from dealmath.errors import require_non_negative, require_positive


def calculate_cagr(begin_value: float, end_value: float, years: float) -> float:
    """Compound annual growth rate as a percentage.

    CAGR = (end / begin) ^ (1 / years) - 1

    A decline gives a negative CAGR; an end value of 0 gives -100.
    """
    require_positive(begin_value=begin_value, years=years)
    require_non_negative(end_value=end_value)

    return ((end_value / begin_value) ** (1 / years) - 1) * 100


def break_even_months(monthly_noi: float, initial_investment: float) -> float:
    """Months of NOI needed to recover the initial investment.

    Returns ``math.inf`` when NOI is zero (never breaks even) and ``-math.inf``
    when NOI is negative. These are results, not errors.
    """
    if monthly_noi == 0:
        return math.inf
    if monthly_noi < 0:
        return -math.inf
    return initial_investment / monthly_noi
