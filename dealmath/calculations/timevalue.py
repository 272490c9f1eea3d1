"""NPV and IRR calculations.

Cash flows are periodic: ``cash_flows[0]`` arrives at the end of period 1,
``cash_flows[1]`` at the end of period 2, and so on. The initial investment
is paid at period 0. Rates are percentages per period.

IRR uses Newton-Raphson on NPV as a function of the rate. The solver never
raises on numerical failure; it returns an ``IRRResult`` whose status tells
the caller what happened.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from dealmath.errors import ValidationError
from dealmath.models import IRRResult, IRRStatus

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 100
DEFAULT_GUESS = 0.1
RATE_TOLERANCE = 1e-7
NPV_TOLERANCE = 1e-6


def _require_cash_flows(cash_flows: Sequence[float]) -> None:
    if not cash_flows:
        raise ValidationError({"cash_flows": "must contain at least one cash flow"})


def _npv(cash_flows: Sequence[float], initial_investment: float, rate: float) -> float:
    npv = -initial_investment
    for period, cf in enumerate(cash_flows, start=1):
        npv += cf / ((1 + rate) ** period)
    return npv


def _npv_derivative(cash_flows: Sequence[float], rate: float) -> float:
    """d(NPV)/d(rate); the initial investment is constant and drops out."""
    dnpv = 0.0
    for period, cf in enumerate(cash_flows, start=1):
        dnpv -= (period * cf) / ((1 + rate) ** (period + 1))
    return dnpv


def calculate_npv(
    cash_flows: Sequence[float],
    initial_investment: float,
    discount_rate: float,
) -> float:
    """Calculate Net Present Value.

    NPV = sum(CF_t / (1 + r)^t for t = 1..N) - initial_investment

    Args:
        cash_flows: Cash flows for periods 1..N (at least one).
        initial_investment: Amount invested at period 0.
        discount_rate: Discount rate per period as a percentage (10 for 10%).

    Returns:
        NPV in the cash flows' currency. A 0% rate is a plain sum.
    """
    _require_cash_flows(cash_flows)
    return _npv(cash_flows, initial_investment, discount_rate / 100)


def calculate_irr(
    cash_flows: Sequence[float],
    initial_investment: float,
    *,
    initial_guess: float = DEFAULT_GUESS,
    max_iterations: int = MAX_ITERATIONS,
    rate_tolerance: float = RATE_TOLERANCE,
    npv_tolerance: float = NPV_TOLERANCE,
) -> IRRResult:
    """Calculate the Internal Rate of Return with Newton-Raphson.

    Finds r such that ``calculate_npv(cash_flows, initial_investment, r) == 0``.
    Iteration stops when |NPV| drops below ``npv_tolerance``, when a step
    moves the rate by less than ``rate_tolerance``, or after
    ``max_iterations`` steps.

    Args:
        cash_flows: Cash flows for periods 1..N (at least one).
        initial_investment: Amount invested at period 0.
        initial_guess: Starting rate as a decimal (0.1 = 10%).
        max_iterations: Hard cap on Newton steps.
        rate_tolerance: Convergence threshold on the step size (decimal).
        npv_tolerance: Convergence threshold on |NPV|.

    Returns:
        IRRResult with ``rate`` as a percentage per period when converged.
        Otherwise the status is MAX_ITERATIONS, ZERO_DERIVATIVE or DIVERGED
        and ``rate`` is None.
    """
    _require_cash_flows(cash_flows)

    rate = initial_guess

    for iteration in range(1, max_iterations + 1):
        if 1 + rate <= 0:
            return _failed(IRRStatus.DIVERGED, iteration, rate)

        try:
            npv = _npv(cash_flows, initial_investment, rate)
            dnpv = _npv_derivative(cash_flows, rate)
        except (OverflowError, ZeroDivisionError):
            return _failed(IRRStatus.DIVERGED, iteration, rate)

        if abs(npv) < npv_tolerance:
            return _converged(rate, iteration)

        if dnpv == 0 or not math.isfinite(dnpv):
            return _failed(IRRStatus.ZERO_DERIVATIVE, iteration, rate)

        new_rate = rate - npv / dnpv
        if not math.isfinite(new_rate):
            return _failed(IRRStatus.DIVERGED, iteration, rate)
        if new_rate <= -1:
            # step would pass -100%; go halfway to it instead
            new_rate = (rate - 1) / 2

        if abs(new_rate - rate) < rate_tolerance:
            return _converged(new_rate, iteration)

        rate = new_rate

    return _failed(IRRStatus.MAX_ITERATIONS, max_iterations, rate)


def _converged(rate: float, iterations: int) -> IRRResult:
    logger.debug("IRR converged to %.6f after %d iterations", rate, iterations)
    return IRRResult(status=IRRStatus.CONVERGED, rate=rate * 100, iterations=iterations)


def _failed(status: IRRStatus, iterations: int, last_rate: float) -> IRRResult:
    logger.debug("IRR failed (%s) after %d iterations, last rate %r", status.value, iterations, last_rate)
    return IRRResult(status=status, iterations=iterations)


def periodic_to_annual_rate(rate: float, periods_per_year: int = 12) -> float:
    """Compound a per-period percentage rate up to an annual percentage rate."""
    return ((1 + rate / 100) ** periods_per_year - 1) * 100


def annual_to_periodic_rate(rate: float, periods_per_year: int = 12) -> float:
    """Convert an annual percentage rate to the equivalent per-period rate."""
    return ((1 + rate / 100) ** (1 / periods_per_year) - 1) * 100
