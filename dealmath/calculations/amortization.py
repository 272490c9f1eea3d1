"""Loan payment and amortization schedule calculations."""

from __future__ import annotations

from dealmath.errors import require_positive
from dealmath.models import AmortizationEntry, MortgageSchedule


def monthly_payment(principal: float, annual_rate: float, months: int) -> float:
    """Level monthly payment for a fully amortizing loan.

    Args:
        principal: Loan amount.
        annual_rate: Annual interest rate as a percentage (7 for 7%).
        months: Number of monthly payments.

    Returns:
        The constant monthly payment. A 0% loan is paid off straight-line.
    """
    require_positive(principal=principal, months=months)

    monthly_rate = annual_rate / 100 / 12
    if monthly_rate == 0:
        return principal / months

    growth = (1 + monthly_rate) ** months
    return principal * (monthly_rate * growth) / (growth - 1)


def amortization_schedule(
    principal: float,
    annual_rate: float,
    months: int,
) -> list[AmortizationEntry]:
    """Generate a month-by-month amortization schedule.

    The payment is held constant for every period, including the last one.
    Floating point drift may leave a residual balance of a fraction of a
    cent in the final period; it is reported as-is rather than folded into
    the last payment. A balance that would dip below zero is clamped to 0.

    Args:
        principal: Loan amount (must be positive).
        annual_rate: Annual interest rate as a percentage.
        months: Loan term in months (must be positive).

    Returns:
        Exactly ``months`` entries, periods numbered from 1.
    """
    payment = monthly_payment(principal, annual_rate, months)
    monthly_rate = annual_rate / 100 / 12

    schedule: list[AmortizationEntry] = []
    balance = float(principal)

    for period in range(1, months + 1):
        interest = balance * monthly_rate
        principal_paid = payment - interest
        balance -= principal_paid
        if balance < 0:
            balance = 0.0

        schedule.append(
            AmortizationEntry(
                period=period,
                payment=payment,
                principal=principal_paid,
                interest=interest,
                balance=balance,
            )
        )

    return schedule


def total_interest(schedule: list[AmortizationEntry]) -> float:
    """Total interest paid over the schedule."""
    return sum(entry.interest for entry in schedule)


def balance_after(schedule: list[AmortizationEntry], period: int) -> float:
    """Outstanding balance once ``period`` payments have been made."""
    if not schedule:
        return 0.0
    if period <= 0:
        first = schedule[0]
        return first.balance + first.principal
    return schedule[min(period, len(schedule)) - 1].balance


def mortgage_schedule(principal: float, annual_rate: float, months: int) -> MortgageSchedule:
    """Build a schedule together with its payment and interest totals."""
    schedule = amortization_schedule(principal, annual_rate, months)
    interest = total_interest(schedule)

    return MortgageSchedule(
        principal=principal,
        annual_rate=annual_rate,
        months=months,
        monthly_payment=schedule[0].payment,
        total_interest=interest,
        total_paid=principal + interest,
        schedule=schedule,
    )
