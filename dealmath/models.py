"""Data models for dealmath."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ExitStrategy(str, Enum):
    RENT = "rent"
    AIRBNB = "airbnb"
    FLIP = "flip"


class IRRStatus(str, Enum):
    CONVERGED = "converged"
    MAX_ITERATIONS = "max_iterations"
    ZERO_DERIVATIVE = "zero_derivative"
    DIVERGED = "diverged"


class SensitivityVariable(str, Enum):
    SALE_PRICE = "sale_price"
    REHAB_COST = "rehab_cost"
    PURCHASE_PRICE = "purchase_price"


class AmortizationEntry(BaseModel):
    """One month of a loan amortization schedule."""

    period: int  # 1-based
    payment: float
    principal: float
    interest: float
    balance: float


class MortgageSchedule(BaseModel):
    """A full schedule plus the totals the mortgage endpoint reports."""

    principal: float
    annual_rate: float  # percentage
    months: int
    monthly_payment: float
    total_interest: float
    total_paid: float
    schedule: list[AmortizationEntry] = Field(default_factory=list)


class Comparable(BaseModel):
    """A recent comparable sale used to estimate ARV."""

    sale_price: float
    area: float  # square feet, or whatever unit the subject uses

    @property
    def price_per_area(self) -> float:
        return self.sale_price / self.area


class IRRResult(BaseModel):
    """Outcome of the IRR solver.

    ``rate`` is a percentage and is only set when ``status`` is CONVERGED.
    """

    status: IRRStatus
    rate: Optional[float] = None
    iterations: int = 0

    @property
    def converged(self) -> bool:
        return self.status == IRRStatus.CONVERGED

    def value_or(self, default: float) -> float:
        """Return the converged rate, or ``default`` when the solver failed."""
        if self.converged and self.rate is not None:
            return self.rate
        return default


class FlipBaseCase(BaseModel):
    """Inputs a flip profit is computed from."""

    purchase_price: float
    rehab_cost: float
    closing_costs: float
    sale_price: float
    selling_costs: float
    holding_costs: float = 0.0


class SensitivityScenario(BaseModel):
    variable: SensitivityVariable
    down_percent: float
    up_percent: float


class SensitivityResult(BaseModel):
    base_profit: float
    variation_percent: float
    scenarios: list[SensitivityScenario] = Field(default_factory=list)

    def scenario(self, variable: SensitivityVariable | str) -> SensitivityScenario:
        variable = SensitivityVariable(variable)
        for s in self.scenarios:
            if s.variable == variable:
                return s
        raise KeyError(variable.value)


class ScenarioAssumptions(BaseModel):
    """Deal inputs for one exit strategy on one property.

    Optional fields left as None fall back to the analysis config defaults.
    """

    name: str = "Scenario"
    exit_strategy: ExitStrategy
    purchase_price: float
    rehab_cost: float = 0.0
    closing_costs: float = 0.0
    holding_costs: float = 0.0
    interest_rate: float = 0.0  # annual percentage
    hold_time_months: Optional[int] = None
    # long-term rental
    monthly_rent: float = 0.0
    occupancy_rate: Optional[float] = None  # percentage
    monthly_expenses: float = 0.0
    maintenance_cost: float = 0.0
    # short-term rental
    daily_rate: Optional[float] = None
    average_occupancy: Optional[float] = None  # percentage
    cleaning_cost: float = 0.0
    # flip / exit
    sale_price: Optional[float] = None
    selling_costs: float = 0.0
    # financing
    ltv: Optional[float] = None  # percentage of purchase price financed
    loan_term_months: Optional[int] = None


class ScenarioMetrics(BaseModel):
    """Metrics computed for a scenario, rounded to cents."""

    name: str
    strategy: ExitStrategy
    cap_rate: float = 0.0  # percentage
    cash_on_cash: float = 0.0  # percentage
    roi: float = 0.0  # percentage
    monthly_noi: float = 0.0
    total_profit: float = 0.0
    irr: float = 0.0  # percentage, annualized
    irr_available: bool = False
    npv: float = 0.0
    break_even_months: Optional[float] = None
    annualized_return: Optional[float] = None  # percentage


class ScenarioComparison(BaseModel):
    """Scenarios ranked by ROI, with the leaders on other axes."""

    comparisons: list[ScenarioMetrics] = Field(default_factory=list)
    best_by_roi: Optional[ScenarioMetrics] = None
    best_by_cap_rate: Optional[ScenarioMetrics] = None
    best_by_profit: Optional[ScenarioMetrics] = None
