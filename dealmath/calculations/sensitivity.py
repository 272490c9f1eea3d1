"""Sensitivity of flip profit to the key deal assumptions."""

from __future__ import annotations

from dealmath.calculations.ratios import calculate_flip_profit
from dealmath.models import (
    FlipBaseCase,
    SensitivityResult,
    SensitivityScenario,
    SensitivityVariable,
)

# Output order is part of the contract.
VARIABLES = (
    SensitivityVariable.SALE_PRICE,
    SensitivityVariable.REHAB_COST,
    SensitivityVariable.PURCHASE_PRICE,
)


def _profit(case: FlipBaseCase) -> float:
    return calculate_flip_profit(
        case.purchase_price,
        case.rehab_cost,
        case.closing_costs,
        case.sale_price,
        case.selling_costs,
        case.holding_costs,
    )


def _scaled(case: FlipBaseCase, variable: SensitivityVariable, factor: float) -> FlipBaseCase:
    field = variable.value
    return case.model_copy(update={field: getattr(case, field) * factor})


def sensitivity_analysis(
    base_case: FlipBaseCase,
    variation_percent: float = 10.0,
) -> SensitivityResult:
    """Recompute flip profit with one input moved down and up at a time.

    Each variable is scaled by ``1 - variation`` and ``1 + variation`` while
    every other input stays at its base value.

    Args:
        base_case: The unperturbed deal.
        variation_percent: Size of the perturbation (10 for +/-10%).
    """
    variation = variation_percent / 100

    scenarios = [
        SensitivityScenario(
            variable=variable,
            down_percent=_profit(_scaled(base_case, variable, 1 - variation)),
            up_percent=_profit(_scaled(base_case, variable, 1 + variation)),
        )
        for variable in VARIABLES
    ]

    return SensitivityResult(
        base_profit=_profit(base_case),
        variation_percent=variation_percent,
        scenarios=scenarios,
    )
