"""Scenario analysis engine that dispatches to per-strategy analyzers."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

from dealmath.config import AnalysisConfig
from dealmath.errors import ValidationError
from dealmath.models import (
    ExitStrategy,
    ScenarioAssumptions,
    ScenarioComparison,
    ScenarioMetrics,
    SensitivityResult,
)
from dealmath.analysis.airbnb import ShortTermRentalAnalyzer
from dealmath.analysis.flip import FlipAnalyzer
from dealmath.analysis.rental import RentalAnalyzer

logger = logging.getLogger(__name__)


class StrategyAnalyzer(Protocol):
    def analyze(self, assumptions: ScenarioAssumptions) -> ScenarioMetrics: ...


class ScenarioAnalyzer:
    """Runs the analyzer matching each scenario's exit strategy.

    Analyzers can be passed in explicitly; otherwise one is built for every
    strategy enabled in the config.
    """

    def __init__(
        self,
        config: AnalysisConfig,
        analyzers: Mapping[ExitStrategy, StrategyAnalyzer] | None = None,
    ):
        self.config = config

        if analyzers is not None:
            self._analyzers: dict[ExitStrategy, StrategyAnalyzer] = dict(analyzers)
            return

        self._analyzers = {}
        if "rent" in config.strategies:
            self._analyzers[ExitStrategy.RENT] = RentalAnalyzer(config)
        if "airbnb" in config.strategies:
            self._analyzers[ExitStrategy.AIRBNB] = ShortTermRentalAnalyzer(config)
        if "flip" in config.strategies:
            self._analyzers[ExitStrategy.FLIP] = FlipAnalyzer(config)

    @property
    def strategies(self) -> list[ExitStrategy]:
        return list(self._analyzers)

    def analyze(self, assumptions: ScenarioAssumptions) -> ScenarioMetrics:
        """Compute the metrics for one scenario."""
        analyzer = self._analyzers.get(assumptions.exit_strategy)
        if analyzer is None:
            raise ValidationError(
                {"exit_strategy": f"'{assumptions.exit_strategy.value}' is not enabled"}
            )

        logger.info("Analyzing %r as %s", assumptions.name, assumptions.exit_strategy.value)
        return analyzer.analyze(assumptions)

    def analyze_many(self, scenarios: list[ScenarioAssumptions]) -> list[ScenarioMetrics]:
        return [self.analyze(s) for s in scenarios]

    def compare(self, scenarios: list[ScenarioAssumptions]) -> ScenarioComparison:
        """Analyze scenarios and rank them against each other."""
        return compare_scenarios(self.analyze_many(scenarios))

    def sensitivity(
        self,
        assumptions: ScenarioAssumptions,
        variation_percent: float | None = None,
    ) -> SensitivityResult:
        """Flip-profit sensitivity for a flip scenario."""
        if assumptions.exit_strategy != ExitStrategy.FLIP:
            raise ValidationError({"exit_strategy": "sensitivity analysis requires a flip scenario"})

        analyzer = self._analyzers.get(ExitStrategy.FLIP)
        if not isinstance(analyzer, FlipAnalyzer):
            analyzer = FlipAnalyzer(self.config)
        return analyzer.sensitivity(assumptions, variation_percent)


def compare_scenarios(metrics: list[ScenarioMetrics]) -> ScenarioComparison:
    """Rank scenario metrics by ROI and pick the leaders by cap rate and profit."""
    if not metrics:
        return ScenarioComparison()

    ranked = sorted(metrics, key=lambda m: m.roi, reverse=True)
    return ScenarioComparison(
        comparisons=ranked,
        best_by_roi=ranked[0],
        best_by_cap_rate=max(metrics, key=lambda m: m.cap_rate),
        best_by_profit=max(metrics, key=lambda m: m.total_profit),
    )
