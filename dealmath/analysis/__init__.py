"""Scenario analysis for each exit strategy."""

from dealmath.analysis.engine import ScenarioAnalyzer, StrategyAnalyzer, compare_scenarios
from dealmath.analysis.rental import RentalAnalyzer
from dealmath.analysis.airbnb import ShortTermRentalAnalyzer
from dealmath.analysis.flip import FlipAnalyzer
