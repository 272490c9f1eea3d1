"""CLI interface for dealmath."""

from __future__ import annotations

import json
import logging
import math
import tomllib
from pathlib import Path
from typing import List

import pydantic
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dealmath.config import EnvSettings, load_config
from dealmath.errors import ValidationError
from dealmath.models import Comparable, FlipBaseCase, ScenarioAssumptions, ScenarioMetrics

app = typer.Typer(
    name="dealmath",
    help="Real estate deal calculator - returns, loans, valuations and scenarios.",
    no_args_is_help=True,
)
console = Console()


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else EnvSettings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _fail(error: ValidationError) -> None:
    console.print(f"[red]{error}[/red]")
    raise typer.Exit(code=1)


def _load_scenario(path: Path) -> ScenarioAssumptions:
    """Read a scenario from a TOML or JSON file."""
    try:
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        else:
            data = json.loads(path.read_text())
        return ScenarioAssumptions(**data)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, pydantic.ValidationError) as e:
        console.print(f"[red]Invalid scenario file {path}:[/red]")
        console.print(str(e), markup=False)
        raise typer.Exit(code=1)


def _money(value: float) -> str:
    return f"${value:,.2f}"


def _months(value: float | None) -> str:
    if value is None:
        return "-"
    if math.isinf(value):
        return "never" if value > 0 else "losing money"
    return f"{value:,.1f}"


def _metrics_summary(m: ScenarioMetrics) -> str:
    irr = f"{m.irr:.2f}%" if m.irr_available else f"unavailable (using {m.irr:.2f}%)"
    parts = [
        f"Monthly NOI: {_money(m.monthly_noi)} | Total Profit: {_money(m.total_profit)}",
        f"Cap Rate: {m.cap_rate:.2f}% | CoC Return: {m.cash_on_cash:.2f}% | ROI: {m.roi:.2f}%",
        f"IRR: {irr} | NPV: {_money(m.npv)}",
        f"Break-even (months): {_months(m.break_even_months)}",
    ]
    if m.annualized_return is not None:
        parts.append(f"Annualized Return: {m.annualized_return:.2f}%")
    return "\n".join(parts)


@app.command()
def analyze(
    scenario_path: Path = typer.Argument(..., help="Scenario file (TOML or JSON)"),
    config_path: Path = typer.Option(None, "--config", "-c", help="Path to config TOML file"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Analyze one deal scenario for its exit strategy."""
    setup_logging(verbose)
    cfg = load_config(config_path)

    from dealmath.analysis.engine import ScenarioAnalyzer

    scenario = _load_scenario(scenario_path)
    try:
        metrics = ScenarioAnalyzer(cfg.analysis).analyze(scenario)
    except ValidationError as e:
        _fail(e)

    console.print(
        Panel(_metrics_summary(metrics), title=f"{metrics.name} - {metrics.strategy.value.upper()}")
    )


@app.command()
def compare(
    scenario_paths: List[Path] = typer.Argument(..., help="Scenario files (TOML or JSON)"),
    config_path: Path = typer.Option(None, "--config", "-c"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Analyze several scenarios and rank them by ROI."""
    setup_logging(verbose)
    cfg = load_config(config_path)

    from dealmath.analysis.engine import ScenarioAnalyzer

    scenarios = [_load_scenario(p) for p in scenario_paths]
    try:
        result = ScenarioAnalyzer(cfg.analysis).compare(scenarios)
    except ValidationError as e:
        _fail(e)

    table = Table(title="Scenario Comparison", show_lines=True)
    table.add_column("#", style="dim", width=3)
    table.add_column("Scenario", style="white")
    table.add_column("Strategy", style="cyan")
    table.add_column("ROI", style="bold")
    table.add_column("Cap Rate", style="yellow")
    table.add_column("Profit", style="green")
    table.add_column("IRR", style="white")

    for i, m in enumerate(result.comparisons, 1):
        table.add_row(
            str(i),
            m.name,
            m.strategy.value.upper(),
            f"{m.roi:.2f}%",
            f"{m.cap_rate:.2f}%",
            _money(m.total_profit),
            f"{m.irr:.2f}%" if m.irr_available else "n/a",
        )

    console.print(table)
    if result.best_by_roi:
        console.print(
            f"[bold]Best by ROI:[/bold] {result.best_by_roi.name} | "
            f"[bold]by cap rate:[/bold] {result.best_by_cap_rate.name} | "
            f"[bold]by profit:[/bold] {result.best_by_profit.name}"
        )


@app.command()
def mortgage(
    principal: float = typer.Argument(..., help="Loan amount"),
    rate: float = typer.Argument(..., help="Annual interest rate in percent"),
    months: int = typer.Argument(..., help="Loan term in months"),
    rows: int = typer.Option(12, "--rows", "-r", help="Schedule rows to show (0 for all)"),
):
    """Print a mortgage amortization schedule and its totals."""
    from dealmath.calculations.amortization import mortgage_schedule

    try:
        result = mortgage_schedule(principal, rate, months)
    except ValidationError as e:
        _fail(e)

    table = Table(title=f"Amortization: {_money(principal)} at {rate}% over {months} months")
    table.add_column("Month", style="dim")
    table.add_column("Payment", style="white")
    table.add_column("Principal", style="green")
    table.add_column("Interest", style="yellow")
    table.add_column("Balance", style="cyan")

    entries = result.schedule if rows <= 0 else result.schedule[:rows]
    for entry in entries:
        table.add_row(
            str(entry.period),
            _money(entry.payment),
            _money(entry.principal),
            _money(entry.interest),
            _money(entry.balance),
        )

    console.print(table)
    console.print(
        f"Monthly Payment: {_money(result.monthly_payment)} | "
        f"Total Interest: {_money(result.total_interest)} | "
        f"Total Paid: {_money(result.total_paid)}"
    )


@app.command()
def arv(
    comps: List[str] = typer.Option(..., "--comp", help="Comparable sale as PRICE:AREA"),
    area: float = typer.Option(..., "--area", "-a", help="Subject property area"),
):
    """Estimate After Repair Value from comparable sales."""
    from dealmath.calculations.valuation import estimate_arv

    comparables = []
    for raw in comps:
        try:
            price, comp_area = raw.split(":")
            comparables.append(Comparable(sale_price=float(price), area=float(comp_area)))
        except ValueError:
            console.print(f"[red]Invalid comparable '{raw}', expected PRICE:AREA[/red]")
            raise typer.Exit(code=1)

    try:
        value = estimate_arv(comparables, area)
    except ValidationError as e:
        _fail(e)

    console.print(f"Estimated ARV: [bold green]{_money(value)}[/bold green] from {len(comparables)} comp(s)")


@app.command()
def irr(
    cash_flows: List[float] = typer.Argument(..., help="Cash flows for periods 1..N"),
    investment: float = typer.Option(..., "--investment", "-i", help="Initial investment"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Solve for the internal rate of return of a cash flow series."""
    setup_logging(verbose)
    cfg = load_config()

    from dealmath.calculations.timevalue import calculate_irr

    irr_cfg = cfg.analysis.irr
    try:
        result = calculate_irr(
            cash_flows,
            investment,
            initial_guess=irr_cfg.initial_guess,
            max_iterations=irr_cfg.max_iterations,
            rate_tolerance=irr_cfg.rate_tolerance,
            npv_tolerance=irr_cfg.npv_tolerance,
        )
    except ValidationError as e:
        _fail(e)

    if result.converged:
        console.print(f"IRR: [bold green]{result.rate:.4f}%[/bold green] per period ({result.iterations} iterations)")
    else:
        console.print(f"[yellow]IRR did not converge: {result.status.value} after {result.iterations} iterations[/yellow]")
        raise typer.Exit(code=2)


@app.command()
def npv(
    cash_flows: List[float] = typer.Argument(..., help="Cash flows for periods 1..N"),
    investment: float = typer.Option(..., "--investment", "-i", help="Initial investment"),
    rate: float = typer.Option(10.0, "--rate", "-r", help="Discount rate per period in percent"),
):
    """Net present value of a cash flow series."""
    from dealmath.calculations.timevalue import calculate_npv

    try:
        value = calculate_npv(cash_flows, investment, rate)
    except ValidationError as e:
        _fail(e)

    console.print(f"NPV at {rate}%: [bold]{_money(value)}[/bold]")


@app.command()
def sensitivity(
    purchase: float = typer.Option(..., "--purchase", help="Purchase price"),
    rehab: float = typer.Option(0, "--rehab", help="Rehab cost"),
    closing: float = typer.Option(0, "--closing", help="Closing costs on purchase"),
    sale: float = typer.Option(..., "--sale", help="Expected sale price"),
    selling: float = typer.Option(0, "--selling", help="Selling costs"),
    holding: float = typer.Option(0, "--holding", help="Holding costs"),
    variation: float = typer.Option(None, "--variation", help="Variation in percent"),
    config_path: Path = typer.Option(None, "--config", "-c"),
):
    """Show how flip profit moves with sale price, rehab cost and purchase price."""
    cfg = load_config(config_path)

    from dealmath.calculations.sensitivity import sensitivity_analysis

    if variation is None:
        variation = cfg.analysis.sensitivity.variation_percent

    base_case = FlipBaseCase(
        purchase_price=purchase,
        rehab_cost=rehab,
        closing_costs=closing,
        sale_price=sale,
        selling_costs=selling,
        holding_costs=holding,
    )
    result = sensitivity_analysis(base_case, variation)

    table = Table(title=f"Flip Profit Sensitivity (+/-{variation:g}%)")
    table.add_column("Variable", style="cyan")
    table.add_column(f"-{variation:g}%", style="red")
    table.add_column("Base", style="white")
    table.add_column(f"+{variation:g}%", style="green")
    for s in result.scenarios:
        table.add_row(
            s.variable.value.replace("_", " ").title(),
            _money(s.down_percent),
            _money(result.base_profit),
            _money(s.up_percent),
        )
    console.print(table)


@app.command()
def config_show(
    config_path: Path = typer.Option(None, "--config", "-c"),
):
    """Display current configuration."""
    cfg = load_config(config_path)
    console.print_json(json.dumps(cfg.model_dump(), indent=2, default=str))


if __name__ == "__main__":
    app()
