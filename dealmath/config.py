"""Configuration management for dealmath."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_DIR = Path(__file__).parent.parent / "config"


class EnvSettings(BaseSettings):
    """Settings read from ``DEALMATH_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="DEALMATH_", extra="ignore")

    config_path: Optional[Path] = None
    log_level: str = "INFO"


class IRRConfig(BaseModel):
    max_iterations: int = 100
    initial_guess: float = 0.1
    rate_tolerance: float = 1e-7
    npv_tolerance: float = 1e-6
    # substituted when the solver does not converge
    fallback_rate: float = 0.0


class RentalConfig(BaseModel):
    default_occupancy_rate: float = 100.0
    default_ltv: float = 75.0
    loan_term_months: int = 360


class ShortTermRentalConfig(BaseModel):
    default_daily_rate: float = 150.0
    default_average_occupancy: float = 70.0
    platform_fee_pct: float = 0.04


class SensitivityConfig(BaseModel):
    variation_percent: float = 10.0


class AnalysisConfig(BaseModel):
    strategies: list[str] = ["rent", "airbnb", "flip"]
    default_discount_rate: float = 10.0  # annual percentage
    default_hold_time_months: int = 60
    irr: IRRConfig = IRRConfig()
    rental: RentalConfig = RentalConfig()
    short_term_rental: ShortTermRentalConfig = ShortTermRentalConfig()
    sensitivity: SensitivityConfig = SensitivityConfig()


class AppConfig(BaseModel):
    analysis: AnalysisConfig = AnalysisConfig()


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load configuration from TOML files.

    Loads default.toml first, then merges local.toml, ``DEALMATH_CONFIG_PATH``
    or an explicit path on top.
    """
    default_path = CONFIG_DIR / "default.toml"
    data: dict[str, Any] = {}

    if default_path.exists():
        with open(default_path, "rb") as f:
            data = tomllib.load(f)

    local_path = config_path or EnvSettings().config_path or CONFIG_DIR / "local.toml"
    if local_path.exists():
        with open(local_path, "rb") as f:
            overrides = tomllib.load(f)
        data = _deep_merge(data, overrides)

    return AppConfig(**data)
