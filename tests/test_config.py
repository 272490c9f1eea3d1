"""Tests for configuration loading."""

from dealmath.config import AppConfig, EnvSettings, load_config, _deep_merge


def test_load_default_config():
    cfg = load_config()
    assert isinstance(cfg, AppConfig)
    assert cfg.analysis.strategies == ["rent", "airbnb", "flip"]


def test_config_has_all_sections():
    cfg = load_config()
    assert cfg.analysis.irr.max_iterations == 100
    assert cfg.analysis.irr.initial_guess == 0.1
    assert cfg.analysis.irr.fallback_rate == 0.0
    assert cfg.analysis.rental.default_ltv == 75.0
    assert cfg.analysis.short_term_rental.platform_fee_pct > 0
    assert cfg.analysis.sensitivity.variation_percent == 10.0


def test_explicit_override_file(tmp_path):
    override = tmp_path / "override.toml"
    override.write_text("[analysis]\ndefault_discount_rate = 8.0\n\n[analysis.irr]\nmax_iterations = 50\n")
    cfg = load_config(override)
    assert cfg.analysis.default_discount_rate == 8.0
    assert cfg.analysis.irr.max_iterations == 50
    # untouched keys keep their defaults
    assert cfg.analysis.irr.initial_guess == 0.1


def test_override_from_environment(tmp_path, monkeypatch):
    override = tmp_path / "env.toml"
    override.write_text('[analysis]\nstrategies = ["flip"]\n')
    monkeypatch.setenv("DEALMATH_CONFIG_PATH", str(override))
    assert load_config().analysis.strategies == ["flip"]


def test_env_settings(monkeypatch):
    monkeypatch.setenv("DEALMATH_LOG_LEVEL", "DEBUG")
    assert EnvSettings().log_level == "DEBUG"


def test_config_deep_merge():
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    override = {"a": {"b": 10}, "e": 5}
    result = _deep_merge(base, override)
    assert result == {"a": {"b": 10, "c": 2}, "d": 3, "e": 5}
