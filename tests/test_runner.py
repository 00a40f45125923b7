import logging

import pytest

from core.config import EngineConfig, ProjectionInput
from engine.runner import run_projection


def test_run_projection_combines_closed_form_ledger_and_summary():
    inputs = ProjectionInput(principal=1000.0, interest_rate=5.0, time_period=3, inflation_rate=2.0, tax_rate=10.0)

    result = run_projection(inputs)

    assert result.inputs is inputs
    assert result.future_value == pytest.approx(1157.625)
    assert len(result.ledger) == 3
    assert result.ledger[-1].future_value == pytest.approx(result.future_value)
    assert result.summary.total_interest == pytest.approx(157.625)


def test_run_projection_zero_years_does_not_crash(caplog):
    inputs = ProjectionInput(principal=500.0, interest_rate=5.0, time_period=0)

    with caplog.at_level(logging.INFO, logger="engine.runner"):
        result = run_projection(inputs)

    assert result.future_value == 500.0
    assert result.ledger == []
    assert result.summary.avg_annual_return is None
    assert "not applicable" in caplog.text


def test_run_projection_rejects_time_period_above_limit():
    inputs = ProjectionInput(principal=1.0, interest_rate=1.0, time_period=51)

    with pytest.raises(ValueError, match="exceeds the maximum"):
        run_projection(inputs, EngineConfig(max_time_period=50))


def test_engine_config_from_env(monkeypatch):
    monkeypatch.setenv("INVEST_MAX_YEARS", "75")
    monkeypatch.setenv("INVEST_LOG_LEVEL", "debug")
    monkeypatch.delenv("INVEST_DISPLAY_DECIMALS", raising=False)

    cfg = EngineConfig.from_env()

    assert cfg.max_time_period == 75
    assert cfg.log_level == "DEBUG"
    assert cfg.display_decimals == 2


def test_run_projection_with_overflowing_growth_completes():
    inputs = ProjectionInput(principal=1000.0, interest_rate=200.0, time_period=1000, inflation_rate=2.0, tax_rate=10.0)

    result = run_projection(inputs)

    assert result.future_value == float("inf")
    assert len(result.ledger) == 1000
    assert result.ledger[-1].future_value == float("inf")


@pytest.mark.parametrize("name", ["INVEST_MAX_YEARS", "INVEST_DISPLAY_DECIMALS"])
def test_engine_config_from_env_names_bad_integer(monkeypatch, name):
    monkeypatch.setenv(name, "lots")

    with pytest.raises(ValueError, match=name):
        EngineConfig.from_env()
