import pytest

from engine.ledger import build_ledger
from pm.metrics import summarize


def test_summary_totals_for_reference_scenario():
    ledger = build_ledger(1000.0, 5.0, 3, 2.0, 10.0)

    summary = summarize(ledger, 1000.0, 3)

    assert summary.principal_invested == 1000.0
    # sum of each year's starting principal
    assert summary.total_principal == pytest.approx(1000.0 + 1050.0 + 1102.5)
    assert summary.total_interest == pytest.approx(157.625)
    assert summary.avg_annual_return == pytest.approx(157.625 / 3)
    assert summary.avg_annual_return_rate == pytest.approx((157.625 / 3) / 3152.5 * 100)
    assert summary.total_after_tax == pytest.approx(945.0 + 992.25 + 1041.8625)
    assert summary.total_inflation_adjusted == pytest.approx(
        1050.0 * 0.98 + 1102.5 * 0.98 ** 2 + 1157.625 * 0.98 ** 3
    )
    assert summary.final_future_value == pytest.approx(1157.625)


def test_zero_year_projection_reports_not_applicable_averages():
    summary = summarize([], 1000.0, 0)

    assert summary.total_principal == 0.0
    assert summary.total_interest == 0.0
    assert summary.avg_annual_return is None
    assert summary.avg_annual_return_rate is None
    assert summary.final_future_value == 1000.0


def test_zero_principal_reports_not_applicable_rate():
    ledger = build_ledger(0.0, 5.0, 4, 2.0, 10.0)

    summary = summarize(ledger, 0.0, 4)

    assert summary.avg_annual_return == 0.0
    assert summary.avg_annual_return_rate is None


def test_as_dict_exposes_all_fields():
    summary = summarize(build_ledger(100.0, 10.0, 1, 0.0, 0.0), 100.0, 1)

    d = summary.as_dict()

    assert d["total_interest"] == pytest.approx(10.0)
    assert d["avg_annual_return_rate"] == pytest.approx(10.0)
    assert set(d) >= {"principal_invested", "total_after_tax", "total_inflation_adjusted"}
