import pytest

from core.config import ProjectionInput
from core.schema import LEDGER_COLUMNS
from engine.formulas import future_value
from engine.ledger import build_ledger, build_ledger_for, ledger_to_frame


def test_reference_scenario_matches_hand_computed_values():
    ledger = build_ledger(1000.0, 5.0, 3, 2.0, 10.0)

    assert [r.year for r in ledger] == [1, 2, 3]

    y1, y2, y3 = ledger
    assert y1.principal == 1000.0
    assert y1.interest == pytest.approx(50.0)
    assert y1.future_value == pytest.approx(1050.0)
    assert y1.inflation_adjusted_future_value == pytest.approx(1029.0)
    assert y1.after_tax_future_value == pytest.approx(945.0)

    assert y2.principal == pytest.approx(1050.0)
    assert y2.interest == pytest.approx(52.5)
    assert y2.future_value == pytest.approx(1102.5)
    assert y2.inflation_adjusted_future_value == pytest.approx(1102.5 * 0.98 ** 2)
    assert y2.inflation_adjusted_future_value == pytest.approx(1058.96, abs=0.01)
    assert y2.after_tax_future_value == pytest.approx(992.25)

    assert y3.principal == pytest.approx(1102.5)
    assert y3.interest == pytest.approx(55.125)
    assert y3.future_value == pytest.approx(1157.625)
    assert y3.inflation_adjusted_future_value == pytest.approx(1087.93, abs=0.01)
    assert y3.after_tax_future_value == pytest.approx(1041.8625)


def test_last_year_matches_closed_form():
    ledger = build_ledger(2500.0, 7.25, 12, 3.0, 20.0)

    assert ledger[-1].future_value == pytest.approx(future_value(2500.0, 7.25, 12))


@pytest.mark.parametrize("years", [0, 1, 5, 40])
def test_ledger_length_equals_time_period(years):
    assert len(build_ledger(100.0, 4.0, years, 1.0, 15.0)) == years


def test_negative_time_period_gives_empty_ledger():
    assert build_ledger(100.0, 4.0, -3, 1.0, 15.0) == []


def test_each_year_starts_from_previous_future_value():
    ledger = build_ledger(750.0, 6.0, 8, 2.5, 25.0)

    assert ledger[0].principal == 750.0
    for prev, cur in zip(ledger, ledger[1:]):
        assert cur.principal == prev.future_value
        assert cur.year == prev.year + 1


def test_inflation_exponent_is_year_index_and_tax_is_not_compounded():
    ledger = build_ledger(1000.0, 0.0, 3, 10.0, 10.0)

    # zero interest keeps the nominal value flat, isolating the adjustments
    assert [r.inflation_adjusted_future_value for r in ledger] == pytest.approx([900.0, 810.0, 729.0])
    assert [r.after_tax_future_value for r in ledger] == pytest.approx([900.0, 900.0, 900.0])


def test_build_ledger_for_uses_projection_input():
    inputs = ProjectionInput(principal=1000.0, interest_rate=5.0, time_period=3, inflation_rate=2.0, tax_rate=10.0)

    assert build_ledger_for(inputs) == build_ledger(1000.0, 5.0, 3, 2.0, 10.0)


def test_ledger_to_frame_has_canonical_columns():
    df = ledger_to_frame(build_ledger(1000.0, 5.0, 3, 2.0, 10.0))

    assert tuple(df.columns) == LEDGER_COLUMNS
    assert len(df) == 3
    assert df["future_value"].iloc[-1] == pytest.approx(1157.625)


def test_ledger_to_frame_empty_ledger():
    df = ledger_to_frame([])

    assert tuple(df.columns) == LEDGER_COLUMNS
    assert df.empty
