"""
Year-by-year ledger construction.

Threads a running principal through repeated one-year compounding steps and
records, for each year:
  1. interest earned on that year's starting principal
  2. the nominal future value at year end
  3. the future value discounted for inflation over *all* years so far
     (exponent = year index)
  4. the future value after a flat tax, applied once to that year's value
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable, List

import pandas as pd

from core.config import ProjectionInput
from core.schema import LEDGER_COLUMNS
from core.utils import percent_to_decimal

from .formulas import inflation_adjust, tax_adjust


@dataclass(frozen=True)
class YearlyRecord:
    year: int
    principal: float
    interest: float
    future_value: float
    inflation_adjusted_future_value: float
    after_tax_future_value: float


def build_ledger(
    principal: float,
    interest_rate: float,
    time_period: int,
    inflation_rate: float,
    tax_rate: float,
) -> List[YearlyRecord]:
    """
    Build one YearlyRecord per year for years 1..time_period.

    Each year's principal is the previous year's future value. A time period
    of zero (or less) gives an empty ledger. No input validation is done.
    """
    rate = percent_to_decimal(interest_rate)
    records: List[YearlyRecord] = []
    current_principal = float(principal)

    for year in range(1, int(time_period) + 1):
        interest = current_principal * rate
        fv = current_principal + interest

        records.append(
            YearlyRecord(
                year=year,
                principal=current_principal,
                interest=interest,
                future_value=fv,
                inflation_adjusted_future_value=inflation_adjust(fv, inflation_rate, year),
                after_tax_future_value=tax_adjust(fv, tax_rate),
            )
        )

        # carry forward
        current_principal = fv

    return records


def build_ledger_for(inputs: ProjectionInput) -> List[YearlyRecord]:
    return build_ledger(
        inputs.principal,
        inputs.interest_rate,
        inputs.time_period,
        inputs.inflation_rate,
        inputs.tax_rate,
    )


def ledger_to_frame(records: Iterable[YearlyRecord]) -> pd.DataFrame:
    """Tabular view of a ledger with LEDGER_COLUMNS (empty frame for no records)."""
    rows = [asdict(r) for r in records]
    if not rows:
        return pd.DataFrame(columns=list(LEDGER_COLUMNS))
    return pd.DataFrame(rows, columns=list(LEDGER_COLUMNS))
