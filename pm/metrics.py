"""
Aggregate summary over a projection ledger.

Totals are plain sums of the per-year fields. Note that total_principal sums
every year's *starting* principal, not just the original lump sum; the
average return rate is expressed relative to that total.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Dict, Optional, Sequence

from core.utils import safe_divide

if TYPE_CHECKING:
    from engine.ledger import YearlyRecord


@dataclass(frozen=True)
class InvestmentSummary:
    """
    avg_annual_return and avg_annual_return_rate are None when not applicable
    (zero-year projection, or zero total principal).
    """

    principal_invested: float
    total_principal: float
    total_interest: float
    avg_annual_return: Optional[float]
    avg_annual_return_rate: Optional[float]
    total_inflation_adjusted: float
    total_after_tax: float
    final_future_value: float

    def as_dict(self) -> Dict[str, Optional[float]]:
        return asdict(self)


def summarize(
    records: Sequence[YearlyRecord],
    principal: float,
    time_period: int,
) -> InvestmentSummary:
    """
    Compute totals and averages for a ledger.

    Parameters
    ----------
    records : sequence of YearlyRecord
        Ledger from build_ledger
    principal : float
        Original lump sum (reported as principal_invested)
    time_period : int
        Projection length in years (denominator of the average return)
    """
    total_principal = sum(r.principal for r in records)
    total_interest = sum(r.interest for r in records)
    total_inflation_adjusted = sum(r.inflation_adjusted_future_value for r in records)
    total_after_tax = sum(r.after_tax_future_value for r in records)

    avg_return = safe_divide(total_interest, time_period) if time_period > 0 else None
    avg_return_rate = None
    if avg_return is not None:
        ratio = safe_divide(avg_return, total_principal)
        avg_return_rate = ratio * 100.0 if ratio is not None else None

    final_fv = records[-1].future_value if records else float(principal)

    return InvestmentSummary(
        principal_invested=float(principal),
        total_principal=float(total_principal),
        total_interest=float(total_interest),
        avg_annual_return=avg_return,
        avg_annual_return_rate=avg_return_rate,
        total_inflation_adjusted=float(total_inflation_adjusted),
        total_after_tax=float(total_after_tax),
        final_future_value=float(final_fv),
    )
