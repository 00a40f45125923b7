from __future__ import annotations

from typing import Dict, Tuple

# Canonical ledger columns, in display order.
LEDGER_COLUMNS: Tuple[str, ...] = (
    "year",
    "principal",
    "interest",
    "future_value",
    "inflation_adjusted_future_value",
    "after_tax_future_value",
)

LEDGER_DISPLAY_LABELS: Dict[str, str] = {
    "year": "Year",
    "principal": "Principal",
    "interest": "Interest",
    "future_value": "Future Value",
    "inflation_adjusted_future_value": "Inflation-Adjusted Future Value",
    "after_tax_future_value": "After-Tax Future Value",
}
