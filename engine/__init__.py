"""
Projection engine — compounding formulas, yearly ledger, and the runner.
"""

from .formulas import future_value, inflation_adjust, tax_adjust
from .ledger import YearlyRecord, build_ledger, build_ledger_for, ledger_to_frame
from .runner import ProjectionResult, run_projection

__all__ = [
    "future_value",
    "inflation_adjust",
    "tax_adjust",
    "YearlyRecord",
    "build_ledger",
    "build_ledger_for",
    "ledger_to_frame",
    "ProjectionResult",
    "run_projection",
]
