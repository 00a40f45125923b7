"""
Core package — input/config dataclasses, ledger schema, and shared utilities.
No business logic lives here.
"""

from .schema import LEDGER_COLUMNS, LEDGER_DISPLAY_LABELS
from .config import EngineConfig, ProjectionInput
from .utils import percent_to_decimal, safe_divide, excel_round

__all__ = [
    "LEDGER_COLUMNS",
    "LEDGER_DISPLAY_LABELS",
    "EngineConfig",
    "ProjectionInput",
    "percent_to_decimal",
    "safe_divide",
    "excel_round",
]
