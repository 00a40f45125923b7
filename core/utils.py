from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd


def percent_to_decimal(rate_percent):
    """8.0 -> 0.08 (vectorized)."""
    if isinstance(rate_percent, (np.ndarray, pd.Series)):
        return np.asarray(rate_percent, dtype=float) / 100.0
    return float(rate_percent) / 100.0


def safe_divide(numerator: float, denominator: float) -> Optional[float]:
    """numerator / denominator, or None when the denominator is zero."""
    if denominator == 0:
        return None
    return float(numerator) / float(denominator)


def excel_round(x, decimals: int = 2):
    """Excel ROUND: half away from zero (vectorized)."""
    m = 10 ** decimals
    x = np.asarray(x, dtype=float)
    return np.sign(x) * (np.floor(np.abs(x) * m + 0.5) / m)
