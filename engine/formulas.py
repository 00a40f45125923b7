"""
Closed-form valuation formulas.

All rates are annual percentages (5.0 means 5%). None of these functions
bound their inputs: a rate at or below -100 (or an inflation/tax rate at or
above 100) yields a zero or negative multiplier and the result follows the
formula. Scalars in give a float back; numpy arrays broadcast.
"""

from __future__ import annotations

import numpy as np

from core.utils import percent_to_decimal


def _is_array(*values) -> bool:
    return any(isinstance(v, np.ndarray) for v in values)


def _scalar_periods(periods):
    # keeps a negative base real: (-0.5) ** 3 rather than (-0.5) ** 3.0
    if isinstance(periods, float) and periods.is_integer():
        return int(periods)
    return periods


def _compound(value, rate_decimal, periods):
    # results past the float range saturate to inf
    with np.errstate(over="ignore", invalid="ignore"):
        if _is_array(value, rate_decimal, periods):
            return np.asarray(value, dtype=float) * np.power(
                1.0 + np.asarray(rate_decimal, dtype=float), np.asarray(periods)
            )
        # 0.0 ** 0 == 1.0, so a -100% rate over zero periods returns the value unchanged
        growth = np.power(1.0 + rate_decimal, _scalar_periods(periods))
        return float(np.float64(value) * growth)


def future_value(principal, rate_percent, periods):
    """principal * (1 + rate/100) ** periods; periods=0 returns principal."""
    return _compound(principal, percent_to_decimal(rate_percent), periods)


def inflation_adjust(value, inflation_rate_percent, periods):
    """
    Restate value in today's money: value * (1 - inflation/100) ** periods.

    The ledger passes the year index as periods, so the discount is
    cumulative from the start of the projection.
    """
    return _compound(value, -percent_to_decimal(inflation_rate_percent), periods)


def tax_adjust(value, tax_rate_percent):
    """Flat, one-off tax deduction: value * (1 - tax/100)."""
    rate = percent_to_decimal(tax_rate_percent)
    if _is_array(value, rate):
        return np.asarray(value, dtype=float) * (1.0 - np.asarray(rate, dtype=float))
    return float(value) * (1.0 - rate)
