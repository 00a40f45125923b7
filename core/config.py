"""
Projection configuration.
ProjectionInput is the per-run scenario; EngineConfig holds the ambient settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from None


@dataclass(frozen=True)
class ProjectionInput:
    principal: float
    interest_rate: float  # annual, percent
    time_period: int  # whole years
    inflation_rate: float = 0.0  # annual, percent
    tax_rate: float = 0.0  # flat, percent


@dataclass(frozen=True)
class EngineConfig:
    # upper bound on the ledger length (the engine is O(time_period))
    max_time_period: int = 1000

    # output controls
    display_decimals: int = 2
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """
        Build a config with INVEST_* environment overrides applied.
        Raises ValueError naming the variable when a numeric override is not an integer.
        """
        default = cls()
        return cls(
            max_time_period=_int_env("INVEST_MAX_YEARS", default.max_time_period),
            display_decimals=_int_env("INVEST_DISPLAY_DECIMALS", default.display_decimals),
            log_level=os.getenv("INVEST_LOG_LEVEL", default.log_level).upper(),
        )
