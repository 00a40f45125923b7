"""
Projection runner — orchestrates one scenario through the engine.

  1. Closed-form future value for the full time period
  2. Iterative year-by-year ledger
  3. Aggregate summary over the ledger

The closed form and the last ledger record agree (up to float rounding);
both are reported so callers can show the headline figure and the table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from core.config import EngineConfig, ProjectionInput
from pm.metrics import InvestmentSummary, summarize

from .formulas import future_value
from .ledger import YearlyRecord, build_ledger_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectionResult:
    inputs: ProjectionInput
    future_value: float
    ledger: List[YearlyRecord]
    summary: InvestmentSummary


def run_projection(
    inputs: ProjectionInput,
    config: Optional[EngineConfig] = None,
) -> ProjectionResult:
    """
    Run a single projection.

    Raises ValueError when inputs.time_period exceeds config.max_time_period.
    Everything else (negative rates, rates over 100%) is computed as-is.
    """
    cfg = config or EngineConfig()
    if inputs.time_period > cfg.max_time_period:
        raise ValueError(
            f"time_period={inputs.time_period} exceeds the maximum of "
            f"{cfg.max_time_period} years."
        )

    logger.debug(
        "Running projection: principal=%s rate=%s%% years=%s inflation=%s%% tax=%s%%",
        inputs.principal,
        inputs.interest_rate,
        inputs.time_period,
        inputs.inflation_rate,
        inputs.tax_rate,
    )

    fv = future_value(inputs.principal, inputs.interest_rate, max(int(inputs.time_period), 0))
    ledger = build_ledger_for(inputs)
    summary = summarize(ledger, inputs.principal, inputs.time_period)

    if summary.avg_annual_return is None:
        logger.info("Average annual return not applicable for a %s-year projection.", inputs.time_period)
    elif summary.avg_annual_return_rate is None:
        logger.info("Average annual return rate not applicable: total principal is zero.")

    return ProjectionResult(inputs=inputs, future_value=fv, ledger=ledger, summary=summary)
