"""
Input parsing and sanity checks for projection scenarios.

Parsing returns explicit ParseResult values instead of raising, so a prompt
loop can re-ask without any shared error state. validate_inputs collects
blocking errors and informational warnings; the engine itself accepts any
numbers, so unusual rates only ever produce warnings.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Optional

from core.config import EngineConfig, ProjectionInput

NUMERIC_ERROR = "Invalid input. Please enter a numeric value."
TIME_PERIOD_ERROR = "Invalid input. Please enter a non-negative integer value."


@dataclass(frozen=True)
class ParseResult:
    ok: bool
    value: Any = None
    error: Optional[str] = None


def _clean(text: str) -> str:
    cleaned = (text or "").strip()
    if cleaned.startswith("$"):
        cleaned = cleaned[1:].strip()
    if cleaned.endswith("%"):
        cleaned = cleaned[:-1].strip()
    return cleaned


def parse_number(text: str) -> ParseResult:
    """Parse a finite float; tolerates a leading '$' and a trailing '%'."""
    cleaned = _clean(text)
    if not cleaned:
        return ParseResult(ok=False, error=NUMERIC_ERROR)
    try:
        value = float(cleaned)
    except ValueError:
        return ParseResult(ok=False, error=NUMERIC_ERROR)
    if not math.isfinite(value):
        return ParseResult(ok=False, error=NUMERIC_ERROR)
    return ParseResult(ok=True, value=value)


def parse_time_period(text: str, max_years: Optional[int] = None) -> ParseResult:
    """Parse a non-negative whole number of years ("10" or "10.0")."""
    number = parse_number(text)
    if not number.ok or not float(number.value).is_integer() or number.value < 0:
        return ParseResult(ok=False, error=TIME_PERIOD_ERROR)
    years = int(number.value)
    if max_years is not None and years > max_years:
        return ParseResult(
            ok=False,
            error=f"Invalid input. The time period cannot exceed {max_years} years.",
        )
    return ParseResult(ok=True, value=years)


def parse_yes_no(text: str) -> bool:
    cleaned = (text or "").strip()
    return cleaned[:1].lower() == "y"


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a scenario."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_inputs(
    inputs: ProjectionInput,
    config: Optional[EngineConfig] = None,
) -> ValidationResult:
    """
    Run all checks on a scenario.
    Errors block a run; warnings flag results that will look odd but are still computed.
    """
    cfg = config or EngineConfig()
    result = ValidationResult()

    # --- Time period ---
    if inputs.time_period < 0:
        result.errors.append(f"Time period must be non-negative (got {inputs.time_period}).")
    elif inputs.time_period > cfg.max_time_period:
        result.errors.append(
            f"Time period of {inputs.time_period} years exceeds the maximum of "
            f"{cfg.max_time_period}."
        )
    elif inputs.time_period == 0:
        result.warnings.append("Time period is 0 years; averages will be reported as N/A.")

    # --- Principal ---
    if inputs.principal < 0:
        result.warnings.append(f"Principal is negative ({inputs.principal}).")

    # --- Rates ---
    if inputs.interest_rate <= -100:
        result.warnings.append(
            f"Interest rate of {inputs.interest_rate}% wipes out (or inverts) the principal."
        )
    if inputs.inflation_rate >= 100:
        result.warnings.append(
            f"Inflation rate of {inputs.inflation_rate}% gives a zero or negative real value."
        )
    if inputs.tax_rate >= 100:
        result.warnings.append(
            f"Tax rate of {inputs.tax_rate}% gives a zero or negative after-tax value."
        )

    return result
