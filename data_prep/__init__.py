"""
Data preparation — parsing raw user text into scenario inputs, validation.
"""

from .validators import (
    ParseResult,
    ValidationResult,
    parse_number,
    parse_time_period,
    parse_yes_no,
    validate_inputs,
)

__all__ = [
    "ParseResult",
    "ValidationResult",
    "parse_number",
    "parse_time_period",
    "parse_yes_no",
    "validate_inputs",
]
