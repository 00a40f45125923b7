"""
Investment Calculator — interactive console session
===================================================

Prompts for a single lump-sum scenario, prints the closed-form future value,
the year-by-year investment table and the summary, then offers another run.

Run: investment-calculator   (or: python -m app.console)
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional, Sequence

from core.config import EngineConfig, ProjectionInput
from core.schema import LEDGER_COLUMNS, LEDGER_DISPLAY_LABELS
from core.utils import excel_round
from data_prep.validators import (
    ParseResult,
    parse_number,
    parse_time_period,
    parse_yes_no,
    validate_inputs,
)
from engine.ledger import YearlyRecord, ledger_to_frame
from engine.runner import run_projection
from pm.metrics import InvestmentSummary

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

RULE = "-" * 116

# Column widths of the investment table (left aligned).
COLUMN_WIDTHS = {
    "year": 10,
    "principal": 15,
    "interest": 15,
    "future_value": 20,
    "inflation_adjusted_future_value": 33,
    "after_tax_future_value": 23,
}


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------
def prompt_until_valid(
    prompt: str,
    parser: Callable[[str], ParseResult],
    *,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
):
    """Ask until parser accepts the answer; returns the parsed value."""
    while True:
        result = parser(input_fn(prompt))
        if result.ok:
            return result.value
        logger.debug("Rejected input for %r: %s", prompt, result.error)
        output_fn(result.error)


def read_projection_input(
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    config: Optional[EngineConfig] = None,
) -> ProjectionInput:
    cfg = config or EngineConfig()

    def ask(prompt, parser):
        return prompt_until_valid(prompt, parser, input_fn=input_fn, output_fn=output_fn)

    principal = ask("Enter the principal amount: $", parse_number)
    interest_rate = ask("Enter the annual interest rate (%): ", parse_number)
    inflation_rate = ask("Enter the inflation rate (%): ", parse_number)
    tax_rate = ask("Enter the tax rate (%): ", parse_number)
    time_period = ask(
        "Enter the time period (in years): ",
        lambda text: parse_time_period(text, max_years=cfg.max_time_period),
    )
    return ProjectionInput(
        principal=principal,
        interest_rate=interest_rate,
        time_period=time_period,
        inflation_rate=inflation_rate,
        tax_rate=tax_rate,
    )


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------
def _fmt_money(val: float, decimals: int) -> str:
    return f"{float(excel_round(val, decimals)):.{decimals}f}"


def _fmt_optional(val: Optional[float], decimals: int, *, prefix: str = "", suffix: str = "") -> str:
    if val is None:
        return "N/A"
    return f"{prefix}{_fmt_money(val, decimals)}{suffix}"


def render_ledger_table(records: Sequence[YearlyRecord], decimals: int = 2) -> str:
    """Fixed-width 'Investment Table' for a ledger."""
    frame = ledger_to_frame(records).rename(columns=LEDGER_DISPLAY_LABELS)
    formatters = {
        LEDGER_DISPLAY_LABELS[col]: (
            (lambda v: str(int(v))) if col == "year" else (lambda v: _fmt_money(v, decimals))
        )
        for col in LEDGER_COLUMNS
    }
    col_space = {LEDGER_DISPLAY_LABELS[col]: width for col, width in COLUMN_WIDTHS.items()}

    if frame.empty:
        body = "".join(label.ljust(col_space[label]) for label in frame.columns).rstrip()
    else:
        body = frame.to_string(
            index=False,
            formatters=formatters,
            col_space=col_space,
            justify="left",
        )

    lines = ["", "Investment Table", RULE, body, RULE]
    return "\n".join(lines)


def render_summary(summary: InvestmentSummary, decimals: int = 2) -> str:
    lines = [
        "",
        "Investment Summary",
        RULE,
        f"Principal Invested: ${_fmt_money(summary.principal_invested, decimals)}",
        f"Total Interest Earned: ${_fmt_money(summary.total_interest, decimals)}",
        "Average Annual Return: "
        + _fmt_optional(summary.avg_annual_return, decimals, prefix="$"),
        "Average Annual Return Rate: "
        + _fmt_optional(summary.avg_annual_return_rate, decimals, suffix="%"),
        "Total Inflation-Adjusted Future Value: "
        f"${_fmt_money(summary.total_inflation_adjusted, decimals)}",
        f"Total After-Tax Future Value: ${_fmt_money(summary.total_after_tax, decimals)}",
        RULE,
    ]
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------
def run_session(
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    config: Optional[EngineConfig] = None,
) -> int:
    """
    Interactive loop. Returns the number of projections completed.
    End of input at any prompt ends the session.
    """
    cfg = config or EngineConfig()
    completed = 0

    try:
        while True:
            output_fn("Welcome to the Future Value Calculator!")
            inputs = read_projection_input(input_fn, output_fn, cfg)

            vr = validate_inputs(inputs, cfg)
            for warning in vr.warnings:
                logger.warning(warning)

            result = run_projection(inputs, cfg)
            output_fn(
                f"The future value of your investment after {inputs.time_period} years "
                f"will be: ${_fmt_money(result.future_value, cfg.display_decimals)}"
            )
            output_fn(render_ledger_table(result.ledger, cfg.display_decimals))
            output_fn(render_summary(result.summary, cfg.display_decimals))
            completed += 1

            again = input_fn("Do you want to calculate another investment? (Y/N): ")
            if not parse_yes_no(again):
                break
            output_fn("")
    except EOFError:
        logger.info("Input closed; ending session after %d projection(s).", completed)
        output_fn("")

    return completed


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="investment-calculator",
        description="Project a lump-sum investment year by year.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: INVEST_LOG_LEVEL or WARNING).")
    parser.add_argument("--max-years", type=int, default=None, help="Largest accepted time period.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    try:
        cfg = EngineConfig.from_env()
    except ValueError as exc:
        parser.error(str(exc))
    if args.max_years is not None or args.log_level is not None:
        cfg = EngineConfig(
            max_time_period=args.max_years if args.max_years is not None else cfg.max_time_period,
            display_decimals=cfg.display_decimals,
            log_level=(args.log_level or cfg.log_level).upper(),
        )

    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    run_session(config=cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
