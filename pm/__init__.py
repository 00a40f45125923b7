"""
Projection summary — totals and average returns over a yearly ledger.
"""

from .metrics import InvestmentSummary, summarize

__all__ = [
    "InvestmentSummary",
    "summarize",
]
