"""Typed structures shared by the quote commands."""
from .modes import QuoteMode
from .results import QuoteOutcome, QuoteParams, SwapQuote

__all__ = [
    "QuoteMode",
    "QuoteOutcome",
    "QuoteParams",
    "SwapQuote",
]
