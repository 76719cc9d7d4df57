"""Fetch 0x swap quotes and re-encode them as ABI payloads."""
from .abi import decode_quote_params, encode_quote_result
from .client import QuoteOptions, ZeroExQuote
from .errors import ZeroExQuoteError
from .http import HttpClient
from .pipeline import run_quote_pipeline
from .quoting import Quoting
from .types import QuoteMode, QuoteOutcome, QuoteParams, SwapQuote

__all__ = [
    "HttpClient",
    "QuoteMode",
    "QuoteOptions",
    "QuoteOutcome",
    "QuoteParams",
    "Quoting",
    "SwapQuote",
    "ZeroExQuote",
    "ZeroExQuoteError",
    "decode_quote_params",
    "encode_quote_result",
    "run_quote_pipeline",
]
