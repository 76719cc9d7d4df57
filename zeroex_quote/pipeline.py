"""Decode -> fetch -> encode, shared by both quote commands."""
from __future__ import annotations

import logging
from typing import Sequence

from .abi import decode_quote_params, encode_quote_result
from .errors import ZeroExQuoteError
from .quoting import Quoting
from .types.modes import QuoteMode
from .types.results import QuoteOutcome

logger = logging.getLogger(__name__)


def run_quote_pipeline(args: Sequence[str], mode: QuoteMode, quoting: Quoting) -> QuoteOutcome:
    """Turn the ABI arguments of one command into an encoded quote payload.

    Decoding errors are not caught. Anything that goes wrong while talking to
    the API or reading its answer comes back as a failed outcome, so callers
    never see a partial payload.
    """
    params = decode_quote_params(args, mode)
    logger.debug("decoded %s params: %s", mode.value, params)

    try:
        quote = quoting.fetch_quote(params, mode)
    except ZeroExQuoteError as exc:
        return QuoteOutcome.failure(exc)

    return QuoteOutcome.success(encode_quote_result(quote, mode, params.is_mint))
