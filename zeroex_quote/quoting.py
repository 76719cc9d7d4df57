"""Quote client for the 0x swap API."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, FrozenSet, Optional

from .errors import ZeroExQuoteError
from .http import HttpClient
from .types.modes import QuoteMode
from .types.results import QuoteParams, SwapQuote
from .validation import validate_address, validate_hex_data, validate_uint256

DEFAULT_SLIPPAGE_PERCENTAGE = "0.001"

logger = logging.getLogger(__name__)


def amount_parameter(params: QuoteParams, mode: QuoteMode) -> str:
    """Name of the query parameter that carries the quantity.

    Minting asks for an exact output, so the quantity is what gets bought.
    """
    if mode is QuoteMode.MINT_AWARE and params.is_mint:
        return "buyAmount"
    return "sellAmount"


def build_query(
    params: QuoteParams,
    mode: QuoteMode,
    slippage_percentage: str = DEFAULT_SLIPPAGE_PERCENTAGE,
) -> Dict[str, str]:
    return {
        "buyToken": params.buy_token,
        "sellToken": params.sell_token,
        amount_parameter(params, mode): str(params.quantity),
        "slippagePercentage": slippage_percentage,
    }


def encoded_fields(params: QuoteParams, mode: QuoteMode) -> FrozenSet[str]:
    """Response fields that end up in the payload, besides ``data``."""
    if mode is QuoteMode.MINT_AWARE:
        return frozenset({"sellAmount" if params.is_mint else "buyAmount"})
    return frozenset({"buyAmount", "to"})


class Quoting:
    def __init__(
        self,
        api_base_url: str,
        quote_path: str,
        http_client: Optional[HttpClient] = None,
        slippage_percentage: str = DEFAULT_SLIPPAGE_PERCENTAGE,
    ) -> None:
        self._api_base_url = api_base_url.rstrip("/")
        self._quote_path = quote_path
        self._http_client = http_client or HttpClient()
        self._slippage_percentage = slippage_percentage

    @property
    def quote_url(self) -> str:
        return f"{self._api_base_url}{self._quote_path}"

    def fetch_quote(self, params: QuoteParams, mode: QuoteMode) -> SwapQuote:
        query = build_query(params, mode, self._slippage_percentage)
        payload = self._http_client.send_get_request(
            self._api_base_url,
            self._quote_path,
            query,
        )
        if not isinstance(payload, dict):
            raise ZeroExQuoteError.invalid_response_error(self.quote_url, payload)
        return self._build_quote(payload, encoded_fields(params, mode))

    def _build_quote(self, payload: Dict[str, Any], fields: FrozenSet[str]) -> SwapQuote:
        def read(validator: Callable[[Any, str], Any], field: str) -> Any:
            # fields this mode does not encode are left unset when unusable
            try:
                return validator(payload.get(field), field)
            except ZeroExQuoteError:
                if field in fields:
                    raise
                return None

        quote = SwapQuote(
            call_data=validate_hex_data(payload.get("data"), "data"),
            sell_amount=read(validate_uint256, "sellAmount"),
            buy_amount=read(validate_uint256, "buyAmount"),
            to=read(validate_address, "to"),
        )
        logger.debug(
            "quote: sellAmount=%s buyAmount=%s to=%s calldata=%d bytes",
            quote.sell_amount,
            quote.buy_amount,
            quote.to,
            len(quote.call_data),
        )
        return quote
