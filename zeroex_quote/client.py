"""Public entry point for fetching encoded 0x quotes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .http import HttpClient, HttpRequestor
from .pipeline import run_quote_pipeline
from .quoting import DEFAULT_SLIPPAGE_PERCENTAGE, Quoting
from .types.modes import QuoteMode
from .types.results import QuoteOutcome

DEFAULT_API_BASE_URL = "https://api.0x.org"


@dataclass(slots=True)
class QuoteOptions:
    api_base_url: str = DEFAULT_API_BASE_URL
    quote_path: str = "/swap/v1/quote"
    slippage_percentage: str = DEFAULT_SLIPPAGE_PERCENTAGE
    timeout: Optional[float] = None
    http_requestor: Optional[HttpRequestor] = None


class ZeroExQuote:
    """Wires the HTTP client and quote client together from :class:`QuoteOptions`."""

    def __init__(
        self,
        options: Optional[QuoteOptions] = None,
        http_client: Optional[HttpClient] = None,
    ) -> None:
        self.options = options or QuoteOptions()

        self._http_client = http_client or HttpClient(
            self.options.http_requestor, timeout=self.options.timeout
        )

        self.quoting = Quoting(
            self.options.api_base_url,
            self.options.quote_path,
            self._http_client,
            slippage_percentage=self.options.slippage_percentage,
        )

    @property
    def quote_url(self) -> str:
        return self.quoting.quote_url

    def run(self, args: Sequence[str], mode: QuoteMode) -> QuoteOutcome:
        return run_quote_pipeline(args, mode, self.quoting)
