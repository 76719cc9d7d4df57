"""Dataclasses describing the values that flow through a quote run."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..errors import ZeroExQuoteError


@dataclass(slots=True)
class QuoteParams:
    quantity: int
    sell_token: str
    buy_token: str
    is_mint: bool = False


@dataclass(slots=True)
class SwapQuote:
    call_data: bytes
    sell_amount: Optional[int] = None
    buy_amount: Optional[int] = None
    to: Optional[str] = None


@dataclass(slots=True)
class QuoteOutcome:
    """Either an encoded payload or the reason no payload was produced."""

    payload: Optional[bytes] = None
    error: Optional[ZeroExQuoteError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.payload is not None

    @classmethod
    def success(cls, payload: bytes) -> "QuoteOutcome":
        return cls(payload=payload)

    @classmethod
    def failure(cls, error: ZeroExQuoteError) -> "QuoteOutcome":
        return cls(error=error)
