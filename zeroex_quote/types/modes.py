"""Constants that describe the supported quote modes."""
from __future__ import annotations

from enum import Enum


class QuoteMode(Enum):
    """Shape of a quote request and of the payload written back.

    ``MINT_AWARE`` takes a fourth ``isMint`` argument and emits
    ``(bytes[], uint256)``; ``PLAIN`` always sells the quantity and emits
    ``(bytes, uint256, address)``.
    """

    MINT_AWARE = "mint-aware"
    PLAIN = "plain"

    @property
    def arg_names(self) -> tuple[str, ...]:
        if self is QuoteMode.MINT_AWARE:
            return ("quantity", "sellToken", "buyToken", "isMint")
        return ("quantity", "sellToken", "buyToken")

    @property
    def arg_count(self) -> int:
        return len(self.arg_names)

    @property
    def output_types(self) -> tuple[str, ...]:
        if self is QuoteMode.MINT_AWARE:
            return ("bytes[]", "uint256")
        return ("bytes", "uint256", "address")
