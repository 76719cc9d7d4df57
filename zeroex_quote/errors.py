"""Custom exceptions for the 0x quote tooling."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(eq=False)
class ZeroExQuoteError(Exception):
    """Base exception raised while fetching or re-encoding a quote."""

    message: str
    code: str
    details: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    @classmethod
    def network_error(cls, url: str, exc: BaseException) -> "ZeroExQuoteError":
        return cls(
            f"Request to {url} failed: {exc}",
            "NETWORK_ERROR",
            {"url": url, "reason": type(exc).__name__},
        )

    @classmethod
    def invalid_response_error(cls, url: str, payload: Any) -> "ZeroExQuoteError":
        return cls(
            "Unexpected response structure from quote endpoint",
            "INVALID_RESPONSE",
            {"url": url, "payload": payload},
        )

    @classmethod
    def from_http_response(
        cls, url: str, status: int, body: Any, reason: Optional[str], message: Optional[str]
    ) -> "ZeroExQuoteError":
        if reason and message:
            return cls(
                f"0x API Error {reason} from {url}: {message}",
                "API_ERROR",
                {
                    "message": message,
                    "reason": reason,
                    "status": status,
                    "body": body,
                    "url": url,
                },
            )

        return cls(
            f"Unexpected HTTP Error {status} from {url}",
            "HTTP_ERROR",
            {"status": status, "body": body, "url": url},
        )
