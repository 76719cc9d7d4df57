"""HTTP client helpers used by the quote tooling."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, MutableMapping, Optional

import requests

from .errors import ZeroExQuoteError

HttpRequestor = Callable[[str, Mapping[str, Any]], requests.Response]

logger = logging.getLogger(__name__)


def _first_validation_reason(payload: Mapping[str, Any]) -> Optional[str]:
    errors = payload.get("validationErrors")
    if isinstance(errors, list) and errors and isinstance(errors[0], Mapping):
        field = errors[0].get("field")
        reason = errors[0].get("reason")
        if field and reason:
            return f"{field}: {reason}"
        return reason
    return None


@dataclass
class HttpClient:
    """Small convenience wrapper around :mod:`requests` with quote defaults.

    ``timeout`` defaults to ``None`` so a request blocks until the server
    answers, which matches how the commands have always behaved.
    """

    requestor: Optional[HttpRequestor] = None
    user_agent: str = "zeroex-quote/0.1"
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        if self.requestor is None:
            session = requests.Session()

            def _requestor(url: str, kwargs: Mapping[str, Any]) -> requests.Response:
                return session.request(url=url, **dict(kwargs))

            self.requestor = _requestor

    def send_get_request(
        self,
        base_url: str,
        base_path: str,
        params: Optional[Mapping[str, str]] = None,
    ) -> Any:
        url = f"{base_url.rstrip('/')}{base_path}"
        headers: MutableMapping[str, str] = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }

        kwargs: MutableMapping[str, Any] = {
            "method": "GET",
            "headers": headers,
            "timeout": self.timeout,
        }
        if params:
            kwargs["params"] = params

        logger.debug("GET %s params=%s", url, params)
        assert self.requestor is not None
        try:
            response = self.requestor(url, kwargs)
        except requests.RequestException as exc:
            raise ZeroExQuoteError.network_error(url, exc) from exc

        if not response.ok:
            reason: Optional[str] = None
            message: Optional[str] = None
            try:
                payload = response.json()
            except ValueError:
                payload = response.text
            else:
                if isinstance(payload, Mapping):
                    reason = payload.get("reason")  # type: ignore[assignment]
                    message = _first_validation_reason(payload) or payload.get("message")  # type: ignore[assignment]
            raise ZeroExQuoteError.from_http_response(
                url, response.status_code, payload, reason, message
            )

        try:
            return response.json()
        except ValueError:
            return response.text
