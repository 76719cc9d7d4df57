"""Coercion helpers for fields returned by the quote API."""
from __future__ import annotations

from typing import Any

from .errors import ZeroExQuoteError

UINT256_MAX = 2**256 - 1


def _invalid(field: str, value: Any, kind: str, reason: str) -> ZeroExQuoteError:
    return ZeroExQuoteError(
        f"Invalid {field}: {reason}",
        "VALIDATION_ERROR",
        {"type": kind, "field": field, "value": value},
    )


def validate_uint256(value: Any, field: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        amount = value
    elif isinstance(value, str) and value.isascii() and value.isdecimal():
        amount = int(value, 10)
    else:
        raise _invalid(field, value, "INVALID_UINT256", "must be a decimal integer")
    if amount < 0 or amount > UINT256_MAX:
        raise _invalid(field, value, "INVALID_UINT256", "out of uint256 range")
    return amount


def validate_hex_data(value: Any, field: str) -> bytes:
    if not isinstance(value, str) or not value.startswith("0x"):
        raise _invalid(field, value, "INVALID_HEX_DATA", "must be a 0x-prefixed hex string")
    try:
        return bytes.fromhex(value[2:])
    except ValueError as exc:
        raise _invalid(field, value, "INVALID_HEX_DATA", "must be a 0x-prefixed hex string") from exc


def validate_address(value: Any, field: str) -> str:
    raw = validate_hex_data(value, field)
    if len(raw) != 20:
        raise _invalid(field, value, "INVALID_ADDRESS", "must be 20 bytes long")
    return value
