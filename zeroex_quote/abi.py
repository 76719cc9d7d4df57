"""ABI helpers: decode command-line arguments and encode quote payloads."""
from __future__ import annotations

from typing import Sequence

from eth_abi import decode, encode
from eth_utils import to_checksum_address

from .types.modes import QuoteMode
from .types.results import QuoteParams, SwapQuote


def hex_to_bytes(value: str) -> bytes:
    text = value[2:] if value[:2] in ("0x", "0X") else value
    return bytes.fromhex(text)


def decode_uint256(value: str) -> int:
    return int(decode(["uint256"], hex_to_bytes(value))[0])


def decode_address(value: str) -> str:
    return to_checksum_address(decode(["address"], hex_to_bytes(value))[0])


def decode_quote_params(args: Sequence[str], mode: QuoteMode) -> QuoteParams:
    """Decode the positional ABI arguments of a quote command.

    The caller is responsible for passing exactly ``mode.arg_count`` values.
    Malformed hex or short words raise straight from :mod:`eth_abi`.
    """
    quantity = decode_uint256(args[0])
    sell_token = decode_address(args[1])
    buy_token = decode_address(args[2])
    is_mint = False
    if mode is QuoteMode.MINT_AWARE:
        is_mint = decode_uint256(args[3]) == 1
    return QuoteParams(
        quantity=quantity,
        sell_token=sell_token,
        buy_token=buy_token,
        is_mint=is_mint,
    )


def encode_mint_quote(call_data: bytes, amount: int) -> bytes:
    return encode(list(QuoteMode.MINT_AWARE.output_types), [[call_data], amount])


def encode_full_quote(call_data: bytes, buy_amount: int, target: str) -> bytes:
    return encode(
        list(QuoteMode.PLAIN.output_types),
        [call_data, buy_amount, to_checksum_address(target)],
    )


def encode_quote_result(quote: SwapQuote, mode: QuoteMode, is_mint: bool = False) -> bytes:
    if mode is QuoteMode.MINT_AWARE:
        # the amount on the side opposite to the requested quantity
        amount = quote.sell_amount if is_mint else quote.buy_amount
        if amount is None:
            raise ValueError("quote is missing the amount to encode")
        return encode_mint_quote(quote.call_data, amount)

    if quote.buy_amount is None or quote.to is None:
        raise ValueError("plain quotes need a buy amount and a target contract address")
    return encode_full_quote(quote.call_data, quote.buy_amount, quote.to)


def decode_quote_result(payload: bytes, mode: QuoteMode) -> tuple:
    """Inverse of :func:`encode_quote_result`, handy when inspecting output."""
    return tuple(decode(list(mode.output_types), payload))
