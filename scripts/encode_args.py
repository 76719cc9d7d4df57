#!/usr/bin/env python3
"""Build the hex ABI arguments expected by the quote commands.

Prints the words on one line so they can be pasted after ``fetch-0x-quote``
or ``fetch-full-0x-quote``. The ``decode`` command reads a hex payload written
by one of the commands and prints the decoded tuple instead.
"""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

from eth_abi import encode

from zeroex_quote.abi import decode_quote_result, hex_to_bytes
from zeroex_quote.types import QuoteMode


def _word(abi_type: str, value: object) -> str:
    return "0x" + encode([abi_type], [value]).hex()


def encode_arguments(quantity: int, sell_token: str, buy_token: str, mint: bool | None) -> List[str]:
    words = [
        _word("uint256", quantity),
        _word("address", sell_token),
        _word("address", buy_token),
    ]
    if mint is not None:
        words.append(_word("uint256", 1 if mint else 0))
    return words


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", help="encode quantity and token addresses")
    enc.add_argument("quantity", type=int)
    enc.add_argument("sell_token")
    enc.add_argument("buy_token")
    flag = enc.add_mutually_exclusive_group()
    flag.add_argument("--mint", dest="mint", action="store_true", default=None)
    flag.add_argument("--redeem", dest="mint", action="store_false")

    dec = sub.add_parser("decode", help="decode a hex payload printed with --hex")
    dec.add_argument("payload")
    dec.add_argument("--mode", choices=[mode.value for mode in QuoteMode], default=QuoteMode.PLAIN.value)
    return parser.parse_args(argv)


def main() -> None:
    args = parse_args()
    if args.command == "encode":
        print(" ".join(encode_arguments(args.quantity, args.sell_token, args.buy_token, args.mint)))
        return

    decoded = decode_quote_result(hex_to_bytes(args.payload), QuoteMode(args.mode))
    for value in decoded:
        if isinstance(value, bytes):
            value = "0x" + value.hex()
        elif isinstance(value, tuple):
            value = ["0x" + item.hex() for item in value]
        print(value)


if __name__ == "__main__":  # pragma: no cover - script entry point
    main()
