"""Console commands that print an ABI-encoded 0x quote on stdout.

``fetch-0x-quote QUANTITY SELL_TOKEN BUY_TOKEN IS_MINT`` and
``fetch-full-0x-quote QUANTITY SELL_TOKEN BUY_TOKEN`` take every positional
argument as the hex text of its ABI encoding (``uint256`` / ``address``) and
write the encoded quote as raw bytes. Exit codes: ``0`` success, ``1`` wrong
arguments, ``2`` the quote could not be fetched.

A malformed ABI word is not caught: Python reports it with a traceback on
stderr and its default exit code ``1``, the same code as a usage error. Only
the stderr text tells the two apart; a usage error prints the parameter list
and never a traceback.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, NoReturn, Optional, Sequence

from .client import DEFAULT_API_BASE_URL, QuoteOptions, ZeroExQuote
from .http import HttpClient
from .types.modes import QuoteMode

EXIT_USAGE = 1
EXIT_QUOTE_FAILED = 2

PROG_NAMES = {
    QuoteMode.MINT_AWARE: "fetch-0x-quote",
    QuoteMode.PLAIN: "fetch-full-0x-quote",
}

logger = logging.getLogger(__name__)


class UsageError(Exception):
    pass


class _QuoteArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def usage_message(mode: QuoteMode) -> str:
    return "please supply the correct parameters:\n    " + " ".join(mode.arg_names)


def _build_parser(mode: QuoteMode) -> argparse.ArgumentParser:
    parser = _QuoteArgumentParser(
        prog=PROG_NAMES[mode],
        description="Fetch a 0x swap quote and print it ABI-encoded on stdout.",
    )
    parser.add_argument(
        "values",
        nargs="*",
        metavar="WORD",
        help="hex-encoded ABI words: " + " ".join(mode.arg_names),
    )
    parser.add_argument(
        "--hex",
        action="store_true",
        help="write the payload as 0x-prefixed hex text instead of raw bytes",
    )
    parser.add_argument("--api-url", default=DEFAULT_API_BASE_URL)
    parser.add_argument("--timeout", type=float, default=None, help="request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _emit(payload: bytes, as_hex: bool) -> None:
    out = sys.stdout.buffer
    out.write(("0x" + payload.hex()).encode("ascii") if as_hex else payload)
    out.flush()


def main(
    mode: QuoteMode,
    argv: Optional[Sequence[str]] = None,
    http_client: Optional[HttpClient] = None,
) -> int:
    parser = _build_parser(mode)
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        print(usage_message(mode), file=sys.stderr)
        return EXIT_USAGE

    values: List[str] = args.values
    if len(values) != mode.arg_count:
        print(usage_message(mode), file=sys.stderr)
        return EXIT_USAGE

    _setup_logging(args.verbose)

    client = ZeroExQuote(
        QuoteOptions(api_base_url=args.api_url, timeout=args.timeout),
        http_client=http_client,
    )
    outcome = client.run(values, mode)
    if not outcome.ok:
        assert outcome.error is not None
        logger.error("%s (%s)", outcome.error.message, outcome.error.code)
        return EXIT_QUOTE_FAILED

    assert outcome.payload is not None
    _emit(outcome.payload, args.hex)
    return 0


def fetch_mint_quote_main() -> None:  # pragma: no cover - console entry point
    sys.exit(main(QuoteMode.MINT_AWARE))


def fetch_full_quote_main() -> None:  # pragma: no cover - console entry point
    sys.exit(main(QuoteMode.PLAIN))
