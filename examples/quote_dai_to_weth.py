"""Example: fetch a plain 0x quote for DAI -> WETH and show the decoded payload."""
from eth_abi import encode

from zeroex_quote import QuoteMode, ZeroExQuote
from zeroex_quote.abi import decode_quote_result

DAI = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"


def main() -> None:
    args = [
        "0x" + encode(["uint256"], [1000 * 10**18]).hex(),
        "0x" + encode(["address"], [DAI]).hex(),
        "0x" + encode(["address"], [WETH]).hex(),
    ]
    outcome = ZeroExQuote().run(args, QuoteMode.PLAIN)
    if not outcome.ok:
        print("Quote failed:", outcome.error)
        return

    call_data, buy_amount, target = decode_quote_result(outcome.payload, QuoteMode.PLAIN)
    print("Payload size:", len(outcome.payload))
    print("Buy amount:", buy_amount)
    print("Target:", target)
    print("Call data bytes:", len(call_data))


if __name__ == "__main__":  # pragma: no cover - manual usage
    main()
