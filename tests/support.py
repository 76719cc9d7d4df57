"""Test data and doubles shared by the quote tests."""
from eth_abi import encode

TARGET = "0x" + "beef" * 10
SELL_TOKEN = "0x6b175474e89094c44da98b954eedeac495271d0f"
BUY_TOKEN = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"

QUOTE_PAYLOAD = {
    "data": "0xcafe",
    "sellAmount": "100",
    "buyAmount": "200",
    "to": TARGET,
}


def abi_word(abi_type, value):
    return "0x" + encode([abi_type], [value]).hex()


class DummyHttpClient:
    def __init__(self, payload=None, error=None):
        self.payload = QUOTE_PAYLOAD if payload is None else payload
        self.error = error
        self.calls = []

    def send_get_request(self, base_url, base_path, params=None):
        self.calls.append((base_url, base_path, params))
        if self.error is not None:
            raise self.error
        return self.payload
