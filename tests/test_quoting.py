import pytest

from zeroex_quote.errors import ZeroExQuoteError
from zeroex_quote.quoting import Quoting, amount_parameter, build_query, encoded_fields
from zeroex_quote.types import QuoteMode, QuoteParams

from support import BUY_TOKEN, QUOTE_PAYLOAD, SELL_TOKEN, TARGET, DummyHttpClient


def _params(is_mint=False):
    return QuoteParams(quantity=5000, sell_token=SELL_TOKEN, buy_token=BUY_TOKEN, is_mint=is_mint)


def test_amount_parameter_follows_mint_flag():
    assert amount_parameter(_params(is_mint=True), QuoteMode.MINT_AWARE) == "buyAmount"
    assert amount_parameter(_params(is_mint=False), QuoteMode.MINT_AWARE) == "sellAmount"
    assert amount_parameter(_params(is_mint=True), QuoteMode.PLAIN) == "sellAmount"


def test_build_query_for_mint():
    assert build_query(_params(is_mint=True), QuoteMode.MINT_AWARE) == {
        "buyToken": BUY_TOKEN,
        "sellToken": SELL_TOKEN,
        "buyAmount": "5000",
        "slippagePercentage": "0.001",
    }


def test_fetch_quote_sends_one_get_and_parses_fields():
    http_client = DummyHttpClient()
    quoting = Quoting("https://api.example/", "/swap/v1/quote", http_client)

    quote = quoting.fetch_quote(_params(), QuoteMode.PLAIN)

    assert http_client.calls == [
        (
            "https://api.example",
            "/swap/v1/quote",
            {
                "buyToken": BUY_TOKEN,
                "sellToken": SELL_TOKEN,
                "sellAmount": "5000",
                "slippagePercentage": "0.001",
            },
        )
    ]
    assert quote.call_data == b"\xca\xfe"
    assert quote.sell_amount == 100
    assert quote.buy_amount == 200
    assert quote.to == TARGET
    assert quoting.quote_url == "https://api.example/swap/v1/quote"


def test_fetch_quote_custom_slippage():
    http_client = DummyHttpClient()
    quoting = Quoting("https://api.example", "/q", http_client, slippage_percentage="0.01")

    quoting.fetch_quote(_params(is_mint=True), QuoteMode.MINT_AWARE)

    assert http_client.calls[0][2]["slippagePercentage"] == "0.01"


def test_mint_aware_quote_does_not_need_target():
    payload = {key: value for key, value in QUOTE_PAYLOAD.items() if key != "to"}
    quoting = Quoting("https://api.example", "/q", DummyHttpClient(payload))

    quote = quoting.fetch_quote(_params(), QuoteMode.MINT_AWARE)

    assert quote.to is None


def test_plain_quote_requires_target():
    payload = {key: value for key, value in QUOTE_PAYLOAD.items() if key != "to"}
    quoting = Quoting("https://api.example", "/q", DummyHttpClient(payload))

    with pytest.raises(ZeroExQuoteError) as excinfo:
        quoting.fetch_quote(_params(), QuoteMode.PLAIN)

    assert excinfo.value.code == "VALIDATION_ERROR"
    assert excinfo.value.details["field"] == "to"


def test_non_object_payload_is_rejected():
    quoting = Quoting("https://api.example", "/q", DummyHttpClient(["not", "a", "quote"]))

    with pytest.raises(ZeroExQuoteError) as excinfo:
        quoting.fetch_quote(_params(), QuoteMode.PLAIN)

    assert excinfo.value.code == "INVALID_RESPONSE"


def test_errors_from_http_client_propagate():
    error = ZeroExQuoteError("boom", "HTTP_ERROR")
    quoting = Quoting("https://api.example", "/q", DummyHttpClient(error=error))

    with pytest.raises(ZeroExQuoteError) as excinfo:
        quoting.fetch_quote(_params(), QuoteMode.PLAIN)

    assert excinfo.value is error


def test_mint_aware_quote_ignores_malformed_target():
    payload = dict(QUOTE_PAYLOAD, to="0x")
    quoting = Quoting("https://api.example", "/q", DummyHttpClient(payload))

    quote = quoting.fetch_quote(_params(is_mint=True), QuoteMode.MINT_AWARE)

    assert quote.to is None
    assert quote.sell_amount == 100


def test_plain_quote_does_not_need_sell_amount():
    payload = {key: value for key, value in QUOTE_PAYLOAD.items() if key != "sellAmount"}
    quoting = Quoting("https://api.example", "/q", DummyHttpClient(payload))

    quote = quoting.fetch_quote(_params(), QuoteMode.PLAIN)

    assert quote.sell_amount is None
    assert quote.buy_amount == 200
    assert quote.to == TARGET


@pytest.mark.parametrize(
    "is_mint, missing, unused",
    [(True, "sellAmount", "buyAmount"), (False, "buyAmount", "sellAmount")],
)
def test_mint_aware_quote_requires_only_the_encoded_amount(is_mint, missing, unused):
    quoting = Quoting(
        "https://api.example",
        "/q",
        DummyHttpClient(dict(QUOTE_PAYLOAD, **{unused: "not a number"})),
    )
    quoting.fetch_quote(_params(is_mint=is_mint), QuoteMode.MINT_AWARE)

    payload = {key: value for key, value in QUOTE_PAYLOAD.items() if key != missing}
    quoting = Quoting("https://api.example", "/q", DummyHttpClient(payload))

    with pytest.raises(ZeroExQuoteError) as excinfo:
        quoting.fetch_quote(_params(is_mint=is_mint), QuoteMode.MINT_AWARE)

    assert excinfo.value.details["field"] == missing


def test_encoded_fields_per_mode():
    assert encoded_fields(_params(is_mint=True), QuoteMode.MINT_AWARE) == {"sellAmount"}
    assert encoded_fields(_params(is_mint=False), QuoteMode.MINT_AWARE) == {"buyAmount"}
    assert encoded_fields(_params(is_mint=True), QuoteMode.PLAIN) == {"buyAmount", "to"}
