"""End-to-end tests for the account client against a mocked exchange."""

from __future__ import annotations

import asyncio
import logging

import httpx
import pytest
from pydantic import BaseModel

from binance_rest import (
    BINANCE_US_URL,
    AccountClient,
    ApiError,
    DecodeError,
    GeneralClient,
    MarketDataClient,
    TransportError,
    UrlParseError,
    UserDataClient,
)
from binance_rest.auth import sign
from binance_rest.params import ID, Side


class OrderAck(BaseModel):
    symbol: str
    orderId: int


@pytest.mark.asyncio
async def test_limit_test_order_end_to_end(exchange, http, frozen_clock) -> None:
    client = AccountClient.connect("api-key", "secret-key", BINANCE_US_URL, http=http)

    result = await client.place_limit_order("BNBUSDT", Side.SELL, 20.00, 5.00, execute=False).json()

    assert result == {}
    request = exchange.last
    expected = (
        "symbol=BNBUSDT&side=SELL&type=LIMIT&price=20&quantity=5&timeInForce=GTC"
        f"&timestamp={frozen_clock}"
    )
    assert request.method == "POST"
    assert request.url.scheme == "https"
    assert request.url.host == "api.binance.us"
    assert request.url.path == "/api/v3/order/test"
    assert request.url.query.decode() == f"{expected}&signature={sign('secret-key', expected)}"
    assert request.headers["X-MBX-APIKEY"] == "api-key"


@pytest.mark.asyncio
async def test_live_order_uses_order_endpoint(exchange, http) -> None:
    client = AccountClient.connect("api-key", "secret-key", http=http)

    await client.place_market_order("BNBUSDT", Side.BUY, 1, execute=True).send()

    assert exchange.last.url.path == "/api/v3/order"
    assert exchange.last.url.host == "api.binance.com"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("identifier", "present", "absent"),
    [
        (ID.OrderId(123), "orderId=123", "origClientOrderId"),
        (ID.ClientOId("my-order"), "origClientOrderId=my-order", "orderId"),
    ],
)
async def test_get_order_sends_exactly_one_id(exchange, http, identifier, present, absent) -> None:
    client = AccountClient.connect("api-key", "secret-key", http=http)

    await client.get_order("BNBUSDT", identifier).send()

    query = exchange.last.url.query.decode()
    assert exchange.last.method == "GET"
    assert query.startswith(f"symbol=BNBUSDT&{present}&timestamp=")
    assert f"{absent}=" not in query


@pytest.mark.asyncio
async def test_cancel_all_orders_without_open_orders_raises_api_error(exchange, http, caplog) -> None:
    exchange.reply(400, json={"code": -2011, "msg": "Unknown order sent."})
    client = AccountClient.connect("api-key", "secret-key", http=http)

    with caplog.at_level(logging.WARNING, logger="binance_rest.builder"):
        with pytest.raises(ApiError) as excinfo:
            await client.cancel_all_orders("BNBUSDT").send()

    error = excinfo.value
    assert error.status_code == 400
    assert error.code == -2011
    assert error.message == "Unknown order sent."
    assert error.method == "DELETE"
    assert "signature=<redacted>" in error.url
    assert "-2011 Unknown order sent." in str(error)
    assert exchange.last.url.path == "/api/v3/openOrders"
    assert any("Unknown order sent." in record.getMessage() for record in caplog.records)


@pytest.mark.asyncio
async def test_api_error_without_envelope_uses_http_status(exchange, http) -> None:
    exchange.reply(503, text="")
    client = AccountClient.connect("api-key", "secret-key", http=http)

    with pytest.raises(ApiError) as excinfo:
        await client.get_account().json()

    assert excinfo.value.status_code == 503
    assert excinfo.value.code is None
    assert excinfo.value.message == "Service Unavailable"


@pytest.mark.asyncio
async def test_connection_failure_raises_transport_error(exchange, http) -> None:
    exchange.fail()
    client = AccountClient.connect("api-key", "secret-key", http=http)

    with pytest.raises(TransportError) as excinfo:
        await client.get_account().send()

    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)
    assert "signature=<redacted>" in str(excinfo.value)


@pytest.mark.asyncio
async def test_invalid_json_raises_decode_error(exchange, http) -> None:
    exchange.reply(200, text="<html>maintenance</html>")
    client = AccountClient.connect("api-key", "secret-key", http=http)

    with pytest.raises(DecodeError) as excinfo:
        await client.get_open_orders().json()

    assert excinfo.value.body == "<html>maintenance</html>"


@pytest.mark.asyncio
async def test_json_decodes_into_a_model(exchange, http) -> None:
    exchange.reply(200, json={"symbol": "BNBUSDT", "orderId": 28, "status": "NEW"})
    exchange.reply(200, json={"symbol": "BNBUSDT"})
    client = AccountClient.connect("api-key", "secret-key", http=http)

    ack = await client.get_order("BNBUSDT", ID.OrderId(28)).json(OrderAck)
    assert ack == OrderAck(symbol="BNBUSDT", orderId=28)

    with pytest.raises(DecodeError):
        await client.get_order("BNBUSDT", ID.OrderId(28)).json(OrderAck)


@pytest.mark.asyncio
async def test_oco_queries(exchange, http) -> None:
    client = AccountClient.connect("api-key", "secret-key", http=http)

    await client.cancel_oco_order("BNBUSDT", ID.ClientOId("list-1")).send()
    cancel = exchange.last
    await client.get_oco_order(ID.OrderId(9)).send()
    status = exchange.last
    await client.get_open_oco_orders().send()

    assert cancel.method == "DELETE"
    assert cancel.url.path == "/api/v3/orderList"
    assert cancel.url.query.decode().startswith("symbol=BNBUSDT&listClientOrderId=list-1&")
    assert status.method == "GET"
    assert status.url.query.decode().startswith("orderListId=9&timestamp=")
    assert exchange.last.url.path == "/api/v3/openOrderList"


def test_malformed_base_url_is_rejected() -> None:
    for base_url in ("", "not a url", "ftp://api.binance.com", "https://"):
        with pytest.raises(UrlParseError):
            AccountClient.connect("api-key", "secret-key", base_url)


def test_role_conversions_share_the_transport(http) -> None:
    client = AccountClient.connect("api-key", "secret-key", BINANCE_US_URL, http=http)

    general = client.to_general_client()
    market = client.to_market_data_client()
    stream = client.to_user_data_client()

    assert isinstance(general, GeneralClient)
    assert isinstance(market, MarketDataClient)
    assert isinstance(stream, UserDataClient)
    for role in (general, market, stream):
        assert role.http is http
        assert role.base_url == client.base_url
    assert general.api_key is None
    assert market.api_key == "api-key"
    assert stream.api_key == "api-key"

    request = market.get_historical_trades("BNBUSDT").prepare()
    assert not request.signed
    assert request.headers == {"X-MBX-APIKEY": "api-key"}


def test_shared_transport_is_left_open() -> None:
    async def runner() -> None:
        http = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
        async with AccountClient.connect("api-key", "secret-key", http=http):
            pass
        assert not http.is_closed
        await http.aclose()

        async with AccountClient.connect("api-key", "secret-key") as owned:
            pass
        assert owned.http.is_closed

    asyncio.run(runner())
