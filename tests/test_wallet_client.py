"""Tests for the withdrawal and deposit client."""

from __future__ import annotations

import pytest

from binance_rest import AccountClient, ParameterOutOfRange, WithdrawalClient
from binance_rest.auth import sign


@pytest.fixture
def wallet(http) -> WithdrawalClient:
    return WithdrawalClient.connect("api-key", "secret-key", http=http)


@pytest.mark.asyncio
async def test_withdraw_is_signed(exchange, wallet, frozen_clock) -> None:
    exchange.reply(200, json={"id": "7213fea8e94b4a5593d507237e5a555b"})

    result = await (
        wallet.withdraw("USDT", "0x5aa1a3b2", 25.50)
        .with_network("BSC")
        .with_withdraw_order_id("payout-1")
        .json()
    )

    request = exchange.last
    expected = (
        "coin=USDT&address=0x5aa1a3b2&amount=25.5&network=BSC&withdrawOrderId=payout-1"
        f"&timestamp={frozen_clock}"
    )
    assert result == {"id": "7213fea8e94b4a5593d507237e5a555b"}
    assert request.method == "POST"
    assert request.url.path == "/sapi/v1/capital/withdraw/apply"
    assert request.url.query.decode() == f"{expected}&signature={sign('secret-key', expected)}"
    assert request.headers["X-MBX-APIKEY"] == "api-key"


@pytest.mark.asyncio
async def test_history_and_deposit_address(exchange, wallet, frozen_clock) -> None:
    await wallet.get_withdraw_history().with_coin("BTC").with_limit(10).send()
    withdrawals = exchange.last
    await wallet.get_deposit_history().with_start_time(1_000).with_end_time(2_000).send()
    deposits = exchange.last
    await wallet.get_deposit_address("BNB").with_network("BSC").send()
    address = exchange.last

    assert withdrawals.url.path == "/sapi/v1/capital/withdraw/history"
    assert withdrawals.url.query.decode().startswith(f"coin=BTC&limit=10&timestamp={frozen_clock}&")
    assert deposits.url.path == "/sapi/v1/capital/deposit/hisrec"
    assert deposits.url.query.decode().startswith("startTime=1000&endTime=2000&timestamp=")
    assert address.url.path == "/sapi/v1/capital/deposit/address"
    assert address.url.query.decode().startswith("coin=BNB&network=BSC&timestamp=")


def test_history_limit_is_bounded(wallet) -> None:
    with pytest.raises(ParameterOutOfRange):
        wallet.get_withdraw_history().with_limit(1001).prepare()


def test_account_client_converts_to_withdrawal_client(http, frozen_clock) -> None:
    account = AccountClient.connect("api-key", "secret-key", "https://api.binance.us", http=http, recv_window=5000)

    wallet = account.to_withdrawal_client()
    request = wallet.get_deposit_address("BTC").prepare()

    assert isinstance(wallet, WithdrawalClient)
    assert wallet.http is http
    assert wallet.base_url == account.base_url
    assert wallet.api_key == "api-key"
    assert request.url == "https://api.binance.us/sapi/v1/capital/deposit/address"
    query, signature = request.query.rsplit("&signature=", 1)
    assert query == f"coin=BTC&recvWindow=5000&timestamp={frozen_clock}"
    assert signature == sign("secret-key", query)
