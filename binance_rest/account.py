"""Signed trading and account endpoints."""

from __future__ import annotations

from typing import Optional

import httpx

from .auth import ANONYMOUS, Credentials
from .builders import (
    AccountBuilder,
    AccountTradesBuilder,
    AllOcoBuilder,
    AllOrdersBuilder,
    CancelAllOrdersBuilder,
    CancelOcoBuilder,
    CancelOrderBuilder,
    LimitOrderBuilder,
    MarketOrderBuilder,
    OcoOrderBuilder,
    OcoStatusBuilder,
    OpenOcoBuilder,
    OpenOrdersBuilder,
    OrderStatusBuilder,
)
from .client import DEFAULT_CONNECT_TIMEOUT, DEFAULT_TIMEOUT, BaseClient
from .config import Settings, get_settings
from .constants import (
    BINANCE_URL,
    PATH_ACCOUNT,
    PATH_ALL_ORDER_LIST,
    PATH_ALL_ORDERS,
    PATH_MY_TRADES,
    PATH_OPEN_ORDER_LIST,
    PATH_OPEN_ORDERS,
    PATH_ORDER,
    PATH_ORDER_LIST,
    PATH_ORDER_OCO,
    PATH_ORDER_TEST,
)
from .errors import BinanceError
from .market import GeneralClient, MarketDataClient, UserDataClient
from .params import ID, Number, OrderType, Parameters, Side, TimeInForce, split_id
from .wallet import WithdrawalClient


class AccountClient(BaseClient):
    """Client for placing, cancelling and querying orders and account data.

    Every method only picks the endpoint and the initial parameters; the
    returned builder adds optional parameters and sends the signed request::

        async with AccountClient.connect(api_key, secret_key, BINANCE_US_URL) as client:
            order = await (
                client.place_limit_order("BNBUSDT", Side.SELL, 20.00, 5.00, execute=False)
                .with_new_client_order_id("my-order")
                .with_recv_window(8000)
                .json()
            )
    """

    @classmethod
    def connect(
        cls,
        api_key: str,
        secret_key: str,
        base_url: str = BINANCE_URL,
        *,
        http: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        recv_window: Optional[int] = None,
    ) -> "AccountClient":
        """Create a client; raises :class:`UrlParseError` for a malformed *base_url*.

        ``recv_window`` is sent with every request that does not set its own.
        Pass ``http`` to share an existing ``httpx.AsyncClient``; it is then
        left open by :meth:`aclose`.
        """

        return cls._open(
            Credentials(api_key=api_key, secret_key=secret_key),
            base_url,
            http=http,
            timeout=timeout,
            connect_timeout=connect_timeout,
            recv_window=recv_window,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        http: Optional[httpx.AsyncClient] = None,
    ) -> "AccountClient":
        settings = settings or get_settings()
        if not settings.api_key or not settings.secret:
            raise BinanceError("BINANCE_API_KEY and BINANCE_SECRET_KEY are required")
        return cls.connect(
            settings.api_key,
            settings.secret,
            settings.base_url,
            http=http,
            timeout=settings.timeout,
            connect_timeout=settings.connect_timeout,
            recv_window=settings.recv_window,
        )

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------
    def place_limit_order(
        self,
        symbol: str,
        side: Side,
        price: Number,
        quantity: Number,
        execute: bool,
    ) -> LimitOrderBuilder:
        """Place a LIMIT order, good till cancelled unless changed.

        With ``execute=False`` the order goes to the test endpoint, which
        validates it without sending it to the matching engine.
        """

        return self._builder(
            LimitOrderBuilder,
            "POST",
            PATH_ORDER if execute else PATH_ORDER_TEST,
            Parameters.new(
                symbol=symbol,
                side=side,
                order_type=OrderType.LIMIT,
                price=price,
                quantity=quantity,
                time_in_force=TimeInForce.GTC,
            ),
        )

    def place_market_order(
        self,
        symbol: str,
        side: Side,
        quantity: Number,
        execute: bool,
    ) -> MarketOrderBuilder:
        """Place a MARKET order; ``execute=False`` uses the test endpoint."""

        return self._builder(
            MarketOrderBuilder,
            "POST",
            PATH_ORDER if execute else PATH_ORDER_TEST,
            Parameters.new(
                symbol=symbol,
                side=side,
                order_type=OrderType.MARKET,
                quantity=quantity,
            ),
        )

    def get_order(self, symbol: str, id: ID) -> OrderStatusBuilder:
        order_id, client_id = split_id(id)
        return self._builder(
            OrderStatusBuilder,
            "GET",
            PATH_ORDER,
            Parameters.new(symbol=symbol, order_id=order_id, orig_client_order_id=client_id),
        )

    def cancel_order(self, symbol: str, id: ID) -> CancelOrderBuilder:
        order_id, client_id = split_id(id)
        return self._builder(
            CancelOrderBuilder,
            "DELETE",
            PATH_ORDER,
            Parameters.new(symbol=symbol, order_id=order_id, orig_client_order_id=client_id),
        )

    def get_open_orders(self) -> OpenOrdersBuilder:
        """Open orders for every symbol, or one symbol via ``with_symbol``."""

        return self._builder(OpenOrdersBuilder, "GET", PATH_OPEN_ORDERS)

    def get_all_orders(self, symbol: str) -> AllOrdersBuilder:
        """Active, cancelled and filled orders for *symbol*.

        Narrow with ``with_order_id`` *or* a time range, not both.
        """

        return self._builder(AllOrdersBuilder, "GET", PATH_ALL_ORDERS, Parameters.new(symbol=symbol))

    def cancel_all_orders(self, symbol: str) -> CancelAllOrdersBuilder:
        """Cancel every open order on *symbol*.

        The exchange answers HTTP 400 when there is nothing to cancel.
        """

        return self._builder(
            CancelAllOrdersBuilder, "DELETE", PATH_OPEN_ORDERS, Parameters.new(symbol=symbol)
        )

    # ------------------------------------------------------------------
    # OCO order lists
    # ------------------------------------------------------------------
    def place_oco_order(
        self,
        symbol: str,
        side: Side,
        price: Number,
        stop_price: Number,
        quantity: Number,
    ) -> OcoOrderBuilder:
        """Place a limit order and a stop-loss order where one cancels the other.

        Price restrictions: SELL needs limit price > last price > stop price,
        BUY needs limit price < last price < stop price.
        """

        return self._builder(
            OcoOrderBuilder,
            "POST",
            PATH_ORDER_OCO,
            Parameters.new(
                symbol=symbol,
                side=side,
                price=price,
                stop_price=stop_price,
                quantity=quantity,
            ),
        )

    def cancel_oco_order(self, symbol: str, id: ID) -> CancelOcoBuilder:
        order_list_id, client_id = split_id(id)
        return self._builder(
            CancelOcoBuilder,
            "DELETE",
            PATH_ORDER_LIST,
            Parameters.new(
                symbol=symbol,
                order_list_id=order_list_id,
                list_client_order_id=client_id,
            ),
        )

    def get_oco_order(self, id: ID) -> OcoStatusBuilder:
        # The query endpoint names the client list id origClientOrderId.
        order_list_id, client_id = split_id(id)
        return self._builder(
            OcoStatusBuilder,
            "GET",
            PATH_ORDER_LIST,
            Parameters.new(order_list_id=order_list_id, orig_client_order_id=client_id),
        )

    def get_all_oco_orders(self) -> AllOcoBuilder:
        return self._builder(AllOcoBuilder, "GET", PATH_ALL_ORDER_LIST)

    def get_open_oco_orders(self) -> OpenOcoBuilder:
        return self._builder(OpenOcoBuilder, "GET", PATH_OPEN_ORDER_LIST)

    # ------------------------------------------------------------------
    # Account
    # ------------------------------------------------------------------
    def get_account(self) -> AccountBuilder:
        """Balances and permissions of the account."""

        return self._builder(AccountBuilder, "GET", PATH_ACCOUNT)

    def get_account_trades(self, symbol: str) -> AccountTradesBuilder:
        return self._builder(
            AccountTradesBuilder, "GET", PATH_MY_TRADES, Parameters.new(symbol=symbol)
        )

    # ------------------------------------------------------------------
    # Role conversions sharing transport and credentials
    # ------------------------------------------------------------------
    def to_general_client(self) -> GeneralClient:
        return self._share(GeneralClient, ANONYMOUS)

    def to_market_data_client(self) -> MarketDataClient:
        return self._share(MarketDataClient, self._credentials.public())

    def to_user_data_client(self) -> UserDataClient:
        return self._share(UserDataClient, self._credentials.public())

    def to_withdrawal_client(self) -> WithdrawalClient:
        """Wallet client signing with the same key and secret."""

        return self._share(WithdrawalClient, self._credentials)


__all__ = ["AccountClient"]
