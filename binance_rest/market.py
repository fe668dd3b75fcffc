"""Role clients for public, market data and user data stream endpoints."""

from __future__ import annotations

from typing import Optional

import httpx

from .auth import ANONYMOUS, Credentials
from .builders import (
    AggTradesBuilder,
    BookTickerBuilder,
    ExchangeInfoBuilder,
    HistoricalTradesBuilder,
    OrderBookBuilder,
    PingBuilder,
    PriceTickerBuilder,
    RecentTradesBuilder,
    ServerTimeBuilder,
    UserStreamBuilder,
)
from .client import DEFAULT_CONNECT_TIMEOUT, DEFAULT_TIMEOUT, BaseClient
from .constants import (
    BINANCE_URL,
    PATH_AGG_TRADES,
    PATH_BOOK_TICKER,
    PATH_DEPTH,
    PATH_EXCHANGE_INFO,
    PATH_HISTORICAL_TRADES,
    PATH_PING,
    PATH_TICKER_PRICE,
    PATH_TIME,
    PATH_TRADES,
    PATH_USER_DATA_STREAM,
)
from .params import Parameters


class GeneralClient(BaseClient):
    """Connectivity and exchange metadata; no credentials involved."""

    @classmethod
    def connect(
        cls,
        base_url: str = BINANCE_URL,
        *,
        http: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    ) -> "GeneralClient":
        return cls._open(
            ANONYMOUS, base_url, http=http, timeout=timeout, connect_timeout=connect_timeout
        )

    def ping(self) -> PingBuilder:
        return self._builder(PingBuilder, "GET", PATH_PING)

    def get_server_time(self) -> ServerTimeBuilder:
        return self._builder(ServerTimeBuilder, "GET", PATH_TIME)

    def get_exchange_info(self) -> ExchangeInfoBuilder:
        """Trading rules and symbol information; narrow with ``with_symbol``."""

        return self._builder(ExchangeInfoBuilder, "GET", PATH_EXCHANGE_INFO)


class MarketDataClient(BaseClient):
    """Market data endpoints. The API key is sent where required, nothing is signed."""

    @classmethod
    def connect(
        cls,
        api_key: Optional[str] = None,
        base_url: str = BINANCE_URL,
        *,
        http: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    ) -> "MarketDataClient":
        return cls._open(
            Credentials(api_key=api_key),
            base_url,
            http=http,
            timeout=timeout,
            connect_timeout=connect_timeout,
        )

    def get_order_book(self, symbol: str) -> OrderBookBuilder:
        return self._builder(OrderBookBuilder, "GET", PATH_DEPTH, Parameters.new(symbol=symbol))

    def get_trades(self, symbol: str) -> RecentTradesBuilder:
        return self._builder(RecentTradesBuilder, "GET", PATH_TRADES, Parameters.new(symbol=symbol))

    def get_historical_trades(self, symbol: str) -> HistoricalTradesBuilder:
        """Older trades; the exchange requires the API key header for this one."""

        return self._builder(
            HistoricalTradesBuilder,
            "GET",
            PATH_HISTORICAL_TRADES,
            Parameters.new(symbol=symbol),
        )

    def get_agg_trades(self, symbol: str) -> AggTradesBuilder:
        return self._builder(AggTradesBuilder, "GET", PATH_AGG_TRADES, Parameters.new(symbol=symbol))

    def get_price_ticker(self) -> PriceTickerBuilder:
        return self._builder(PriceTickerBuilder, "GET", PATH_TICKER_PRICE)

    def get_order_book_ticker(self) -> BookTickerBuilder:
        return self._builder(BookTickerBuilder, "GET", PATH_BOOK_TICKER)

    def to_general_client(self) -> GeneralClient:
        return self._share(GeneralClient, ANONYMOUS)


class UserDataClient(BaseClient):
    """Listen key management for the user data websocket stream."""

    @classmethod
    def connect(
        cls,
        api_key: str,
        base_url: str = BINANCE_URL,
        *,
        http: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    ) -> "UserDataClient":
        return cls._open(
            Credentials(api_key=api_key),
            base_url,
            http=http,
            timeout=timeout,
            connect_timeout=connect_timeout,
        )

    def start_stream(self) -> UserStreamBuilder:
        """Open a stream; the response carries the ``listenKey``."""

        return self._builder(UserStreamBuilder, "POST", PATH_USER_DATA_STREAM)

    def keep_alive(self, listen_key: str) -> UserStreamBuilder:
        """Extend the validity of *listen_key* by 60 minutes."""

        return self._builder(
            UserStreamBuilder, "PUT", PATH_USER_DATA_STREAM, Parameters.new(listen_key=listen_key)
        )

    def close_stream(self, listen_key: str) -> UserStreamBuilder:
        return self._builder(
            UserStreamBuilder, "DELETE", PATH_USER_DATA_STREAM, Parameters.new(listen_key=listen_key)
        )


__all__ = ["GeneralClient", "MarketDataClient", "UserDataClient"]
