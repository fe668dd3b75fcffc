"""Canonical Binance REST endpoint constants used by the client package."""

from __future__ import annotations


# Public base URLs. Callers may pass any other well formed http(s) base URL
# (regional mirrors, proxies); these are the documented ones.
BINANCE_URL = "https://api.binance.com"
BINANCE_US_URL = "https://api.binance.us"
BINANCE_TESTNET_URL = "https://testnet.binance.vision"

API_KEY_HEADER = "X-MBX-APIKEY"

# Trading endpoints (signed).
PATH_ORDER = "/api/v3/order"
PATH_ORDER_TEST = "/api/v3/order/test"
PATH_OPEN_ORDERS = "/api/v3/openOrders"
PATH_ALL_ORDERS = "/api/v3/allOrders"
PATH_ORDER_OCO = "/api/v3/order/oco"
PATH_ORDER_LIST = "/api/v3/orderList"
PATH_ALL_ORDER_LIST = "/api/v3/allOrderList"
PATH_OPEN_ORDER_LIST = "/api/v3/openOrderList"

# Account endpoints (signed).
PATH_ACCOUNT = "/api/v3/account"
PATH_MY_TRADES = "/api/v3/myTrades"

# General endpoints (public).
PATH_PING = "/api/v3/ping"
PATH_TIME = "/api/v3/time"
PATH_EXCHANGE_INFO = "/api/v3/exchangeInfo"

# Market data endpoints (public, historical trades need the API key header).
PATH_DEPTH = "/api/v3/depth"
PATH_TRADES = "/api/v3/trades"
PATH_HISTORICAL_TRADES = "/api/v3/historicalTrades"
PATH_AGG_TRADES = "/api/v3/aggTrades"
PATH_TICKER_PRICE = "/api/v3/ticker/price"
PATH_BOOK_TICKER = "/api/v3/ticker/bookTicker"

# User data stream (API key header only).
PATH_USER_DATA_STREAM = "/api/v3/userDataStream"

# Wallet endpoints (signed).
PATH_WITHDRAW = "/sapi/v1/capital/withdraw/apply"
PATH_WITHDRAW_HISTORY = "/sapi/v1/capital/withdraw/history"
PATH_DEPOSIT_HISTORY = "/sapi/v1/capital/deposit/hisrec"
PATH_DEPOSIT_ADDRESS = "/sapi/v1/capital/deposit/address"


__all__ = [
    "BINANCE_URL",
    "BINANCE_US_URL",
    "BINANCE_TESTNET_URL",
    "API_KEY_HEADER",
    "PATH_ORDER",
    "PATH_ORDER_TEST",
    "PATH_OPEN_ORDERS",
    "PATH_ALL_ORDERS",
    "PATH_ORDER_OCO",
    "PATH_ORDER_LIST",
    "PATH_ALL_ORDER_LIST",
    "PATH_OPEN_ORDER_LIST",
    "PATH_ACCOUNT",
    "PATH_MY_TRADES",
    "PATH_PING",
    "PATH_TIME",
    "PATH_EXCHANGE_INFO",
    "PATH_DEPTH",
    "PATH_TRADES",
    "PATH_HISTORICAL_TRADES",
    "PATH_AGG_TRADES",
    "PATH_TICKER_PRICE",
    "PATH_BOOK_TICKER",
    "PATH_USER_DATA_STREAM",
    "PATH_WITHDRAW",
    "PATH_WITHDRAW_HISTORY",
    "PATH_DEPOSIT_HISTORY",
    "PATH_DEPOSIT_ADDRESS",
]
