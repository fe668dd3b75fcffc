"""Variant specific builders.

Every request variant gets its own class exposing only the ``with_*`` methods
the exchange accepts for it. Methods that turn an order into another order
type (``with_stop_loss_limit``, ``into_limit_maker_order``, ...) consume the
builder they are called on and return a builder of the new class, which no
longer offers the alternative upgrades.

Values are never checked when a ``with_*`` method is called; range and
consistency checks run when the request is prepared for sending.
"""

from __future__ import annotations

from typing import TypeVar

from .builder import ParamBuilder
from .params import Number, OrderRespType, OrderType, Timestamp, TimeInForce
from .variants import Variant

_B = TypeVar("_B", bound=ParamBuilder)


# ----------------------------------------------------------------------
# Shared setters
# ----------------------------------------------------------------------
class _RecvWindow(ParamBuilder):
    def with_recv_window(self: _B, recv_window: int) -> _B:
        """Milliseconds the request stays valid after ``timestamp``; at most 60000."""

        return self._set(recv_window=recv_window)


class _SymbolFilter(ParamBuilder):
    def with_symbol(self: _B, symbol: str) -> _B:
        """Restrict the result to *symbol*; all symbols are returned otherwise."""

        return self._set(symbol=symbol)


class _NewClientOrderId(ParamBuilder):
    def with_new_client_order_id(self: _B, client_order_id: str) -> _B:
        """Unique id for the order; generated by the exchange when omitted."""

        return self._set(new_client_order_id=client_order_id)


class _Limit(ParamBuilder):
    def with_limit(self: _B, limit: int) -> _B:
        return self._set(limit=limit)


class _TimeRange(_Limit):
    def with_start_time(self: _B, start: Timestamp) -> _B:
        """Only include entries at or after *start* (datetime or epoch ms)."""

        return self._set(start_time=start)

    def with_end_time(self: _B, end: Timestamp) -> _B:
        """Only include entries at or before *end* (datetime or epoch ms)."""

        return self._set(end_time=end)


class _FromId(ParamBuilder):
    def with_from_id(self: _B, from_id: int) -> _B:
        """Start from this id; cannot be combined with a time range."""

        return self._set(from_id=from_id)


class _OrderIdFilter(ParamBuilder):
    def with_order_id(self: _B, order_id: int) -> _B:
        """Only include orders with an id >= *order_id*; cannot be combined with a time range."""

        return self._set(order_id=order_id)


class _OrderOptions(_NewClientOrderId, _RecvWindow):
    def with_new_order_resp_type(self: _B, resp_type: OrderRespType) -> _B:
        """Response verbosity; the exchange defaults to ``ACK`` or ``FULL`` by order type."""

        return self._set(new_order_resp_type=resp_type)


class _TimeInForce(ParamBuilder):
    def with_time_in_force(self: _B, time_in_force: TimeInForce) -> _B:
        return self._set(time_in_force=time_in_force)


class _Iceberg(ParamBuilder):
    def with_iceberg_qty(self: _B, iceberg_qty: Number) -> _B:
        """Show only *iceberg_qty* on the book; forces ``timeInForce=GTC``."""

        return self._set(iceberg_qty=iceberg_qty, time_in_force=TimeInForce.GTC)


# ----------------------------------------------------------------------
# Limit family
# ----------------------------------------------------------------------
class StopLossLimitOrderBuilder(_Iceberg, _TimeInForce, _OrderOptions):
    variant = Variant.STOP_LOSS_LIMIT


class TakeProfitLimitOrderBuilder(_Iceberg, _TimeInForce, _OrderOptions):
    variant = Variant.TAKE_PROFIT_LIMIT


class LimitMakerOrderBuilder(_OrderOptions):
    """Limit order that is rejected instead of matching immediately."""

    variant = Variant.LIMIT_MAKER

    def with_iceberg_qty(self, iceberg_qty: Number) -> "LimitMakerOrderBuilder":
        return self._set(iceberg_qty=iceberg_qty)


class LimitOrderBuilder(_Iceberg, _TimeInForce, _OrderOptions):
    variant = Variant.LIMIT

    def with_stop_loss_limit(self, stop_price: Number) -> StopLossLimitOrderBuilder:
        """Turn the order into a STOP_LOSS_LIMIT order triggered at *stop_price*."""

        return self._into(
            StopLossLimitOrderBuilder,
            order_type=OrderType.STOP_LOSS_LIMIT,
            stop_price=stop_price,
        )

    def with_take_profit_limit(self, stop_price: Number) -> TakeProfitLimitOrderBuilder:
        """Turn the order into a TAKE_PROFIT_LIMIT order triggered at *stop_price*."""

        return self._into(
            TakeProfitLimitOrderBuilder,
            order_type=OrderType.TAKE_PROFIT_LIMIT,
            stop_price=stop_price,
        )

    def into_limit_maker_order(self) -> LimitMakerOrderBuilder:
        """Turn the order into a LIMIT_MAKER order; drops ``timeInForce``."""

        return self._into(
            LimitMakerOrderBuilder,
            order_type=OrderType.LIMIT_MAKER,
            time_in_force=None,
        )


# ----------------------------------------------------------------------
# Market family
# ----------------------------------------------------------------------
class StopLossOrderBuilder(_OrderOptions):
    variant = Variant.STOP_LOSS


class TakeProfitOrderBuilder(_OrderOptions):
    variant = Variant.TAKE_PROFIT


class MarketOrderBuilder(_OrderOptions):
    variant = Variant.MARKET

    def with_quote_order_qty(self, quote_order_qty: Number) -> "MarketOrderBuilder":
        """Spend (or receive) *quote_order_qty* of the quote asset instead of a base quantity."""

        return self._set(quantity=None, quote_order_qty=quote_order_qty)

    def with_stop_loss(self, stop_price: Number) -> StopLossOrderBuilder:
        """Turn the order into a STOP_LOSS order triggered at *stop_price*."""

        return self._into(
            StopLossOrderBuilder,
            order_type=OrderType.STOP_LOSS,
            stop_price=stop_price,
        )

    def with_take_profit(self, stop_price: Number) -> TakeProfitOrderBuilder:
        """Turn the order into a TAKE_PROFIT order triggered at *stop_price*."""

        return self._into(
            TakeProfitOrderBuilder,
            order_type=OrderType.TAKE_PROFIT,
            stop_price=stop_price,
        )


# ----------------------------------------------------------------------
# OCO
# ----------------------------------------------------------------------
class _OcoOptions(_RecvWindow):
    def with_list_client_order_id(self: _B, client_order_id: str) -> _B:
        """Unique id for the whole order list."""

        return self._set(list_client_order_id=client_order_id)

    def with_limit_client_order_id(self: _B, client_order_id: str) -> _B:
        """Unique id for the limit leg."""

        return self._set(limit_client_order_id=client_order_id)

    def with_limit_iceberg_qty(self: _B, iceberg_qty: Number) -> _B:
        return self._set(limit_iceberg_qty=iceberg_qty)

    def with_stop_client_order_id(self: _B, client_order_id: str) -> _B:
        """Unique id for the stop leg."""

        return self._set(stop_client_order_id=client_order_id)

    def with_new_order_resp_type(self: _B, resp_type: OrderRespType) -> _B:
        return self._set(new_order_resp_type=resp_type)


class OcoStopLimitOrderBuilder(_OcoOptions):
    """OCO order whose stop leg is a STOP_LOSS_LIMIT order."""

    variant = Variant.OCO_STOP_LIMIT

    def with_stop_iceberg_qty(self, iceberg_qty: Number) -> "OcoStopLimitOrderBuilder":
        return self._set(stop_iceberg_qty=iceberg_qty)


class OcoOrderBuilder(_OcoOptions):
    variant = Variant.OCO

    def with_stop_limit_price(
        self,
        stop_limit_price: Number,
        time_in_force: TimeInForce = TimeInForce.GTC,
    ) -> OcoStopLimitOrderBuilder:
        """Make the stop leg a limit order placed at *stop_limit_price* once triggered."""

        return self._into(
            OcoStopLimitOrderBuilder,
            stop_limit_price=stop_limit_price,
            stop_limit_time_in_force=time_in_force,
        )


# ----------------------------------------------------------------------
# Queries and cancellations
# ----------------------------------------------------------------------
class OrderStatusBuilder(_RecvWindow):
    variant = Variant.ORDER_STATUS


class CancelOrderBuilder(_NewClientOrderId, _RecvWindow):
    variant = Variant.CANCEL_ORDER


class OpenOrdersBuilder(_SymbolFilter, _RecvWindow):
    variant = Variant.OPEN_ORDERS


class AllOrdersBuilder(_OrderIdFilter, _TimeRange, _RecvWindow):
    variant = Variant.ALL_ORDERS


class CancelAllOrdersBuilder(_RecvWindow):
    variant = Variant.CANCEL_ALL_ORDERS


class CancelOcoBuilder(_NewClientOrderId, _RecvWindow):
    variant = Variant.CANCEL_OCO


class OcoStatusBuilder(_RecvWindow):
    variant = Variant.OCO_STATUS


class AllOcoBuilder(_FromId, _TimeRange, _RecvWindow):
    variant = Variant.ALL_OCO


class OpenOcoBuilder(_RecvWindow):
    variant = Variant.OPEN_OCO


class AccountBuilder(_RecvWindow):
    variant = Variant.ACCOUNT


class AccountTradesBuilder(_FromId, _TimeRange, _RecvWindow):
    variant = Variant.ACCOUNT_TRADES


# ----------------------------------------------------------------------
# Public and API-key-only requests
# ----------------------------------------------------------------------
class PingBuilder(ParamBuilder):
    variant = Variant.PING


class ServerTimeBuilder(ParamBuilder):
    variant = Variant.SERVER_TIME


class ExchangeInfoBuilder(_SymbolFilter):
    variant = Variant.EXCHANGE_INFO


class OrderBookBuilder(_Limit):
    """Order book depth; ``limit`` accepts up to 5000 levels."""

    variant = Variant.ORDER_BOOK


class RecentTradesBuilder(_Limit):
    variant = Variant.RECENT_TRADES


class HistoricalTradesBuilder(_FromId, _Limit):
    variant = Variant.HISTORICAL_TRADES


class AggTradesBuilder(_FromId, _TimeRange):
    variant = Variant.AGG_TRADES


class PriceTickerBuilder(_SymbolFilter):
    variant = Variant.PRICE_TICKER


class BookTickerBuilder(_SymbolFilter):
    variant = Variant.BOOK_TICKER


class UserStreamBuilder(ParamBuilder):
    variant = Variant.USER_STREAM


# ----------------------------------------------------------------------
# Wallet
# ----------------------------------------------------------------------
class _Coin(ParamBuilder):
    def with_coin(self: _B, coin: str) -> _B:
        return self._set(coin=coin)


class _Network(ParamBuilder):
    def with_network(self: _B, network: str) -> _B:
        """Transfer network, e.g. ``BSC``; the coin's default network otherwise."""

        return self._set(network=network)


class WithdrawBuilder(_Network, _RecvWindow):
    variant = Variant.WITHDRAW

    def with_address_tag(self, address_tag: str) -> "WithdrawBuilder":
        """Secondary address identifier (memo or tag) required by some coins."""

        return self._set(address_tag=address_tag)

    def with_withdraw_order_id(self, withdraw_order_id: str) -> "WithdrawBuilder":
        """Client id of the withdrawal, usable to look it up in the history."""

        return self._set(withdraw_order_id=withdraw_order_id)

    def with_name(self, name: str) -> "WithdrawBuilder":
        """Description of the address in the address book."""

        return self._set(name=name)


class WithdrawHistoryBuilder(_Coin, _TimeRange, _RecvWindow):
    variant = Variant.WITHDRAW_HISTORY

    def with_withdraw_order_id(self, withdraw_order_id: str) -> "WithdrawHistoryBuilder":
        return self._set(withdraw_order_id=withdraw_order_id)


class DepositHistoryBuilder(_Coin, _TimeRange, _RecvWindow):
    variant = Variant.DEPOSIT_HISTORY


class DepositAddressBuilder(_Network, _RecvWindow):
    variant = Variant.DEPOSIT_ADDRESS


__all__ = [
    "AccountBuilder",
    "AccountTradesBuilder",
    "AggTradesBuilder",
    "AllOcoBuilder",
    "AllOrdersBuilder",
    "BookTickerBuilder",
    "CancelAllOrdersBuilder",
    "CancelOcoBuilder",
    "CancelOrderBuilder",
    "DepositAddressBuilder",
    "DepositHistoryBuilder",
    "ExchangeInfoBuilder",
    "HistoricalTradesBuilder",
    "LimitMakerOrderBuilder",
    "LimitOrderBuilder",
    "MarketOrderBuilder",
    "OcoOrderBuilder",
    "OcoStatusBuilder",
    "OcoStopLimitOrderBuilder",
    "OpenOcoBuilder",
    "OpenOrdersBuilder",
    "OrderBookBuilder",
    "OrderStatusBuilder",
    "PingBuilder",
    "PriceTickerBuilder",
    "RecentTradesBuilder",
    "ServerTimeBuilder",
    "StopLossLimitOrderBuilder",
    "StopLossOrderBuilder",
    "TakeProfitLimitOrderBuilder",
    "TakeProfitOrderBuilder",
    "UserStreamBuilder",
    "WithdrawBuilder",
    "WithdrawHistoryBuilder",
]
