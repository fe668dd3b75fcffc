"""Request parameter record and the enums used to fill it."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Iterator, Optional, Union

Number = Union[int, float, Decimal]
Timestamp = Union[int, datetime]


class Side(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class OrderType(str, Enum):
    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP_LOSS = "STOP_LOSS"
    STOP_LOSS_LIMIT = "STOP_LOSS_LIMIT"
    TAKE_PROFIT = "TAKE_PROFIT"
    TAKE_PROFIT_LIMIT = "TAKE_PROFIT_LIMIT"
    LIMIT_MAKER = "LIMIT_MAKER"


class TimeInForce(str, Enum):
    """How long an order stays active before it expires."""

    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"


class OrderRespType(str, Enum):
    """Verbosity of the order placement response."""

    ACK = "ACK"
    RESULT = "RESULT"
    FULL = "FULL"


class ID:
    """Identifies an order or order list by exchange id or by client id.

    Use ``ID.OrderId(123)`` or ``ID.ClientOId("my-id")``.
    """

    __slots__ = ()

    OrderId: type["OrderId"]
    ClientOId: type["ClientOId"]


@dataclass(frozen=True)
class OrderId(ID):
    value: int


@dataclass(frozen=True)
class ClientOId(ID):
    value: str


ID.OrderId = OrderId
ID.ClientOId = ClientOId


def split_id(identifier: ID) -> tuple[Optional[int], Optional[str]]:
    """Return ``(numeric_id, client_id)`` with exactly one side populated."""

    if isinstance(identifier, OrderId):
        return identifier.value, None
    if isinstance(identifier, ClientOId):
        return None, identifier.value
    raise TypeError(f"expected ID.OrderId or ID.ClientOId, got {identifier!r}")


# Attribute name -> exchange parameter name.
WIRE_NAMES: dict[str, str] = {
    "symbol": "symbol",
    "side": "side",
    "order_type": "type",
    "time_in_force": "timeInForce",
    "quantity": "quantity",
    "quote_order_qty": "quoteOrderQty",
    "price": "price",
    "new_client_order_id": "newClientOrderId",
    "stop_price": "stopPrice",
    "iceberg_qty": "icebergQty",
    "new_order_resp_type": "newOrderRespType",
    "recv_window": "recvWindow",
    "timestamp": "timestamp",
    "order_id": "orderId",
    "orig_client_order_id": "origClientOrderId",
    "start_time": "startTime",
    "end_time": "endTime",
    "limit": "limit",
    "from_id": "fromId",
    "list_client_order_id": "listClientOrderId",
    "limit_client_order_id": "limitClientOrderId",
    "limit_iceberg_qty": "limitIcebergQty",
    "stop_client_order_id": "stopClientOrderId",
    "stop_limit_price": "stopLimitPrice",
    "stop_limit_time_in_force": "stopLimitTimeInForce",
    "stop_iceberg_qty": "stopIcebergQty",
    "order_list_id": "orderListId",
    "listen_key": "listenKey",
    "coin": "coin",
    "network": "network",
    "address": "address",
    "address_tag": "addressTag",
    "amount": "amount",
    "withdraw_order_id": "withdrawOrderId",
    "name": "name",
}


@dataclass
class Parameters:
    """Every parameter any request may carry; ``None`` means absent.

    The record remembers the order in which fields were first set. Setting a
    field again keeps its position, setting it to ``None`` drops it.
    """

    symbol: Optional[str] = None
    side: Optional[Side] = None
    order_type: Optional[OrderType] = None
    time_in_force: Optional[TimeInForce] = None
    quantity: Optional[Number] = None
    quote_order_qty: Optional[Number] = None
    price: Optional[Number] = None
    new_client_order_id: Optional[str] = None
    stop_price: Optional[Number] = None
    iceberg_qty: Optional[Number] = None
    new_order_resp_type: Optional[OrderRespType] = None
    recv_window: Optional[int] = None
    timestamp: Optional[int] = None
    order_id: Optional[int] = None
    orig_client_order_id: Optional[str] = None
    start_time: Optional[Timestamp] = None
    end_time: Optional[Timestamp] = None
    limit: Optional[int] = None
    from_id: Optional[int] = None
    list_client_order_id: Optional[str] = None
    limit_client_order_id: Optional[str] = None
    limit_iceberg_qty: Optional[Number] = None
    stop_client_order_id: Optional[str] = None
    stop_limit_price: Optional[Number] = None
    stop_limit_time_in_force: Optional[TimeInForce] = None
    stop_iceberg_qty: Optional[Number] = None
    order_list_id: Optional[int] = None
    listen_key: Optional[str] = None
    coin: Optional[str] = None
    network: Optional[str] = None
    address: Optional[str] = None
    address_tag: Optional[str] = None
    amount: Optional[Number] = None
    withdraw_order_id: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def new(cls, **values: Any) -> "Parameters":
        """Build a record whose insertion order follows the keyword order."""

        params = cls()
        for name, value in values.items():
            if name not in WIRE_NAMES:
                raise TypeError(f"unknown parameter {name!r}")
            setattr(params, name, value)
        return params

    def __setattr__(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)
        if name not in WIRE_NAMES:
            return
        order: list[str] = self.__dict__.setdefault("_order", [])
        if value is None:
            if name in order:
                order.remove(name)
        elif name not in order:
            order.append(name)

    def present(self) -> list[str]:
        """Return the names of the fields that are set, in insertion order."""

        return list(self.__dict__.get("_order", ()))

    def is_set(self, name: str) -> bool:
        return getattr(self, name) is not None

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(wire_name, value)`` for present fields in insertion order."""

        for name in self.present():
            yield WIRE_NAMES[name], getattr(self, name)


__all__ = [
    "ClientOId",
    "ID",
    "OrderId",
    "OrderRespType",
    "OrderType",
    "Parameters",
    "Side",
    "TimeInForce",
    "WIRE_NAMES",
    "split_id",
]
