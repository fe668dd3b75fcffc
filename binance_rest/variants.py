"""Request variants and the parameter rules attached to each of them."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .guards import MAX_DEPTH_LIMIT, MAX_HISTORY_LIMIT
from .params import OrderType


class Variant(str, Enum):
    """Closed set of request shapes a builder can represent."""

    LIMIT = "limit"
    STOP_LOSS_LIMIT = "stop_loss_limit"
    TAKE_PROFIT_LIMIT = "take_profit_limit"
    LIMIT_MAKER = "limit_maker"
    MARKET = "market"
    STOP_LOSS = "stop_loss"
    TAKE_PROFIT = "take_profit"
    ORDER_STATUS = "order_status"
    CANCEL_ORDER = "cancel_order"
    OPEN_ORDERS = "open_orders"
    ALL_ORDERS = "all_orders"
    CANCEL_ALL_ORDERS = "cancel_all_orders"
    OCO = "oco"
    OCO_STOP_LIMIT = "oco_stop_limit"
    CANCEL_OCO = "cancel_oco"
    OCO_STATUS = "oco_status"
    ALL_OCO = "all_oco"
    OPEN_OCO = "open_oco"
    ACCOUNT = "account"
    ACCOUNT_TRADES = "account_trades"
    PING = "ping"
    SERVER_TIME = "server_time"
    EXCHANGE_INFO = "exchange_info"
    ORDER_BOOK = "order_book"
    RECENT_TRADES = "recent_trades"
    HISTORICAL_TRADES = "historical_trades"
    AGG_TRADES = "agg_trades"
    PRICE_TICKER = "price_ticker"
    BOOK_TICKER = "book_ticker"
    USER_STREAM = "user_stream"
    WITHDRAW = "withdraw"
    WITHDRAW_HISTORY = "withdraw_history"
    DEPOSIT_HISTORY = "deposit_history"
    DEPOSIT_ADDRESS = "deposit_address"


@dataclass(frozen=True)
class VariantRules:
    """Which fields a variant accepts and how they must relate."""

    fields: frozenset[str]
    order_type: Optional[OrderType] = None
    upgrades: frozenset[Variant] = frozenset()
    # Pairs of fields of which exactly one must be set (ID disambiguation).
    exclusive_ids: tuple[tuple[str, str], ...] = ()
    # The exchange rejects an id cursor combined with a time range.
    id_excludes_time_range: bool = False
    max_limit: int = MAX_HISTORY_LIMIT


_SIGNED = frozenset({"recv_window", "timestamp"})
_ORDER = _SIGNED | {
    "symbol",
    "side",
    "order_type",
    "quantity",
    "new_client_order_id",
    "new_order_resp_type",
}
_LIMIT = _ORDER | {"price", "time_in_force", "iceberg_qty"}
_OCO = _SIGNED | {
    "symbol",
    "side",
    "quantity",
    "price",
    "stop_price",
    "list_client_order_id",
    "limit_client_order_id",
    "limit_iceberg_qty",
    "stop_client_order_id",
    "new_order_resp_type",
}
_RANGE = frozenset({"start_time", "end_time", "limit"})

RULES: dict[Variant, VariantRules] = {
    Variant.LIMIT: VariantRules(
        _LIMIT,
        OrderType.LIMIT,
        upgrades=frozenset(
            {Variant.STOP_LOSS_LIMIT, Variant.TAKE_PROFIT_LIMIT, Variant.LIMIT_MAKER}
        ),
    ),
    Variant.STOP_LOSS_LIMIT: VariantRules(_LIMIT | {"stop_price"}, OrderType.STOP_LOSS_LIMIT),
    Variant.TAKE_PROFIT_LIMIT: VariantRules(_LIMIT | {"stop_price"}, OrderType.TAKE_PROFIT_LIMIT),
    Variant.LIMIT_MAKER: VariantRules(_ORDER | {"price", "iceberg_qty"}, OrderType.LIMIT_MAKER),
    Variant.MARKET: VariantRules(
        _ORDER | {"quote_order_qty"},
        OrderType.MARKET,
        upgrades=frozenset({Variant.STOP_LOSS, Variant.TAKE_PROFIT}),
    ),
    Variant.STOP_LOSS: VariantRules(_ORDER | {"stop_price"}, OrderType.STOP_LOSS),
    Variant.TAKE_PROFIT: VariantRules(_ORDER | {"stop_price"}, OrderType.TAKE_PROFIT),
    Variant.ORDER_STATUS: VariantRules(
        _SIGNED | {"symbol", "order_id", "orig_client_order_id"},
        exclusive_ids=(("order_id", "orig_client_order_id"),),
    ),
    Variant.CANCEL_ORDER: VariantRules(
        _SIGNED | {"symbol", "order_id", "orig_client_order_id", "new_client_order_id"},
        exclusive_ids=(("order_id", "orig_client_order_id"),),
    ),
    Variant.OPEN_ORDERS: VariantRules(_SIGNED | {"symbol"}),
    Variant.ALL_ORDERS: VariantRules(
        _SIGNED | _RANGE | {"symbol", "order_id"},
        id_excludes_time_range=True,
    ),
    Variant.CANCEL_ALL_ORDERS: VariantRules(_SIGNED | {"symbol"}),
    Variant.OCO: VariantRules(_OCO, upgrades=frozenset({Variant.OCO_STOP_LIMIT})),
    Variant.OCO_STOP_LIMIT: VariantRules(
        _OCO | {"stop_limit_price", "stop_limit_time_in_force", "stop_iceberg_qty"}
    ),
    Variant.CANCEL_OCO: VariantRules(
        _SIGNED | {"symbol", "order_list_id", "list_client_order_id", "new_client_order_id"},
        exclusive_ids=(("order_list_id", "list_client_order_id"),),
    ),
    Variant.OCO_STATUS: VariantRules(
        _SIGNED | {"order_list_id", "orig_client_order_id"},
        exclusive_ids=(("order_list_id", "orig_client_order_id"),),
    ),
    Variant.ALL_OCO: VariantRules(_SIGNED | _RANGE | {"from_id"}, id_excludes_time_range=True),
    Variant.OPEN_OCO: VariantRules(_SIGNED),
    Variant.ACCOUNT: VariantRules(_SIGNED),
    Variant.ACCOUNT_TRADES: VariantRules(
        _SIGNED | _RANGE | {"symbol", "from_id"},
        id_excludes_time_range=True,
    ),
    Variant.PING: VariantRules(frozenset()),
    Variant.SERVER_TIME: VariantRules(frozenset()),
    Variant.EXCHANGE_INFO: VariantRules(frozenset({"symbol"})),
    Variant.ORDER_BOOK: VariantRules(frozenset({"symbol", "limit"}), max_limit=MAX_DEPTH_LIMIT),
    Variant.RECENT_TRADES: VariantRules(frozenset({"symbol", "limit"})),
    Variant.HISTORICAL_TRADES: VariantRules(frozenset({"symbol", "limit", "from_id"})),
    Variant.AGG_TRADES: VariantRules(_RANGE | {"symbol", "from_id"}),
    Variant.PRICE_TICKER: VariantRules(frozenset({"symbol"})),
    Variant.BOOK_TICKER: VariantRules(frozenset({"symbol"})),
    Variant.USER_STREAM: VariantRules(frozenset({"listen_key"})),
    Variant.WITHDRAW: VariantRules(
        _SIGNED
        | {"coin", "network", "address", "address_tag", "amount", "withdraw_order_id", "name"}
    ),
    Variant.WITHDRAW_HISTORY: VariantRules(_SIGNED | _RANGE | {"coin", "withdraw_order_id"}),
    Variant.DEPOSIT_HISTORY: VariantRules(_SIGNED | _RANGE | {"coin"}),
    Variant.DEPOSIT_ADDRESS: VariantRules(_SIGNED | {"coin", "network"}),
}


def rules_for(variant: Variant) -> VariantRules:
    return RULES[variant]


def can_upgrade(source: Variant, target: Variant) -> bool:
    """Return ``True`` when *source* may turn into *target*."""

    return target in RULES[source].upgrades


__all__ = ["RULES", "Variant", "VariantRules", "can_upgrade", "rules_for"]
