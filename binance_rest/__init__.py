"""Async Binance spot REST client built around typed request builders."""

from .account import AccountClient
from .auth import Credentials, sign
from .builder import ParamBuilder, SignedRequest
from .config import Settings, get_settings
from .constants import BINANCE_TESTNET_URL, BINANCE_URL, BINANCE_US_URL
from .errors import (
    ApiError,
    BinanceError,
    ConflictingParameters,
    DecodeError,
    InvalidStateTransition,
    MissingParameter,
    ParameterOutOfRange,
    RequestValidationError,
    TransportError,
    UrlParseError,
)
from .market import GeneralClient, MarketDataClient, UserDataClient
from .params import ID, OrderRespType, OrderType, Parameters, Side, TimeInForce
from .variants import Variant
from .wallet import WithdrawalClient

__all__ = [
    "AccountClient",
    "ApiError",
    "BINANCE_TESTNET_URL",
    "BINANCE_URL",
    "BINANCE_US_URL",
    "BinanceError",
    "ConflictingParameters",
    "Credentials",
    "DecodeError",
    "GeneralClient",
    "ID",
    "InvalidStateTransition",
    "MissingParameter",
    "MarketDataClient",
    "OrderRespType",
    "OrderType",
    "ParamBuilder",
    "ParameterOutOfRange",
    "Parameters",
    "RequestValidationError",
    "Settings",
    "Side",
    "SignedRequest",
    "TimeInForce",
    "TransportError",
    "UrlParseError",
    "UserDataClient",
    "Variant",
    "WithdrawalClient",
    "get_settings",
    "sign",
]
