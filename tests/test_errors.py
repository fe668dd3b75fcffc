"""Tests for error formatting helpers."""

from __future__ import annotations

from binance_rest.errors import (
    ApiError,
    BinanceError,
    ConflictingParameters,
    ParameterOutOfRange,
    RequestValidationError,
    UrlParseError,
    format_binance_error,
    redact_signature,
)


def test_redact_signature() -> None:
    url = "https://api.binance.com/api/v3/account?timestamp=1&signature=abcdef0123"

    assert redact_signature(url) == "https://api.binance.com/api/v3/account?timestamp=1&signature=<redacted>"
    assert redact_signature(None) == ""


def test_format_binance_error_includes_code_and_message() -> None:
    message = format_binance_error("get", "https://api.binance.com/api/v3/order", {"code": -1102, "msg": "Mandatory parameter"})

    assert message == "Failed to contact Binance: GET https://api.binance.com/api/v3/order → -1102 Mandatory parameter"


def test_format_binance_error_without_details() -> None:
    assert format_binance_error(None, None, None) == "Failed to contact Binance: GET <unknown>"


def test_error_hierarchy() -> None:
    assert issubclass(UrlParseError, ValueError)
    assert issubclass(ParameterOutOfRange, RequestValidationError)
    assert issubclass(ConflictingParameters, RequestValidationError)
    assert issubclass(ApiError, BinanceError)


def test_parameter_out_of_range_message() -> None:
    error = ParameterOutOfRange("limit", 0, minimum=1, maximum=1000)

    assert str(error) == "limit=0 is out of range (must be >= 1 and <= 1000)"
    assert (error.name, error.value, error.minimum, error.maximum) == ("limit", 0, 1, 1000)


def test_api_error_uses_http_status_without_exchange_code() -> None:
    error = ApiError(502, None, "Bad Gateway", method="GET", url="https://api.binance.com/api/v3/ping")

    assert str(error).endswith("→ HTTP 502 Bad Gateway")
    assert error.code is None


def test_format_binance_error_with_text_payload() -> None:
    message = format_binance_error(" post ", "https://api.binance.com/api/v3/order?signature=ab12", " gateway timeout ")

    assert message == "Failed to contact Binance: POST https://api.binance.com/api/v3/order?signature=<redacted> → gateway timeout"


def test_format_binance_error_skips_empty_envelope_parts() -> None:
    message = format_binance_error("GET", "https://api.binance.com/api/v3/ping", {"code": "", "message": "rate limited"})

    assert message.endswith("→ rate limited")
