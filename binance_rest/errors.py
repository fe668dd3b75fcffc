"""Exception types and consistent Binance error messages."""

from __future__ import annotations

import re
from typing import Any, Mapping

_SIGNATURE_RE = re.compile(r"(signature=)[0-9a-fA-F]+")


def redact_signature(text: str | None) -> str:
    """Replace the hex value of any ``signature=`` pair with a placeholder."""

    if not text:
        return ""
    return _SIGNATURE_RE.sub(r"\1<redacted>", text)


def _describe(payload: Mapping[str, Any] | str | None) -> str:
    """Return ``"<code> <msg>"`` from an error envelope, or the raw text."""

    if not isinstance(payload, Mapping):
        return str(payload or "").strip()
    parts = [payload.get("code"), payload.get("msg") or payload.get("message")]
    return " ".join(str(part) for part in parts if part not in (None, ""))


def format_binance_error(
    method: str | None,
    url: str | None,
    payload: Mapping[str, Any] | str | None,
) -> str:
    """Return a human readable error string including method and URL details."""

    verb = (method or "GET").strip().upper() or "GET"
    target = redact_signature(url) or "<unknown>"
    details = _describe(payload)
    summary = f"Failed to contact Binance: {verb} {target}"
    return f"{summary} → {details}" if details else summary


class BinanceError(RuntimeError):
    """Base exception for everything raised by :mod:`binance_rest`."""


class UrlParseError(BinanceError, ValueError):
    """Raised when a base URL is not an absolute http(s) URL."""


class RequestValidationError(BinanceError):
    """Raised before sending when the accumulated parameters are not valid."""


class ParameterOutOfRange(RequestValidationError):
    """A parameter value lies outside the range accepted by the exchange."""

    def __init__(self, name: str, value: Any, *, minimum: int | None = None, maximum: int | None = None) -> None:
        bounds = []
        if minimum is not None:
            bounds.append(f">= {minimum}")
        if maximum is not None:
            bounds.append(f"<= {maximum}")
        super().__init__(f"{name}={value!r} is out of range (must be {' and '.join(bounds)})")
        self.name = name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class ConflictingParameters(RequestValidationError):
    """Two parameters that the exchange treats as mutually exclusive are both set."""

    def __init__(self, first: str, second: str, reason: str | None = None) -> None:
        message = f"{first} cannot be combined with {second}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.first = first
        self.second = second


class MissingParameter(RequestValidationError):
    """None of the parameters the request needs exactly one of is set."""

    def __init__(self, *names: str) -> None:
        super().__init__(f"one of {' or '.join(names)} is required")
        self.names = names


class InvalidStateTransition(RequestValidationError):
    """A builder was reused after being consumed, or its parameters disagree with its variant."""


class TransportError(BinanceError):
    """The HTTP request could not be completed (connection, TLS, timeout)."""


class ApiError(BinanceError):
    """Raised when the Binance REST API answers with a non-success status."""

    def __init__(
        self,
        status_code: int,
        code: int | None,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
        payload: Any | None = None,
    ) -> None:
        details: dict[str, Any] = {"code": code if code is not None else f"HTTP {status_code}", "msg": message}
        super().__init__(format_binance_error(method, url, details))
        self.status_code = status_code
        self.code = code
        self.message = message
        self.method = method
        self.url = redact_signature(url) if url else url
        self.payload = payload


class DecodeError(BinanceError):
    """The response body was not JSON or did not match the requested type."""

    def __init__(self, message: str, *, body: str | None = None) -> None:
        super().__init__(message)
        self.body = body


__all__ = [
    "ApiError",
    "BinanceError",
    "ConflictingParameters",
    "DecodeError",
    "InvalidStateTransition",
    "MissingParameter",
    "ParameterOutOfRange",
    "RequestValidationError",
    "TransportError",
    "UrlParseError",
    "format_binance_error",
    "redact_signature",
]
