"""Validation helpers for base URLs and bounded request parameters."""

from __future__ import annotations

import httpx

from .errors import ParameterOutOfRange, UrlParseError

MAX_RECV_WINDOW = 60_000
MAX_HISTORY_LIMIT = 1_000
MAX_DEPTH_LIMIT = 5_000


def assert_base_url(base_url: str) -> httpx.URL:
    """Return *base_url* parsed, raising :class:`UrlParseError` when malformed."""

    candidate = (base_url or "").strip()
    if not candidate:
        raise UrlParseError("Binance base URL is empty")
    try:
        url = httpx.URL(candidate)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise UrlParseError(f"Invalid Binance base URL {candidate!r}: {exc}") from exc

    if url.scheme not in {"http", "https"}:
        raise UrlParseError(
            f"Invalid Binance base URL {candidate!r} (scheme must be http or https)"
        )
    if not url.host:
        raise UrlParseError(f"Invalid Binance base URL {candidate!r} (missing host)")
    return url


def check_recv_window(value: int | None) -> None:
    """Raise :class:`ParameterOutOfRange` unless ``0 < value <= 60000``."""

    if value is None:
        return
    if value <= 0 or value > MAX_RECV_WINDOW:
        raise ParameterOutOfRange("recvWindow", value, minimum=1, maximum=MAX_RECV_WINDOW)


def check_limit(value: int | None, maximum: int) -> None:
    """Raise :class:`ParameterOutOfRange` unless ``1 <= value <= maximum``."""

    if value is None:
        return
    if value < 1 or value > maximum:
        raise ParameterOutOfRange("limit", value, minimum=1, maximum=maximum)


__all__ = [
    "MAX_DEPTH_LIMIT",
    "MAX_HISTORY_LIMIT",
    "MAX_RECV_WINDOW",
    "assert_base_url",
    "check_limit",
    "check_recv_window",
]
