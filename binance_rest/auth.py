"""Signing helpers for Binance REST requests."""
from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass, field


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def sign(secret_key: str | bytes, message: str | bytes) -> str:
    """Return the lowercase hex HMAC SHA256 of ``message`` keyed by ``secret_key``.

    ``message`` is the canonical query string exactly as it is sent, without
    the ``signature`` pair itself.
    """

    return hmac.new(_as_bytes(secret_key), _as_bytes(message), hashlib.sha256).hexdigest()


@dataclass(frozen=True)
class Credentials:
    """API key and secret shared by a client and every builder it creates."""

    api_key: str | None = None
    secret_key: str | None = field(default=None, repr=False)

    @property
    def can_sign(self) -> bool:
        return bool(self.secret_key)

    def public(self) -> "Credentials":
        """Return a copy holding only the API key."""

        return Credentials(api_key=self.api_key)


ANONYMOUS = Credentials()


__all__ = ["ANONYMOUS", "Credentials", "sign"]
