"""Shared plumbing for the role clients: transport, base URL and credentials."""

from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar

import httpx

from .auth import Credentials
from .builder import ParamBuilder
from .guards import assert_base_url
from .params import Parameters

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_CONNECT_TIMEOUT = 5.0

_B = TypeVar("_B", bound=ParamBuilder)
_C = TypeVar("_C", bound="BaseClient")


def new_http_client(
    timeout: float = DEFAULT_TIMEOUT,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout, connect=connect_timeout))


class BaseClient:
    """Holds what every builder borrows: transport, base URL, credentials."""

    def __init__(
        self,
        credentials: Credentials,
        base_url: httpx.URL,
        http: httpx.AsyncClient,
        *,
        owns_http: bool = False,
        recv_window: Optional[int] = None,
    ) -> None:
        self._credentials = credentials
        self._base_url = base_url
        self._http = http
        self._owns_http = owns_http
        self._recv_window = recv_window

    @classmethod
    def _open(
        cls: type[_C],
        credentials: Credentials,
        base_url: str,
        *,
        http: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        recv_window: Optional[int] = None,
    ) -> _C:
        url = assert_base_url(base_url)
        owns_http = http is None
        client = cls(
            credentials,
            url,
            http or new_http_client(timeout, connect_timeout),
            owns_http=owns_http,
            recv_window=recv_window,
        )
        LOGGER.debug("%s ready for %s", cls.__name__, url)
        return client

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._base_url}>"

    async def __aenter__(self: _C) -> _C:
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport if this client created it."""

        if self._owns_http and not self._http.is_closed:
            await self._http.aclose()

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def http(self) -> httpx.AsyncClient:
        return self._http

    @property
    def api_key(self) -> Optional[str]:
        return self._credentials.api_key

    def _share(self, cls: type[_C], credentials: Credentials) -> _C:
        """Return a *cls* client reusing this client's transport."""

        return cls(
            credentials,
            self._base_url,
            self._http,
            owns_http=False,
            recv_window=self._recv_window,
        )

    def _builder(
        self,
        builder_cls: type[_B],
        method: str,
        path: str,
        params: Optional[Parameters] = None,
    ) -> _B:
        # Paths are fixed absolute constants, joining cannot fail.
        return builder_cls(
            params or Parameters(),
            method,
            self._base_url.join(path),
            self._credentials,
            self._http,
            recv_window=self._recv_window,
        )


__all__ = ["BaseClient", "DEFAULT_CONNECT_TIMEOUT", "DEFAULT_TIMEOUT", "new_http_client"]
