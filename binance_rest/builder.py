"""Generic request builder: parameter accumulation, canonical encoding and dispatch."""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Iterable, Optional, TypeVar
from urllib.parse import quote, urlencode

import httpx
from pydantic import TypeAdapter, ValidationError

from .auth import Credentials, sign
from .constants import API_KEY_HEADER
from .errors import (
    ApiError,
    ConflictingParameters,
    DecodeError,
    InvalidStateTransition,
    MissingParameter,
    TransportError,
    redact_signature,
)
from .guards import check_limit, check_recv_window
from .params import WIRE_NAMES, Parameters, TimeInForce
from .variants import Variant, can_upgrade, rules_for

LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")
_B = TypeVar("_B", bound="ParamBuilder")


def _now_ms() -> int:
    return int(time.time() * 1000)


def _plain_decimal(value: Decimal) -> str:
    """Render *value* in positional notation with no trailing fractional zeros."""

    whole, _, fraction = f"{value.normalize():f}".partition(".")
    fraction = fraction.rstrip("0")
    return f"{whole}.{fraction}" if fraction else whole


def to_millis(value: datetime) -> int:
    """Return epoch milliseconds for *value*; naive datetimes are taken as UTC."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def stringify(value: Any) -> str:
    """Render a parameter value the way the exchange expects it."""

    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return str(to_millis(value))
    if isinstance(value, Decimal):
        return _plain_decimal(value) if value.is_finite() else str(value)
    if isinstance(value, float):
        # ``repr`` keeps the literal the caller typed (20.00 -> 20) instead of
        # the binary expansion.
        return _plain_decimal(Decimal(repr(value))) if math.isfinite(value) else repr(value)
    return str(value)


def encode_query(items: Iterable[tuple[str, Any]]) -> str:
    """Return the canonical query string for ``(name, value)`` pairs.

    Pairs keep the order they are given in and ``None`` values are skipped.
    """

    payload = [(key, stringify(value)) for key, value in items if value is not None]
    if not payload:
        return ""
    return urlencode(payload, safe="-_.~", quote_via=quote)


@dataclass(frozen=True)
class SignedRequest:
    """A finalised request: sent once, never mutated."""

    method: str
    url: str
    query: str
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def full_url(self) -> str:
        return f"{self.url}?{self.query}" if self.query else self.url

    @property
    def signed(self) -> bool:
        return "signature=" in self.query


class ParamBuilder:
    """Accumulates the parameters of one request and sends it exactly once.

    Subclasses pin :attr:`variant` and expose only the ``with_*`` methods the
    variant accepts. Methods that change the variant consume the builder and
    return a new one; any later use of the consumed builder raises
    :class:`InvalidStateTransition`.
    """

    variant: ClassVar[Variant]

    def __init__(
        self,
        params: Parameters,
        method: str,
        url: httpx.URL | str,
        credentials: Credentials,
        http: httpx.AsyncClient,
        *,
        recv_window: Optional[int] = None,
    ) -> None:
        self._params = params
        self._method = method.upper()
        self._url = httpx.URL(url) if isinstance(url, str) else url
        self._credentials = credentials
        self._http = http
        self._default_recv_window = recv_window
        self._consumed = False

    def __repr__(self) -> str:
        state = " consumed" if self._consumed else ""
        return f"<{type(self).__name__} {self._method} {self._url}{state}>"

    @property
    def params(self) -> Parameters:
        return self._params

    @property
    def method(self) -> str:
        return self._method

    @property
    def url(self) -> httpx.URL:
        return self._url

    @property
    def consumed(self) -> bool:
        return self._consumed

    # ------------------------------------------------------------------
    # Accumulation
    # ------------------------------------------------------------------
    def _live(self) -> Parameters:
        if self._consumed:
            raise InvalidStateTransition(
                f"{type(self).__name__} was already consumed; use the builder it returned"
            )
        return self._params

    def _set(self: _B, **values: Any) -> _B:
        params = self._live()
        for name, value in values.items():
            setattr(params, name, value)
        return self

    def _take(self) -> Parameters:
        params = self._live()
        self._consumed = True
        return params

    def _into(self, target: type[_B], **values: Any) -> _B:
        """Consume this builder and return a *target* builder over the same parameters."""

        if not can_upgrade(self.variant, target.variant):
            raise InvalidStateTransition(
                f"{self.variant.value} requests cannot become {target.variant.value}"
            )
        params = self._take()
        for name, value in values.items():
            setattr(params, name, value)
        return target(
            params,
            self._method,
            self._url,
            self._credentials,
            self._http,
            recv_window=self._default_recv_window,
        )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def _validate(self, params: Parameters) -> None:
        rules = rules_for(self.variant)

        illegal = [WIRE_NAMES[name] for name in params.present() if name not in rules.fields]
        if illegal:
            raise InvalidStateTransition(
                f"{', '.join(illegal)} not accepted by {self.variant.value} requests"
            )
        if rules.order_type is not None and params.order_type != rules.order_type:
            raise InvalidStateTransition(
                f"{self.variant.value} requests must have type={rules.order_type.value}, "
                f"got {stringify(params.order_type) if params.order_type else '<unset>'}"
            )

        check_recv_window(params.recv_window)
        check_limit(params.limit, rules.max_limit)

        for first, second in rules.exclusive_ids:
            if params.is_set(first) and params.is_set(second):
                raise ConflictingParameters(
                    WIRE_NAMES[first], WIRE_NAMES[second], "identify the order one way only"
                )
            if not params.is_set(first) and not params.is_set(second):
                raise MissingParameter(WIRE_NAMES[first], WIRE_NAMES[second])

        if rules.id_excludes_time_range:
            for cursor in ("order_id", "from_id"):
                if not params.is_set(cursor):
                    continue
                for bound in ("start_time", "end_time"):
                    if params.is_set(bound):
                        raise ConflictingParameters(
                            WIRE_NAMES[cursor],
                            WIRE_NAMES[bound],
                            "the exchange rejects an id filter combined with a time range",
                        )

        if params.is_set("start_time") and params.is_set("end_time"):
            start = params.start_time
            end = params.end_time
            start_ms = to_millis(start) if isinstance(start, datetime) else int(start)
            end_ms = to_millis(end) if isinstance(end, datetime) else int(end)
            if start_ms > end_ms:
                raise ConflictingParameters("startTime", "endTime", "startTime is after endTime")

        if params.is_set("iceberg_qty") and params.time_in_force not in (None, TimeInForce.GTC):
            raise ConflictingParameters(
                "icebergQty", "timeInForce", "iceberg orders must use GTC"
            )

        if params.is_set("quantity") and params.is_set("quote_order_qty"):
            raise ConflictingParameters("quantity", "quoteOrderQty")

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def prepare(self) -> SignedRequest:
        """Consume the builder and return the request that would be sent.

        Validation failures raise before anything leaves the process.
        """

        params = self._take()
        credentials = self._credentials
        signing = credentials.can_sign

        if signing and params.recv_window is None and self._default_recv_window is not None:
            params.recv_window = self._default_recv_window

        self._validate(params)

        if signing:
            params.timestamp = _now_ms()

        query = encode_query(params.items())
        if signing:
            signature = sign(credentials.secret_key or "", query)
            query = f"{query}&signature={signature}" if query else f"signature={signature}"

        headers: dict[str, str] = {}
        if credentials.api_key:
            headers[API_KEY_HEADER] = credentials.api_key

        return SignedRequest(self._method, str(self._url), query, headers)

    async def send(self) -> httpx.Response:
        """Send the request and return the raw response of a successful call."""

        request = self.prepare()
        safe_url = redact_signature(request.full_url)
        LOGGER.debug("→ %s %s", request.method, safe_url)

        try:
            response = await self._http.request(
                request.method, request.full_url, headers=request.headers
            )
        except httpx.HTTPError as exc:
            raise TransportError(
                f"HTTP request to Binance failed: {request.method} {safe_url}: {exc}"
            ) from exc

        LOGGER.debug(
            "Binance response %s %s status=%s",
            request.method,
            safe_url,
            response.status_code,
        )

        if response.is_success:
            return response

        try:
            payload: Any = response.json()
        except ValueError:
            payload = response.text

        code: Optional[int] = None
        message = response.reason_phrase or f"HTTP {response.status_code}"
        if isinstance(payload, dict):
            raw_code = payload.get("code")
            try:
                code = int(raw_code) if raw_code is not None else None
            except (TypeError, ValueError):
                code = None
            message = str(payload.get("msg") or payload.get("message") or message)
        elif payload:
            message = str(payload)

        error = ApiError(
            response.status_code,
            code,
            message,
            method=request.method,
            url=request.full_url,
            payload=payload,
        )
        LOGGER.warning("%s", error)
        raise error

    async def json(self, model: Optional[type[_T]] = None) -> Any:
        """Send the request and decode the JSON body, optionally into *model*."""

        response = await self.send()
        try:
            data = response.json()
        except ValueError as exc:
            raise DecodeError("Failed to decode Binance response as JSON", body=response.text) from exc

        if model is None:
            return data
        try:
            return TypeAdapter(model).validate_python(data)
        except ValidationError as exc:
            raise DecodeError(
                f"Binance response does not match {getattr(model, '__name__', model)!s}: {exc}",
                body=response.text,
            ) from exc


__all__ = [
    "ParamBuilder",
    "SignedRequest",
    "encode_query",
    "stringify",
    "to_millis",
]
