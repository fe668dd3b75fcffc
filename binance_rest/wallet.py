"""Signed wallet endpoints: withdrawals and deposits."""

from __future__ import annotations

from typing import Optional

import httpx

from .auth import Credentials
from .builders import (
    DepositAddressBuilder,
    DepositHistoryBuilder,
    WithdrawBuilder,
    WithdrawHistoryBuilder,
)
from .client import DEFAULT_CONNECT_TIMEOUT, DEFAULT_TIMEOUT, BaseClient
from .constants import (
    BINANCE_URL,
    PATH_DEPOSIT_ADDRESS,
    PATH_DEPOSIT_HISTORY,
    PATH_WITHDRAW,
    PATH_WITHDRAW_HISTORY,
)
from .params import Number, Parameters


class WithdrawalClient(BaseClient):
    """Moves funds off the exchange and reports on deposits.

    Needs a key with withdrawals enabled; every request is signed.
    """

    @classmethod
    def connect(
        cls,
        api_key: str,
        secret_key: str,
        base_url: str = BINANCE_URL,
        *,
        http: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        recv_window: Optional[int] = None,
    ) -> "WithdrawalClient":
        return cls._open(
            Credentials(api_key=api_key, secret_key=secret_key),
            base_url,
            http=http,
            timeout=timeout,
            connect_timeout=connect_timeout,
            recv_window=recv_window,
        )

    def withdraw(self, coin: str, address: str, amount: Number) -> WithdrawBuilder:
        """Withdraw *amount* of *coin* to *address*.

        The response carries the withdrawal ``id``.
        """

        return self._builder(
            WithdrawBuilder,
            "POST",
            PATH_WITHDRAW,
            Parameters.new(coin=coin, address=address, amount=amount),
        )

    def get_withdraw_history(self) -> WithdrawHistoryBuilder:
        return self._builder(WithdrawHistoryBuilder, "GET", PATH_WITHDRAW_HISTORY)

    def get_deposit_history(self) -> DepositHistoryBuilder:
        return self._builder(DepositHistoryBuilder, "GET", PATH_DEPOSIT_HISTORY)

    def get_deposit_address(self, coin: str) -> DepositAddressBuilder:
        return self._builder(
            DepositAddressBuilder, "GET", PATH_DEPOSIT_ADDRESS, Parameters.new(coin=coin)
        )


__all__ = ["WithdrawalClient"]
