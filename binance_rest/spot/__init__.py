"""Spot ``sapi`` client (crypto loans and sub-accounts)."""

from __future__ import annotations

from typing import Any

from ..session import Session
from .loan import Loan
from .subaccount import Subaccount

SPOT_BASE_URL = "https://api.binance.com"


class Spot:
    """
    Binance spot REST client.

    Same shape as ``Futures``: one ``Session`` plus endpoint groups
    (``client.loan``, ``client.subaccount``).
    """

    def __init__(
        self,
        key: str = "",
        secret: str = "",
        base_url: str = SPOT_BASE_URL,
        **session_options: Any,
    ):
        self.session = Session(key=key, secret=secret, base_url=base_url, **session_options)
        self.loan = Loan(self.session)
        self.subaccount = Subaccount(self.session)

    def __enter__(self) -> "Spot":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()


__all__ = ["Spot", "Loan", "Subaccount", "SPOT_BASE_URL"]
