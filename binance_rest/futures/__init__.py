"""USDT-M futures client."""

from __future__ import annotations

from typing import Any

from ..session import FUTURES_BASE_URL, Session
from .account import Account
from .market import Market
from .trade import Trade


class Futures:
    """
    Binance USDT-M futures REST client.

    Holds one ``Session`` and exposes the endpoint groups as attributes::

        client = Futures(key, secret)
        client.market.depth("BTCUSDT", limit=5)
        client.trade.new_order("BTCUSDT", "BUY", "MARKET", quantity="0.01")
        client.account.balance()

    Extra keyword arguments (``timeout``, ``proxies``, ``recv_window``,
    ``show_weight_usage``, ``show_header``, ``http``) go to ``Session``.
    """

    def __init__(
        self,
        key: str = "",
        secret: str = "",
        base_url: str = FUTURES_BASE_URL,
        **session_options: Any,
    ):
        self.session = Session(key=key, secret=secret, base_url=base_url, **session_options)
        self.market = Market(self.session)
        self.trade = Trade(self.session)
        self.account = Account(self.session)

    def __enter__(self) -> "Futures":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()


__all__ = ["Futures", "Market", "Trade", "Account"]
