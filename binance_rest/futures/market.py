"""
USDT-M futures market data endpoints.

All endpoints here are public: server time, exchange info, order book,
trades, klines and tickers.

See https://developers.binance.com/docs/derivatives/usds-margined-futures/market-data
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union

from ..base import EndpointGroup
from ..validators import require_one_of, require_param


def _upper_symbols(symbols: Optional[Union[str, Sequence[str]]]) -> Optional[List[str]]:
    """Upper-case *symbols*; a bare string counts as a single symbol."""
    if not symbols:
        return None
    if isinstance(symbols, str):
        symbols = [symbols]
    return [s.upper() for s in symbols]


class Market(EndpointGroup):
    """Public market data (``/fapi/v1``)."""

    def ping(self) -> Any:
        """Test connectivity (``GET /fapi/v1/ping``)."""
        return self._session.public_request("/fapi/v1/ping")

    def time(self) -> Any:
        """Check server time (``GET /fapi/v1/time``)."""
        return self._session.public_request("/fapi/v1/time")

    def exchange_info(
        self,
        symbol: Optional[str] = None,
        symbols: Optional[Union[str, Sequence[str]]] = None,
        permissions: Optional[Union[str, Sequence[str]]] = None,
    ) -> Any:
        """
        Exchange trading rules and symbol information
        (``GET /fapi/v1/exchangeInfo``).

        Parameters
        ----------
        symbol : str, optional
            A single symbol.
        symbols : list of str, optional
            Several symbols; sent as ``%5B%22BTCUSDT%22,...%5D``.
        permissions : list of str, optional
            Permission sets to filter on, encoded like ``symbols``.
        """
        return self._session.public_request(
            "/fapi/v1/exchangeInfo",
            {"symbol": symbol, "symbols": symbols, "permissions": permissions},
        )

    def depth(self, symbol: str, limit: Optional[int] = None) -> Any:
        """
        Order book (``GET /fapi/v1/depth``).

        ``limit`` defaults to 100 server-side; valid values are
        5, 10, 20, 50, 100, 500, 1000.
        """
        require_param("symbol", symbol)
        return self._session.public_request(
            "/fapi/v1/depth", {"symbol": symbol, "limit": limit}
        )

    def trades(self, symbol: str, limit: Optional[int] = None) -> Any:
        """Recent trades list (``GET /fapi/v1/trades``).  ``limit`` default 500, max 1000."""
        require_param("symbol", symbol)
        return self._session.public_request(
            "/fapi/v1/trades", {"symbol": symbol, "limit": limit}
        )

    def historical_trades(
        self,
        symbol: str,
        limit: Optional[int] = None,
        from_id: Optional[int] = None,
    ) -> Any:
        """
        Old trade lookup (``GET /fapi/v1/historicalTrades``).

        Requires the API key header, which the session sends whenever a key
        is configured.  ``from_id`` is the trade id to fetch from; by default
        the most recent trades are returned.
        """
        require_param("symbol", symbol)
        return self._session.public_request(
            "/fapi/v1/historicalTrades",
            {"symbol": symbol, "limit": limit, "fromId": from_id},
        )

    def agg_trades(
        self,
        symbol: str,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        from_id: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """
        Compressed/aggregate trades (``GET /fapi/v1/aggTrades``).

        Trades filled at the same time, from the same order, at the same
        price have their quantity aggregated.  ``start_time``/``end_time``
        are inclusive millisecond timestamps.
        """
        require_param("symbol", symbol)
        return self._session.public_request(
            "/fapi/v1/aggTrades",
            {
                "symbol": symbol,
                "startTime": start_time,
                "endTime": end_time,
                "fromId": from_id,
                "limit": limit,
            },
        )

    def klines(
        self,
        symbol: str,
        interval: str,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        time_zone: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[List[Any]]:
        """
        Kline/candlestick bars (``GET /fapi/v1/klines``).

        Klines are uniquely identified by their open time.  ``time_zone``
        defaults to ``0`` (UTC) server-side; ``limit`` default 500, max 1500.
        """
        require_param("symbol", symbol)
        require_param("interval", interval)
        return self._session.public_request(
            "/fapi/v1/klines",
            {
                "symbol": symbol,
                "interval": interval,
                "startTime": start_time,
                "endTime": end_time,
                "timeZone": time_zone,
                "limit": limit,
            },
        )

    def continuous_klines(
        self,
        symbol: str,
        interval: str,
        contract_type: str,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[List[Any]]:
        """
        Continuous contract klines (``GET /fapi/v1/continuousKlines``).

        *symbol* is sent as ``pair``; *contract_type* is one of
        ``PERPETUAL``, ``CURRENT_QUARTER``, ``NEXT_QUARTER``.
        """
        require_param("symbol", symbol)
        require_param("interval", interval)
        require_param("contract_type", contract_type)
        return self._session.public_request(
            "/fapi/v1/continuousKlines",
            {
                "pair": symbol,
                "interval": interval,
                "contractType": contract_type,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
            },
        )

    def avg_price(self, symbol: str) -> Any:
        """Current average price (``GET /fapi/v1/avgPrice``)."""
        require_param("symbol", symbol)
        return self._session.public_request("/fapi/v1/avgPrice", {"symbol": symbol})

    def ticker_24hr(self, symbol: Optional[str] = None) -> Any:
        """
        24 hour rolling window statistics (``GET /fapi/v1/ticker/24hr``).

        Without *symbol* every symbol is returned, at a much higher weight.
        """
        return self._session.public_request("/fapi/v1/ticker/24hr", {"symbol": symbol})

    def ticker_trading_day(
        self,
        symbol: Optional[str] = None,
        symbols: Optional[Union[str, Sequence[str]]] = None,
        time_zone: Optional[str] = None,
        type: Optional[str] = None,
    ) -> Any:
        """
        Price change statistics for a trading day
        (``GET /fapi/v1/ticker/tradingDay``).

        Parameters
        ----------
        symbol, symbols
            Mutually exclusive.  ``symbols`` is upper-cased.
        time_zone : str, optional
            Default ``0`` (UTC).
        type : str, optional
            ``FULL`` (default) or ``MINI``.
        """
        require_one_of("symbol", symbol, "symbols", symbols)
        return self._session.public_request(
            "/fapi/v1/ticker/tradingDay",
            {
                "symbol": symbol,
                "symbols": _upper_symbols(symbols),
                "timeZone": time_zone,
                "type": type,
            },
        )

    def ticker_price(self, symbol: Optional[str] = None) -> Any:
        """Latest price for one or all symbols (``GET /fapi/v1/ticker/price``)."""
        return self._session.public_request("/fapi/v1/ticker/price", {"symbol": symbol})

    def book_ticker(self, symbol: Optional[str] = None) -> Any:
        """Best price/qty on the order book (``GET /fapi/v1/ticker/bookTicker``)."""
        return self._session.public_request(
            "/fapi/v1/ticker/bookTicker", {"symbol": symbol}
        )

    def ticker(
        self,
        symbol: Optional[str] = None,
        symbols: Optional[Union[str, Sequence[str]]] = None,
        window_size: str = "1d",
    ) -> Any:
        """
        Rolling window price change statistics (``GET /fapi/v1/ticker``).

        *symbol* and *symbols* are mutually exclusive and upper-cased.
        ``window_size`` is ``1m``..``59m``, ``1h``..``23h`` or ``1d``..``7d``.
        """
        require_one_of("symbol", symbol, "symbols", symbols)
        return self._session.public_request(
            "/fapi/v1/ticker",
            {
                "symbol": symbol.upper() if symbol else None,
                "symbols": _upper_symbols(symbols),
                "windowSize": window_size,
            },
        )
