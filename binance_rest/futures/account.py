"""USDT-M futures account endpoints (signed)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base import EndpointGroup
from ..validators import require_param


class Account(EndpointGroup):
    """Balances, positions and income (``/fapi/v1`` and ``/fapi/v2``)."""

    def account(self, recv_window: Optional[int] = None) -> Dict[str, Any]:
        """Account balances, margin and positions (``GET /fapi/v2/account``)."""
        return self._session.signed_request("/fapi/v2/account", {"recvWindow": recv_window})

    def balance(self, recv_window: Optional[int] = None) -> List[Dict[str, Any]]:
        """Per-asset futures balance (``GET /fapi/v2/balance``)."""
        return self._session.signed_request("/fapi/v2/balance", {"recvWindow": recv_window})

    def position_risk(
        self,
        symbol: Optional[str] = None,
        recv_window: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Position information (``GET /fapi/v2/positionRisk``)."""
        return self._session.signed_request(
            "/fapi/v2/positionRisk", {"symbol": symbol, "recvWindow": recv_window}
        )

    def income(
        self,
        symbol: Optional[str] = None,
        income_type: Optional[str] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
        recv_window: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Income history (``GET /fapi/v1/income``).

        ``income_type`` filters on e.g. ``REALIZED_PNL``, ``FUNDING_FEE``,
        ``COMMISSION``; ``limit`` default 100, max 1000.
        """
        return self._session.signed_request(
            "/fapi/v1/income",
            {
                "symbol": symbol,
                "incomeType": income_type,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
                "recvWindow": recv_window,
            },
        )

    def commission_rate(self, symbol: str, recv_window: Optional[int] = None) -> Dict[str, Any]:
        """Maker/taker commission rate for *symbol* (``GET /fapi/v1/commissionRate``)."""
        require_param("symbol", symbol)
        return self._session.signed_request(
            "/fapi/v1/commissionRate", {"symbol": symbol, "recvWindow": recv_window}
        )
