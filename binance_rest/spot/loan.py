"""
Crypto loan endpoints (``/sapi/v1/loan``), signed.

See https://developers.binance.com/docs/crypto_loan
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..base import EndpointGroup


class Loan(EndpointGroup):
    """Crypto loan history."""

    def get_loan_ltv_adjustment_history(
        self,
        loan_coin: Optional[str] = None,
        collateral_coin: Optional[str] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        current: Optional[int] = None,
        limit: Optional[int] = None,
        recv_window: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        LTV adjustment history (``GET /sapi/v1/loan/ltv/adjustment/history``).

        Parameters
        ----------
        loan_coin, collateral_coin : str, optional
            Filter by asset.
        start_time, end_time : int, optional
            Millisecond timestamps.
        current : int, optional
            Page number, default 1.
        limit : int, optional
            Page size, default 10, max 100.
        """
        return self._session.signed_request(
            "/sapi/v1/loan/ltv/adjustment/history",
            {
                "loanCoin": loan_coin,
                "collateralCoin": collateral_coin,
                "startTime": start_time,
                "endTime": end_time,
                "current": current,
                "limit": limit,
                "recvWindow": recv_window,
            },
        )

    def get_loan_borrow_history(
        self,
        order_id: Optional[int] = None,
        loan_coin: Optional[str] = None,
        collateral_coin: Optional[str] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        current: Optional[int] = None,
        limit: Optional[int] = None,
        recv_window: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Borrow history (``GET /sapi/v1/loan/borrow/history``)."""
        return self._session.signed_request(
            "/sapi/v1/loan/borrow/history",
            {
                "orderId": order_id,
                "loanCoin": loan_coin,
                "collateralCoin": collateral_coin,
                "startTime": start_time,
                "endTime": end_time,
                "current": current,
                "limit": limit,
                "recvWindow": recv_window,
            },
        )
