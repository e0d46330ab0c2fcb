"""
USDT-M futures order endpoints.  Every call here is signed.

See https://developers.binance.com/docs/derivatives/usds-margined-futures/trade
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from ..base import EndpointGroup
from ..validators import require_one_of, require_param

Number = Union[int, float, str]


class Trade(EndpointGroup):
    """Order placement, lookup and cancellation."""

    def _order_params(
        self,
        symbol: str,
        side: str,
        type: str,
        quantity: Optional[Number],
        price: Optional[Number],
        time_in_force: Optional[str],
        reduce_only: Optional[bool],
        position_side: Optional[str],
        stop_price: Optional[Number],
        new_client_order_id: Optional[str],
        recv_window: Optional[int],
    ) -> Dict[str, Any]:
        require_param("symbol", symbol)
        require_param("side", side)
        require_param("type", type)
        return {
            "symbol": symbol,
            "side": side,
            "type": type,
            "quantity": quantity,
            "price": price,
            "timeInForce": time_in_force,
            "reduceOnly": reduce_only,
            "positionSide": position_side,
            "stopPrice": stop_price,
            "newClientOrderId": new_client_order_id,
            "recvWindow": recv_window,
        }

    def new_order(
        self,
        symbol: str,
        side: str,
        type: str,
        quantity: Optional[Number] = None,
        price: Optional[Number] = None,
        time_in_force: Optional[str] = None,
        reduce_only: Optional[bool] = None,
        position_side: Optional[str] = None,
        stop_price: Optional[Number] = None,
        new_client_order_id: Optional[str] = None,
        recv_window: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Place a new order (``POST /fapi/v1/order``).

        Parameters
        ----------
        symbol, side, type : str
            Required.  ``side`` is ``BUY``/``SELL``; ``type`` is e.g.
            ``LIMIT``, ``MARKET``, ``STOP``, ``TAKE_PROFIT``.
        quantity, price : number, optional
            Sent as given; pass strings to control precision.
        time_in_force : str, optional
            ``GTC``, ``IOC``, ``FOK`` or ``GTX``; required by LIMIT orders.
        reduce_only : bool, optional
            Only reduce an existing position.
        position_side : str, optional
            ``BOTH``, ``LONG`` or ``SHORT`` (hedge mode).
        stop_price : number, optional
            Trigger price for STOP / TAKE_PROFIT orders.
        new_client_order_id : str, optional
            Caller-chosen unique id.
        recv_window : int, optional
            Overrides the session default.
        """
        params = self._order_params(
            symbol, side, type, quantity, price, time_in_force, reduce_only,
            position_side, stop_price, new_client_order_id, recv_window,
        )
        return self._session.signed_request("/fapi/v1/order", params, method="POST")

    def test_order(
        self,
        symbol: str,
        side: str,
        type: str,
        quantity: Optional[Number] = None,
        price: Optional[Number] = None,
        time_in_force: Optional[str] = None,
        reduce_only: Optional[bool] = None,
        position_side: Optional[str] = None,
        stop_price: Optional[Number] = None,
        new_client_order_id: Optional[str] = None,
        recv_window: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Validate an order without sending it to the matching engine (``POST /fapi/v1/order/test``)."""
        params = self._order_params(
            symbol, side, type, quantity, price, time_in_force, reduce_only,
            position_side, stop_price, new_client_order_id, recv_window,
        )
        return self._session.signed_request("/fapi/v1/order/test", params, method="POST")

    def query_order(
        self,
        symbol: str,
        order_id: Optional[int] = None,
        orig_client_order_id: Optional[str] = None,
        recv_window: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Query an order by ``order_id`` or ``orig_client_order_id`` (``GET /fapi/v1/order``)."""
        require_param("symbol", symbol)
        require_one_of("orderId", order_id, "origClientOrderId", orig_client_order_id, required=True)
        return self._session.signed_request(
            "/fapi/v1/order",
            {
                "symbol": symbol,
                "orderId": order_id,
                "origClientOrderId": orig_client_order_id,
                "recvWindow": recv_window,
            },
        )

    def cancel_order(
        self,
        symbol: str,
        order_id: Optional[int] = None,
        orig_client_order_id: Optional[str] = None,
        recv_window: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Cancel an active order (``DELETE /fapi/v1/order``)."""
        require_param("symbol", symbol)
        require_one_of("orderId", order_id, "origClientOrderId", orig_client_order_id, required=True)
        return self._session.signed_request(
            "/fapi/v1/order",
            {
                "symbol": symbol,
                "orderId": order_id,
                "origClientOrderId": orig_client_order_id,
                "recvWindow": recv_window,
            },
            method="DELETE",
        )

    def cancel_open_orders(self, symbol: str, recv_window: Optional[int] = None) -> Dict[str, Any]:
        """Cancel every open order on *symbol* (``DELETE /fapi/v1/allOpenOrders``)."""
        require_param("symbol", symbol)
        return self._session.signed_request(
            "/fapi/v1/allOpenOrders",
            {"symbol": symbol, "recvWindow": recv_window},
            method="DELETE",
        )

    def get_open_orders(
        self,
        symbol: Optional[str] = None,
        recv_window: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Current open orders, for one symbol or all (``GET /fapi/v1/openOrders``)."""
        return self._session.signed_request(
            "/fapi/v1/openOrders", {"symbol": symbol, "recvWindow": recv_window}
        )

    def get_all_orders(
        self,
        symbol: str,
        order_id: Optional[int] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
        recv_window: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        All orders, active, cancelled or filled (``GET /fapi/v1/allOrders``).

        With ``order_id`` set, orders with id >= that value are returned.
        """
        require_param("symbol", symbol)
        return self._session.signed_request(
            "/fapi/v1/allOrders",
            {
                "symbol": symbol,
                "orderId": order_id,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
                "recvWindow": recv_window,
            },
        )

    def account_trades(
        self,
        symbol: str,
        order_id: Optional[int] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        from_id: Optional[int] = None,
        limit: Optional[int] = None,
        recv_window: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Trades for the account on *symbol* (``GET /fapi/v1/userTrades``)."""
        require_param("symbol", symbol)
        return self._session.signed_request(
            "/fapi/v1/userTrades",
            {
                "symbol": symbol,
                "orderId": order_id,
                "startTime": start_time,
                "endTime": end_time,
                "fromId": from_id,
                "limit": limit,
                "recvWindow": recv_window,
            },
        )

    def change_leverage(
        self,
        symbol: str,
        leverage: int,
        recv_window: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Set initial leverage, 1 to 125 (``POST /fapi/v1/leverage``)."""
        require_param("symbol", symbol)
        require_param("leverage", leverage)
        return self._session.signed_request(
            "/fapi/v1/leverage",
            {"symbol": symbol, "leverage": leverage, "recvWindow": recv_window},
            method="POST",
        )

    def change_margin_type(
        self,
        symbol: str,
        margin_type: str,
        recv_window: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Switch between ``ISOLATED`` and ``CROSSED`` margin (``POST /fapi/v1/marginType``)."""
        require_param("symbol", symbol)
        require_param("margin_type", margin_type)
        return self._session.signed_request(
            "/fapi/v1/marginType",
            {"symbol": symbol, "marginType": margin_type, "recvWindow": recv_window},
            method="POST",
        )
