"""
Order placement from validated front-end input.

Sits between ``validators.validate_all`` and ``Futures.trade.new_order``.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, Optional

from .futures import Futures

logger = logging.getLogger("binance_rest")


def place_order(
    client: Futures,
    symbol: str,
    side: str,
    order_type: str,
    quantity: Decimal,
    price: Optional[Decimal] = None,
) -> Dict[str, Any]:
    """
    Submit a MARKET or LIMIT order and return the raw acknowledgement.

    LIMIT orders are sent Good-Til-Cancelled.  Quantities and prices are
    passed as strings so ``Decimal`` precision survives serialization.
    """
    limit = order_type == "LIMIT"

    logger.info(
        "Placing %s %s order: %s %s @ %s",
        side,
        order_type,
        quantity,
        symbol,
        price if limit else "MARKET",
    )

    response = client.trade.new_order(
        symbol=symbol,
        side=side,
        type=order_type,
        quantity=str(quantity),
        price=str(price) if limit else None,
        time_in_force="GTC" if limit else None,
    )

    logger.info("Order placed - orderId=%s status=%s", response.get("orderId"), response.get("status"))
    logger.debug("Full order response: %s", response)
    return response


def format_order_response(response: Dict[str, Any]) -> str:
    """Multi-line summary of an order acknowledgement for terminal output."""
    fields = [
        ("Order ID", response.get("orderId")),
        ("Symbol", response.get("symbol")),
        ("Side", response.get("side")),
        ("Type", response.get("type")),
        ("Status", response.get("status")),
        ("Orig Qty", response.get("origQty")),
        ("Executed Qty", response.get("executedQty")),
        ("Avg Price", response.get("avgPrice", "N/A")),
        ("Price", response.get("price", "N/A")),
        ("Time In Force", response.get("timeInForce", "N/A")),
    ]
    rule = "-" * 47
    lines = ["--- Order Response " + "-" * 28]
    lines += [f"  {label:<14}: {value}" for label, value in fields]
    lines.append(rule)
    return "\n".join(lines)
