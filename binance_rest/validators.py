"""
Parameter validation.

Two layers live here:

* ``require_param`` / ``require_one_of`` guard endpoint methods and raise
  ``RequiredParameterError`` / ``DuplicatedParametersError`` before any
  request is built.
* ``validate_*`` normalise user input from the CLI and web front ends and
  raise ``ValueError`` with a human-readable message.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from .errors import DuplicatedParametersError, RequiredParameterError

# Binance symbols are uppercase alphanumeric (e.g. BTCUSDT, ETHUSDT).
_SYMBOL_RE = re.compile(r"^[A-Z0-9]{2,20}$")

VALID_SIDES = ("BUY", "SELL")
VALID_ORDER_TYPES = ("MARKET", "LIMIT")


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value) == 0
    return False


def require_param(name: str, value: Any) -> None:
    """Raise ``RequiredParameterError`` if *value* is ``None`` or empty."""
    if _is_empty(value):
        raise RequiredParameterError(name)


def require_one_of(
    name_a: str,
    value_a: Any,
    name_b: str,
    value_b: Any,
    required: bool = False,
) -> None:
    """
    Enforce that *name_a* and *name_b* are not both supplied.

    Any value other than ``None`` counts as supplied, empty strings
    included.  With ``required=True`` one of them must also be non-empty.

    Raises
    ------
    DuplicatedParametersError
        Neither value is ``None``.
    RequiredParameterError
        Both values are empty and ``required`` is set.
    """
    if value_a is not None and value_b is not None:
        raise DuplicatedParametersError(name_a, name_b)
    if required and _is_empty(value_a) and _is_empty(value_b):
        raise RequiredParameterError(f"{name_a} or {name_b}")


# ── front-end input validators ─────────────────────────────────────────────


def validate_symbol(symbol: str) -> str:
    """Return the uppercased symbol or raise on invalid format."""
    symbol = symbol.strip().upper()
    if not _SYMBOL_RE.match(symbol):
        raise ValueError(
            f"Invalid symbol '{symbol}'. "
            "Expected uppercase alphanumeric (e.g. BTCUSDT)."
        )
    return symbol


def validate_side(side: str) -> str:
    side = side.strip().upper()
    if side not in VALID_SIDES:
        raise ValueError(
            f"Invalid side '{side}'. Must be one of: {', '.join(VALID_SIDES)}."
        )
    return side


def validate_order_type(order_type: str) -> str:
    order_type = order_type.strip().upper()
    if order_type not in VALID_ORDER_TYPES:
        raise ValueError(
            f"Invalid order type '{order_type}'. "
            f"Must be one of: {', '.join(VALID_ORDER_TYPES)}."
        )
    return order_type


def _positive_decimal(raw: Union[str, float], label: str) -> Decimal:
    try:
        value = Decimal(str(raw))
    except (InvalidOperation, ValueError):
        raise ValueError(f"Invalid {label} '{raw}'. Must be a positive number.")
    if not value.is_finite() or value <= 0:
        raise ValueError(f"{label.capitalize()} must be positive, got {value}.")
    return value


def validate_quantity(quantity: Union[str, float]) -> Decimal:
    """Return a positive ``Decimal`` quantity or raise ``ValueError``."""
    return _positive_decimal(quantity, "quantity")


def validate_price(price: Union[str, float, None], order_type: str) -> Optional[Decimal]:
    """
    Validate *price* given an *order_type*.

    LIMIT orders need a positive price; for MARKET orders the price is
    ignored and ``None`` is returned.
    """
    if order_type == "MARKET":
        return None
    if price is None or price == "":
        raise ValueError("Price is required for LIMIT orders.")
    return _positive_decimal(price, "price")


def validate_all(
    symbol: str,
    side: str,
    order_type: str,
    quantity: Union[str, float],
    price: Union[str, float, None],
) -> dict:
    """
    Run every front-end validator and return a clean parameter dict.

    Returns
    -------
    dict
        Keys: ``symbol``, ``side``, ``order_type``, ``quantity``, ``price``.
    """
    v_type = validate_order_type(order_type)
    return {
        "symbol": validate_symbol(symbol),
        "side": validate_side(side),
        "order_type": v_type,
        "quantity": validate_quantity(quantity),
        "price": validate_price(price, v_type),
    }
