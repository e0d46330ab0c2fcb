"""
Query-string construction.

The query string built here is both what gets signed and what goes on the
wire, so the two can never disagree.  List values use the exchange's
bracket-and-quote encoding (``%5B%22BTCUSDT%22,%22ETHUSDT%22%5D``) and are
emitted verbatim; every other value is percent-escaped.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Iterable, Mapping, Optional
from urllib.parse import quote


def encode_list(values: Iterable[Any]) -> str:
    """Encode *values* as the exchange's escaped JSON-like list."""
    items = ",".join(f"%22{quote(str(v), safe='')}%22" for v in values)
    return f"%5B{items}%5D"


def clean_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Drop ``None`` entries, keeping insertion order."""
    return {k: v for k, v in (params or {}).items() if v is not None}


def _encode_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return encode_list(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    # Plain positional notation; the exchange rejects ``1e-05``.
    if isinstance(value, float):
        value = format(Decimal(str(value)), "f")
    elif isinstance(value, Decimal):
        value = format(value, "f")
    return quote(str(value), safe="")


def build_query(params: Optional[Mapping[str, Any]]) -> str:
    """Serialize *params* to ``k=v&k=v`` in insertion order, skipping ``None``."""
    return "&".join(
        f"{key}={_encode_value(value)}" for key, value in clean_params(params).items()
    )
