#!/usr/bin/env python3
"""
Lightweight Flask JSON API over the Binance futures REST client.

Run::

    python web_app.py                # http://127.0.0.1:5000
    python web_app.py --port 8080    # custom port

Environment variables (API keys loaded from ``.env``)::

    BINANCE_API_KEY / BINANCE_API_SECRET   needed for account and order routes
    BINANCE_BASE_URL                       optional REST base URL override
    FLASK_DEBUG=0                          set to 1 for reloader + debugger
"""

from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from dotenv import load_dotenv
from flask import Flask, Response, jsonify, request

# ── Bootstrap ──────────────────────────────────────────────────────────────
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
if SCRIPT_DIR not in sys.path:
    sys.path.insert(0, SCRIPT_DIR)

load_dotenv(os.path.join(SCRIPT_DIR, ".env"))

from binance_rest.errors import AuthenticationError, BinanceAPIError, NetworkError  # noqa: E402
from binance_rest.futures import Futures  # noqa: E402
from binance_rest.logging_config import setup_logging  # noqa: E402
from binance_rest.orders import place_order  # noqa: E402
from binance_rest.session import FUTURES_BASE_URL  # noqa: E402
from binance_rest.validators import validate_all  # noqa: E402

# ── App setup ──────────────────────────────────────────────────────────────
logger = setup_logging()
app = Flask(__name__)

_client: Optional[Futures] = None

# In-memory order history, newest first; resets on restart.
_MAX_HISTORY = 200
_order_history: List[Dict[str, Any]] = []


def _get_client() -> Futures:
    """Return the shared client, creating it on first call.

    Credentials are optional here: public routes work without them and
    signed routes answer 401 via ``AuthenticationError``.
    """
    global _client
    if _client is None:
        _client = Futures(
            os.getenv("BINANCE_API_KEY", ""),
            os.getenv("BINANCE_API_SECRET", ""),
            base_url=os.getenv("BINANCE_BASE_URL") or FUTURES_BASE_URL,
        )
        logger.info("Binance client initialised (shared instance)")
    return _client


def _ok(data: Any) -> Tuple[Response, int]:
    """Standard JSON success envelope."""
    return jsonify({"success": True, "data": data}), 200


def _error(exc: Exception, status: int = 500) -> Tuple[Response, int]:
    """Standard JSON error envelope."""
    return jsonify({"success": False, "error": str(exc)}), status


def _call(what: str, fn: Callable[[], Any]) -> Tuple[Response, int]:
    """Run *fn* and map client exceptions onto HTTP status codes."""
    try:
        return _ok(fn())
    except ValueError as exc:
        return _error(exc, 400)
    except AuthenticationError as exc:
        logger.error("%s: authentication failed: %s", what, exc)
        return _error(exc, 401)
    except (BinanceAPIError, NetworkError) as exc:
        logger.error("%s: %s", what, exc)
        return _error(exc, 502)
    except Exception as exc:
        logger.exception("%s: unexpected error", what)
        return _error(exc)


# ── Market data ────────────────────────────────────────────────────────────


@app.route("/api/ticker/<symbol>")
def api_ticker(symbol: str) -> Tuple[Response, int]:
    """24-hr ticker statistics for *symbol*."""
    return _call("ticker", lambda: _get_client().market.ticker_24hr(symbol.upper()))


@app.route("/api/price/<symbol>")
def api_price(symbol: str) -> Tuple[Response, int]:
    return _call("price", lambda: _get_client().market.ticker_price(symbol.upper()))


@app.route("/api/depth/<symbol>")
def api_depth(symbol: str) -> Tuple[Response, int]:
    """Order book.  Query param: ``?limit=20``."""
    limit = request.args.get("limit", type=int)
    return _call("depth", lambda: _get_client().market.depth(symbol.upper(), limit=limit))


@app.route("/api/klines/<symbol>")
def api_klines(symbol: str) -> Tuple[Response, int]:
    """Candlestick data.  Query params: ``?interval=1h&limit=50``."""
    interval = request.args.get("interval", "1h")
    limit_str = request.args.get("limit", "50")
    try:
        limit = min(int(limit_str), 1500)
    except ValueError:
        return _error(ValueError(f"Invalid limit: {limit_str!r}"), 400)

    def fetch() -> List[Dict[str, Any]]:
        raw = _get_client().market.klines(symbol.upper(), interval, limit=limit)
        return [
            {"t": c[0], "o": c[1], "h": c[2], "l": c[3], "c": c[4], "v": c[5]}
            for c in raw
        ]

    return _call("klines", fetch)


# ── Account data ───────────────────────────────────────────────────────────


@app.route("/api/account")
def api_account() -> Tuple[Response, int]:
    """Account balances and margin summary."""

    def fetch() -> Dict[str, Any]:
        data = _get_client().account.account()
        return {
            "totalWalletBalance": data.get("totalWalletBalance"),
            "totalUnrealizedProfit": data.get("totalUnrealizedProfit"),
            "totalMarginBalance": data.get("totalMarginBalance"),
            "availableBalance": data.get("availableBalance"),
            "assets": [
                a for a in data.get("assets", [])
                if float(a.get("walletBalance", 0)) > 0
            ],
        }

    return _call("account", fetch)


@app.route("/api/positions")
def api_positions() -> Tuple[Response, int]:
    """Open positions (non-zero amount only)."""

    def fetch() -> List[Dict[str, Any]]:
        positions = _get_client().account.position_risk()
        return [p for p in positions if float(p.get("positionAmt", 0)) != 0]

    return _call("positions", fetch)


# ── Orders ─────────────────────────────────────────────────────────────────


@app.route("/api/order", methods=["POST"])
def api_place_order() -> Tuple[Response, int]:
    """Place an order.  JSON body: ``{ symbol, side, order_type, quantity, price? }``."""
    body = request.get_json(silent=True) or {}

    try:
        params = validate_all(
            body.get("symbol", ""),
            body.get("side", ""),
            body.get("order_type", ""),
            body.get("quantity", ""),
            body.get("price") or None,
        )
    except ValueError as exc:
        logger.warning("Order validation failed: %s", exc)
        return _error(exc, 400)

    try:
        response = place_order(client=_get_client(), **params)
    except AuthenticationError as exc:
        logger.error("Order rejected, authentication failed: %s", exc)
        return _error(exc, 401)
    except (BinanceAPIError, NetworkError) as exc:
        logger.error("Binance API error: %s", exc)
        return _error(exc, 502)
    except Exception as exc:
        logger.exception("Unexpected order error")
        return _error(exc)

    record: Dict[str, Any] = {
        "time": datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC"),
        "orderId": response.get("orderId"),
        "symbol": response.get("symbol"),
        "side": response.get("side"),
        "type": response.get("type"),
        "status": response.get("status"),
        "origQty": response.get("origQty"),
        "executedQty": response.get("executedQty"),
        "avgPrice": response.get("avgPrice", "N/A"),
        "price": response.get("price", "N/A"),
    }
    _order_history.insert(0, record)
    del _order_history[_MAX_HISTORY:]
    return _ok(record)


@app.route("/api/open-orders")
def api_open_orders() -> Tuple[Response, int]:
    """All open orders, optionally filtered by ``?symbol=BTCUSDT``."""
    sym = request.args.get("symbol")
    return _call(
        "open orders",
        lambda: _get_client().trade.get_open_orders(sym.upper() if sym else None),
    )


@app.route("/api/cancel-order", methods=["POST"])
def api_cancel_order() -> Tuple[Response, int]:
    """Cancel an order.  JSON body: ``{ symbol, orderId }``."""
    body = request.get_json(silent=True) or {}
    symbol = body.get("symbol", "")
    order_id = body.get("orderId")

    if not symbol or order_id is None:
        return _error(ValueError("symbol and orderId are required"), 400)
    try:
        oid = int(order_id)
    except (TypeError, ValueError):
        return _error(ValueError(f"Invalid orderId: {order_id!r}"), 400)

    return _call("cancel", lambda: _get_client().trade.cancel_order(symbol.upper(), order_id=oid))


@app.route("/api/orders")
def api_order_history() -> Tuple[Response, int]:
    """In-memory order history."""
    return _ok(_order_history)


@app.route("/api/status")
def api_status() -> Tuple[Response, int]:
    """Health check: pings Binance and reports connectivity."""
    try:
        _get_client().market.ping()
        return jsonify({"success": True, "status": "connected"}), 200
    except Exception as exc:
        return jsonify({"success": False, "status": "disconnected", "error": str(exc)}), 200


# ── Entry point ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Binance REST web API")
    parser.add_argument("--port", type=int, default=5000, help="Port (default 5000)")
    parser.add_argument("--host", default="127.0.0.1", help="Host (default 127.0.0.1)")
    cli_args = parser.parse_args()

    try:
        _get_client().market.ping()
        logger.info("Binance API reachable")
    except Exception as e:
        logger.warning("Binance connectivity check failed: %s (starting anyway)", e)

    debug_mode = os.getenv("FLASK_DEBUG", "0") == "1"
    print(f"\n  Binance REST API -> http://{cli_args.host}:{cli_args.port}")
    if debug_mode:
        print("     Debug mode ON - do not expose to the internet\n")
    else:
        print()

    app.run(host=cli_args.host, port=cli_args.port, debug=debug_mode)
