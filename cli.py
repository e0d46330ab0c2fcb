#!/usr/bin/env python3
"""
Command-line front end for the Binance USDT-M futures REST client.

Usage examples
--------------
Market data (no credentials needed)::

    python cli.py ping
    python cli.py depth BTCUSDT --limit 5
    python cli.py klines BTCUSDT --interval 1h --limit 24
    python cli.py ticker --symbols BTCUSDT ETHUSDT --window-size 4h

Signed calls (``BINANCE_API_KEY`` / ``BINANCE_API_SECRET`` from ``.env``)::

    python cli.py account
    python cli.py order --symbol BTCUSDT --side BUY --type MARKET --quantity 0.01
    python cli.py order --symbol BTCUSDT --side SELL --type LIMIT --quantity 0.01 --price 50000
    python cli.py cancel --symbol BTCUSDT --order-id 123456
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Any, Callable, Dict, List, Optional

from dotenv import load_dotenv

# ── Bootstrap ──────────────────────────────────────────────────────────────
# Allow ``python cli.py …`` from a source checkout.
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
if SCRIPT_DIR not in sys.path:
    sys.path.insert(0, SCRIPT_DIR)

from binance_rest.errors import BinanceAPIError, BinanceError  # noqa: E402
from binance_rest.futures import Futures  # noqa: E402
from binance_rest.logging_config import setup_logging  # noqa: E402
from binance_rest.orders import format_order_response, place_order  # noqa: E402
from binance_rest.session import FUTURES_BASE_URL  # noqa: E402
from binance_rest.validators import validate_all  # noqa: E402

# Commands that hit signed endpoints.
SIGNED_COMMANDS = ("account", "balance", "positions", "open-orders", "order", "cancel")

# ── Argument parser ────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query and trade Binance USDT-M futures over REST.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python cli.py depth BTCUSDT --limit 5\n"
            "  python cli.py order --symbol BTCUSDT --side BUY --type MARKET --quantity 0.01\n"
        ),
    )
    parser.add_argument("--base-url", default=None, help="Override the REST base URL")
    parser.add_argument("--timeout", type=float, default=10, help="Request timeout in seconds")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("ping", help="Test connectivity")
    sub.add_parser("time", help="Server time")

    p = sub.add_parser("exchange-info", help="Trading rules")
    p.add_argument("--symbol")
    p.add_argument("--symbols", nargs="+")

    p = sub.add_parser("depth", help="Order book")
    p.add_argument("symbol")
    p.add_argument("--limit", type=int)

    p = sub.add_parser("trades", help="Recent trades")
    p.add_argument("symbol")
    p.add_argument("--limit", type=int)

    p = sub.add_parser("klines", help="Candlesticks")
    p.add_argument("symbol")
    p.add_argument("--interval", default="1h")
    p.add_argument("--limit", type=int)

    p = sub.add_parser("price", help="Latest price")
    p.add_argument("symbol", nargs="?")

    p = sub.add_parser("ticker", help="Rolling window statistics")
    p.add_argument("--symbol")
    p.add_argument("--symbols", nargs="+")
    p.add_argument("--window-size", default="1d")

    sub.add_parser("account", help="Account information")
    sub.add_parser("balance", help="Futures balances")
    p = sub.add_parser("positions", help="Non-zero positions")
    p.add_argument("--symbol")
    p = sub.add_parser("open-orders", help="Open orders")
    p.add_argument("--symbol")

    p = sub.add_parser("order", help="Place a MARKET or LIMIT order")
    p.add_argument("--symbol", required=True, help="Trading pair (e.g. BTCUSDT)")
    p.add_argument("--side", required=True, choices=["BUY", "SELL", "buy", "sell"])
    p.add_argument("--type", required=True, dest="order_type",
                   choices=["MARKET", "LIMIT", "market", "limit"])
    p.add_argument("--quantity", required=True)
    p.add_argument("--price", default=None, help="Limit price (required for LIMIT orders)")

    p = sub.add_parser("cancel", help="Cancel an order")
    p.add_argument("--symbol", required=True)
    p.add_argument("--order-id", type=int, required=True)

    return parser


# ── Command dispatch ───────────────────────────────────────────────────────


def _active_positions(client: Futures, args: argparse.Namespace) -> List[Dict[str, Any]]:
    positions = client.account.position_risk(symbol=args.symbol)
    return [p for p in positions if float(p.get("positionAmt", 0)) != 0]


COMMANDS: Dict[str, Callable[[Futures, argparse.Namespace], Any]] = {
    "ping": lambda c, a: c.market.ping(),
    "time": lambda c, a: c.market.time(),
    "exchange-info": lambda c, a: c.market.exchange_info(symbol=a.symbol, symbols=a.symbols),
    "depth": lambda c, a: c.market.depth(a.symbol.upper(), limit=a.limit),
    "trades": lambda c, a: c.market.trades(a.symbol.upper(), limit=a.limit),
    "klines": lambda c, a: c.market.klines(a.symbol.upper(), a.interval, limit=a.limit),
    "price": lambda c, a: c.market.ticker_price(a.symbol.upper() if a.symbol else None),
    "ticker": lambda c, a: c.market.ticker(
        symbol=a.symbol, symbols=a.symbols, window_size=a.window_size
    ),
    "account": lambda c, a: c.account.account(),
    "balance": lambda c, a: c.account.balance(),
    "positions": _active_positions,
    "open-orders": lambda c, a: c.trade.get_open_orders(a.symbol.upper() if a.symbol else None),
    "cancel": lambda c, a: c.trade.cancel_order(a.symbol.upper(), order_id=a.order_id),
}


def _run_order(client: Futures, args: argparse.Namespace, logger) -> int:
    try:
        params = validate_all(
            symbol=args.symbol,
            side=args.side,
            order_type=args.order_type,
            quantity=args.quantity,
            price=args.price,
        )
    except ValueError as exc:
        logger.error("Validation error: %s", exc)
        return 1

    print()
    print("--- Order Request Summary " + "-" * 21)
    print(f"  Symbol   : {params['symbol']}")
    print(f"  Side     : {params['side']}")
    print(f"  Type     : {params['order_type']}")
    print(f"  Quantity : {params['quantity']}")
    if params["price"] is not None:
        print(f"  Price    : {params['price']}")
    print("-" * 47)
    print()

    response = place_order(client=client, **params)
    print(format_order_response(response))
    print("Order placed successfully.\n")
    return 0


# ── Main ───────────────────────────────────────────────────────────────────


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(os.path.join(SCRIPT_DIR, ".env"))
    logger = setup_logging()

    args = build_parser().parse_args(argv)

    api_key = os.getenv("BINANCE_API_KEY", "")
    api_secret = os.getenv("BINANCE_API_SECRET", "")
    if args.command in SIGNED_COMMANDS and not (api_key and api_secret):
        logger.error(
            "Missing API credentials. Set BINANCE_API_KEY and BINANCE_API_SECRET "
            "in a .env file or as environment variables."
        )
        return 1

    base_url = args.base_url or os.getenv("BINANCE_BASE_URL") or FUTURES_BASE_URL

    with Futures(api_key, api_secret, base_url=base_url, timeout=args.timeout) as client:
        try:
            if args.command == "order":
                return _run_order(client, args, logger)
            result = COMMANDS[args.command](client, args)
        except BinanceAPIError as exc:
            logger.error("Binance API error: %s", exc)
            return 1
        except (BinanceError, ValueError) as exc:
            logger.error("%s", exc)
            return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
