"""
binance_rest: REST client for Binance USDT-M futures and spot ``sapi``.

Submodules
----------
session         HTTP session: query building, HMAC signing, error mapping.
futures         ``Futures`` client with market / trade / account groups.
spot            ``Spot`` client with loan / sub-account groups.
validators      Required/exclusive parameter checks and front-end validators.
url             Canonical query string and list encoding.
errors          Exception hierarchy.
orders          Order placement helpers for the CLI and web UI.
logging_config  Dual-output logging (console + rotating file).
"""

from binance_rest.errors import (
    AuthenticationError,
    BinanceAPIError,
    BinanceError,
    DuplicatedParametersError,
    NetworkError,
    RequiredParameterError,
)
from binance_rest.futures import Futures
from binance_rest.session import Credentials, Session
from binance_rest.spot import Spot

__version__ = "0.1.0"

__all__ = [
    "Futures",
    "Spot",
    "Session",
    "Credentials",
    "BinanceError",
    "BinanceAPIError",
    "AuthenticationError",
    "NetworkError",
    "RequiredParameterError",
    "DuplicatedParametersError",
]
