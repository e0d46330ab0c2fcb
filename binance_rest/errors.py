"""
Exception types raised by the Binance REST client.

Parameter errors are raised before any request is sent.  ``BinanceAPIError``
and ``AuthenticationError`` carry the exchange's error payload verbatim;
``NetworkError`` wraps transport failures from ``requests``.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

# Exchange error codes that mean the key or signature was rejected.
AUTH_ERROR_CODES = (-1022, -2014, -2015)


class BinanceError(Exception):
    """Base class for every error raised by this package."""


class RequiredParameterError(BinanceError, ValueError):
    """A mandatory parameter was missing or empty."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"'{name}' is required")


class DuplicatedParametersError(BinanceError, ValueError):
    """Two mutually exclusive parameters were supplied together."""

    def __init__(self, *names: str):
        self.names = names
        joined = " and ".join(f"'{n}'" for n in names)
        super().__init__(f"Parameters {joined} should not be sent together")


class NetworkError(BinanceError):
    """Transport-level failure: timeout, DNS, connection reset, ..."""


class BinanceAPIError(BinanceError):
    """Raised when the Binance API returns a non-2xx response."""

    def __init__(
        self,
        status_code: Optional[int],
        code: Optional[int],
        message: str,
        headers: Optional[Mapping[str, Any]] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.headers = dict(headers or {})
        super().__init__(f"[HTTP {status_code}] Binance error {code}: {message}")


class AuthenticationError(BinanceAPIError):
    """Credentials are missing locally or were rejected by the exchange."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[int] = None,
        headers: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(status_code, code, message, headers)
        if status_code is None:
            # Detected before dispatch; keep the message free of HTTP noise.
            self.args = (message,)
