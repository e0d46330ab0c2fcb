"""
HTTP session shared by every endpoint group.

Owns the connection configuration and credentials, builds the query string,
signs private calls (HMAC-SHA256) and turns HTTP failures into the
exceptions in :mod:`binance_rest.errors`.  Responses are returned as parsed
JSON without further transformation.
"""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import requests

from .authentication import hmac_signature
from .errors import AUTH_ERROR_CODES, AuthenticationError, BinanceAPIError, NetworkError
from .url import build_query, clean_params

logger = logging.getLogger("binance_rest")

FUTURES_BASE_URL = "https://fapi.binance.com"
API_KEY_HEADER = "X-MBX-APIKEY"

_SIGNATURE_RE = re.compile(r"signature=[0-9a-fA-F]+")
_WEIGHT_HEADER_PREFIXES = ("x-mbx-used-weight", "x-sapi-used")


def get_timestamp() -> int:
    """Current time in milliseconds."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Credentials:
    """API key pair.  The secret signs requests and is never sent."""

    key: str = ""
    secret: str = field(default="", repr=False)

    @property
    def complete(self) -> bool:
        return bool(self.key) and bool(self.secret)


class Session:
    """
    Issues public and signed requests against one Binance base URL.

    Parameters
    ----------
    key, secret : str
        API credentials.  Only signed endpoints require both.
    base_url : str
        Scheme and host, e.g. ``https://fapi.binance.com``.
    timeout : float
        Per-request timeout in seconds, passed to the transport.
    proxies : dict, optional
        ``requests``-style proxy mapping.
    recv_window : int, optional
        Default ``recvWindow`` for signed calls; an endpoint argument wins.
    show_weight_usage, show_header : bool
        Wrap results as ``{"data": ..., "weight_usage": ..., "header": ...}``.
    http : requests.Session, optional
        Transport to use.  A fresh ``requests.Session`` by default.
    """

    def __init__(
        self,
        key: str = "",
        secret: str = "",
        base_url: str = FUTURES_BASE_URL,
        timeout: float = 10,
        proxies: Optional[Dict[str, str]] = None,
        recv_window: Optional[int] = None,
        show_weight_usage: bool = False,
        show_header: bool = False,
        http: Optional[requests.Session] = None,
    ):
        self.credentials = Credentials(key or "", secret or "")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.proxies = dict(proxies) if proxies else None
        self.recv_window = recv_window
        self.show_weight_usage = show_weight_usage
        self.show_header = show_header
        self._http = http if http is not None else requests.Session()

    # ── context-manager support ────────────────────────────────────────

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._http.close()

    # ── request primitives ─────────────────────────────────────────────

    def public_request(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        method: str = "GET",
    ) -> Any:
        """Send an unsigned request; ``None`` parameters are not sent."""
        return self._dispatch(method, path, build_query(params))

    def signed_request(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        method: str = "GET",
    ) -> Any:
        """
        Send a request signed with the session's secret.

        Raises
        ------
        AuthenticationError
            Key or secret is empty (nothing is sent), or the exchange
            rejected the key/signature.
        BinanceAPIError
            Any other non-2xx response.
        NetworkError
            Transport failure.
        """
        if not self.credentials.complete:
            raise AuthenticationError("API key and secret are required for signed endpoints")
        return self._dispatch(method, path, self.sign_query(params))

    def sign_query(
        self,
        params: Optional[Mapping[str, Any]] = None,
        timestamp: Optional[int] = None,
    ) -> str:
        """
        Return the signed query string for *params*.

        ``recvWindow`` (if any) and ``timestamp`` are appended after the
        caller's parameters and ``signature`` comes last.  The output is a
        pure function of params, timestamp and secret.
        """
        payload = clean_params(params)
        if "recvWindow" not in payload and self.recv_window is not None:
            payload["recvWindow"] = self.recv_window
        payload["timestamp"] = get_timestamp() if timestamp is None else timestamp
        query = build_query(payload)
        signature = hmac_signature(self.credentials.secret, query)
        return f"{query}&signature={signature}"

    # ── internal helpers ───────────────────────────────────────────────

    def _headers(self) -> Dict[str, str]:
        if self.credentials.key:
            return {API_KEY_HEADER: self.credentials.key}
        return {}

    def _dispatch(self, method: str, path: str, query: str) -> Any:
        url = f"{self.base_url}{path}"
        if query:
            url = f"{url}?{query}"

        logger.debug("API request  -> %s %s", method, _SIGNATURE_RE.sub("signature=***", url))

        try:
            response = self._http.request(
                method,
                url,
                headers=self._headers(),
                timeout=self.timeout,
                proxies=self.proxies,
            )
        except requests.RequestException as exc:
            logger.error("Network error on %s %s: %s", method, path, exc)
            raise NetworkError(f"{method} {path} failed: {exc}") from exc

        logger.debug(
            "API response <- %s (%.1f KB)",
            response.status_code,
            len(response.content) / 1024,
        )

        if not 200 <= response.status_code < 300:
            raise _api_error(response)

        return self._result(response)

    def _result(self, response: requests.Response) -> Any:
        try:
            body = response.json()
        except ValueError:
            body = response.text

        if not (self.show_weight_usage or self.show_header):
            return body

        result: Dict[str, Any] = {"data": body}
        if self.show_weight_usage:
            result["weight_usage"] = {
                k: v
                for k, v in response.headers.items()
                if k.lower().startswith(_WEIGHT_HEADER_PREFIXES)
            }
        if self.show_header:
            result["header"] = dict(response.headers)
        return result


def _api_error(response: requests.Response) -> BinanceAPIError:
    """Build the exception for a non-2xx *response*."""
    try:
        body = response.json()
        code = body.get("code", -1)
        msg = body.get("msg", response.text)
    except (ValueError, AttributeError):
        code = -1
        msg = response.text

    logger.debug("API error <- %s code=%s msg=%s", response.status_code, code, msg)

    if response.status_code == 401 or code in AUTH_ERROR_CODES:
        return AuthenticationError(msg, response.status_code, code, response.headers)
    return BinanceAPIError(response.status_code, code, msg, response.headers)
