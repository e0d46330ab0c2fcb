import hashlib
import hmac
import json
from typing import Any, Dict, List, NamedTuple, Optional
from urllib.parse import urlsplit

import pytest

from binance_rest.futures import Futures
from binance_rest.spot import Spot

KEY = "test-key"
SECRET = "test-secret"
TIMESTAMP = 1700000000000


class FakeResponse:
    def __init__(self, status_code=200, body=None, headers=None, text=None):
        self.status_code = status_code
        self.headers = dict(headers or {})
        self.text = text if text is not None else json.dumps(body if body is not None else {})
        self.content = self.text.encode("utf-8")

    def json(self):
        return json.loads(self.text)


class Call(NamedTuple):
    method: str
    url: str
    kwargs: Dict[str, Any]

    @property
    def path(self) -> str:
        return urlsplit(self.url).path

    @property
    def query(self) -> str:
        return urlsplit(self.url).query


class FakeHTTP:
    """Records requests and replays queued responses (default: 200 ``{}``)."""

    def __init__(self):
        self.calls: List[Call] = []
        self.responses: List[FakeResponse] = []
        self.error: Optional[Exception] = None
        self.closed = False

    def queue(self, status_code=200, body=None, headers=None, text=None):
        self.responses.append(FakeResponse(status_code, body, headers, text))

    def request(self, method, url, **kwargs):
        self.calls.append(Call(method, url, kwargs))
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.pop(0)
        return FakeResponse(200, {})

    def close(self):
        self.closed = True

    @property
    def last(self) -> Call:
        assert self.calls, "no request was made"
        return self.calls[-1]


def sign(query: str, secret: str = SECRET) -> str:
    return hmac.new(secret.encode(), query.encode(), hashlib.sha256).hexdigest()


def signed(query: str) -> str:
    """Expected wire query for a signed call made at ``TIMESTAMP``."""
    base = f"{query}&timestamp={TIMESTAMP}" if query else f"timestamp={TIMESTAMP}"
    return f"{base}&signature={sign(base)}"


@pytest.fixture
def http():
    return FakeHTTP()


@pytest.fixture
def fixed_timestamp(monkeypatch):
    monkeypatch.setattr("binance_rest.session.get_timestamp", lambda: TIMESTAMP)
    return TIMESTAMP


@pytest.fixture
def futures_client(http):
    return Futures(http=http)


@pytest.fixture
def futures_client_signed(http, fixed_timestamp):
    return Futures(KEY, SECRET, http=http)


@pytest.fixture
def spot_client_signed(http, fixed_timestamp):
    return Spot(KEY, SECRET, http=http)
