import logging

import pytest
import requests

from binance_rest.errors import AuthenticationError, BinanceAPIError, NetworkError
from binance_rest.session import API_KEY_HEADER, Credentials, Session

from conftest import KEY, SECRET, TIMESTAMP, sign, signed


@pytest.fixture
def session(http):
    return Session(KEY, SECRET, base_url="https://fapi.example.com/", http=http)


# ── public requests ────────────────────────────────────────────────────────


def test_public_request_builds_url_and_returns_body(session, http):
    http.queue(body={"serverTime": 1})
    result = session.public_request("/fapi/v1/depth", {"symbol": "BTCUSDT", "limit": None})

    assert result == {"serverTime": 1}
    assert len(http.calls) == 1
    call = http.last
    assert call.method == "GET"
    assert call.url == "https://fapi.example.com/fapi/v1/depth?symbol=BTCUSDT"
    assert call.kwargs["timeout"] == 10
    assert call.kwargs["headers"] == {API_KEY_HEADER: KEY}


def test_public_request_without_params_has_no_query(http):
    Session(http=http).public_request("/fapi/v1/ping")
    assert http.last.url == "https://fapi.binance.com/fapi/v1/ping"
    assert http.last.kwargs["headers"] == {}


def test_timeout_and_proxies_passed_to_transport(http):
    proxies = {"https": "http://proxy:3128"}
    Session(http=http, timeout=3, proxies=proxies).public_request("/fapi/v1/time")
    assert http.last.kwargs["timeout"] == 3
    assert http.last.kwargs["proxies"] == proxies


def test_non_json_body_returned_as_text(session, http):
    http.queue(text="pong")
    assert session.public_request("/fapi/v1/ping") == "pong"


# ── error mapping ──────────────────────────────────────────────────────────


def test_api_error_carries_code_and_message(session, http):
    http.queue(400, {"code": -1121, "msg": "Invalid symbol."}, headers={"x-mbx-used-weight-1m": "3"})
    with pytest.raises(BinanceAPIError) as excinfo:
        session.public_request("/fapi/v1/depth", {"symbol": "NOPE"})

    err = excinfo.value
    assert not isinstance(err, AuthenticationError)
    assert err.status_code == 400
    assert err.code == -1121
    assert err.message == "Invalid symbol."
    assert err.headers == {"x-mbx-used-weight-1m": "3"}


def test_api_error_with_non_json_body(session, http):
    http.queue(502, text="<html>Bad Gateway</html>")
    with pytest.raises(BinanceAPIError) as excinfo:
        session.public_request("/fapi/v1/ping")
    assert excinfo.value.code == -1
    assert excinfo.value.message == "<html>Bad Gateway</html>"


@pytest.mark.parametrize(
    "status, payload",
    [
        (401, {"code": -2015, "msg": "Invalid API-key, IP, or permissions for action."}),
        (400, {"code": -1022, "msg": "Signature for this request is not valid."}),
        (400, {"code": -2014, "msg": "API-key format invalid."}),
    ],
)
def test_rejected_credentials_raise_authentication_error(session, http, fixed_timestamp, status, payload):
    http.queue(status, payload)
    with pytest.raises(AuthenticationError) as excinfo:
        session.signed_request("/fapi/v2/account")
    assert excinfo.value.code == payload["code"]
    assert excinfo.value.status_code == status


def test_transport_failure_raises_network_error(session, http):
    http.error = requests.ConnectionError("connection reset")
    with pytest.raises(NetworkError) as excinfo:
        session.public_request("/fapi/v1/ping")
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_timeout_raises_network_error(session, http):
    http.error = requests.Timeout("read timed out")
    with pytest.raises(NetworkError):
        session.public_request("/fapi/v1/ping")


# ── signed requests ────────────────────────────────────────────────────────


@pytest.mark.parametrize("key, secret", [("", ""), (KEY, ""), ("", SECRET)])
def test_signed_request_requires_credentials(http, key, secret):
    with pytest.raises(AuthenticationError):
        Session(key, secret, http=http).signed_request("/fapi/v2/account")
    assert http.calls == []


def test_signed_request_appends_timestamp_and_signature(session, http, fixed_timestamp):
    session.signed_request("/fapi/v1/order", {"symbol": "BTCUSDT", "side": "BUY"}, method="POST")

    call = http.last
    assert call.method == "POST"
    assert call.path == "/fapi/v1/order"
    assert call.query == signed("symbol=BTCUSDT&side=BUY")
    assert call.kwargs["headers"] == {API_KEY_HEADER: KEY}


def test_signature_covers_exactly_the_transmitted_query(session, http, fixed_timestamp):
    session.signed_request("/fapi/v1/openOrders", {"symbol": "ETHUSDT", "recvWindow": None})
    query, _, signature = http.last.query.rpartition("&signature=")
    assert query == f"symbol=ETHUSDT&timestamp={TIMESTAMP}"
    assert signature == sign(query)


def test_sign_query_is_deterministic(session):
    params = {"symbol": "BTCUSDT", "symbols": ["A", "B"], "limit": 5}
    first = session.sign_query(params, timestamp=TIMESTAMP)
    assert first == session.sign_query(dict(params), timestamp=TIMESTAMP)
    assert first != session.sign_query(params, timestamp=TIMESTAMP + 1)


def test_sign_query_does_not_mutate_params(session):
    params = {"symbol": "BTCUSDT"}
    session.sign_query(params, timestamp=TIMESTAMP)
    assert params == {"symbol": "BTCUSDT"}


def test_session_recv_window_default(http, fixed_timestamp):
    session = Session(KEY, SECRET, http=http, recv_window=5000)
    session.signed_request("/fapi/v2/balance")
    assert http.last.query == signed("recvWindow=5000")


def test_endpoint_recv_window_wins(http, fixed_timestamp):
    session = Session(KEY, SECRET, http=http, recv_window=5000)
    session.signed_request("/fapi/v2/balance", {"recvWindow": 10000})
    assert http.last.query == signed("recvWindow=10000")


# ── result wrapping ────────────────────────────────────────────────────────


def test_show_weight_usage_and_header(http):
    headers = {
        "Content-Type": "application/json",
        "X-MBX-USED-WEIGHT-1M": "7",
        "x-sapi-used-ip-weight-1m": "1",
    }
    http.queue(body={"ok": True}, headers=headers)
    session = Session(http=http, show_weight_usage=True, show_header=True)

    result = session.public_request("/fapi/v1/ping")
    assert result["data"] == {"ok": True}
    assert result["weight_usage"] == {"X-MBX-USED-WEIGHT-1M": "7", "x-sapi-used-ip-weight-1m": "1"}
    assert result["header"] == headers


def test_show_weight_usage_only(http):
    http.queue(body=[], headers={"x-mbx-used-weight": "1"})
    result = Session(http=http, show_weight_usage=True).public_request("/fapi/v1/ping")
    assert result == {"data": [], "weight_usage": {"x-mbx-used-weight": "1"}}


# ── misc ───────────────────────────────────────────────────────────────────


def test_credentials_are_immutable_and_hide_secret():
    creds = Credentials(KEY, SECRET)
    assert SECRET not in repr(creds)
    with pytest.raises(AttributeError):
        creds.key = "other"


def test_signature_is_not_logged(session, http, fixed_timestamp, caplog):
    with caplog.at_level(logging.DEBUG, logger="binance_rest"):
        session.signed_request("/fapi/v2/account")
    text = caplog.text
    assert "signature=***" in text
    assert sign(f"timestamp={TIMESTAMP}") not in text
    assert SECRET not in text


def test_context_manager_closes_transport(http):
    with Session(http=http):
        pass
    assert http.closed
