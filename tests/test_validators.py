from decimal import Decimal

import pytest

from binance_rest.errors import DuplicatedParametersError, RequiredParameterError
from binance_rest.validators import (
    require_one_of,
    require_param,
    validate_all,
    validate_order_type,
    validate_price,
    validate_quantity,
    validate_side,
    validate_symbol,
)


@pytest.mark.parametrize("value", [None, "", [], (), {}])
def test_require_param_rejects_empty(value):
    with pytest.raises(RequiredParameterError) as excinfo:
        require_param("symbol", value)
    assert excinfo.value.name == "symbol"
    assert "symbol" in str(excinfo.value)


@pytest.mark.parametrize("value", ["BTCUSDT", 0, False, ["A"]])
def test_require_param_accepts_present(value):
    require_param("x", value)


def test_required_parameter_error_is_value_error():
    with pytest.raises(ValueError):
        require_param("email", "")


def test_require_one_of_duplicated():
    with pytest.raises(DuplicatedParametersError) as excinfo:
        require_one_of("symbol", "BTCUSDT", "symbols", ["ETHUSDT"])
    assert excinfo.value.names == ("symbol", "symbols")
    assert "'symbol' and 'symbols'" in str(excinfo.value)


def test_require_one_of_either_alone_is_fine():
    require_one_of("symbol", "BTCUSDT", "symbols", None)
    require_one_of("symbol", None, "symbols", ["BTCUSDT"])
    require_one_of("symbol", None, "symbols", None)


def test_require_one_of_required():
    with pytest.raises(RequiredParameterError) as excinfo:
        require_one_of("orderId", None, "origClientOrderId", None, required=True)
    assert excinfo.value.name == "orderId or origClientOrderId"


# ── front-end validators ───────────────────────────────────────────────────


def test_validate_symbol_normalises():
    assert validate_symbol(" btcusdt ") == "BTCUSDT"


@pytest.mark.parametrize("symbol", ["", "B", "BTC-USDT", "X" * 21])
def test_validate_symbol_rejects(symbol):
    with pytest.raises(ValueError):
        validate_symbol(symbol)


def test_validate_side_and_type():
    assert validate_side("sell") == "SELL"
    assert validate_order_type("limit") == "LIMIT"
    with pytest.raises(ValueError):
        validate_side("HOLD")
    with pytest.raises(ValueError):
        validate_order_type("STOP")


@pytest.mark.parametrize("quantity", ["abc", "0", "-1", "nan"])
def test_validate_quantity_rejects(quantity):
    with pytest.raises(ValueError):
        validate_quantity(quantity)


def test_validate_price_rules():
    assert validate_price("123", "MARKET") is None
    assert validate_price("50000.5", "LIMIT") == Decimal("50000.5")
    with pytest.raises(ValueError, match="required"):
        validate_price(None, "LIMIT")


def test_validate_all():
    params = validate_all("ethusdt", "buy", "limit", "0.1", "3000")
    assert params == {
        "symbol": "ETHUSDT",
        "side": "BUY",
        "order_type": "LIMIT",
        "quantity": Decimal("0.1"),
        "price": Decimal("3000"),
    }


@pytest.mark.parametrize("value_a, value_b", [("", ["BTCUSDT"]), ("BTCUSDT", []), ("", "")])
def test_require_one_of_empty_values_count_as_supplied(value_a, value_b):
    with pytest.raises(DuplicatedParametersError):
        require_one_of("symbol", value_a, "symbols", value_b)


def test_require_one_of_required_ignores_empty():
    with pytest.raises(RequiredParameterError):
        require_one_of("orderId", "", "origClientOrderId", None, required=True)
