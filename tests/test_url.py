from binance_rest.url import build_query, clean_params, encode_list


def test_encode_list_uses_escaped_brackets_and_quotes():
    assert encode_list(["BTCUSDT", "ETHUSDT"]) == "%5B%22BTCUSDT%22,%22ETHUSDT%22%5D"


def test_encode_list_single_and_empty():
    assert encode_list(["BTCUSDT"]) == "%5B%22BTCUSDT%22%5D"
    assert encode_list([]) == "%5B%5D"


def test_clean_params_drops_none_and_keeps_order():
    params = {"b": 1, "a": None, "c": 0, "d": ""}
    assert list(clean_params(params).items()) == [("b", 1), ("c", 0), ("d", "")]
    assert clean_params(None) == {}


def test_build_query_insertion_order():
    assert build_query({"symbol": "BTCUSDT", "limit": 5}) == "symbol=BTCUSDT&limit=5"
    assert build_query({"limit": 5, "symbol": "BTCUSDT"}) == "limit=5&symbol=BTCUSDT"


def test_build_query_skips_none():
    assert build_query({"symbol": "BTCUSDT", "limit": None}) == "symbol=BTCUSDT"
    assert build_query({}) == ""


def test_build_query_lists_are_not_double_escaped():
    query = build_query({"symbols": ["BTCUSDT", "ETHUSDT"]})
    assert query == "symbols=%5B%22BTCUSDT%22,%22ETHUSDT%22%5D"


def test_build_query_escapes_scalars():
    assert build_query({"email": "a+b@test.com"}) == "email=a%2Bb%40test.com"
    assert build_query({"note": "x y&z"}) == "note=x%20y%26z"


def test_build_query_booleans():
    assert build_query({"reduceOnly": True, "isFreeze": False}) == "reduceOnly=true&isFreeze=false"


def test_build_query_floats_use_positional_notation():
    assert build_query({"quantity": 0.00001}) == "quantity=0.00001"
    assert build_query({"price": 1e20}) == "price=100000000000000000000"
    assert build_query({"price": 3000.5}) == "price=3000.5"


def test_build_query_decimals_use_positional_notation():
    from decimal import Decimal

    assert build_query({"quantity": Decimal("1E-7")}) == "quantity=0.0000001"
    assert build_query({"quantity": Decimal("0.010")}) == "quantity=0.010"


def test_encode_list_escapes_items():
    assert encode_list(["A&B", "C=D"]) == "%5B%22A%26B%22,%22C%3DD%22%5D"
    assert build_query({"symbols": ["A&B"]}) == "symbols=%5B%22A%26B%22%5D"
