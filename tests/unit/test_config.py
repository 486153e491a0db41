from decimal import Decimal

import pytest

from coffee_order.config import check_precision, max_precision, price_precision, promo_discount, quantize
from coffee_order.errors import InvalidValueError


@pytest.mark.unit
def test_defaults():
    # autouse fixture: clean_config clears the env before each test
    assert price_precision() == 2
    assert promo_discount() == 0


@pytest.mark.unit
def test_promo_code(set_promo):
    # custom fixture: set_promo injects the code via monkeypatch
    assert promo_discount() == Decimal("0.10")


@pytest.mark.unit
def test_unknown_promo_code(monkeypatch):
    monkeypatch.setenv("COFFEE_PROMO_CODE", "FREECOFFEE")
    assert promo_discount() == 0


@pytest.mark.unit
def test_precision_from_env(monkeypatch):
    # monkeypatch: env only reaches callers that read the config
    monkeypatch.setenv("COFFEE_PRICE_PRECISION", "0")
    assert price_precision() == 0
    assert quantize(Decimal("4.5"), price_precision()) == Decimal("5")
    assert str(quantize(Decimal("4.4"), 0)) == "4"


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw",
    ["two", "-1", "30", str(max_precision() + 1)],
    ids=["not-int", "negative", "too-many-places", "just-over-bound"],
)
def test_bad_precision(monkeypatch, raw):
    monkeypatch.setenv("COFFEE_PRICE_PRECISION", raw)
    with pytest.raises(InvalidValueError, match="COFFEE_PRICE_PRECISION"):
        price_precision()


@pytest.mark.unit
def test_largest_precision_accepted(monkeypatch):
    monkeypatch.setenv("COFFEE_PRICE_PRECISION", str(max_precision()))
    assert price_precision() == max_precision()


@pytest.mark.unit
def test_quantize_overflow_is_invalid_value():
    # pytest.raises: 27 integer digits plus 2 places overflow the 28-digit context
    huge = Decimal("1" * 27)
    with pytest.raises(InvalidValueError, match="cannot be rounded"):
        quantize(huge, 2)


@pytest.mark.unit
@pytest.mark.parametrize("places", [-1, 2.5, True, max_precision() + 1])
def test_check_precision(places):
    with pytest.raises(InvalidValueError):
        check_precision(places)
