import os
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, getcontext

from .errors import InvalidValueError

PRECISION_ENV = "COFFEE_PRICE_PRECISION"
PROMO_ENV = "COFFEE_PROMO_CODE"

DEFAULT_PRECISION = 2

PROMO_CODES = {
    "SAVE10": Decimal("0.10"),
}


def max_precision() -> int:
    # leave room for at least two integer digits in the context
    return getcontext().prec - 2


def check_precision(places: int, source: str = "precision") -> int:
    if isinstance(places, bool) or not isinstance(places, int):
        raise InvalidValueError(f"{source} must be an integer, got {places!r}")
    if not 0 <= places <= max_precision():
        raise InvalidValueError(f"{source} must be within [0, {max_precision()}], got {places}")
    return places


def price_precision() -> int:
    raw = os.environ.get(PRECISION_ENV, "")
    if not raw:
        return DEFAULT_PRECISION
    try:
        places = int(raw)
    except ValueError as exc:
        raise InvalidValueError(f"{PRECISION_ENV} must be an integer, got {raw!r}") from exc
    return check_precision(places, PRECISION_ENV)


def quantize(amount: Decimal, places: int = DEFAULT_PRECISION) -> Decimal:
    try:
        return amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise InvalidValueError(f"{amount} cannot be rounded to {places} places") from exc


def promo_discount() -> Decimal:
    code = os.environ.get(PROMO_ENV, "")
    return PROMO_CODES.get(code, Decimal(0))
