import json
import logging
import time
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from .config import price_precision, promo_discount, quantize
from .errors import InvalidValueError
from .models import Item, Number, Order
from .operations import Operation

logger = logging.getLogger("coffee_order.service")


def add_modifiers(item: Item, modifiers: Iterable[Tuple[str, Number]]) -> Item:
    for label, delta in modifiers:
        item = item.wrap(label, delta)
    return item


def checkout(items: List[Item], operation: Optional[Operation] = None) -> Order:
    if operation is None:
        prices = [i.cost() for i in items]
    else:
        prices = [operation.apply(i) for i in items]
        for item, price in zip(items, prices):
            if not isinstance(price, Decimal):
                raise InvalidValueError(
                    f"{type(operation).__name__} returned {type(price).__name__} "
                    f"for {item.description()!r}, expected a Decimal price"
                )
    subtotal = sum(prices, Decimal(0))
    promo = promo_discount()
    amount = quantize(subtotal * (1 - promo), price_precision())
    order = Order(items=list(items), prices=prices, amount=amount)
    order.meta["ts"] = str(int(time.time()))
    order.meta["promo"] = str(promo)
    logger.info("checkout: %d items, subtotal=%s, amount=%s", len(items), subtotal, amount)
    return order


def format_receipt(order: Order) -> str:
    payload = {
        "count": len(order.items),
        "amount": str(order.amount),
        "items": [i.description() for i in order.items],
    }
    return json.dumps(payload, ensure_ascii=False)


def print_receipt(order: Order) -> str:
    text = format_receipt(order)
    print(text)
    return text
