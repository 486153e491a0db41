from dataclasses import dataclass
from decimal import Decimal
from typing import List, Tuple

from coffee_order.models import BaseItem, Item
from coffee_order.service import add_modifiers


@dataclass(frozen=True)
class Defaults:
    name: str = "Simple coffee"
    base_price: Decimal = Decimal("5")


MODIFIERS: List[Tuple[str, Decimal]] = [
    ("with milk", Decimal("1.5")),
    ("with sugar", Decimal("0.5")),
    ("with cream", Decimal("1.0")),
]


def make_base(name: str = Defaults.name, price=Defaults.base_price, category=BaseItem) -> BaseItem:
    return category(name, price)


def make_chain(n: int = len(MODIFIERS), base: Item = None) -> Item:
    if base is None:
        base = make_base()
    return add_modifiers(base, MODIFIERS[:n])


def make_order_items(n: int = 2) -> List[Item]:
    return [make_chain(i % (len(MODIFIERS) + 1)) for i in range(n)]
