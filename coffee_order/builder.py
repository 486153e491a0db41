from typing import List, Tuple, Type

from .models import BaseItem, Item, Number


class ItemBuilder:
    """Fluent construction of a modifier chain.

    >>> ItemBuilder("Simple coffee", 5).add("with milk", 1.5).build().description()
    'Simple coffee, with milk'
    """

    def __init__(self, name: str, price: Number, category: Type[BaseItem] = BaseItem) -> None:
        self.name = name
        self.price = price
        self.category = category
        self._modifiers: List[Tuple[str, Number]] = []

    def add(self, label: str, price_delta: Number) -> "ItemBuilder":
        self._modifiers.append((label, price_delta))
        return self

    def build(self) -> Item:
        item: Item = self.category(self.name, self.price)
        for label, delta in self._modifiers:
            item = item.wrap(label, delta)
        return item
