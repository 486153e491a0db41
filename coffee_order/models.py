from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Tuple, Union

from .errors import InvalidValueError

Number = Union[Decimal, int, float, str]

SEPARATOR = ", "


def to_decimal(value: Number, field_name: str) -> Decimal:
    # bool is an int subclass, but True is not a price
    if isinstance(value, bool):
        raise InvalidValueError(f"{field_name} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidValueError(f"{field_name} must be a number, got {value!r}") from exc
    if not result.is_finite():
        raise InvalidValueError(f"{field_name} must be finite, got {value!r}")
    return result


class Item:
    """A priced, described value: a BaseItem or a Modifier wrapping another Item."""

    def cost(self) -> Decimal:
        raise NotImplementedError

    def description(self) -> str:
        raise NotImplementedError

    def accept(self, operation):
        return operation.apply(self)

    def wrap(self, label: str, price_delta: Number) -> "Modifier":
        return Modifier(label, price_delta, self)

    def base(self) -> "BaseItem":
        node = self
        while isinstance(node, Modifier):
            node = node.inner
        return node

    def modifiers(self) -> Tuple["Modifier", ...]:
        chain = []
        node = self
        while isinstance(node, Modifier):
            chain.append(node)
            node = node.inner
        # innermost modifier was applied first
        return tuple(reversed(chain))


@dataclass(frozen=True)
class BaseItem(Item):
    name: str
    base_price: Decimal

    def __post_init__(self) -> None:
        price = to_decimal(self.base_price, "base_price")
        if price < 0:
            raise InvalidValueError(f"base_price must be >= 0, got {price}")
        object.__setattr__(self, "base_price", price)

    def cost(self) -> Decimal:
        return self.base_price

    def description(self) -> str:
        return self.name


@dataclass(frozen=True)
class Modifier(Item):
    label: str
    price_delta: Decimal
    inner: Item

    def __post_init__(self) -> None:
        if not isinstance(self.inner, Item):
            raise InvalidValueError(f"inner must be an Item, got {type(self.inner).__name__}")
        object.__setattr__(self, "price_delta", to_decimal(self.price_delta, "price_delta"))

    # iterative: chain depth is not bounded by the recursion limit
    def cost(self) -> Decimal:
        total = self.base().cost()
        for modifier in self.modifiers():
            total += modifier.price_delta
        return total

    def description(self) -> str:
        parts = [self.base().description()]
        parts.extend(m.label for m in self.modifiers())
        return SEPARATOR.join(parts)


class Coffee(BaseItem):
    pass


class Tea(BaseItem):
    pass


@dataclass
class Order:
    items: List[Item]
    prices: List[Decimal]
    amount: Decimal
    meta: Dict[str, str] = field(default_factory=dict)

    def subtotal(self) -> Decimal:
        return sum(self.prices, Decimal(0))

    def to_dict(self) -> Dict[str, object]:
        return {
            "items": [
                {"description": i.description(), "price": str(p)}
                for i, p in zip(self.items, self.prices)
            ],
            "amount": str(self.amount),
            "meta": self.meta,
        }
