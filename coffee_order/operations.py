import logging
from decimal import Decimal
from typing import Callable, Dict, Mapping, Union

from .config import DEFAULT_PRECISION, check_precision, quantize
from .errors import InvalidValueError, UnsupportedVariantError
from .models import BaseItem, Item, Modifier, Number, to_decimal

logger = logging.getLogger("coffee_order.operations")


def handles(variant: type) -> Callable:
    """Mark an Operation method as the rule for one Item variant."""

    def mark(func: Callable) -> Callable:
        func._handles = variant
        return func

    return mark


class Operation:
    """Computes a result from any Item without the Item knowing about it.

    Subclasses declare one ``@handles(Variant)`` method per supported variant.
    Lookup walks the item's MRO, so a rule for ``BaseItem`` also covers
    ``Coffee`` unless a more specific rule exists. Variants with no rule raise
    ``UnsupportedVariantError``.
    """

    _handlers: Dict[type, str] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        inherited = dict(cls._handlers)
        handlers = dict(inherited)
        declared = set()
        for attr, value in vars(cls).items():
            variant = getattr(value, "_handles", None)
            if variant is None:
                continue
            if variant in declared:
                raise TypeError(f"Duplicate rule for {variant.__name__} in {cls.__name__}")
            for other, name in inherited.items():
                if name == attr and other is not variant:
                    raise TypeError(
                        f"{cls.__name__}.{attr} already handles {other.__name__}; "
                        f"rename it to add a rule for {variant.__name__}"
                    )
            declared.add(variant)
            handlers[variant] = attr
        cls._handlers = handlers

    def apply(self, item: Item):
        for variant in type(item).__mro__:
            name = self._handlers.get(variant)
            if name is not None:
                logger.debug("%s: %s handled as %s", type(self).__name__, type(item).__name__, variant.__name__)
                return getattr(self, name)(item)
        raise UnsupportedVariantError(type(self).__name__, type(item).__name__)


class CostOperation(Operation):
    @handles(BaseItem)
    def base_cost(self, item: BaseItem) -> Decimal:
        return item.base_price

    @handles(Modifier)
    def modifier_cost(self, item: Modifier) -> Decimal:
        total = self.apply(item.base())
        for modifier in item.modifiers():
            total += modifier.price_delta
        return total


class DiscountOperation(Operation):
    """Multiplies a chain's cost by the retention factor of its base item's category.

    ``DiscountOperation(0.9)`` keeps 90% of any item's price;
    ``DiscountOperation({Coffee: Decimal("0.9"), Tea: Decimal("0.8")})``
    prices each category differently. Factors are looked up by concrete type.
    """

    def __init__(
        self,
        factors: Union[Number, Mapping[type, Number]],
        precision: int = DEFAULT_PRECISION,
    ) -> None:
        self.precision = check_precision(precision)
        if not isinstance(factors, Mapping):
            factors = {BaseItem: factors}
        self.factors: Dict[type, Decimal] = {}
        for variant, factor in factors.items():
            if not (isinstance(variant, type) and issubclass(variant, BaseItem)):
                raise InvalidValueError(f"discount key must be a BaseItem type, got {variant!r}")
            value = to_decimal(factor, "factor")
            if not Decimal(0) <= value <= Decimal(1):
                raise InvalidValueError(f"factor must be within [0, 1], got {value}")
            self.factors[variant] = value

    def factor_for(self, item: BaseItem) -> Decimal:
        for variant in type(item).__mro__:
            if variant in self.factors:
                return self.factors[variant]
        raise UnsupportedVariantError(type(self).__name__, type(item).__name__)

    @handles(BaseItem)
    def discount_base(self, item: BaseItem) -> Decimal:
        return quantize(item.cost() * self.factor_for(item), self.precision)

    @handles(Modifier)
    def discount_modifier(self, item: Modifier) -> Decimal:
        return quantize(item.cost() * self.factor_for(item.base()), self.precision)


class CalorieOperation(Operation):
    def __init__(self, table: Mapping[str, int]) -> None:
        self.table = dict(table)

    def _lookup(self, key: str) -> int:
        if key not in self.table:
            logger.debug("no calorie entry for %r, counting 0", key)
        return self.table.get(key, 0)

    @handles(BaseItem)
    def base_calories(self, item: BaseItem) -> int:
        return self._lookup(item.name)

    @handles(Modifier)
    def modifier_calories(self, item: Modifier) -> int:
        total = self.apply(item.base())
        for modifier in item.modifiers():
            total += self._lookup(modifier.label)
        return total


class ReceiptOperation(Operation):
    """Renders a chain as one line per component plus a total line."""

    def __init__(self, precision: int = DEFAULT_PRECISION) -> None:
        self.precision = check_precision(precision)

    @handles(BaseItem)
    def base_receipt(self, item: BaseItem) -> str:
        return self._render(item)

    @handles(Modifier)
    def modifier_receipt(self, item: Modifier) -> str:
        return self._render(item)

    def _render(self, item: Item) -> str:
        base = item.base()
        lines = [f"{base.name}  {quantize(base.base_price, self.precision)}"]
        for modifier in item.modifiers():
            lines.append(f"  {modifier.label}  {quantize(modifier.price_delta, self.precision):+}")
        lines.append(f"Total  {quantize(item.cost(), self.precision)}")
        return "\n".join(lines)
