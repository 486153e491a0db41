from .builder import ItemBuilder
from .errors import CoffeeOrderError, InvalidValueError, UnsupportedVariantError
from .models import BaseItem, Coffee, Item, Modifier, Order, Tea
from .operations import (
    CalorieOperation,
    CostOperation,
    DiscountOperation,
    Operation,
    ReceiptOperation,
    handles,
)

__all__ = [
    "BaseItem",
    "CalorieOperation",
    "Coffee",
    "CoffeeOrderError",
    "CostOperation",
    "DiscountOperation",
    "InvalidValueError",
    "Item",
    "ItemBuilder",
    "Modifier",
    "Operation",
    "Order",
    "ReceiptOperation",
    "Tea",
    "UnsupportedVariantError",
    "handles",
]
