class CoffeeOrderError(Exception):
    pass


class InvalidValueError(CoffeeOrderError, ValueError):
    pass


class UnsupportedVariantError(CoffeeOrderError, TypeError):
    def __init__(self, operation: str, variant: str) -> None:
        super().__init__(f"{operation} has no rule for {variant}")
        self.operation = operation
        self.variant = variant
