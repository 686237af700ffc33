"""Price oracle stand-in"""
from ..errors import InvalidPriceError


class StaticPriceOracle:
    """Returns whatever rate was last set. Aggregation happens elsewhere."""

    def __init__(self, initial_price: int):
        self._price = 0
        self.set_price(initial_price)

    def price(self) -> int:
        return self._price

    def set_price(self, new_price: int) -> None:
        if new_price <= 0:
            raise InvalidPriceError(f"Price must be positive, got {new_price}")
        self._price = new_price
