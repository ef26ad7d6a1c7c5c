from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable, List, Sequence
import sys

from loguru import logger


class EmptyInputError(ValueError):
    """Raised when a strategy needs at least one item to work with"""
    pass


@dataclass
class Item:
    """Checkout cart item"""
    name: str
    price: Decimal

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            try:
                self.price = Decimal(str(self.price))
            except InvalidOperation:
                raise ValueError(f"Invalid price for {self.name}: {self.price!r}")
        if not self.price.is_finite():
            raise ValueError(f"Price must be a finite number: {self.name} costs {self.price}")
        if self.price < 0:
            raise ValueError(f"Price must not be negative: {self.name} costs {self.price}")


def _subtotal(items: Sequence[Item]) -> Decimal:
    return sum((item.price for item in items), Decimal('0'))


# ==================== Strategies ====================

class DiscountStrategy(ABC):
    """Common interface for every way of computing a sale's total discount"""

    @abstractmethod
    def calculate_total_discount(self, items: Sequence[Item]) -> Decimal:
        pass


class FiftyPercentDiscountStrategy(DiscountStrategy):
    """Half off on every item in the cart"""

    def calculate_total_discount(self, items: Sequence[Item]) -> Decimal:
        return _subtotal(items) / 2


class FirstItemDiscountStrategy(DiscountStrategy):
    """Full price for the cart minus half of the first item's price"""

    def calculate_total_discount(self, items: Sequence[Item]) -> Decimal:
        if not items:
            raise EmptyInputError("First item discount needs at least one item")
        return _subtotal(items) - items[0].price / 2


# ==================== Context ====================

class Sale:
    """
    Context that owns one discount strategy at a time.

    The strategy is handed in at construction and can be swapped any number
    of times afterwards; every later get_total_discount call uses whichever
    strategy is current.
    """

    def __init__(self, strategy: DiscountStrategy):
        self._strategy = strategy

    @property
    def strategy(self) -> DiscountStrategy:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: DiscountStrategy):
        self.set_strategy(strategy)

    def set_strategy(self, strategy: DiscountStrategy):
        logger.info(
            f"[Sale] Strategy switched: {type(self._strategy).__name__} "
            f"-> {type(strategy).__name__}"
        )
        self._strategy = strategy

    def get_total_discount(self, items: Iterable[Item]) -> Decimal:
        items = list(items)
        logger.debug(
            f"[Sale] Delegating {len(items)} item(s) to {type(self._strategy).__name__}"
        )
        total = self._strategy.calculate_total_discount(items)
        print(total)
        return total


if __name__ == "__main__":
    logger.remove()
    logger.add(sys.stderr, level="WARNING")

    cart_items: List[Item] = [
        Item("Headphone", Decimal('20')),
        Item("Monitor", Decimal('70')),
    ]

    summer_sale = Sale(FiftyPercentDiscountStrategy())
    summer_sale.get_total_discount(cart_items)

    print("--------")

    summer_sale.set_strategy(FirstItemDiscountStrategy())
    summer_sale.get_total_discount(cart_items)

    print("--------")

    black_friday_sale = Sale(FiftyPercentDiscountStrategy())
    black_friday_sale.get_total_discount(cart_items)
