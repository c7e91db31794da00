"""Shop items: fruit, snacks, seasonings, vegetables and drinks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from .currency import Currency


def _fmt(number: float) -> str:
    return f"{number:g}"


class Unit(Enum):
    """Unit an item is sold in."""

    KG = "Kg"
    G = "g"
    PACKAGE = "Package"
    BOTTLE = "Bottle"

    def __str__(self) -> str:
        return self.value


class OutOfStockError(Exception):
    """More stock was requested than is available."""


class Item(ABC):
    """A product with a price, a quantity and a stock count."""

    def __init__(self, name: str, price: Currency, quantity: float, unit: Unit) -> None:
        self.name = name
        # Keep only the amount and rate, not the currency's own presentation.
        self.price = Currency(price.value, price.conversion_rate)
        self.quantity = float(quantity)
        self.unit = unit
        self.stock = 0

    def whole_quantity(self) -> int:
        """Return the quantity truncated to a whole number."""
        return int(self.quantity)

    def total_price(self) -> Currency:
        """Return price times quantity."""
        return self.price * self.quantity

    def add_unit(self) -> str:
        """Add one unit to stock and return a message about it."""
        self.stock += 1
        return f"one unit added to {self.name}\nrecent stock : {self.stock}\n"

    @abstractmethod
    def info(self) -> str:
        """Return a multi-line description of the item."""

    def reduce_stock(self, amount: float) -> None:
        """Remove an amount from stock; raise OutOfStockError if too little."""
        if amount > self.stock:
            raise OutOfStockError("mojodi kafi nist...")
        self.stock = int(self.stock - amount)

    def increment(self) -> Item:
        """Add one to stock."""
        self.stock += 1
        return self

    def decrement(self) -> Item:
        """Remove one from stock unless it is already empty."""
        if self.stock > 0:
            self.stock -= 1
        return self


class Fruit(Item):
    """Fruit sold by the kilogram."""

    def __init__(self, name: str, price: Currency, quantity: float, kind: str) -> None:
        super().__init__(name, price, quantity, Unit.KG)
        self.kind = kind

    def add_unit(self) -> str:
        return super().add_unit()

    def info(self) -> str:
        return (
            f"Fruit: {self.name}, Type: {self.kind}, {self.price.describe()}\n"
            f"Quantity: {_fmt(self.quantity)} Kg \n"
            f"Stock: {self.stock}\n"
        )


class Snack(Item):
    """Packaged snack."""

    def __init__(self, name: str, price: Currency, quantity: float, calories: int) -> None:
        super().__init__(name, price, quantity, Unit.PACKAGE)
        self.calories = int(calories)

    def add_unit(self) -> str:
        self.stock += 1
        return f"one snack added : {self.name}\nrecent stock : {self.stock}\n"

    def info(self) -> str:
        return (
            f"Snack: {self.name}, Calories: {self.calories}, {self.price.describe()}\n"
            f"Quntity: {_fmt(self.quantity)}package \n"
            f"Stock: {self.stock}\n"
        )


class Seasoning(Item):
    """Seasoning sold by the gram."""

    def __init__(self, name: str, price: Currency, quantity: float, flavor: str) -> None:
        super().__init__(name, price, quantity, Unit.G)
        self.flavor = flavor

    def add_unit(self) -> str:
        return super().add_unit()

    def info(self) -> str:
        return (
            f"Name: {self.name}\nPrice: {self.price.describe()}\n"
            f"Quantity: {_fmt(self.quantity)}\nFlavor: {self.flavor}\n"
            f"Stock: {self.stock}\n"
        )


class Vegetables(Item):
    """Vegetables sold by the kilogram."""

    def __init__(self, name: str, price: Currency, quantity: float, color: str) -> None:
        super().__init__(name, price, quantity, Unit.KG)
        self.color = color

    def add_unit(self) -> str:
        self.stock += 1
        return f"one vegetable added: {self.name}, Stock: {self.stock}\n"

    def info(self) -> str:
        return (
            f"Vegetable: {self.name}, Color: {self.color}, {self.price.describe()}\n"
            f"Quantity: {_fmt(self.quantity)} Kg \n"
            f"Stock: {self.stock}\n"
        )


class Drink(Item):
    """Bottled drink, served hot or cold."""

    def __init__(self, name: str, price: Currency, quantity: float, is_cold: bool) -> None:
        super().__init__(name, price, quantity, Unit.BOTTLE)
        self.is_cold = bool(is_cold)

    def add_unit(self) -> str:
        self.stock += 1
        return f"One drink added: {self.name}, Stock: {self.stock}\n"

    def info(self) -> str:
        kind = "Cold" if self.is_cold else "Hot"
        return (
            f"Drink: {self.name}, Type: {kind}, {self.price.describe()}\n"
            f"Quantity: {_fmt(self.quantity)} bottle \n"
            f"Stock: {self.stock}\n"
        )