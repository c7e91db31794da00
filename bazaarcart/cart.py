"""A shopping cart of items."""

from __future__ import annotations

from collections.abc import Iterator

from .bank import BankAccount
from .currency import Currency
from .items import Item


class ShoppingCart:
    """An ordered collection of items that can be paid for."""

    def __init__(self) -> None:
        self._items: list[Item] = []

    def add_item(self, item: Item) -> None:
        """Append an item."""
        self._items.append(item)

    @property
    def items(self) -> tuple[Item, ...]:
        """The items in the order they were added."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def describe_items(self) -> str:
        """Return the description of every item, or a note if empty."""
        if not self._items:
            return "Cart is empty...\n"
        return "".join(item.info() for item in self._items)

    def total(self) -> Currency:
        """Return the sum of all item totals, in dollars."""
        result = Currency(0.0, 1.0)
        for item in self._items:
            result = result + item.total_price()
        return result

    def checkout(self, account: BankAccount) -> Currency:
        """Withdraw the total from the account and return it.

        Payment errors from the account propagate unchanged.
        """
        amount = self.total()
        account.withdraw(amount)
        return amount