"""A simple bank account holding a dollar balance."""

from __future__ import annotations

from .currency import Currency


class PaymentError(Exception):
    """A withdrawal could not be made."""


class TransferLimitError(PaymentError):
    """The amount is larger than the account's transfer limit."""


class InsufficientFundsError(PaymentError):
    """The balance does not cover the amount."""


class BankAccount:
    """An account whose balance is kept in dollars."""

    def __init__(self, limit: float = 1000.0) -> None:
        self.limit = float(limit)
        self.balance = Currency(0.0, 1.0)

    def deposit(self, amount: Currency) -> None:
        """Add an amount, converted to dollars, to the balance."""
        self.balance = self.balance + Currency(amount.in_dollars(), 1.0)

    def withdraw(self, amount: Currency) -> None:
        """Take an amount from the balance.

        Raises TransferLimitError if it exceeds the transfer limit and
        InsufficientFundsError if it exceeds the balance.
        """
        converted = Currency(amount.in_dollars(), 1.0)
        if converted.value > self.limit:
            raise TransferLimitError(
                "Amount more than transfer limit!pleas try again and less"
            )
        if converted.value > self.balance.value:
            raise InsufficientFundsError("mojodi kafi nist!")
        self.balance = self.balance - converted

    def describe_balance(self) -> str:
        """Return a line describing the current balance."""
        return f"Current Balance: {self.balance.describe()}"