"""Interactive bank and shopping session on a text console."""

from __future__ import annotations

import argparse
import math
import re
import sys
from enum import Enum
from typing import IO, Iterable

from .bank import BankAccount, PaymentError
from .cart import ShoppingCart
from .currency import EUR, IRR, USD, Currency
from .items import Drink, Fruit, Item, Seasoning, Snack, Vegetables

_WORD_PATTERN = re.compile(r"\S+")

INVALID_NUMBER = "vorodi namotabar! adad mosbat vared konid.\n"
INVALID_LETTERS = "vorodi namotabar! lotfan harf vared konid.\n"
INVALID_CHOICE = "vorodi namotabar!\n"


class ItemKind(Enum):
    """Kinds of item that can be put in the cart."""

    FRUIT = 1
    SNACK = 2
    SEASONING = 3
    VEGETABLES = 4
    DRINK = 5


_KIND_NAMES = {
    "fruit": ItemKind.FRUIT,
    "snack": ItemKind.SNACK,
    "seasoning": ItemKind.SEASONING,
    "vegetables": ItemKind.VEGETABLES,
    "vegetable": ItemKind.VEGETABLES,
    "drink": ItemKind.DRINK,
    "drinks": ItemKind.DRINK,
}


def _numbered(names: Iterable[str]) -> dict[str, str]:
    table: dict[str, str] = {}
    for number, name in enumerate(names, start=1):
        table[str(number)] = name
        table[name] = name
    return table


_FRUITS = _numbered(("toot", "khiyar", "mooz", "sib", "aloocheh", "porteghal"))
_SNACKS = _numbered(("pitzayi", "gosht", "sosis", "morgh"))
_SEASONINGS = _numbered(("sos", "torshijaat", "adwijat"))
_VEGETABLES = _numbered(("jaafari", "tareh", "havij va torobcheh"))
_HOT_DRINKS = {"5", "abmive"}

_MENUS = {
    ItemKind.FRUIT: "choose fruit:\n1) toot\n2) khiyar\n3) mooz\n4) sib\n"
    "5) aloocheh\n6) porteghal\n>> ",
    ItemKind.SNACK: "choose snack type:\n1. pitzayi\n2. gosht\n3. sosis\n4. morgh\n>> ",
    ItemKind.SEASONING: "choose seasoning type:\n1. sos\n2. torshijaat\n3. adwijat\n>> ",
    ItemKind.VEGETABLES: "choose vegetable type:\n1. jaafari\n2. tareh\n"
    "3. havij va torobcheh\n>> ",
    ItemKind.DRINK: "choose drink:\n1. ab\n2. doogh\n3. noshabe\n4. delester\n5. abmive\n>> ",
}


class Console:
    """Reads whitespace-separated words and lines, writes prompts."""

    def __init__(self, lines: Iterable[str] | None = None, out: IO[str] | None = None) -> None:
        self._lines = iter(sys.stdin if lines is None else lines)
        self._out = sys.stdout if out is None else out
        self._pending = ""

    def write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _skip_whitespace(self) -> None:
        while not self._pending.strip():
            try:
                self._pending = next(self._lines)
            except StopIteration:
                self._pending = ""
                raise EOFError("input ended") from None
        self._pending = self._pending.lstrip()

    def _discard_line(self) -> None:
        self._pending = ""

    def _read_char(self, prompt: str) -> str:
        self.write(prompt)
        self._skip_whitespace()
        char, self._pending = self._pending[0], self._pending[1:]
        return char

    def read_token(self, prompt: str = "") -> str:
        """Write the prompt and return the next whitespace-separated word."""
        self.write(prompt)
        self._skip_whitespace()
        match = _WORD_PATTERN.match(self._pending)
        assert match is not None
        self._pending = self._pending[match.end():]
        return match.group()

    def read_line(self, prompt: str = "") -> str:
        """Write the prompt, skip leading whitespace and return the rest of the line."""
        self.write(prompt)
        self._skip_whitespace()
        line = self._pending.rstrip("\r\n")
        self._pending = ""
        return line

    def read_positive_float(self, prompt: str) -> float:
        """Ask until a non-negative number is given."""
        while True:
            word = self.read_token(prompt)
            try:
                value = float(word)
            except ValueError:
                value = math.nan
            if math.isfinite(value) and value >= 0:
                return value
            self.write(INVALID_NUMBER)
            self._discard_line()

    def read_letters(self, prompt: str) -> str:
        """Ask until a line made only of letters and spaces is given."""
        while True:
            line = self.read_line(prompt)
            if all(c.isalpha() or c.isspace() for c in line):
                return line
            self.write(INVALID_LETTERS)

    def read_choice(self, prompt: str, low: int, high: int) -> int:
        """Ask for a whole number between low and high inclusive."""
        self.write(prompt)
        while True:
            word = self.read_token()
            try:
                choice = int(word)
            except ValueError:
                choice = None
            if choice is not None and low <= choice <= high:
                return choice
            self.write(f"vorodi namotabar! bayad adad bein {low} ta {high} bashad.\n>> ")
            self._discard_line()


def parse_item_kind(text: str) -> ItemKind:
    """Turn a menu answer (number or name, any case) into an ItemKind."""
    answer = text.lower()
    if answer.isdigit():
        try:
            return ItemKind(int(answer))
        except ValueError:
            pass
    elif answer in _KIND_NAMES:
        return _KIND_NAMES[answer]
    raise ValueError(f"unknown item kind: {text!r}")


def build_item(
    kind: ItemKind, option: str, price: Currency, quantity: float, calories: float = 0
) -> Item:
    """Create the item chosen from a kind's sub-menu."""
    option = option.lower()
    if kind is ItemKind.FRUIT:
        name = _FRUITS.get(option, "fruit")
        return Fruit(name, price, quantity, name)
    if kind is ItemKind.SNACK:
        name = _SNACKS.get(option, "snack")
        return Snack(name, price, quantity, int(calories))
    if kind is ItemKind.SEASONING:
        name = _SEASONINGS.get(option, "seasoning")
        return Seasoning(name, price, quantity, name)
    if kind is ItemKind.VEGETABLES:
        name = _VEGETABLES.get(option, "vegetable")
        return Vegetables(name, price, quantity, name)
    return Drink(option, price, quantity, option not in _HOT_DRINKS)


def _is_yes(answer: str) -> bool:
    return answer in ("y", "Y")


def run(console: Console) -> int:
    """Run one whole session; return the exit status."""
    console.write("Welcome to Bank & Shopping System \n")
    console.read_letters("Enter your name: ")
    console.read_letters("Enter your bank account name: ")
    limit = console.read_positive_float("Enter your transfer limit: ")
    if limit <= 0:
        console.write("transfer limit namotabar! meghdar pishfarz (1000) set shod.\n")
        limit = 1000.0

    choice = console.read_choice("Choose currency:\n1. USD\n2. EUR\n3. IRR\n>> ", 1, 3)
    starting: Currency = {1: USD, 2: EUR, 3: IRR}[choice](0)
    account = BankAccount(limit)

    starting.value = console.read_positive_float("Enter initial deposit: ")
    account.deposit(starting)
    console.write("hesab ba movafaghiat sakhte shod!\n")
    console.write(account.describe_balance() + "\n")

    cart = ShoppingCart()
    add_more = "y"
    while True:
        answer = console.read_line(
            "\nChoose item to add:\n1. Fruit\n2. Snack\n3. Seasoning\n"
            "4. Vegetables\n5. Drink\n>> "
        )
        try:
            kind = parse_item_kind(answer)
        except ValueError:
            console.write(INVALID_CHOICE)
        else:
            price = console.read_positive_float("Price: ")
            quantity = console.read_positive_float("Quantity: ")
            price_currency = Currency(price, starting.conversion_rate)
            option = console.read_line(_MENUS[kind])
            calories = 0.0
            if kind is ItemKind.SNACK:
                calories = console.read_positive_float("Snack calories: ")
            item = build_item(kind, option, price_currency, quantity, calories)
            cart.add_item(item)
            add_more = console._read_char("add item dige? (y/n): ")
            item.increment()
        if not _is_yes(add_more):
            break

    if len(cart) >= 5:
        gift = Snack("gift-snack", Currency(0.0, starting.conversion_rate), 1, 0)
        cart.add_item(gift)
        console.write("gift snack ba gheymat 0 be sabad ezafe shod!\n")

    console.write("sabade shoma:\n")
    console.write(cart.describe_items())
    console.write("mablagh pardakht: " + cart.total().describe() + "\n")

    pay = console._read_char("\n aya mikhahid pardakht ra anjam dahid? (y/n): ")
    if _is_yes(pay):
        try:
            cart.checkout(account)
        except PaymentError as error:
            console.write(f"Error: {error}\n")
            console.write("pardakht namovafagh! mojodi ya had ra check konid.\n")
        else:
            for item in cart:
                item.decrement()
            console.write("pardakht movafagh bud!\n")
            console.write(" stock jadid ba'd az pardakht:\n")
            console.write(cart.describe_items())

    console.write("mojodi nahayi hesab: " + account.describe_balance() + "\n")
    console.write("mamnoon az estefade az system ma!\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="bazaarcart", description="Interactive bank account and shopping cart."
    )
    parser.parse_args(argv)
    console = Console(sys.stdin, sys.stdout)
    try:
        return run(console)
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())