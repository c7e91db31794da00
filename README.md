# bazaarcart

A small console shop. You open a bank account in US dollars, euros or
Iranian rials. You fill a cart with fruit, snacks, seasonings, vegetables and
drinks, and then pay for the cart from the account.

## Installation

```
pip install .
```

## Running the shop

```
bazaarcart
```

The command takes no options apart from `--help`. It reads answers from
standard input. It asks for:

1. your name and the name of your bank account. Only letters and spaces are
   accepted;
2. a transfer limit. A limit of zero becomes the default of 1000;
3. the account currency: `1` USD, `2` EUR or `3` IRR;
4. an initial deposit.

Numbers must not be negative. The program asks again until it gets a valid
answer.

The program then asks for items. For each item you give:

- the kind, as a number or a name in any case (`fruit`, `snack`, `seasoning`,
  `vegetable`/`vegetables`, `drink`/`drinks`);
- a price and a quantity. The price is in the account's currency;
- the variety from a sub-menu;
- the calories, for snacks only.

The program keeps asking for items while you answer `y` or `Y`. If the cart
then holds five or more items, it adds a free `gift-snack`. It shows the
cart and its total, and asks whether to pay. After a successful payment it
shows the cart again with the updated stock. At the end it prints the final
balance. If input runs out early, the command exits with status 1.

Balances are kept in dollars. EUR converts at 1.2 dollars and IRR at 0.00002
dollars. A payment fails if it is more than the transfer limit or more than
the balance.

## Using the library

```python
from bazaarcart.currency import EUR, USD
from bazaarcart.bank import BankAccount, PaymentError
from bazaarcart.items import Fruit, Drink
from bazaarcart.cart import ShoppingCart

account = BankAccount(500.0)
account.deposit(EUR(100))           # stored as 120 dollars

cart = ShoppingCart()
cart.add_item(Fruit("sib", USD(2), 3, "sib"))
cart.add_item(Drink("doogh", USD(1), 2, True))

print(cart.total())                 # 8 (1)
try:
    cart.checkout(account)
except PaymentError as error:
    print("payment failed:", error)
print(account.describe_balance())   # Current Balance: Value: 112, Conversion Rate: 1
```

### Modules

- `bazaarcart.currency`
  - `Currency(value, conversion_rate)` stores an amount and its rate to
    dollars. `+` and `-` convert both sides to dollars and give the result
    in the left operand's rate. `*` and `/` scale the amount by a number.
    The comparisons `==`, `<` and `>` look only at the raw values.
    `in_dollars()` gives the dollar amount and `describe()` gives a
    one-line text.
  - `USD`, `EUR` and `IRR` are subclasses with fixed rates.
- `bazaarcart.bank`
  - `BankAccount(limit=1000.0)` has `deposit`, `withdraw` and
    `describe_balance`.
  - A refused withdrawal raises `TransferLimitError` or
    `InsufficientFundsError`. Both are subclasses of `PaymentError`.
- `bazaarcart.items`
  - The `Unit` enum and the abstract `Item` base class.
  - The item types `Fruit`, `Snack`, `Seasoning`, `Vegetables` and `Drink`.
  - Each item has these methods:
    - `total_price()` gives the price times the quantity;
    - `whole_quantity()` gives the quantity as a whole number;
    - `add_unit()`, `increment()` and `decrement()` change the stock count;
    - `reduce_stock()` also changes the stock count, and raises
      `OutOfStockError` when the stock is too small;
    - `info()` gives a description.
- `bazaarcart.cart`
  - `ShoppingCart` has `add_item`, `items`, `len()` and iteration.
  - `describe_items()` describes the cart.
  - `total()` gives the sum in dollars.
  - `checkout(account)` withdraws the total and returns it. Payment errors
    pass through unchanged.
- `bazaarcart.cli`
  - `Console`, `parse_item_kind`, `build_item`, `run(console)` and
    `main(argv=None)` make up the interactive session.
  - `Console` accepts any iterable of lines and any text stream, so you can
    drive a session from a script.

## What it does not do

Accounts, carts and stock exist only for one session. Nothing is saved to
disk or shared between runs.

## Running the tests

```
pip install .[test]
pytest
```