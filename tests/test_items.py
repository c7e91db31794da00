import pytest

from bazaarcart.currency import EUR, USD, Currency
from bazaarcart.items import (
    Drink,
    Fruit,
    Item,
    OutOfStockError,
    Seasoning,
    Snack,
    Unit,
    Vegetables,
)


def test_unit_names():
    price = Currency(1)
    items = [
        Fruit("sib", price, 1, "sib"),
        Seasoning("sos", price, 1, "sos"),
        Snack("sosis", price, 1, 100),
        Drink("ab", price, 1, True),
    ]
    assert [str(item.unit) for item in items] == ["Kg", "g", "Package", "Bottle"]


def test_item_is_abstract():
    with pytest.raises(TypeError):
        Item("x", Currency(1), 1, Unit.KG)


def test_units_per_kind():
    price = Currency(1)
    assert Fruit("sib", price, 1, "sib").unit is Unit.KG
    assert Snack("sosis", price, 1, 100).unit is Unit.PACKAGE
    assert Seasoning("sos", price, 1, "sos").unit is Unit.G
    assert Vegetables("tareh", price, 1, "tareh").unit is Unit.KG
    assert Drink("ab", price, 1, True).unit is Unit.BOTTLE


def test_price_kept_as_plain_currency():
    fruit = Fruit("sib", USD(3), 1, "sib")
    assert fruit.price.describe() == "Value: 3, Conversion Rate: 1"


def test_total_price_is_price_times_quantity():
    fruit = Fruit("mooz", EUR(2.5), 4, "mooz")
    total = fruit.total_price()
    assert total.value == pytest.approx(fruit.price.value * fruit.quantity)
    assert total.conversion_rate == fruit.price.conversion_rate


def test_whole_quantity_truncates():
    assert Fruit("sib", Currency(1), 2.7, "sib").whole_quantity() == 2


def test_stock_increment_and_decrement():
    snack = Snack("morgh", Currency(1), 1, 50)
    assert snack.stock == 0
    assert snack.increment() is snack
    assert snack.stock == 1
    snack.decrement()
    snack.decrement()
    assert snack.stock == 0


def test_reduce_stock():
    drink = Drink("ab", Currency(1), 1, True)
    for _ in range(3):
        drink.increment()
    drink.reduce_stock(2)
    assert drink.stock == 1
    with pytest.raises(OutOfStockError):
        drink.reduce_stock(2)
    assert drink.stock == 1


def test_fruit_messages():
    fruit = Fruit("sib", Currency(2, 1), 3, "sib")
    assert fruit.info() == (
        "Fruit: sib, Type: sib, Value: 2, Conversion Rate: 1\n"
        "Quantity: 3 Kg \nStock: 0\n"
    )
    assert fruit.add_unit() == "one unit added to sib\nrecent stock : 1\n"
    assert fruit.stock == 1


def test_snack_messages():
    snack = Snack("gosht", Currency(4, 1), 2, 300)
    assert snack.info() == (
        "Snack: gosht, Calories: 300, Value: 4, Conversion Rate: 1\n"
        "Quntity: 2package \nStock: 0\n"
    )
    assert snack.add_unit() == "one snack added : gosht\nrecent stock : 1\n"


def test_seasoning_messages():
    seasoning = Seasoning("sos", Currency(5, 1), 100, "sos")
    assert seasoning.info() == (
        "Name: sos\nPrice: Value: 5, Conversion Rate: 1\n"
        "Quantity: 100\nFlavor: sos\nStock: 0\n"
    )
    assert seasoning.add_unit() == "one unit added to sos\nrecent stock : 1\n"


def test_vegetables_messages():
    veg = Vegetables("tareh", Currency(6, 1), 1.5, "tareh")
    assert veg.info() == (
        "Vegetable: tareh, Color: tareh, Value: 6, Conversion Rate: 1\n"
        "Quantity: 1.5 Kg \nStock: 0\n"
    )
    assert veg.add_unit() == "one vegetable added: tareh, Stock: 1\n"


def test_drink_messages_hot_and_cold():
    cold = Drink("doogh", Currency(1, 1), 2, True)
    hot = Drink("abmive", Currency(1, 1), 2, False)
    assert "Type: Cold" in cold.info()
    assert "Type: Hot" in hot.info()
    assert cold.info().endswith("Quantity: 2 bottle \nStock: 0\n")
    assert cold.add_unit() == "One drink added: doogh, Stock: 1\n"