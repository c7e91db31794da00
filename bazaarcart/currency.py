"""Money values tagged with their rate against the US dollar."""

from __future__ import annotations


def _fmt(number: float) -> str:
    """Format a number the way a default-precision stream would."""
    return f"{number:g}"


class Currency:
    """An amount of money together with its conversion rate to dollars.

    Addition and subtraction convert both operands to dollars. The result
    is expressed in the rate of the left operand. Comparisons look only at
    the raw values.
    """

    __hash__ = None  # mutable and compared by value

    def __init__(self, value: float = 0.0, conversion_rate: float = 1.0) -> None:
        self.value = float(value)
        self.conversion_rate = float(conversion_rate)

    def in_dollars(self) -> float:
        """Return the amount converted to dollars."""
        return self.value * self.conversion_rate

    def _combine(self, dollars: float) -> Currency:
        return Currency(dollars / self.conversion_rate, self.conversion_rate)

    def __add__(self, other: Currency) -> Currency:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._combine(self.in_dollars() + other.in_dollars())

    def __sub__(self, other: Currency) -> Currency:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._combine(self.in_dollars() - other.in_dollars())

    def __mul__(self, factor: float) -> Currency:
        if isinstance(factor, Currency):
            return NotImplemented
        return Currency(self.value * factor, self.conversion_rate)

    def __truediv__(self, divisor: float) -> Currency:
        if isinstance(divisor, Currency):
            return NotImplemented
        return Currency(self.value / divisor, self.conversion_rate)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: Currency) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.value < other.value

    def __gt__(self, other: Currency) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.value > other.value

    def describe(self) -> str:
        """Return a one-line, human-readable description."""
        return f"Value: {_fmt(self.value)}, Conversion Rate: {_fmt(self.conversion_rate)}"

    def __str__(self) -> str:
        return f"{_fmt(self.value)} ({_fmt(self.conversion_rate)})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r}, {self.conversion_rate!r})"


class USD(Currency):
    """US dollars."""

    RATE = 1.0

    def __init__(self, value: float = 0.0) -> None:
        super().__init__(value, self.RATE)

    def describe(self) -> str:
        return f"USD: {_fmt(self.value)}"


class EUR(Currency):
    """Euros."""

    RATE = 1.2

    def __init__(self, value: float = 0.0) -> None:
        super().__init__(value, self.RATE)

    def describe(self) -> str:
        return f"EUR:{_fmt(self.value)}"


class IRR(Currency):
    """Iranian rials."""

    RATE = 0.00002

    def __init__(self, value: float = 0.0) -> None:
        super().__init__(value, self.RATE)

    def describe(self) -> str:
        return f"IRR: {_fmt(self.value)} Rials"