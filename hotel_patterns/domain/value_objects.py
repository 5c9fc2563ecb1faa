"""
Объекты-значения сценария бронирования.
"""

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field

CENT = Decimal("0.01")

Number = Union[int, Decimal]


class Money(BaseModel):
    """Денежная сумма с валютой."""

    amount: Decimal = Field(..., ge=0, description="Сумма денег")
    currency: str = Field(
        default="USD", max_length=3, description="Код валюты (ISO 4217)"
    )

    def _check_currency(self, other: "Money") -> None:
        if not isinstance(other, Money):
            raise TypeError("Операция допустима только между объектами Money")
        if self.currency != other.currency:
            raise ValueError("Нельзя смешивать разные валюты")

    def __sub__(self, other: "Money") -> "Money":
        self._check_currency(other)
        if self.amount < other.amount:
            raise ValueError("Результат не может быть отрицательным")
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def __mul__(self, multiplier: Number) -> "Money":
        if isinstance(multiplier, bool) or not isinstance(multiplier, (int, Decimal)):
            raise TypeError("Множитель должен быть int или Decimal")
        if multiplier < 0:
            raise ValueError("Множитель не может быть отрицательным")
        amount = (self.amount * multiplier).quantize(CENT, rounding=ROUND_HALF_UP)
        return Money(amount=amount, currency=self.currency)

    def covers(self, price: "Money") -> bool:
        """Проверяет, хватает ли суммы для оплаты цены."""
        self._check_currency(price)
        return self.amount >= price.amount

    def __str__(self) -> str:
        if self.currency == "USD":
            return f"${self.amount:.2f}"
        return f"{self.amount:.2f} {self.currency}"


class Room(BaseModel):
    """Номер в каталоге отеля."""

    number: int = Field(..., gt=0)
    price_per_night: Money


class Extra(str, Enum):
    """Дополнительные услуги к номеру."""

    BREAKFAST = "B"
    WIFI = "W"

    @classmethod
    def from_choice(cls, choice: Optional[str]) -> Optional["Extra"]:
        """Преобразует ввод пользователя в услугу; всё прочее означает отказ."""
        if choice is None:
            return None
        normalized = choice.strip().upper()
        for extra in cls:
            if extra.value == normalized:
                return extra
        return None


class DiscountApplied(BaseModel):
    """Примененная скидка."""

    fraction: Decimal = Field(..., gt=0, lt=1)
    amount: Money

    @property
    def percent(self) -> str:
        """Процент скидки без лишних нулей: "20", "12.5"."""
        return format((self.fraction * 100).normalize(), "f")


class PriceQuote(BaseModel):
    """Результат расчета цены стратегией."""

    base_price: Money
    final_price: Money
    discount: Optional[DiscountApplied] = None
