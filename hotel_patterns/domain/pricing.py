"""
Стратегии расчета цены номера.
"""

import random
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional, Sequence

from .exceptions import InvalidMenuChoice
from .value_objects import DiscountApplied, Money, PriceQuote

DISCOUNT_FRACTIONS = (
    Decimal("0.10"),
    Decimal("0.20"),
    Decimal("0.30"),
    Decimal("0.40"),
    Decimal("0.50"),
)

STANDARD_CHOICE = 1
DISCOUNTED_CHOICE = 2


class PricingStrategy(ABC):
    """Интерфейс стратегии ценообразования."""

    name: str

    @abstractmethod
    def quote(self, base_price: Money) -> PriceQuote:
        pass

    def calculate_price(self, base_price: Money) -> Money:
        """Возвращает итоговую цену без подробностей расчета."""
        return self.quote(base_price).final_price


class StandardPricingStrategy(PricingStrategy):
    """Стандартная цена без изменений."""

    name = "standard"

    def quote(self, base_price: Money) -> PriceQuote:
        return PriceQuote(base_price=base_price, final_price=base_price)


class DiscountedPricingStrategy(PricingStrategy):
    """Цена со случайной скидкой.

    Скидка выбирается один раз при создании стратегии, поэтому повторные
    расчеты одним экземпляром используют одну и ту же долю.
    """

    name = "discounted"

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        fractions: Sequence[Decimal] = DISCOUNT_FRACTIONS,
    ):
        if not fractions:
            raise ValueError("Список скидок не может быть пустым")
        rng = rng or random.Random()
        self.discount_fraction = Decimal(str(rng.choice(list(fractions))))

    def quote(self, base_price: Money) -> PriceQuote:
        final_price = base_price * (1 - self.discount_fraction)
        discount_amount = base_price - final_price
        return PriceQuote(
            base_price=base_price,
            final_price=final_price,
            discount=DiscountApplied(
                fraction=self.discount_fraction, amount=discount_amount
            ),
        )


def create_pricing_strategy(
    choice: int,
    rng: Optional[random.Random] = None,
    fractions: Sequence[Decimal] = DISCOUNT_FRACTIONS,
) -> PricingStrategy:
    """Создает стратегию по пункту меню (1 - стандартная, 2 - со скидкой)."""
    if choice == STANDARD_CHOICE:
        return StandardPricingStrategy()
    if choice == DISCOUNTED_CHOICE:
        return DiscountedPricingStrategy(rng=rng, fractions=fractions)
    raise InvalidMenuChoice("pricing strategy", choice)
