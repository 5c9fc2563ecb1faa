import random
from decimal import Decimal

import pytest

from hotel_patterns.domain.exceptions import InvalidMenuChoice
from hotel_patterns.domain.pricing import (
    DISCOUNT_FRACTIONS,
    DiscountedPricingStrategy,
    StandardPricingStrategy,
    create_pricing_strategy,
)
from hotel_patterns.tests.helpers import FixedRandom, usd


class TestStandardPricingStrategy:
    @pytest.mark.parametrize("price", ["0", "100.00", "120", "150.5"])
    def test_returns_base_price(self, price):
        strategy = StandardPricingStrategy()
        assert strategy.calculate_price(usd(price)) == usd(price)

    def test_quote_has_no_discount(self):
        quote = StandardPricingStrategy().quote(usd("100"))
        assert quote.discount is None
        assert quote.base_price == quote.final_price


class TestDiscountedPricingStrategy:
    """Тесты стратегии со случайной скидкой."""

    @pytest.mark.parametrize(
        "fraction, expected",
        [
            ("0.10", "135.00"),
            ("0.20", "120.00"),
            ("0.30", "105.00"),
            ("0.40", "90.00"),
            ("0.50", "75.00"),
        ],
    )
    def test_applies_sampled_fraction(self, fraction, expected):
        strategy = DiscountedPricingStrategy(rng=FixedRandom(Decimal(fraction)))

        quote = strategy.quote(usd("150"))

        assert quote.final_price.amount == Decimal(expected)
        assert quote.discount.fraction == Decimal(fraction)
        assert quote.discount.amount.amount == Decimal("150") - Decimal(expected)

    @pytest.mark.parametrize(
        "base, fraction, final, discount",
        [
            ("0.01", "0.50", "0.01", "0.00"),
            ("0.05", "0.50", "0.03", "0.02"),
            ("100", "0.125", "87.50", "12.50"),
        ],
    )
    def test_final_price_is_rounded_base_times_remainder(
        self, base, fraction, final, discount
    ):
        """Итог равен base * (1 - fraction), скидка - разнице с базовой ценой."""
        strategy = DiscountedPricingStrategy(rng=FixedRandom(Decimal(fraction)))

        quote = strategy.quote(usd(base))

        assert quote.final_price.amount == Decimal(final)
        assert quote.discount.amount.amount == Decimal(discount)

    @pytest.mark.parametrize("seed", range(20))
    def test_result_is_one_of_allowed_prices(self, seed):
        strategy = DiscountedPricingStrategy(rng=random.Random(seed))
        allowed = {Decimal("100") * (1 - fraction) for fraction in DISCOUNT_FRACTIONS}

        price = strategy.calculate_price(usd("100"))

        assert price.amount in allowed

    def test_fraction_is_fixed_per_instance(self):
        strategy = DiscountedPricingStrategy(rng=random.Random(1))
        first = strategy.quote(usd("100"))
        second = strategy.quote(usd("100"))
        assert first == second
        assert strategy.calculate_price(usd("200")).amount == (
            Decimal("200") * (1 - strategy.discount_fraction)
        )

    def test_same_seed_same_fraction(self):
        first = DiscountedPricingStrategy(rng=random.Random(42))
        second = DiscountedPricingStrategy(rng=random.Random(42))
        assert first.discount_fraction == second.discount_fraction

    def test_empty_fractions_are_rejected(self):
        with pytest.raises(ValueError):
            DiscountedPricingStrategy(fractions=[])


class TestCreatePricingStrategy:
    def test_menu_choices(self):
        assert isinstance(create_pricing_strategy(1), StandardPricingStrategy)
        assert isinstance(
            create_pricing_strategy(2, rng=FixedRandom()), DiscountedPricingStrategy
        )

    @pytest.mark.parametrize("choice", [0, 3, -1])
    def test_unknown_choice(self, choice):
        with pytest.raises(InvalidMenuChoice) as exc_info:
            create_pricing_strategy(choice)
        assert exc_info.value.choice == choice

    def test_custom_fractions(self):
        strategy = create_pricing_strategy(
            2, rng=random.Random(0), fractions=[Decimal("0.25")]
        )
        assert strategy.discount_fraction == Decimal("0.25")
