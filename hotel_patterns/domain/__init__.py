"""
Доменный слой: объекты-значения, исключения и паттерны сценария бронирования.
"""

from .booking import (
    BreakfastDecorator,
    HotelBooking,
    HotelBookingSystem,
    PaymentAdapter,
    RoomDecorator,
    WifiDecorator,
    decorate,
)
from .exceptions import (
    BusinessRuleValidationException,
    DomainException,
    InsufficientFunds,
    InvalidMenuChoice,
    InvalidRoomSelection,
    PaymentFailure,
)
from .guests import BookingObserver, Client
from .pricing import (
    DiscountedPricingStrategy,
    PricingStrategy,
    StandardPricingStrategy,
    create_pricing_strategy,
)
from .staff import Chef, Doorman, HotelManager, HotelWorker, Maid, WorkerFactory
from .value_objects import DiscountApplied, Extra, Money, PriceQuote, Room

__all__ = [
    # Объекты-значения
    "Money",
    "Room",
    "Extra",
    "DiscountApplied",
    "PriceQuote",
    # Бронирование
    "HotelBookingSystem",
    "HotelBooking",
    "PaymentAdapter",
    "RoomDecorator",
    "BreakfastDecorator",
    "WifiDecorator",
    "decorate",
    # Цены
    "PricingStrategy",
    "StandardPricingStrategy",
    "DiscountedPricingStrategy",
    "create_pricing_strategy",
    # Персонал и клиенты
    "HotelWorker",
    "Doorman",
    "Maid",
    "Chef",
    "WorkerFactory",
    "HotelManager",
    "BookingObserver",
    "Client",
    # Исключения
    "DomainException",
    "BusinessRuleValidationException",
    "InvalidMenuChoice",
    "InvalidRoomSelection",
    "InsufficientFunds",
    "PaymentFailure",
]
