"""
Бронирование номера: адаптер платежной системы и декораторы услуг.

``HotelBookingSystem`` задает возможность "забронировать номер". Ее реализуют
``HotelBooking`` (учет в системе отеля), ``PaymentAdapter`` (оплата через
стороннюю систему и последующий учет) и декораторы, которые оборачивают любую
реализацию и добавляют услуги после бронирования.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional, Type

from .exceptions import PaymentFailure
from .interfaces import IOutput, IThirdPartyPaymentSystem
from .value_objects import Extra, Money

PAYMENT_COMPLETED = "completed"


class HotelBookingSystem(ABC):
    """Возможность забронировать номер."""

    @abstractmethod
    def book_room(self, room_number: int, amount: Money) -> None:
        raise NotImplementedError


class HotelBooking(HotelBookingSystem):
    """Учет бронирования во внутренней системе отеля."""

    def __init__(self, output: IOutput):
        self._output = output

    def book_room(self, room_number: int, amount: Money) -> None:
        self._output.write(f"Room {room_number} booked in the hotel's system for {amount}")


class PaymentAdapter(HotelBookingSystem):
    """Адаптер сторонней платежной системы к интерфейсу бронирования.

    Сначала проводит платеж, затем передает бронирование в ``HotelBooking``.
    Если платеж не прошел, номер не бронируется.
    """

    def __init__(
        self,
        payment_system: IThirdPartyPaymentSystem,
        hotel_booking: HotelBooking,
    ):
        self._payment_system = payment_system
        self._hotel_booking = hotel_booking

    def book_room(self, room_number: int, amount: Money) -> None:
        result = self._payment_system.make_payment(amount.amount, amount.currency)
        status = result.get("status")
        if status != PAYMENT_COMPLETED:
            raise PaymentFailure(
                amount,
                reason=result.get("reason") or f"status '{status}'",
                transaction_id=result.get("transaction_id"),
            )
        self._hotel_booking.book_room(room_number, amount)


class RoomDecorator(HotelBookingSystem):
    """Базовый декоратор: бронирует через обертку, затем добавляет услугу."""

    extra: Extra

    def __init__(self, wrapped: HotelBookingSystem, output: IOutput):
        self._wrapped = wrapped
        self._output = output

    @property
    def wrapped(self) -> HotelBookingSystem:
        return self._wrapped

    def book_room(self, room_number: int, amount: Money) -> None:
        self._wrapped.book_room(room_number, amount)
        self.add_extras()

    @abstractmethod
    def add_extras(self) -> None:
        raise NotImplementedError


class BreakfastDecorator(RoomDecorator):
    extra = Extra.BREAKFAST

    def add_extras(self) -> None:
        self._output.write("Added breakfast to the room.")


class WifiDecorator(RoomDecorator):
    extra = Extra.WIFI

    def add_extras(self) -> None:
        self._output.write("Added Wi-Fi to the room.")


DECORATORS: Dict[Extra, Type[RoomDecorator]] = {
    Extra.BREAKFAST: BreakfastDecorator,
    Extra.WIFI: WifiDecorator,
}


def decorate(
    system: HotelBookingSystem,
    extras: Iterable[Optional[Extra]],
    output: IOutput,
) -> HotelBookingSystem:
    """Оборачивает систему декораторами; первая услуга оказывается внутри."""
    for extra in extras:
        if extra is None:
            continue
        system = DECORATORS[extra](system, output)
    return system
