"""
Прикладной слой: сервисы, которые связывают паттерны в сценарий бронирования.
"""

from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from hotel_patterns.domain.booking import HotelBookingSystem, decorate
from hotel_patterns.domain.exceptions import (
    InsufficientFunds,
    InvalidMenuChoice,
    InvalidRoomSelection,
    PaymentFailure,
)
from hotel_patterns.domain.guests import BookingObserver, Client
from hotel_patterns.domain.interfaces import IOutput
from hotel_patterns.domain.pricing import PricingStrategy
from hotel_patterns.domain.staff import HotelManager, HotelWorker, WorkerFactory
from hotel_patterns.domain.value_objects import Extra, Money, PriceQuote, Room

from .interfaces import ILogger, RoomCatalog

# DTO


class BookingReceipt(BaseModel):
    """Итог успешного бронирования."""

    room_number: int
    quote: PriceQuote
    extras: List[Extra] = Field(default_factory=list)

    @property
    def charged(self) -> Money:
        return self.quote.final_price


# Сервисы приложения


class HotelBookingService:
    """Сервис приложения для бронирования номера."""

    def __init__(
        self,
        catalog: RoomCatalog,
        booking_system: HotelBookingSystem,
        manager: HotelManager,
        output: IOutput,
        logger: ILogger,
    ):
        self.catalog = catalog
        self.booking_system = booking_system
        self.manager = manager
        self._output = output
        self._logger = logger

    def get_room(self, room_number: int) -> Room:
        """Возвращает номер или сообщает о неверном выборе."""
        room = self.catalog.find_by_number(room_number)
        if room is None:
            available = [r.number for r in self.catalog.list_rooms()]
            self._logger.info(
                "Room selection rejected", room_number=room_number, available=available
            )
            raise InvalidRoomSelection(room_number, available)
        return room

    def quote(self, room_number: int, strategy: PricingStrategy) -> PriceQuote:
        """Рассчитывает цену номера выбранной стратегией."""
        room = self.get_room(room_number)
        quote = strategy.quote(room.price_per_night)
        self._logger.debug(
            "Price quoted",
            room_number=room_number,
            strategy=strategy.name,
            quote=quote.model_dump(mode="json"),
        )
        return quote

    def book(
        self,
        room_number: int,
        quote: PriceQuote,
        cash: Money,
        extras: Sequence[Optional[Extra]] = (),
    ) -> BookingReceipt:
        """Бронирует номер по рассчитанной цене, если хватает наличных."""
        room = self.get_room(room_number)
        price = quote.final_price
        if not cash.covers(price):
            self._logger.info(
                "Booking refused: insufficient cash", cash=str(cash), price=str(price)
            )
            raise InsufficientFunds(cash, price)

        chosen = [extra for extra in extras if extra is not None]
        system = decorate(self.booking_system, chosen, self._output)

        self._output.write(f"\nBooking room {room.number}...")
        try:
            system.book_room(room.number, price)
        except PaymentFailure as e:
            self._logger.error(
                "Payment failed, room was not booked",
                room_number=room.number,
                reason=e.reason,
                transaction_id=e.transaction_id,
            )
            raise

        self.manager.manage_hotel()
        self.manager.welcome_guest()
        self._logger.info(
            "Room booked",
            room_number=room.number,
            charged=str(price),
            extras=[extra.name for extra in chosen],
        )
        return BookingReceipt(room_number=room.number, quote=quote, extras=chosen)

    def book_room(
        self,
        room_number: int,
        cash: Money,
        strategy: PricingStrategy,
        extras: Sequence[Optional[Extra]] = (),
    ) -> BookingReceipt:
        """Полный сценарий: расчет цены и бронирование."""
        quote = self.quote(room_number, strategy)
        return self.book(room_number, quote, cash, extras)


class GuestNotificationService:
    """Сервис ручного уведомления клиентов по пункту меню."""

    def __init__(self, clients: Sequence[BookingObserver], logger: ILogger):
        self.clients = list(clients)
        self._logger = logger

    def notify(self, choice: int, room_number: int, amount: Money) -> BookingObserver:
        """Уведомляет клиента под номером ``choice`` (нумерация с единицы)."""
        if not 1 <= choice <= len(self.clients):
            self._logger.info("Unknown client choice", choice=choice)
            raise InvalidMenuChoice("client notification", choice)
        client = self.clients[choice - 1]
        client.update(room_number, amount)
        return client

    def menu(self) -> List[str]:
        """Строки меню выбора клиента."""
        return [
            f"Press {index} to notify {getattr(client, 'name', client)}"
            for index, client in enumerate(self.clients, start=1)
        ]


class StaffService:
    """Сервис вызова персонала на смену."""

    def __init__(self, factory: WorkerFactory, logger: ILogger):
        self._factory = factory
        self._logger = logger

    def roll_call(self, worker_types: Sequence[str]) -> List[HotelWorker]:
        """Создает работников по должностям и отправляет их работать."""
        workers = []
        for worker_type in worker_types:
            worker = self._factory.get_worker(worker_type)
            if worker is None:
                self._logger.warning("Unknown worker type", worker_type=worker_type)
                continue
            worker.work()
            workers.append(worker)
        return workers


def create_clients(names: Sequence[str], output: IOutput) -> List[Client]:
    """Создает клиентов по списку имен."""
    return [Client(name, output) for name in names]
