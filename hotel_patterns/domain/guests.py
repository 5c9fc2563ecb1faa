"""
Клиенты отеля, которых можно уведомить вручную.
"""

from typing import Protocol

from .interfaces import IOutput
from .value_objects import Money


class BookingObserver(Protocol):
    """Получатель уведомления о бронировании."""

    def update(self, room_number: int, amount: Money) -> None: ...


class Client:
    """Клиент, которого приветствуют по выбору в меню.

    Подписки на события бронирования нет: уведомление вызывается один раз
    из консоли.
    """

    def __init__(self, name: str, output: IOutput):
        self.name = name
        self._output = output

    def update(self, room_number: int, amount: Money) -> None:
        self._output.write(
            f"Hello {self.name}! Welcome to our hotel, which room you would like to book?"
        )
