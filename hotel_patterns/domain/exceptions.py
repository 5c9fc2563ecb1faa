"""
Доменные исключения сценария бронирования.
"""

from typing import Any, Iterable, Optional


class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass


class InvalidMenuChoice(DomainException):
    """Выбран несуществующий пункт меню."""

    def __init__(self, menu: str, choice: Any):
        self.menu = menu
        self.choice = choice
        super().__init__(f"Invalid choice {choice!r} for menu '{menu}'")


class InvalidRoomSelection(DomainException):
    """Номер комнаты отсутствует в каталоге."""

    def __init__(self, room_number: Any, available: Iterable[int] = ()):
        self.room_number = room_number
        self.available = list(available)
        super().__init__(
            f"Room {room_number} is not available, choose one of {self.available}"
        )


class InsufficientFunds(BusinessRuleValidationException):
    """Наличных не хватает для оплаты номера."""

    def __init__(self, cash: Any, price: Any):
        self.cash = cash
        self.price = price
        super().__init__(f"Cash {cash} does not cover price {price}")


class PaymentFailure(DomainException):
    """Сторонняя платежная система отклонила платеж."""

    def __init__(
        self,
        amount: Any,
        reason: str = "declined",
        transaction_id: Optional[str] = None,
    ):
        self.amount = amount
        self.reason = reason
        self.transaction_id = transaction_id
        super().__init__(f"Payment of {amount} failed: {reason}")
