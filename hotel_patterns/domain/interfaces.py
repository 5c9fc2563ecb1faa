"""
Интерфейсы (порты), которые нужны доменной модели.
"""

from decimal import Decimal
from typing import Any, Dict, Protocol


class IOutput(Protocol):
    """Интерфейс вывода сообщений для гостя."""

    def write(self, message: str) -> None: ...


class IThirdPartyPaymentSystem(Protocol):
    """Интерфейс сторонней платежной системы.

    Система ничего не знает о номерах и Money: она принимает сумму и код
    валюты и возвращает словарь с ключами ``transaction_id`` и ``status``.
    Успешный платеж имеет статус ``completed``.
    """

    def make_payment(self, amount: Decimal, currency: str) -> Dict[str, Any]: ...
