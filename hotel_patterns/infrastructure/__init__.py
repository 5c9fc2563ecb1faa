"""
Инфраструктурный слой: консоль, платежная заглушка и каталог номеров.
"""

from .console import ConsoleLogger, ConsoleOutput
from .payments import PaymentSystem
from .repositories import InMemoryRoomCatalog

__all__ = [
    "ConsoleLogger",
    "ConsoleOutput",
    "PaymentSystem",
    "InMemoryRoomCatalog",
]
