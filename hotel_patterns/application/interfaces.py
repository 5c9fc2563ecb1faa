"""
Интерфейсы (порты) прикладного слоя.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Protocol

from hotel_patterns.domain.value_objects import Room


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class RoomCatalog(ABC):
    """Абстрактный каталог номеров отеля."""

    @abstractmethod
    def find_by_number(self, room_number: int) -> Optional[Room]:
        """Находит номер по его номеру."""
        raise NotImplementedError

    @abstractmethod
    def list_rooms(self) -> List[Room]:
        """Возвращает все номера в порядке каталога."""
        raise NotImplementedError
