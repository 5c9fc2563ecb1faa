"""
Тестовые двойники и вспомогательные функции.
"""

from decimal import Decimal
from typing import Any, Dict, List, Tuple

from hotel_patterns.domain.value_objects import Money


class RecordingOutput:
    """Запоминает все сообщения вместо печати."""

    def __init__(self):
        self.messages: List[str] = []

    def write(self, message: str) -> None:
        self.messages.append(message)


class RecordingLogger:
    """Логгер, который складывает записи в список."""

    def __init__(self):
        self.records: List[Tuple[str, str, Dict[str, Any]]] = []

    def _record(self, level: str, message: str, **kwargs) -> None:
        self.records.append((level, message, kwargs))

    def debug(self, message: str, **kwargs) -> None:
        self._record("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._record("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._record("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._record("ERROR", message, **kwargs)

    def messages(self, level: str) -> List[str]:
        return [message for lvl, message, _ in self.records if lvl == level]


class FixedRandom:
    """Источник случайности с заранее известным результатом."""

    def __init__(self, choice_value: Any = None, random_value: float = 0.0):
        self.choice_value = choice_value
        self.random_value = random_value

    def choice(self, seq):
        return self.choice_value if self.choice_value is not None else seq[0]

    def random(self) -> float:
        return self.random_value


def usd(amount: str) -> Money:
    return Money(amount=Decimal(amount), currency="USD")


def scripted_input(*answers: str):
    """Возвращает функцию ввода, которая отдает ответы по очереди."""
    remaining = iter(answers)

    def _input(prompt: str = "") -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    return _input


