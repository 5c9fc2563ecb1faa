"""
Консольные реализации вывода и логгера.
"""

import json
import sys

LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
}


class ConsoleOutput:
    """Выводит сообщения для гостя в stdout."""

    def write(self, message: str) -> None:
        print(message, flush=True)


class ConsoleLogger:
    """Простая реализация логгера, выводящая сообщения в консоль.

    Сообщения ниже ``level`` отбрасываются. Предупреждения и ошибки
    пишутся в stderr, остальное в stdout.
    """

    def __init__(self, level: str = "WARNING"):
        level = level.upper()
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        self.level = level

    def _enabled(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS[self.level]

    def _log(self, level: str, message: str, stream, **kwargs) -> None:
        if not self._enabled(level):
            return
        print(f"[{level}] {message}", file=stream, flush=True)
        if kwargs:
            print(
                "  Context:",
                json.dumps(kwargs, default=str, indent=2),
                file=stream,
                flush=True,
            )

    def debug(self, message: str, **kwargs) -> None:
        self._log("DEBUG", message, sys.stdout, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log("INFO", message, sys.stdout, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log("WARNING", message, sys.stderr, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log("ERROR", message, sys.stderr, **kwargs)
