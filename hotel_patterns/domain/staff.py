"""
Персонал отеля: фабрика работников и управляющий.
"""

from abc import ABC
from typing import Dict, Optional, Type

from .interfaces import IOutput


class HotelWorker(ABC):
    """Работник отеля с единственной обязанностью."""

    duty: str

    def __init__(self, output: IOutput):
        self._output = output

    def work(self) -> None:
        self._output.write(self.duty)


class Doorman(HotelWorker):
    duty = "Doorman is welcoming guests."


class Maid(HotelWorker):
    duty = "Maid is cleaning rooms."


class Chef(HotelWorker):
    duty = "Chef is preparing food."


class WorkerFactory:
    """Создает работника по названию должности без учета регистра."""

    WORKERS: Dict[str, Type[HotelWorker]] = {
        "DOORMAN": Doorman,
        "MAID": Maid,
        "CHEF": Chef,
    }

    def __init__(self, output: IOutput):
        self._output = output

    def get_worker(self, worker_type: Optional[str]) -> Optional[HotelWorker]:
        if worker_type is None:
            return None
        worker_class = self.WORKERS.get(worker_type.upper())
        if worker_class is None:
            return None
        return worker_class(self._output)


class HotelManager:
    """Управляющий отелем.

    Единственный экземпляр создается корнем композиции (``bootstrap_app``)
    и передается всем, кому он нужен.
    """

    def __init__(self, output: IOutput):
        self._output = output

    def manage_hotel(self) -> None:
        self._output.write("Performing hotel management operations...")

    def welcome_guest(self) -> None:
        self._output.write("Welcome! Enjoy your stay at our hotel.")
