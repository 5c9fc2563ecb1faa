import pytest

from hotel_patterns.domain.guests import Client
from hotel_patterns.domain.staff import Chef, Doorman, HotelManager, Maid, WorkerFactory
from hotel_patterns.tests.helpers import usd


class TestWorkerFactory:
    """Тесты фабрики работников."""

    @pytest.mark.parametrize(
        "worker_type, expected",
        [
            ("DOORMAN", Doorman),
            ("doorman", Doorman),
            ("DoorMan", Doorman),
            ("MAID", Maid),
            ("maid", Maid),
            ("Chef", Chef),
            ("cHEF", Chef),
        ],
    )
    def test_known_workers(self, output, worker_type, expected):
        worker = WorkerFactory(output).get_worker(worker_type)
        assert type(worker) is expected

    @pytest.mark.parametrize("worker_type", [None, "", "janitor", "chefs", " maid"])
    def test_unknown_worker_is_none(self, output, worker_type):
        assert WorkerFactory(output).get_worker(worker_type) is None

    def test_workers_describe_their_duty(self, output):
        factory = WorkerFactory(output)
        for worker_type in ("DOORMAN", "MAID", "CHEF"):
            factory.get_worker(worker_type).work()

        assert output.messages == [
            "Doorman is welcoming guests.",
            "Maid is cleaning rooms.",
            "Chef is preparing food.",
        ]


class TestHotelManager:
    def test_operations(self, output):
        manager = HotelManager(output)
        manager.manage_hotel()
        manager.welcome_guest()

        assert output.messages == [
            "Performing hotel management operations...",
            "Welcome! Enjoy your stay at our hotel.",
        ]


class TestClient:
    def test_update_greets_by_name(self, output):
        Client("Alice", output).update(101, usd("150"))

        assert output.messages == [
            "Hello Alice! Welcome to our hotel, which room you would like to book?"
        ]
