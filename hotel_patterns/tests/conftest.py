"""
Общие фикстуры тестов.
"""

from decimal import Decimal
from typing import Any, Dict

import pytest

from hotel_patterns.bootstrap import bootstrap_app
from hotel_patterns.cli import HotelConsole
from hotel_patterns.config import HotelSettings
from hotel_patterns.tests.helpers import (
    FixedRandom,
    RecordingLogger,
    RecordingOutput,
    scripted_input,
)


@pytest.fixture
def output() -> RecordingOutput:
    return RecordingOutput()


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def make_app(output, logger):
    """Фабрика приложения с записывающим выводом и логгером."""

    def _make_app(settings: HotelSettings = None, rng=None, **kwargs):
        return bootstrap_app(
            settings=settings or HotelSettings(),
            output=output,
            logger=logger,
            rng=rng or FixedRandom(choice_value=Decimal("0.20")),
            **kwargs,
        )

    return _make_app


@pytest.fixture
def app(make_app) -> Dict[str, Any]:
    return make_app()


@pytest.fixture
def run_console(make_app):
    """Запускает консольный сценарий с заданными ответами."""

    def _run(*answers: str, settings: HotelSettings = None, rng=None) -> int:
        console = HotelConsole(make_app(settings, rng), scripted_input(*answers))
        return console.run()

    return _run
