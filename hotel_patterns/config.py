"""
Настройки приложения.

По умолчанию используется каталог из трех номеров, пять вариантов скидки и
два клиента. Настройки можно переопределить JSON-файлом той же структуры.
"""

from decimal import Decimal
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from hotel_patterns.domain.pricing import DISCOUNT_FRACTIONS
from hotel_patterns.infrastructure.console import LEVELS


class RoomSettings(BaseModel):
    """Номер в каталоге."""

    number: int = Field(..., gt=0)
    price: Decimal = Field(..., ge=0, description="Цена за ночь")


def default_rooms() -> List[RoomSettings]:
    return [
        RoomSettings(number=101, price=Decimal("100.00")),
        RoomSettings(number=102, price=Decimal("120.00")),
        RoomSettings(number=103, price=Decimal("150.00")),
    ]


class HotelSettings(BaseModel):
    """Настройки отеля."""

    currency: str = Field(default="USD", max_length=3)
    rooms: List[RoomSettings] = Field(default_factory=default_rooms, min_length=1)
    discount_fractions: List[Decimal] = Field(
        default_factory=lambda: list(DISCOUNT_FRACTIONS), min_length=1
    )
    client_names: List[str] = Field(
        default_factory=lambda: ["John", "Alice"], min_length=1
    )
    staff: List[str] = Field(default_factory=lambda: ["DOORMAN", "MAID", "CHEF"])
    payment_success_rate: float = Field(default=1.0, ge=0, le=1)
    log_level: str = "WARNING"
    random_seed: Optional[int] = None

    @field_validator("discount_fractions")
    @classmethod
    def fractions_between_zero_and_one(cls, v):
        for fraction in v:
            if not 0 < fraction < 1:
                raise ValueError("Скидка должна быть строго между 0 и 1")
        return v

    @field_validator("rooms")
    @classmethod
    def unique_room_numbers(cls, v):
        numbers = [room.number for room in v]
        if len(numbers) != len(set(numbers)):
            raise ValueError("Номера комнат не должны повторяться")
        return v

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v):
        if v.upper() not in LEVELS:
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return v.upper()


def load_settings(path: Optional[Union[str, Path]] = None) -> HotelSettings:
    """Загружает настройки из JSON-файла или возвращает настройки по умолчанию."""
    if path is None:
        return HotelSettings()

    with open(Path(path), "r", encoding="utf-8") as f:
        raw_data = f.read()

    if not raw_data.strip():
        return HotelSettings()

    return HotelSettings.model_validate_json(raw_data)
