"""
Консольный сценарий бронирования номера.
"""

import argparse
import sys
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from hotel_patterns.bootstrap import bootstrap_app
from hotel_patterns.config import load_settings
from hotel_patterns.domain.exceptions import (
    InsufficientFunds,
    InvalidMenuChoice,
    InvalidRoomSelection,
    PaymentFailure,
)
from hotel_patterns.domain.pricing import StandardPricingStrategy, create_pricing_strategy
from hotel_patterns.domain.value_objects import Extra, Money

EXIT_OK = 0
EXIT_INVALID_CASH = 1
EXIT_INVALID_ROOM = 2
EXIT_INSUFFICIENT_FUNDS = 3
EXIT_PAYMENT_FAILED = 4
EXIT_BAD_SETTINGS = 5


def parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


class HotelConsole:
    """Интерактивный сценарий: один запуск - одно бронирование."""

    def __init__(
        self,
        app: Dict[str, Any],
        input_func: Optional[Callable[[str], str]] = None,
    ):
        self._app = app
        self._input = input_func or input
        self._output = app["output"]
        self._settings = app["settings"]

    def _read(self, prompt: str = "") -> str:
        try:
            return self._input(prompt)
        except EOFError:
            return ""

    def _write(self, message: str) -> None:
        self._output.write(message)

    def notify_client(self) -> None:
        guest_service = self._app["guest_service"]
        self._write("Notify Clients about Booking:")
        for line in guest_service.menu():
            self._write(line)

        # Уведомление содержит первый номер каталога и его цену
        first_room = self._app["room_catalog"].list_rooms()[0]
        choice = parse_int(self._read())
        try:
            guest_service.notify(
                choice if choice is not None else 0,
                first_room.number,
                first_room.price_per_night,
            )
        except InvalidMenuChoice:
            self._write("Invalid choice")

    def read_cash(self) -> Optional[Money]:
        text = self._read("Enter the amount of cash you have: $")
        try:
            return Money(amount=Decimal(text.strip()), currency=self._settings.currency)
        except (InvalidOperation, ValidationError):
            return None

    def show_rooms(self) -> None:
        self._write("\nAvailable Rooms:")
        for room in self._app["room_catalog"].list_rooms():
            self._write(f"{room.number}: {room.price_per_night} per night")

    def choose_strategy(self):
        self._write("\nSelect a pricing strategy:")
        self._write("1. Standard Pricing")
        self._write("2. Discounted Pricing")
        choice = parse_int(self._read())
        try:
            return create_pricing_strategy(
                choice if choice is not None else 0,
                rng=self._app["rng"],
                fractions=self._settings.discount_fractions,
            )
        except InvalidMenuChoice:
            self._write("Invalid strategy choice. Using standard pricing.")
            return StandardPricingStrategy()

    def choose_extras(self) -> List[Extra]:
        text = self._read(
            "Do you want to add extras? (B for Breakfast, W for Wi-Fi, N for None): "
        )
        extra = Extra.from_choice(text)
        return [extra] if extra is not None else []

    def run(self) -> int:
        """Проводит сценарий и возвращает код завершения процесса."""
        booking_service = self._app["booking_service"]

        self._app["staff_service"].roll_call(self._settings.staff)
        self.notify_client()

        cash = self.read_cash()
        if cash is None:
            self._write("Invalid cash amount.")
            return EXIT_INVALID_CASH

        self.show_rooms()
        room_number = parse_int(self._read("\nEnter the room number you want to book: "))
        try:
            room = booking_service.get_room(room_number)
        except InvalidRoomSelection:
            self._write("Invalid room number. Please select from the available rooms.")
            return EXIT_INVALID_ROOM

        strategy = self.choose_strategy()
        extras = self.choose_extras()

        quote = booking_service.quote(room.number, strategy)
        if quote.discount is not None:
            self._write(
                f"Applied {quote.discount.percent}% discount: -{quote.discount.amount}"
            )

        try:
            booking_service.book(room.number, quote, cash, extras)
        except InsufficientFunds:
            self._write("Insufficient cash. Cannot book the room.")
            return EXIT_INSUFFICIENT_FUNDS
        except PaymentFailure as e:
            self._write(f"Payment failed: {e.reason}. The room was not booked.")
            return EXIT_PAYMENT_FAILED
        return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hotel-patterns",
        description="Interactive hotel booking built from classic design patterns.",
    )
    parser.add_argument("--config", help="path to a JSON settings file")
    parser.add_argument("--seed", type=int, help="seed for the discount random source")
    parser.add_argument(
        "--verbose", action="store_true", help="print debug log messages"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(args.config)
    except (OSError, ValidationError) as e:
        print(f"Cannot load settings: {e}", file=sys.stderr)
        return EXIT_BAD_SETTINGS

    updates: Dict[str, Any] = {}
    if args.seed is not None:
        updates["random_seed"] = args.seed
    if args.verbose:
        updates["log_level"] = "DEBUG"
    if updates:
        settings = settings.model_copy(update=updates)

    return HotelConsole(bootstrap_app(settings)).run()
