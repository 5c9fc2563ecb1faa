import random
from typing import Any, Dict, Optional

from hotel_patterns.application.interfaces import ILogger
from hotel_patterns.application.services import (
    GuestNotificationService,
    HotelBookingService,
    StaffService,
    create_clients,
)
from hotel_patterns.config import HotelSettings
from hotel_patterns.domain.booking import HotelBooking, PaymentAdapter
from hotel_patterns.domain.interfaces import IOutput, IThirdPartyPaymentSystem
from hotel_patterns.domain.staff import HotelManager, WorkerFactory
from hotel_patterns.domain.value_objects import Money, Room
from hotel_patterns.infrastructure.console import ConsoleLogger, ConsoleOutput
from hotel_patterns.infrastructure.payments import PaymentSystem
from hotel_patterns.infrastructure.repositories import InMemoryRoomCatalog


def bootstrap_app(
    settings: Optional[HotelSettings] = None,
    output: Optional[IOutput] = None,
    logger: Optional[ILogger] = None,
    rng: Optional[random.Random] = None,
    payment_system: Optional[IThirdPartyPaymentSystem] = None,
) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or HotelSettings()
    output = output or ConsoleOutput()
    logger = logger or ConsoleLogger(settings.log_level)
    rng = rng or random.Random(settings.random_seed)

    # 1. Каталог номеров из настроек
    catalog = InMemoryRoomCatalog(
        Room(
            number=room.number,
            price_per_night=Money(amount=room.price, currency=settings.currency),
        )
        for room in settings.rooms
    )

    # 2. Адаптер сторонней платежной системы
    payment_system = payment_system or PaymentSystem(
        output, success_rate=settings.payment_success_rate, rng=rng
    )
    booking_system = PaymentAdapter(payment_system, HotelBooking(output))

    # 3. Единственный управляющий на весь запуск
    hotel_manager = HotelManager(output)

    booking_service = HotelBookingService(
        catalog=catalog,
        booking_system=booking_system,
        manager=hotel_manager,
        output=output,
        logger=logger,
    )
    guest_service = GuestNotificationService(
        create_clients(settings.client_names, output), logger
    )
    staff_service = StaffService(WorkerFactory(output), logger)

    logger.debug("Application bootstrapped", settings=settings.model_dump(mode="json"))

    return {
        "settings": settings,
        "output": output,
        "logger": logger,
        "rng": rng,
        "room_catalog": catalog,
        "payment_system": payment_system,
        "booking_system": booking_system,
        "hotel_manager": hotel_manager,
        "booking_service": booking_service,
        "guest_service": guest_service,
        "staff_service": staff_service,
    }
