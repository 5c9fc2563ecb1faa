"""
Прикладной слой: порты и сервисы сценария бронирования.
"""

from .interfaces import ILogger, RoomCatalog
from .services import (
    BookingReceipt,
    GuestNotificationService,
    HotelBookingService,
    StaffService,
    create_clients,
)

__all__ = [
    "ILogger",
    "RoomCatalog",
    "BookingReceipt",
    "HotelBookingService",
    "GuestNotificationService",
    "StaffService",
    "create_clients",
]
