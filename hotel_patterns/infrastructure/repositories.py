from typing import Dict, Iterable, List, Optional

from hotel_patterns.application.interfaces import RoomCatalog
from hotel_patterns.domain.value_objects import Room


class InMemoryRoomCatalog(RoomCatalog):
    """Реализация каталога номеров в памяти."""

    def __init__(self, rooms: Iterable[Room] = ()):
        self._rooms: Dict[int, Room] = {}
        for room in rooms:
            self.add(room)

    def add(self, room: Room) -> None:
        if room.number in self._rooms:
            raise ValueError(f"Room {room.number} already exists")
        self._rooms[room.number] = room

    def find_by_number(self, room_number: int) -> Optional[Room]:
        return self._rooms.get(room_number)

    def list_rooms(self) -> List[Room]:
        return list(self._rooms.values())
