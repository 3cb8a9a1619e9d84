"""
Room catalog: the fixed inventory of hotel rooms
"""

import logging
from dataclasses import dataclass
from enum import Enum
from itertools import groupby
from typing import Dict, Iterator, List, Optional, Tuple

from .exceptions import InvalidStateError, RoomNotFoundError

logger = logging.getLogger(__name__)

FLOORS = 5


class RoomType(Enum):
    """Room types, in the order they are laid out on each floor"""
    STANDARD = "Standard"
    DELUXE = "Deluxe"
    SUITE = "Suite"

    @property
    def price(self) -> int:
        """Nightly price in INR"""
        return ROOM_PRICES[self]

    @classmethod
    def from_name(cls, name: str) -> Optional["RoomType"]:
        """
        Look up a room type by its persisted name
        Returns None for names outside the catalog
        """
        for room_type in cls:
            if room_type.value == name:
                return room_type
        return None


ROOM_PRICES = {
    RoomType.STANDARD: 3000,
    RoomType.DELUXE: 5000,
    RoomType.SUITE: 8000,
}


@dataclass
class Room:
    """
    A single hotel room

    Attributes:
        number: room number, floor * 100 + position
        room_type: type of the room, fixed at creation
        booked: whether the room is currently held by a customer
    """
    number: int
    room_type: RoomType
    booked: bool = False

    @property
    def price(self) -> int:
        return self.room_type.price

    @property
    def floor(self) -> int:
        return self.number // 100


class RoomCatalog:
    """
    Holds every room of the hotel keyed by room number
    """

    def __init__(self):
        self._rooms: Dict[int, Room] = {}

    def initialize(self) -> None:
        """
        Populate the default layout: five floors, one room of each type per floor
        (101 Standard, 102 Deluxe, 103 Suite, ..., 503 Suite)
        """
        if self._rooms:
            raise InvalidStateError("Room catalog is already populated")

        for floor in range(1, FLOORS + 1):
            base = floor * 100
            for offset, room_type in enumerate(RoomType, start=1):
                self.add(Room(base + offset, room_type))

        logger.debug(f"Initialized catalog with {len(self._rooms)} rooms")

    def add(self, room: Room) -> None:
        self._rooms[room.number] = room

    def get(self, room_number: int) -> Room:
        """
        Get a room by number
        Raises RoomNotFoundError for unknown numbers
        """
        try:
            return self._rooms[room_number]
        except KeyError:
            raise RoomNotFoundError(room_number)

    def list_available(self) -> Iterator[Tuple[int, List[Room]]]:
        """
        Yield (floor, rooms) pairs for unbooked rooms

        Floors come in ascending order and rooms are sorted by number within a
        floor. Each call starts a fresh pass over the current state.
        """
        available = (room for room in self if not room.booked)
        for floor, rooms in groupby(available, key=lambda room: room.floor):
            yield floor, list(rooms)

    def booked_numbers(self) -> List[int]:
        """Numbers of all rooms flagged as booked"""
        return [room.number for room in self if room.booked]

    def __iter__(self) -> Iterator[Room]:
        for number in sorted(self._rooms):
            yield self._rooms[number]

    def __contains__(self, room_number: int) -> bool:
        return room_number in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)
