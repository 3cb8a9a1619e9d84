"""
Occupancy and popularity reports, derived read-only from the engine state
"""

from collections import Counter
from dataclasses import dataclass
from typing import List

from .engine import BookingEngine
from .exceptions import InvalidStateError


@dataclass
class OccupancyReport:
    total_rooms: int
    booked_rooms: int

    @property
    def available_rooms(self) -> int:
        return self.total_rooms - self.booked_rooms

    @property
    def occupancy_rate(self) -> float:
        """Booked share of all rooms as a percentage, two decimals"""
        return round(self.booked_rooms / self.total_rooms * 100.0, 2)


@dataclass
class RoomTypePopularity:
    type_name: str
    bookings: int


def occupancy_report(engine: BookingEngine) -> OccupancyReport:
    """
    Count booked and available rooms
    Raises InvalidStateError when the catalog is empty
    """
    total = len(engine.catalog)
    if total == 0:
        raise InvalidStateError("Cannot compute occupancy without any rooms")
    return OccupancyReport(total_rooms=total, booked_rooms=len(engine.ledger))


def popular_room_types_report(engine: BookingEngine) -> List[RoomTypePopularity]:
    """
    Count current bookings per room type, most booked first
    Ties are ordered by type name
    """
    counts = Counter()
    for booking in engine.ledger:
        if booking.room_number in engine.catalog:
            counts[engine.catalog.get(booking.room_number).room_type.value] += 1

    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [RoomTypePopularity(type_name, count) for type_name, count in ranked]
