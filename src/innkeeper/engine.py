"""
Booking engine: the state transitions that move rooms, bookings and loyalty
points together

Every operation checks all of its preconditions before touching any
collection, so a rejected request leaves the catalog, the ledger and the
directory exactly as they were.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .rooms import Room, RoomCatalog, RoomType
from .customers import Customer, CustomerDirectory
from .ledger import BookingLedger
from .storage import BookingRecord, CustomerRecord, RoomRecord
from .exceptions import (
    NotBookedByCustomerError,
    RoomAlreadyBookedError,
    RoomNotBookedError,
)

logger = logging.getLogger(__name__)

# Share of the room price credited as loyalty points
LOYALTY_RATE = 0.10


def loyalty_points_for(room: Room) -> int:
    """Points earned by booking (or lost by cancelling) a room"""
    return int(room.price * LOYALTY_RATE)


@dataclass
class BookingReceipt:
    """
    Outcome of a successful book, cancel or checkout

    Attributes:
        room_number: the room affected
        username: the customer involved, None for a checkout with no ledger entry
        points: points credited (book) or deducted (cancel), 0 for checkout
        balance: the customer's balance afterwards, None when no customer is involved
    """
    room_number: int
    username: Optional[str]
    points: int = 0
    balance: Optional[int] = None


class BookingEngine:
    """
    Owns the room catalog, customer directory and booking ledger and performs
    every mutation on them
    """

    def __init__(
        self,
        catalog: Optional[RoomCatalog] = None,
        directory: Optional[CustomerDirectory] = None,
        ledger: Optional[BookingLedger] = None
    ):
        self.catalog = catalog if catalog is not None else RoomCatalog()
        self.directory = directory if directory is not None else CustomerDirectory()
        self.ledger = ledger if ledger is not None else BookingLedger()

    def register(
        self,
        username: str,
        name: str,
        email: str,
        phone: str,
        national_id: str,
        password: str
    ) -> Customer:
        return self.directory.register(username, name, email, phone, national_id, password)

    def authenticate(self, username: str, password: str) -> Customer:
        return self.directory.authenticate(username, password)

    def book(self, room_number: int, username: str) -> BookingReceipt:
        """
        Book an available room for a customer and credit loyalty points
        """
        room = self.catalog.get(room_number)
        self.directory.get(username)
        if room.booked:
            raise RoomAlreadyBookedError(room_number, self.ledger.occupant(room_number))

        points = loyalty_points_for(room)
        room.booked = True
        self.ledger.add(room_number, username)
        balance = self.directory.adjust_points(username, points)

        logger.debug(f"Room {room_number} booked by '{username}' (+{points} points)")
        return BookingReceipt(room_number, username, points, balance)

    def cancel(self, room_number: int, username: str) -> BookingReceipt:
        """
        Cancel a customer's own booking and deduct the loyalty points it earned

        The deduction is clamped at zero, so a customer whose balance dropped
        below the booking's credit in the meantime loses only what is left.
        """
        room = self.catalog.get(room_number)
        if self.ledger.occupant(room_number) != username:
            raise NotBookedByCustomerError(room_number, username)

        points = loyalty_points_for(room)
        self.ledger.remove(room_number)
        room.booked = False
        balance = self.directory.adjust_points(username, -points)

        logger.debug(f"Booking for room {room_number} cancelled by '{username}' (-{points} points)")
        return BookingReceipt(room_number, username, points, balance)

    def checkout(self, room_number: int) -> BookingReceipt:
        """
        Release a booked room without touching the occupant's points
        """
        room = self.catalog.get(room_number)
        if not room.booked:
            raise RoomNotBookedError(room_number)

        username = self.ledger.remove(room_number)
        room.booked = False

        if username is None:
            logger.warning(f"Room {room_number} was booked but no booking record found")
        logger.debug(f"Room {room_number} checked out")
        return BookingReceipt(room_number, username)

    def bookings_for(self, username: str) -> List[Room]:
        """Rooms currently held by a customer, by room number"""
        return [self.catalog.get(number) for number in self.ledger.rooms_for(username)]

    def check_invariants(self) -> List[str]:
        """
        Describe every inconsistency between catalog, ledger and directory
        Returns an empty list when the state is consistent
        """
        problems = []
        for room in self.catalog:
            if room.booked and room.number not in self.ledger:
                problems.append(f"Room {room.number} is booked but has no booking record")
            if not room.booked and room.number in self.ledger:
                problems.append(f"Room {room.number} has a booking record but is not booked")
        for booking in self.ledger:
            if booking.room_number not in self.catalog:
                problems.append(f"Booking references unknown room {booking.room_number}")
            if booking.username not in self.directory:
                problems.append(f"Room {booking.room_number} is held by unknown user '{booking.username}'")
        for customer in self.directory:
            if customer.points < 0:
                problems.append(f"User '{customer.username}' has negative points")
        return problems

    @classmethod
    def from_records(
        cls,
        customers: Iterable[CustomerRecord],
        rooms: Iterable[RoomRecord],
        bookings: Iterable[BookingRecord]
    ) -> "BookingEngine":
        """
        Rebuild the engine state from persisted records

        The bookings store is trusted over the booked flags of the room store:
        a booking forces its room booked, and a room flagged booked without a
        surviving booking is released. Bookings for unknown rooms or customers
        are dropped. An empty room store yields the default layout.
        """
        engine = cls()

        for record in customers:
            engine.directory.restore(Customer(*record))

        for record in rooms:
            room_type = RoomType.from_name(record.type_name)
            if room_type is None:
                logger.warning(f"Unknown room type '{record.type_name}' for room number {record.number}")
                continue
            if record.number in engine.catalog:
                logger.warning(f"Duplicate room record for room {record.number}, keeping the last one")
            engine.catalog.add(Room(record.number, room_type, record.booked))

        if not len(engine.catalog):
            engine.catalog.initialize()

        for record in bookings:
            if record.room_number not in engine.catalog:
                logger.warning(f"Room number {record.room_number} in bookings file does not exist")
                continue
            if record.username not in engine.directory:
                logger.warning(
                    f"Booking for room {record.room_number} references unknown user '{record.username}'"
                )
                continue
            if record.room_number in engine.ledger:
                logger.warning(f"Duplicate booking for room {record.room_number}, keeping the last one")

            room = engine.catalog.get(record.room_number)
            if not room.booked:
                logger.warning(f"Room {room.number} was not marked booked, trusting the bookings file")
                room.booked = True
            engine.ledger.add(record.room_number, record.username)

        for number in engine.catalog.booked_numbers():
            if number not in engine.ledger:
                logger.warning(f"Room {number} was marked booked with no booking record, releasing it")
                engine.catalog.get(number).booked = False

        return engine

    def customer_records(self) -> List[CustomerRecord]:
        return [
            CustomerRecord(c.username, c.name, c.email, c.phone, c.national_id, c.password, c.points)
            for c in self.directory
        ]

    def room_records(self) -> List[RoomRecord]:
        return [RoomRecord(room.number, room.booked, room.room_type.value) for room in self.catalog]

    def booking_records(self) -> List[BookingRecord]:
        return [BookingRecord(booking.room_number, booking.username) for booking in self.ledger]
