"""
Hotel session: the booking engine bound to its flat-file stores
"""

import logging
from typing import List, Optional

from .config import HotelConfig
from .customers import Customer
from .engine import BookingEngine, BookingReceipt
from .reports import (
    OccupancyReport,
    RoomTypePopularity,
    occupancy_report,
    popular_room_types_report,
)
from .storage import FlatFileStore

logger = logging.getLogger(__name__)

CUSTOMERS = "customers"
ROOMS = "rooms"
BOOKINGS = "bookings"


class HotelSession:
    """
    Loads the stores on open, writes the affected stores after every
    successful mutation and writes all of them again on close

    A StorageError raised by a write does not undo the mutation: the
    in-memory state stays authoritative until the next successful flush.
    """

    def __init__(self, config: HotelConfig, store: Optional[FlatFileStore] = None):
        self.config = config
        self.store = store or FlatFileStore(config)
        self.engine: Optional[BookingEngine] = None

    @classmethod
    def open(cls, config: HotelConfig, store: Optional[FlatFileStore] = None) -> "HotelSession":
        session = cls(config, store)
        session.load()
        return session

    def load(self) -> None:
        """Rebuild the engine from the stores"""
        customers = self.store.load_customers()
        rooms = self.store.load_rooms()
        bookings = self.store.load_bookings()

        self.engine = BookingEngine.from_records(customers, rooms, bookings)
        logger.debug(
            f"Loaded {len(self.engine.directory)} customer(s), {len(self.engine.catalog)} room(s), "
            f"{len(self.engine.ledger)} booking(s)"
        )

        if not rooms:
            self.flush(ROOMS)

    def close(self) -> None:
        if self.engine is not None:
            self.flush(CUSTOMERS, ROOMS, BOOKINGS)

    def __enter__(self) -> "HotelSession":
        if self.engine is None:
            self.load()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def flush(self, *stores: str) -> None:
        """
        Rewrite the named stores from the in-memory state

        Bookings go first and customers last, so an interrupted flush leaves
        at most the points balance behind the ledger.
        """
        if BOOKINGS in stores:
            self.store.save_bookings(self.engine.booking_records())
        if ROOMS in stores:
            self.store.save_rooms(self.engine.room_records())
        if CUSTOMERS in stores:
            self.store.save_customers(self.engine.customer_records())

    def register(
        self,
        username: str,
        name: str,
        email: str,
        phone: str,
        national_id: str,
        password: str
    ) -> Customer:
        customer = self.engine.register(username, name, email, phone, national_id, password)
        self.flush(CUSTOMERS)
        return customer

    def authenticate(self, username: str, password: str) -> Customer:
        return self.engine.authenticate(username, password)

    def book(self, room_number: int, username: str) -> BookingReceipt:
        receipt = self.engine.book(room_number, username)
        self.flush(CUSTOMERS, ROOMS, BOOKINGS)
        return receipt

    def cancel(self, room_number: int, username: str) -> BookingReceipt:
        receipt = self.engine.cancel(room_number, username)
        self.flush(CUSTOMERS, ROOMS, BOOKINGS)
        return receipt

    def checkout(self, room_number: int) -> BookingReceipt:
        receipt = self.engine.checkout(room_number)
        self.flush(ROOMS, BOOKINGS)
        return receipt

    def occupancy(self) -> OccupancyReport:
        return occupancy_report(self.engine)

    def popular_room_types(self) -> List[RoomTypePopularity]:
        return popular_room_types_report(self.engine)
