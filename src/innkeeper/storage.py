"""
Flat-file persistence for customers, rooms and bookings

Each store is a text file with one comma-delimited record per line:

    customers.txt   username,name,email,phone,nationalId,password,points
    rooms.txt       number,0|1,typeName
    bookings.txt    roomNumber,username

Stores are always rewritten in full.
"""

import os
import tempfile
import logging
from pathlib import Path
from typing import Callable, Iterable, List, NamedTuple, TypeVar

from .config import HotelConfig
from .rooms import RoomType
from .exceptions import MalformedRecordError, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CustomerRecord(NamedTuple):
    username: str
    name: str
    email: str
    phone: str
    national_id: str
    password: str
    points: int


class RoomRecord(NamedTuple):
    number: int
    booked: bool
    type_name: str


class BookingRecord(NamedTuple):
    room_number: int
    username: str


def _parse_int(value: str, what: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise MalformedRecordError(f"Invalid {what} '{value}'")


def parse_customer_line(line: str) -> CustomerRecord:
    """
    Parse a customer line
    The points field runs to the end of the line
    """
    fields = line.split(",", 6)
    if len(fields) != 7:
        raise MalformedRecordError(f"Expected 7 fields, got {len(fields)}")

    username, name, email, phone, national_id, password, points = fields
    if not username:
        raise MalformedRecordError("Empty username")

    return CustomerRecord(
        username=username,
        name=name,
        email=email,
        phone=phone,
        national_id=national_id,
        password=password,
        points=_parse_int(points, "points value"),
    )


def parse_room_line(line: str) -> RoomRecord:
    fields = line.split(",", 2)
    if len(fields) != 3:
        raise MalformedRecordError(f"Expected 3 fields, got {len(fields)}")

    number_str, booked_str, type_name = fields
    number = _parse_int(number_str, "room number")
    if booked_str not in ("0", "1"):
        raise MalformedRecordError(f"Invalid booked flag '{booked_str}' for room number {number}")
    if RoomType.from_name(type_name) is None:
        raise MalformedRecordError(f"Unknown room type '{type_name}' for room number {number}")

    return RoomRecord(number=number, booked=booked_str == "1", type_name=type_name)


def parse_booking_line(line: str) -> BookingRecord:
    fields = line.split(",", 1)
    if len(fields) != 2 or not fields[1]:
        raise MalformedRecordError(f"Malformed line '{line}'")

    return BookingRecord(room_number=_parse_int(fields[0], "room number"), username=fields[1])


def format_customer_record(record: CustomerRecord) -> str:
    return ",".join([
        record.username,
        record.name,
        record.email,
        record.phone,
        record.national_id,
        record.password,
        str(record.points),
    ])


def format_room_record(record: RoomRecord) -> str:
    return f"{record.number},{'1' if record.booked else '0'},{record.type_name}"


def format_booking_record(record: BookingRecord) -> str:
    return f"{record.room_number},{record.username}"


class FlatFileStore:
    """
    Loads and saves the three stores named by a HotelConfig
    """

    def __init__(self, config: HotelConfig):
        self.config = config

    def load_customers(self) -> List[CustomerRecord]:
        return self._read_records(self.config.customers_path, parse_customer_line)

    def load_rooms(self) -> List[RoomRecord]:
        return self._read_records(self.config.rooms_path, parse_room_line)

    def load_bookings(self) -> List[BookingRecord]:
        return self._read_records(self.config.bookings_path, parse_booking_line)

    def save_customers(self, records: Iterable[CustomerRecord]) -> None:
        ordered = sorted(records, key=lambda record: record.username)
        self._write_lines(self.config.customers_path, [format_customer_record(r) for r in ordered])

    def save_rooms(self, records: Iterable[RoomRecord]) -> None:
        ordered = sorted(records, key=lambda record: record.number)
        self._write_lines(self.config.rooms_path, [format_room_record(r) for r in ordered])

    def save_bookings(self, records: Iterable[BookingRecord]) -> None:
        ordered = sorted(records, key=lambda record: record.room_number)
        self._write_lines(self.config.bookings_path, [format_booking_record(r) for r in ordered])

    def _read_records(self, path: Path, parse: Callable[[str], T]) -> List[T]:
        """
        Parse every line of a store

        A missing file is an empty store. Lines that fail to parse are logged
        and skipped; the rest of the file is still loaded.
        """
        if not path.exists():
            logger.debug(f"No store at {path}, starting empty")
            return []

        try:
            content = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

        records = []
        for line_num, line in enumerate(content.splitlines(), 1):
            if not line.strip():
                continue
            try:
                records.append(parse(line))
            except MalformedRecordError as e:
                logger.warning(f"{path.name}:{line_num}: {e}. Skipping.")

        logger.debug(f"Loaded {len(records)} record(s) from {path}")
        return records

    def _write_lines(self, path: Path, lines: List[str]) -> None:
        """
        Replace a store with the given lines

        The content goes to a temporary file next to the target first and is
        then moved over it, so readers never see a half-written store.
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding='utf-8') as handle:
                    for line in lines:
                        handle.write(line + "\n")
                os.replace(temp_name, path)
            except BaseException:
                if os.path.exists(temp_name):
                    os.unlink(temp_name)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e

        logger.debug(f"Wrote {len(lines)} record(s) to {path}")
