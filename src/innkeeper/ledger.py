"""
Booking ledger: which customer holds which room
"""

from typing import Dict, Iterator, List, NamedTuple, Optional


class Booking(NamedTuple):
    """
    A single ledger entry

    Attributes:
        room_number: the booked room
        username: the customer holding it
    """
    room_number: int
    username: str


class BookingLedger:
    """
    Maps room numbers to the username of their occupant

    This is the single source of truth for whether a room is booked and by
    whom. Only the booking engine mutates it.
    """

    def __init__(self):
        self._entries: Dict[int, str] = {}

    def add(self, room_number: int, username: str) -> None:
        self._entries[room_number] = username

    def remove(self, room_number: int) -> Optional[str]:
        """Drop the entry for a room, returning the previous occupant if any"""
        return self._entries.pop(room_number, None)

    def occupant(self, room_number: int) -> Optional[str]:
        return self._entries.get(room_number)

    def rooms_for(self, username: str) -> List[int]:
        """Rooms held by a customer, ascending"""
        return sorted(number for number, holder in self._entries.items() if holder == username)

    def __iter__(self) -> Iterator[Booking]:
        for number in sorted(self._entries):
            yield Booking(number, self._entries[number])

    def __contains__(self, room_number: int) -> bool:
        return room_number in self._entries

    def __len__(self) -> int:
        return len(self._entries)
