"""
Custom exceptions
"""


class InnkeeperError(Exception):
    """Base exception"""
    pass


class NotFoundError(InnkeeperError):
    """A room or customer does not exist"""
    pass


class RoomNotFoundError(NotFoundError):
    """Unknown room number"""

    def __init__(self, room_number: int):
        self.room_number = room_number
        super().__init__(f"Room {room_number} does not exist")


class CustomerNotFoundError(NotFoundError):
    """Unknown customer identifier"""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username '{username}' not found")


class DuplicateIdentifierError(InnkeeperError):
    """Registration with an identifier that is already taken"""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username '{username}' already exists")


class InvalidCredentialsError(InnkeeperError):
    """Password mismatch"""
    pass


class InvalidStateError(InnkeeperError):
    """Operation attempted against a room or booking in the wrong state"""
    pass


class RoomAlreadyBookedError(InvalidStateError):
    """Booking a room that is already taken"""

    def __init__(self, room_number: int, occupant: str = None):
        self.room_number = room_number
        self.occupant = occupant
        if occupant:
            message = f"Room {room_number} is already booked by user '{occupant}'"
        else:
            message = f"Room {room_number} is already booked"
        super().__init__(message)


class NotBookedByCustomerError(InvalidStateError):
    """Cancelling a room the customer does not hold"""

    def __init__(self, room_number: int, username: str):
        self.room_number = room_number
        self.username = username
        super().__init__(f"User '{username}' does not have a booking for room {room_number}")


class RoomNotBookedError(InvalidStateError):
    """Checking out a room that is already available"""

    def __init__(self, room_number: int):
        self.room_number = room_number
        super().__init__(f"Room {room_number} is already available")


class MalformedRecordError(InnkeeperError):
    """A persisted line could not be parsed"""
    pass


class StorageError(InnkeeperError):
    """A store could not be read or written"""
    pass
