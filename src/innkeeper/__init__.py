__version__ = "0.1.0"

# Package metadata
__description__ = "Hotel booking manager with a loyalty program and flat-file persistence"

# Public API
from .rooms import Room, RoomCatalog, RoomType
from .customers import Customer, CustomerDirectory, LoyaltyTier, tier_for_points
from .ledger import Booking, BookingLedger
from .engine import BookingEngine, BookingReceipt, loyalty_points_for
from .reports import OccupancyReport, RoomTypePopularity, occupancy_report, popular_room_types_report
from .storage import FlatFileStore, CustomerRecord, RoomRecord, BookingRecord
from .config import HotelConfig
from .session import HotelSession
from .exceptions import (
    InnkeeperError,
    NotFoundError,
    RoomNotFoundError,
    CustomerNotFoundError,
    DuplicateIdentifierError,
    InvalidCredentialsError,
    InvalidStateError,
    RoomAlreadyBookedError,
    NotBookedByCustomerError,
    RoomNotBookedError,
    MalformedRecordError,
    StorageError
)

__all__ = [
    # Version
    "__version__",

    # Main classes
    "BookingEngine",
    "HotelSession",
    "HotelConfig",
    "FlatFileStore",
    "RoomCatalog",
    "CustomerDirectory",
    "BookingLedger",

    # Data classes
    "Room",
    "RoomType",
    "Customer",
    "LoyaltyTier",
    "Booking",
    "BookingReceipt",
    "OccupancyReport",
    "RoomTypePopularity",
    "CustomerRecord",
    "RoomRecord",
    "BookingRecord",

    # Functions
    "tier_for_points",
    "loyalty_points_for",
    "occupancy_report",
    "popular_room_types_report",

    # Exceptions
    "InnkeeperError",
    "NotFoundError",
    "RoomNotFoundError",
    "CustomerNotFoundError",
    "DuplicateIdentifierError",
    "InvalidCredentialsError",
    "InvalidStateError",
    "RoomAlreadyBookedError",
    "NotBookedByCustomerError",
    "RoomNotBookedError",
    "MalformedRecordError",
    "StorageError"
]
