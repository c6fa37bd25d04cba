from consignment_booking.storage.booking_store import (
    BookingErrorCode,
    BookingResult,
    BookingStore,
)
from consignment_booking.storage.local_storage import (
    InMemoryStorage,
    JsonFileStorage,
    KeyValueStorage,
)

__all__ = [
    "BookingErrorCode",
    "BookingResult",
    "BookingStore",
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueStorage",
]
