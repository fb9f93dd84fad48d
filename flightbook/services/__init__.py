"""
Booking services for the flight booking store.
"""

from .booking import (
    upsert_flight,
    book_seat,
    check_seat_status,
    get_flight_by_number,
    count_booked_seats,
    flight_lock_statement,
)

from .errors import (
    BookingError,
    SeatLimitReachedError,
    SeatAlreadyBookedError,
    SeatNotAvailableError,
)

__all__ = [
    # Operations
    'upsert_flight',
    'book_seat',
    'check_seat_status',
    'get_flight_by_number',
    'count_booked_seats',
    'flight_lock_statement',

    # Errors
    'BookingError',
    'SeatLimitReachedError',
    'SeatAlreadyBookedError',
    'SeatNotAvailableError',
]
