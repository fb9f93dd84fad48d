"""
Domain errors raised by the booking operations.

Storage errors are not wrapped: they reach the caller as the original
``sqlalchemy.exc`` exception.
"""


class BookingError(Exception):
    """Base class for booking rule violations."""


class SeatLimitReachedError(BookingError):
    """The flight already has the maximum number of booked seats."""

    def __init__(self, flight_id: int):
        self.flight_id = flight_id
        super().__init__("seat limit reached for this flight")


class SeatAlreadyBookedError(BookingError):
    """The seat already has a booking on this flight."""

    def __init__(self, flight_id: int, seat_no: int):
        self.flight_id = flight_id
        self.seat_no = seat_no
        super().__init__(f"seat {seat_no} is already booked")


class SeatNotAvailableError(BookingError):
    """No booking row exists for the seat."""

    def __init__(self, flight_id: int, seat_no: int):
        self.flight_id = flight_id
        self.seat_no = seat_no
        super().__init__(f"seat {seat_no} is not available")
