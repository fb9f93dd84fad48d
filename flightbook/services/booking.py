"""
Booking operations for the flight booking store.

Every operation takes an explicit SQLAlchemy session and ends its own
transaction before returning: committed on success, rolled back on error.

Seat booking runs its capacity check, duplicate check and insert inside one
transaction. On SQLite that transaction holds the database write lock from
its first statement (see ``DatabaseConfig``). On server databases the
booking first takes a row lock on the flight (SELECT ... FOR UPDATE), so
bookings for one flight run one at a time there too. The unique
(flight_id, seat_no) constraint backs the duplicate check on every backend.
"""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..database.models import Flight, Seat, MAX_SEATS_PER_FLIGHT
from ..models import FlightModel, SeatModel
from .errors import BookingError, SeatLimitReachedError, SeatAlreadyBookedError, SeatNotAvailableError

logger = logging.getLogger(__name__)


def _is_unique_violation(error: IntegrityError) -> bool:
    """Check whether an IntegrityError comes from a unique constraint."""
    return 'UNIQUE' in str(error.orig).upper()


def get_flight_by_number(session: Session, flight_no: str) -> Optional[FlightModel]:
    """Look up a flight by its flight number."""
    flight = session.query(Flight).filter(Flight.flight_no == flight_no).first()
    session.commit()
    if flight is None:
        return None
    return FlightModel.model_validate(flight)


def flight_lock_statement(flight_id: int):
    """Select the flight row FOR UPDATE. SQLite compiles this without the lock clause."""
    return select(Flight.id).where(Flight.id == flight_id).with_for_update()


def count_booked_seats(session: Session, flight_id: int) -> int:
    """Count the booked seats of a flight within the caller's transaction."""
    return session.query(func.count(Seat.id)).filter(
        Seat.flight_id == flight_id,
        Seat.booked.is_(True),
    ).scalar()


def upsert_flight(session: Session, flight_no: str, departure: str, destination: str) -> FlightModel:
    """
    Create a flight, or update the existing flight with the same number.

    Args:
        session: Database session
        flight_no: Flight number (business key)
        departure: Departure location
        destination: Destination

    Returns:
        FlightModel: The stored flight

    Raises:
        SQLAlchemyError: Any storage failure, unchanged
    """
    try:
        flight = session.query(Flight).filter(Flight.flight_no == flight_no).first()

        if flight is not None:
            flight.departure = departure
            flight.destination = destination
            logger.info(f"Updated flight {flight_no} (id={flight.id})")
        else:
            flight = Flight(flight_no=flight_no, departure=departure, destination=destination)
            session.add(flight)
            session.flush()
            logger.info(f"Created flight {flight_no} (id={flight.id})")

        session.commit()
    except Exception:
        session.rollback()
        raise

    return FlightModel.model_validate(flight)


def book_seat(session: Session, flight_id: int, seat_no: int) -> SeatModel:
    """
    Book a seat on a flight.

    The seat number is not range-checked here; the seats table rejects
    numbers outside 1..500 and that IntegrityError is raised unchanged.

    Args:
        session: Database session
        flight_id: Flight identifier
        seat_no: Seat number

    Returns:
        SeatModel: The booked seat row

    Raises:
        SeatLimitReachedError: The flight already has 500 booked seats
        SeatAlreadyBookedError: The seat is already booked
        SQLAlchemyError: Any other storage failure, unchanged
    """
    try:
        # Serializes bookings for this flight on backends with row locks
        session.execute(flight_lock_statement(flight_id))

        booked_seats = count_booked_seats(session, flight_id)
        if booked_seats >= MAX_SEATS_PER_FLIGHT:
            raise SeatLimitReachedError(flight_id)

        existing = session.query(Seat.id).filter(
            Seat.flight_id == flight_id,
            Seat.seat_no == seat_no,
            Seat.booked.is_(True),
        ).first()
        if existing is not None:
            raise SeatAlreadyBookedError(flight_id, seat_no)

        seat = Seat(flight_id=flight_id, seat_no=seat_no, booked=True)
        session.add(seat)
        session.flush()
        session.commit()

    except IntegrityError as e:
        session.rollback()
        if _is_unique_violation(e):
            logger.warning(f"Duplicate booking rejected by constraint: flight {flight_id}, seat {seat_no}")
            raise SeatAlreadyBookedError(flight_id, seat_no) from e
        logger.error(f"Failed to book seat {seat_no} on flight {flight_id}: {e.orig}")
        raise
    except BookingError as e:
        session.rollback()
        logger.warning(f"Booking rejected for flight {flight_id}, seat {seat_no}: {e}")
        raise
    except Exception:
        session.rollback()
        raise

    logger.info(f"Booked seat {seat_no} on flight {flight_id}")
    return SeatModel.model_validate(seat)


def check_seat_status(session: Session, flight_id: int, seat_no: int) -> bool:
    """
    Return the booked flag of a seat.

    Only booked seats have a row, so a seat that was never booked raises
    SeatNotAvailableError instead of returning False.

    Raises:
        SeatNotAvailableError: No booking row exists for the seat
    """
    try:
        row = session.query(Seat.booked).filter(
            Seat.flight_id == flight_id,
            Seat.seat_no == seat_no,
        ).first()
        session.commit()
    except Exception:
        session.rollback()
        raise

    if row is None:
        raise SeatNotAvailableError(flight_id, seat_no)
    return bool(row.booked)
