"""
SQLAlchemy database models for the flight booking store.

This module defines the two tables of the store:
- Flight: flights keyed by their unique flight number
- Seat: one row per booked seat, referencing its flight

A seat that was never booked has no row at all. The seat number range and
the one-booking-per-seat rule are enforced by table constraints.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Integer,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base, relationship

# Create the declarative base for all models
Base = declarative_base()

# Maximum number of booked seats on a single flight
MAX_SEATS_PER_FLIGHT = 500


class Flight(Base):
    """
    Flight model keyed by flight number.

    Created on the first upsert of a flight number and updated in place
    afterwards. Flights are never deleted.
    """
    __tablename__ = 'flights'

    id = Column(Integer, primary_key=True, autoincrement=True)
    flight_no = Column(Text, unique=True, nullable=False)  # Business key (e.g., 'ABC123')
    departure = Column(Text, nullable=False)
    destination = Column(Text, nullable=False)

    seats = relationship("Seat", back_populates="flight", lazy="select")

    def __repr__(self):
        return f"<Flight(id={self.id}, flight_no='{self.flight_no}', departure='{self.departure}', destination='{self.destination}')>"


class Seat(Base):
    """
    Booked seat on a flight.

    Rows are only inserted when a seat is booked, so ``booked`` is always
    true for stored rows.
    """
    __tablename__ = 'seats'
    __table_args__ = (
        CheckConstraint(f'seat_no <= {MAX_SEATS_PER_FLIGHT}', name='ck_seats_seat_no_max'),
        CheckConstraint('seat_no >= 1', name='ck_seats_seat_no_min'),
        UniqueConstraint('flight_id', 'seat_no', name='uq_seats_flight_seat'),  # One booking per seat
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    flight_id = Column(Integer, ForeignKey('flights.id'), nullable=False, index=True)
    seat_no = Column(Integer, nullable=False)
    booked = Column(Boolean, nullable=False, default=False, server_default='0')

    flight = relationship("Flight", back_populates="seats", lazy="select")

    def __repr__(self):
        return f"<Seat(id={self.id}, flight_id={self.flight_id}, seat_no={self.seat_no}, booked={self.booked})>"


def create_flights_table(engine):
    """Create the flights table if it doesn't exist."""
    Flight.__table__.create(bind=engine, checkfirst=True)


def create_seats_table(engine):
    """
    Create the seats table if it doesn't exist.

    The flights table must exist first when foreign keys are enforced.
    """
    Seat.__table__.create(bind=engine, checkfirst=True)


def create_all_tables(engine):
    """
    Create all database tables using the provided SQLAlchemy engine.

    Args:
        engine: SQLAlchemy engine instance
    """
    create_flights_table(engine)
    create_seats_table(engine)


def drop_all_tables(engine):
    """Drop all tables managed by this module."""
    Base.metadata.drop_all(bind=engine)
