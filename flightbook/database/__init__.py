"""
Database package for the flight booking store.

This package provides the SQLAlchemy models and the database handle
used by the booking operations.
"""

from .models import (
    Base,
    Flight,
    Seat,
    MAX_SEATS_PER_FLIGHT,
    create_flights_table,
    create_seats_table,
    create_all_tables,
    drop_all_tables,
)

from .config import (
    DatabaseConfig,
    initialize_database,
)

__all__ = [
    # Models
    'Base',
    'Flight',
    'Seat',
    'MAX_SEATS_PER_FLIGHT',
    'create_flights_table',
    'create_seats_table',
    'create_all_tables',
    'drop_all_tables',

    # Configuration
    'DatabaseConfig',
    'initialize_database',
]
