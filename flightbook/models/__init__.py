"""
Flight booking Pydantic models package.

Read models returned by the booking operations.
"""

from .flight import FlightModel
from .seat import SeatModel, SeatStatusModel

__all__ = [
    "FlightModel",
    "SeatModel",
    "SeatStatusModel",
]
