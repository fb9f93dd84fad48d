"""
Seat booking models for the flight booking store.

This module contains the models for booked seat rows and seat status reports.
"""

from pydantic import BaseModel, Field, ConfigDict

from ..database.models import MAX_SEATS_PER_FLIGHT


class SeatModel(BaseModel):
    """
    Booked seat row.

    Only booked seats are stored, so ``booked`` is true for every row
    read from the store.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Auto-assigned seat row identifier")
    flight_id: int = Field(..., description="Owning flight identifier")
    seat_no: int = Field(..., ge=1, le=MAX_SEATS_PER_FLIGHT, description="Seat number (1-based)")
    booked: bool = Field(default=True, description="Booked flag")


class SeatStatusModel(BaseModel):
    """Booked flag of one seat, as reported by the demo program."""
    model_config = ConfigDict(from_attributes=True)

    flight_id: int = Field(..., description="Flight identifier")
    seat_no: int = Field(..., description="Seat number")
    booked: bool = Field(..., description="Booked flag")

    def describe(self) -> str:
        return f"Seat {self.seat_no} status: {self.booked}"
