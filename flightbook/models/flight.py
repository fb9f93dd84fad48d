"""
Flight Pydantic model for the flight booking store.
"""

from pydantic import BaseModel, Field, ConfigDict


class FlightModel(BaseModel):
    """
    Stored flight as returned by the booking operations.

    No format validation is applied to the flight number or locations;
    they are free text.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Auto-assigned flight identifier")
    flight_no: str = Field(..., description="Flight number (unique business key)")
    departure: str = Field(..., description="Departure location")
    destination: str = Field(..., description="Destination")
