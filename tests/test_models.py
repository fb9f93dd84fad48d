"""
Pytest tests for Pydantic models.
"""

import pytest
from pydantic import ValidationError

from flightbook.database.models import Flight, Seat
from flightbook.models import FlightModel, SeatModel, SeatStatusModel


class TestFlightModel:
    """Test flight read model."""

    def test_from_orm_object(self):
        """FlightModel reads SQLAlchemy attributes."""
        flight = Flight(id=1, flight_no="ABC123", departure="New York", destination="Los Angeles")
        model = FlightModel.model_validate(flight)

        assert model.id == 1
        assert model.flight_no == "ABC123"
        assert model.departure == "New York"
        assert model.destination == "Los Angeles"


class TestSeatModel:
    """Test seat read model."""

    def test_from_orm_object(self):
        """SeatModel reads SQLAlchemy attributes."""
        seat = Seat(id=5, flight_id=1, seat_no=3, booked=True)
        model = SeatModel.model_validate(seat)

        assert model.seat_no == 3
        assert model.booked is True

    @pytest.mark.parametrize("seat_no", [0, 501])
    def test_seat_number_range(self, seat_no):
        """Seat numbers are bounded 1..500."""
        with pytest.raises(ValidationError):
            SeatModel(id=1, flight_id=1, seat_no=seat_no)


class TestSeatStatusModel:
    """Test seat status report model."""

    def test_describe(self):
        """The status line names the seat and its flag."""
        status = SeatStatusModel(flight_id=1, seat_no=1, booked=True)
        assert status.describe() == "Seat 1 status: True"

    def test_from_attributes(self):
        """SeatStatusModel reads a booked seat row."""
        seat = Seat(id=2, flight_id=1, seat_no=3, booked=True)
        status = SeatStatusModel.model_validate(seat)

        assert status.flight_id == 1
        assert status.seat_no == 3
        assert status.booked is True

    def test_booked_is_required(self):
        """The flag must be given."""
        with pytest.raises(ValidationError):
            SeatStatusModel(flight_id=1, seat_no=1)
