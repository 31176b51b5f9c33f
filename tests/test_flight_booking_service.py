"""
Flight booking transaction: pricing, seat inventory and all-or-nothing persistence.
"""

from decimal import Decimal

import pytest
from sqlalchemy import func, select

from app.core.errors import CapacityExceeded, NotFound, ValidationError
from app.models.flight import Flight
from app.models.flight_booking import FlightBooking
from app.models.flight_passenger import FlightPassenger
from app.services import flight_booking_service
from app.services.flight_booking_service import (
    create_flight_booking,
    decrement_seats,
    get_flight_booking,
    list_flight_bookings,
)

from conftest import RET_DAY, add_flight, passenger


def _seats(db, fid):
    db.expire_all()
    return db.get(Flight, fid).available_seats


def _count(db, model):
    return db.execute(select(func.count()).select_from(model)).scalar_one()


@pytest.fixture
def flights(catalog, user):
    db = catalog
    add_flight(db, "F1", 100, 2)
    add_flight(db, "F2", 150, 10, src="LHR", dst="JFK", departs=RET_DAY)
    add_flight(db, "F3", 100, 20)
    db.commit()
    return db


class TestPricing:

    def test_one_way_total(self, flights):
        b = create_flight_booking(flights, "U000001", "F3", None, 4, [passenger() for _ in range(4)])
        assert b.total_amount == Decimal("400.00")
        assert b.return_flight_id is None
        assert b.payment_status == "Pending"

    def test_round_trip_total_and_both_flights_decremented(self, flights):
        b = create_flight_booking(flights, "U000001", "F3", "F2", 3, [passenger() for _ in range(3)])

        assert b.total_amount == Decimal("750.00")
        assert b.id.startswith("FB") and len(b.id) == 9
        assert _seats(flights, "F3") == 17
        assert _seats(flights, "F2") == 7


class TestSeatInventory:

    def test_booking_exhausts_then_rejects(self, flights):
        create_flight_booking(flights, "U000001", "F1", None, 2, [passenger("A"), passenger("B")])
        assert _seats(flights, "F1") == 0

        with pytest.raises(CapacityExceeded):
            create_flight_booking(flights, "U000001", "F1", None, 1, [passenger("C")])

        assert _seats(flights, "F1") == 0
        assert _count(flights, FlightBooking) == 1
        assert _count(flights, FlightPassenger) == 2

    def test_return_flight_capacity_checked_independently(self, flights):
        add_flight(flights, "F4", 90, 1, src="LHR", dst="JFK", departs=RET_DAY)
        flights.commit()

        with pytest.raises(CapacityExceeded) as exc:
            create_flight_booking(flights, "U000001", "F3", "F4", 2, [passenger(), passenger()])

        assert "return" in exc.value.message
        assert _seats(flights, "F3") == 20
        assert _count(flights, FlightBooking) == 0

    def test_same_flight_on_both_legs_needs_seats_for_both(self, flights):
        with pytest.raises(CapacityExceeded):
            create_flight_booking(flights, "U000001", "F1", "F1", 2, [passenger(), passenger()])
        assert _seats(flights, "F1") == 2
        assert _count(flights, FlightBooking) == 0

        b = create_flight_booking(flights, "U000001", "F1", "F1", 1, [passenger()])
        assert b.total_amount == Decimal("200.00")
        assert _seats(flights, "F1") == 0

    def test_decrement_is_conditional(self, flights):
        with pytest.raises(CapacityExceeded):
            decrement_seats(flights, "F1", 3)
        flights.rollback()
        assert _seats(flights, "F1") == 2

        decrement_seats(flights, "F1", 2)
        flights.commit()
        assert _seats(flights, "F1") == 0

    def test_stale_reader_cannot_overbook(self, flights, session_factory):
        # SQLite ignores FOR UPDATE, so only the conditional decrement is exercised
        # here. test_seat_locking_postgres.py races real threads against the row lock.
        other = session_factory()
        try:
            # other request has already seen two free seats
            assert other.get(Flight, "F1").available_seats == 2

            create_flight_booking(flights, "U000001", "F1", None, 2, [passenger(), passenger()])

            with pytest.raises(CapacityExceeded):
                create_flight_booking(other, "U000001", "F1", None, 1, [passenger()])
        finally:
            other.close()

        assert _seats(flights, "F1") == 0
        assert _count(flights, FlightBooking) == 1


class TestValidation:

    def test_unknown_outbound_flight(self, flights):
        with pytest.raises(NotFound) as exc:
            create_flight_booking(flights, "U000001", "NOPE", None, 1, [passenger()])
        assert exc.value.message == "Outbound flight not found"

    def test_unknown_return_flight_leaves_outbound_untouched(self, flights):
        with pytest.raises(NotFound) as exc:
            create_flight_booking(flights, "U000001", "F3", "NOPE", 1, [passenger()])
        assert exc.value.message == "Return flight not found"
        assert _seats(flights, "F3") == 20
        assert _count(flights, FlightBooking) == 0

    @pytest.mark.parametrize("count, details", [
        (0, [passenger()]),
        (-1, [passenger()]),
        (2, [passenger()]),
        (1, [passenger(), passenger()]),
        (1, []),
    ])
    def test_bad_passenger_input_rejected_before_any_write(self, flights, count, details):
        with pytest.raises(ValidationError):
            create_flight_booking(flights, "U000001", "F3", None, count, details)
        assert _seats(flights, "F3") == 20

    def test_missing_outbound_id(self, flights):
        with pytest.raises(ValidationError):
            create_flight_booking(flights, "U000001", "", None, 1, [passenger()])


class TestAtomicity:

    def test_failure_after_outbound_decrement_rolls_everything_back(self, flights, monkeypatch):
        real = flight_booking_service.decrement_seats
        calls = []

        def flaky(db, flight_id, count):
            calls.append(flight_id)
            if len(calls) == 2:
                raise RuntimeError("connection lost")
            real(db, flight_id, count)

        monkeypatch.setattr(flight_booking_service, "decrement_seats", flaky)

        with pytest.raises(RuntimeError):
            create_flight_booking(flights, "U000001", "F3", "F2", 2, [passenger(), passenger()])

        assert calls == ["F3", "F2"]
        assert _seats(flights, "F3") == 20
        assert _seats(flights, "F2") == 10
        assert _count(flights, FlightBooking) == 0
        assert _count(flights, FlightPassenger) == 0


class TestReads:

    def test_reread_returns_passengers_in_input_order(self, flights):
        names = ["Ada", "Brian", "Cleo"]
        b = create_flight_booking(flights, "U000001", "F3", "F2", 3, [passenger(n) for n in names])

        booking, pax = get_flight_booking(flights, "U000001", b.id)
        assert booking.number_of_passengers == 3
        assert booking.total_amount == Decimal("750.00")
        assert (booking.outbound_flight_id, booking.return_flight_id) == ("F3", "F2")
        assert [p.first_name for p in pax] == names
        assert len({p.id for p in pax}) == 3
        assert all(p.id.startswith("FP") for p in pax)

    def test_booking_is_scoped_to_owner(self, flights):
        b = create_flight_booking(flights, "U000001", "F3", None, 1, [passenger()])
        with pytest.raises(NotFound):
            get_flight_booking(flights, "U999999", b.id)

    def test_list_includes_display_fields(self, flights):
        create_flight_booking(flights, "U000001", "F3", None, 1, [passenger()])
        create_flight_booking(flights, "U000001", "F3", "F2", 1, [passenger()])

        items = list_flight_bookings(flights, "U000001")
        assert len(items) == 2
        one_way = next(i for i in items if i["returnFlightId"] is None)
        round_trip = next(i for i in items if i["returnFlightId"] == "F2")
        assert one_way["outboundDepartureCity"] == "New York"
        assert one_way["outboundArrivalCity"] == "London"
        assert one_way["outboundAirline"] == "SkyWays"
        assert one_way["returnFlightNumber"] is None
        assert round_trip["returnDepartureCity"] == "London"
        assert round_trip["totalAmount"] == 250.0
        assert list_flight_bookings(flights, "U999999") == []
