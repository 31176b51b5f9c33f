import logging
from decimal import Decimal
from sqlalchemy import select, update
from sqlalchemy.orm import Session, aliased

from app.core.errors import AppError, CapacityExceeded, NotFound, ValidationError
from app.models.airline import Airline
from app.models.airport import Airport
from app.models.flight import Flight
from app.models.flight_booking import FlightBooking
from app.models.flight_passenger import FlightPassenger
from app.services.identifiers import allocate_id, FLIGHT_BOOKING_PREFIX, FLIGHT_PASSENGER_PREFIX

logger = logging.getLogger(__name__)

PENDING = "Pending"


def _validate_request(outbound_flight_id: str, passenger_count: int, passenger_details: list[dict]) -> None:
    if not outbound_flight_id or not passenger_count or not passenger_details:
        raise ValidationError("Missing required booking information")
    if passenger_count < 1:
        raise ValidationError("passengers must be >= 1")
    if len(passenger_details) != passenger_count:
        raise ValidationError("passengerDetails must contain one entry per passenger")


def _lock_flights(db: Session, flight_ids: list[str]) -> dict[str, Flight]:
    # Lock in id order so two bookings touching the same pair of flights cannot deadlock
    ids = sorted(set(flight_ids))
    rows = db.execute(
        select(Flight)
        .where(Flight.id.in_(ids))
        .order_by(Flight.id)
        .with_for_update()
        .execution_options(populate_existing=True)
    ).scalars().all()
    return {f.id: f for f in rows}


def _check_capacity(flight: Flight, passenger_count: int, leg: str) -> None:
    if flight.available_seats < passenger_count:
        raise CapacityExceeded(f"Not enough seats available on {leg} flight")


def decrement_seats(db: Session, flight_id: str, passenger_count: int) -> None:
    """Take `passenger_count` seats from a flight, or raise CapacityExceeded.

    The WHERE clause keeps available_seats non-negative even if another writer
    got in between the capacity check and this statement.
    """
    result = db.execute(
        update(Flight)
        .where(Flight.id == flight_id, Flight.available_seats >= passenger_count)
        .values(available_seats=Flight.available_seats - passenger_count)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount != 1:
        raise CapacityExceeded(f"Not enough seats available on flight {flight_id}")


def create_flight_booking(
    db: Session,
    user_id: str,
    outbound_flight_id: str,
    return_flight_id: str | None,
    passenger_count: int,
    passenger_details: list[dict],
) -> FlightBooking:
    """Book one or two flights for `passenger_count` travellers.

    Booking row, passenger rows and seat decrements are committed together or
    not at all. Classified errors (NotFound, CapacityExceeded) keep their type
    after the rollback; anything else is re-raised as-is.
    """
    _validate_request(outbound_flight_id, passenger_count, passenger_details)

    try:
        flight_ids = [outbound_flight_id] + ([return_flight_id] if return_flight_id else [])
        flights = _lock_flights(db, flight_ids)

        outbound = flights.get(outbound_flight_id)
        if not outbound:
            raise NotFound("Outbound flight not found")
        _check_capacity(outbound, passenger_count, "outbound")

        inbound = None
        if return_flight_id:
            inbound = flights.get(return_flight_id)
            if not inbound:
                raise NotFound("Return flight not found")
            _check_capacity(inbound, passenger_count, "return")

        total = outbound.base_price * passenger_count
        if inbound:
            total += inbound.base_price * passenger_count

        booking = FlightBooking(
            id=allocate_id(db, FlightBooking, FLIGHT_BOOKING_PREFIX),
            user_id=user_id,
            outbound_flight_id=outbound.id,
            return_flight_id=inbound.id if inbound else None,
            number_of_passengers=passenger_count,
            total_amount=Decimal(total),
            payment_status=PENDING,
        )
        db.add(booking)

        taken: set[str] = set()
        for seq, p in enumerate(passenger_details):
            passenger_id = allocate_id(db, FlightPassenger, FLIGHT_PASSENGER_PREFIX, taken=taken)
            taken.add(passenger_id)
            db.add(FlightPassenger(
                id=passenger_id,
                booking_id=booking.id,
                seq=seq,
                title=p.get("title", "") or "",
                first_name=p.get("firstName", ""),
                last_name=p.get("lastName", ""),
                date_of_birth=p.get("dateOfBirth", "") or "",
                passport_number=p.get("passportNumber", "") or "",
            ))
        db.flush()

        decrement_seats(db, outbound.id, passenger_count)
        if inbound:
            decrement_seats(db, inbound.id, passenger_count)

        db.commit()
    except AppError as e:
        db.rollback()
        logger.info("flight booking rejected for user %s: %s", user_id, e.message)
        raise
    except Exception:
        db.rollback()
        logger.warning("flight booking rolled back for user %s", user_id)
        raise

    db.refresh(booking)
    logger.info("flight booking %s created: %s passenger(s), total %s", booking.id, passenger_count, booking.total_amount)
    return booking


def get_flight_booking(db: Session, user_id: str, booking_id: str) -> tuple[FlightBooking, list[FlightPassenger]]:
    booking = db.execute(
        select(FlightBooking).where(FlightBooking.id == booking_id, FlightBooking.user_id == user_id)
    ).scalar_one_or_none()
    if not booking:
        raise NotFound("Flight booking not found")
    passengers = db.execute(
        select(FlightPassenger).where(FlightPassenger.booking_id == booking.id).order_by(FlightPassenger.seq)
    ).scalars().all()
    return booking, list(passengers)


def list_flight_bookings(db: Session, user_id: str) -> list[dict]:
    """Caller's flight bookings, newest first, with flight/airport/airline display fields."""
    out_f, ret_f = aliased(Flight), aliased(Flight)
    out_dep, out_arr = aliased(Airport), aliased(Airport)
    ret_dep, ret_arr = aliased(Airport), aliased(Airport)
    out_al, ret_al = aliased(Airline), aliased(Airline)

    q = (
        select(FlightBooking, out_f, out_dep, out_arr, out_al, ret_f, ret_dep, ret_arr, ret_al)
        .join(out_f, FlightBooking.outbound_flight_id == out_f.id)
        .join(out_dep, out_f.departure_airport == out_dep.code)
        .join(out_arr, out_f.arrival_airport == out_arr.code)
        .join(out_al, out_f.airline_id == out_al.id)
        .outerjoin(ret_f, FlightBooking.return_flight_id == ret_f.id)
        .outerjoin(ret_dep, ret_f.departure_airport == ret_dep.code)
        .outerjoin(ret_arr, ret_f.arrival_airport == ret_arr.code)
        .outerjoin(ret_al, ret_f.airline_id == ret_al.id)
        .where(FlightBooking.user_id == user_id)
        .order_by(FlightBooking.booking_date.desc(), FlightBooking.id.desc())
    )
    items = []
    for b, of, od, oa, oal, rf, rd, ra, ral in db.execute(q).all():
        items.append({
            "bookingId": b.id,
            "bookingDate": b.booking_date.isoformat(),
            "numberOfPassengers": b.number_of_passengers,
            "totalAmount": float(b.total_amount),
            "paymentStatus": b.payment_status,
            "outboundFlightId": b.outbound_flight_id,
            "outboundFlightNumber": of.flight_number,
            "outboundDepartureTime": of.departure_time.isoformat(),
            "outboundArrivalTime": of.arrival_time.isoformat(),
            "outboundDepartureCity": od.city,
            "outboundArrivalCity": oa.city,
            "outboundAirline": oal.name,
            "returnFlightId": b.return_flight_id,
            "returnFlightNumber": rf.flight_number if rf else None,
            "returnDepartureTime": rf.departure_time.isoformat() if rf else None,
            "returnArrivalTime": rf.arrival_time.isoformat() if rf else None,
            "returnDepartureCity": rd.city if rd else None,
            "returnArrivalCity": ra.city if ra else None,
            "returnAirline": ral.name if ral else None,
        })
    return items
